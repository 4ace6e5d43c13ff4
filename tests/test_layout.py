import numpy as np

from treepack import Block, Fit, PackResult
from treepack.utils.layout import fill_ratio, find_overlaps, footprints, is_contained, placed_area


def make_results(*boxes):
    return [PackResult(Block(w, h), fit=Fit(x, y)) for x, y, w, h in boxes]


def test_footprints_skip_unplaced():
    results = make_results((0, 0, 10, 20)) + [PackResult(Block(5, 5))]
    boxes = footprints(results)
    assert boxes.shape == (1, 4)
    np.testing.assert_array_equal(boxes, [[0, 0, 10, 20]])
    assert footprints([]).shape == (0, 4)


def test_touching_edges_do_not_overlap():
    boxes = footprints(make_results((0, 0, 10, 10), (10, 0, 10, 10), (0, 10, 20, 5)))
    assert find_overlaps(boxes) == []


def test_overlapping_pairs():
    boxes = footprints(make_results((0, 0, 10, 10), (5, 5, 10, 10), (30, 30, 1, 1), (9, 0, 2, 2)))
    assert find_overlaps(boxes) == [(0, 1), (0, 3)]


def test_containment():
    boxes = footprints(make_results((0, 0, 10, 10), (10, 0, 10, 10)))
    assert is_contained(boxes, 20, 10)
    assert not is_contained(boxes, 19, 10)
    assert is_contained(footprints([]), 1, 1)


def test_area_and_fill_ratio():
    boxes = footprints(make_results((0, 0, 10, 10), (10, 0, 10, 5)))
    assert placed_area(boxes) == 150
    assert fill_ratio(boxes, 20, 10) == 0.75
