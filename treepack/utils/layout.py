"""Inspection of packed layouts.

Placed footprints are gathered into an (n, 4) array of x, y, width, height
so that overlap, containment and coverage checks run vectorized.
"""

from typing import List, Sequence, Tuple

import numpy as np

from ..packer_types import PackResult
from ..type_hints import BoxArray, Number


def footprints(results: Sequence[PackResult]) -> BoxArray:
    """Collect the placed footprints of a packing run.

    Args:
        results: Results of a packing run.

    Returns:
        Float array of shape (n, 4) with one x, y, width, height row per
        placed block, in result order.
    """
    rows = [
        (r.fit.x, r.fit.y, r.block.width, r.block.height)
        for r in results
        if r.placed
    ]
    return np.array(rows, dtype=np.float64).reshape(-1, 4)


def _edges(boxes: BoxArray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    left = boxes[:, 0]
    top = boxes[:, 1]
    return left, top, left + boxes[:, 2], top + boxes[:, 3]


def find_overlaps(boxes: BoxArray) -> List[Tuple[int, int]]:
    """Find pairs of footprints whose intersection has a positive area.

    Touching edges do not count as an overlap.

    Returns:
        Sorted (i, j) index pairs with i < j.
    """
    if len(boxes) < 2:
        return []

    left, top, right, bottom = _edges(boxes)
    overlap_x = np.minimum(right[:, None], right[None, :]) - np.maximum(left[:, None], left[None, :])
    overlap_y = np.minimum(bottom[:, None], bottom[None, :]) - np.maximum(top[:, None], top[None, :])
    overlapping = (overlap_x > 0) & (overlap_y > 0)
    pairs = np.argwhere(np.triu(overlapping, k=1))
    return [(int(i), int(j)) for i, j in pairs]


def is_contained(boxes: BoxArray, width: Number, height: Number) -> bool:
    """Check that every footprint lies within [0, width] x [0, height]."""
    if len(boxes) == 0:
        return True
    left, top, right, bottom = _edges(boxes)
    return bool(
        np.all(left >= 0) and np.all(top >= 0)
        and np.all(right <= width) and np.all(bottom <= height)
    )


def placed_area(boxes: BoxArray) -> float:
    return float(np.sum(boxes[:, 2] * boxes[:, 3]))


def fill_ratio(boxes: BoxArray, width: Number, height: Number) -> float:
    """Share of the bin area covered by the footprints, between 0 and 1."""
    return placed_area(boxes) / float(width * height)
