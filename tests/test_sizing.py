import pytest

from treepack import Block, ConfigurationError, Fit, PackResult
from treepack.utils.sizing import (
    calculate_adjusted_size,
    calculate_gapped_size,
    calculate_packed_size,
    size_sorting,
    sort_blocks,
)


def test_size_sorting_key():
    assert size_sorting(Block(30, 50)) == (50, 1500, 30)


def test_sort_by_max_side_keeps_ties_in_input_order():
    blocks = [Block(10, 10), Block(50, 20), Block(20, 50), Block(40, 40)]
    # (50, 20) and (20, 50) share max side and area, width decides
    assert sort_blocks(blocks, "MAX_SIDE") == [1, 2, 3, 0]
    assert sort_blocks([Block(5, 5), Block(5, 5)], "MAX_SIDE") == [0, 1]


def test_sort_modes():
    blocks = [Block(10, 40), Block(30, 20), Block(20, 30)]
    assert sort_blocks(blocks, "NONE") == [0, 1, 2]
    assert sort_blocks(blocks, "HEIGHT") == [0, 2, 1]
    assert sort_blocks(blocks, "WIDTH") == [1, 2, 0]
    assert sort_blocks(blocks, "AREA") == [1, 2, 0]


def test_invalid_blocks_sort_last():
    blocks = [Block(None, None), Block(10, 10), Block(0, 50), Block(20, 20)]
    assert sort_blocks(blocks, "MAX_SIDE") == [3, 1, 0, 2]


def test_unknown_sort_mode():
    with pytest.raises(ConfigurationError):
        sort_blocks([], "SIDEWAYS")


def test_gapped_size():
    assert calculate_gapped_size((10, 20), 2) == (12, 22)


def test_packed_size_ignores_unplaced_blocks():
    results = [
        PackResult(Block(10, 20), fit=Fit(0, 0)),
        PackResult(Block(30, 5), fit=Fit(10, 0)),
        PackResult(Block(500, 500)),
    ]
    assert calculate_packed_size(results) == (40, 20)
    assert calculate_packed_size([]) == (1, 1)


@pytest.mark.parametrize("strategy, expected", [
    ("AUTO", (100, 30)),
    ("PO2", (128, 32)),
    ("QUAD", (100, 100)),
])
def test_adjusted_size(strategy, expected):
    assert calculate_adjusted_size((100, 30), strategy) == expected


def test_po2_keeps_exact_powers_and_rounds_floats_up():
    assert calculate_adjusted_size((64, 1), "PO2") == (64, 1)
    assert calculate_adjusted_size((64.5, 2.2), "PO2") == (128, 4)
