"""Size calculations around a packing run.

Sorting keys for the input blocks, gap handling, and the bounding size of a
finished layout with optional rounding strategies.
"""

import math
from typing import List, Sequence, Tuple, cast

from .. import globs
from ..exceptions import ConfigurationError
from ..packer_types import Block, PackResult, is_valid_dimension
from ..type_hints import Number, Size


def size_sorting(block: Block) -> Tuple[Number, Number, Number]:
    """Key function for sorting blocks by size.

    Args:
        block: Block to rank.

    Returns:
        Tuple of sorting keys (max dimension, area, width).
    """
    return max(block.width, block.height), block.width * block.height, block.width


_sort_keys = {
    globs.SortModes.MAX_SIDE: size_sorting,
    globs.SortModes.AREA: lambda b: (b.area, max(b.width, b.height)),
    globs.SortModes.HEIGHT: lambda b: (b.height, b.width),
    globs.SortModes.WIDTH: lambda b: (b.width, b.height),
}


def sort_blocks(blocks: Sequence[Block], sort: str = globs.DEFAULT_SORT) -> List[int]:
    """Order block indices for packing, largest first.

    Blocks with an invalid size cannot be ranked and keep their relative
    order at the end of the list. Ties keep the input order.

    Args:
        blocks: Normalized blocks.
        sort: One of globs.sort_modes.

    Returns:
        Indices into blocks in packing order.
    """
    if sort not in globs.sort_modes:
        raise ConfigurationError("Unknown sort mode: {}".format(sort))

    indices = list(range(len(blocks)))
    if sort == globs.SortModes.NONE:
        return indices

    valid = [i for i in indices if _has_valid_size(blocks[i])]
    invalid = [i for i in indices if not _has_valid_size(blocks[i])]
    key = _sort_keys[sort]
    valid.sort(key=lambda i: key(blocks[i]), reverse=True)
    return valid + invalid


def _has_valid_size(block: Block) -> bool:
    return is_valid_dimension(block.width) and is_valid_dimension(block.height)


def calculate_gapped_size(size: Size, gaps: Number) -> Size:
    """Inflate a block size by the gap left around it in the bin."""
    return cast(Size, tuple(s + gaps for s in size))


def calculate_packed_size(results: Sequence[PackResult], gaps: Number = 0) -> Size:
    """Calculate the bounding size of the placed blocks.

    Args:
        results: Results of a packing run.
        gaps: Gap the blocks were inflated by before packing.

    Returns:
        Tuple of (width, height), at least (1, 1).
    """
    max_x = 1
    max_y = 1

    for result in results:
        if not result.placed:
            continue
        max_x = max(max_x, result.fit.x + result.block.width + gaps)
        max_y = max(max_y, result.fit.y + result.block.height + gaps)

    return max_x, max_y


def calculate_adjusted_size(size: Size, strategy: str = globs.DEFAULT_SIZE_STRATEGY) -> Size:
    """Adjust a packed size based on the chosen sizing strategy.

    Args:
        size: Original calculated size.
        strategy: One of globs.size_strategies.

    Returns:
        Adjusted size based on the selected size strategy.
    """
    if strategy == globs.SizeStrategies.PO2:
        return cast(Size, tuple(1 << (math.ceil(x) - 1).bit_length() for x in size))
    elif strategy == globs.SizeStrategies.QUAD:
        return (max(size),) * 2
    elif strategy == globs.SizeStrategies.AUTO:
        return size
    raise ConfigurationError("Unknown size strategy: {}".format(strategy))
