from typing import List, Optional

from loguru import logger

from .. import globs
from ..exceptions import InvalidDimension
from ..packer_types import Block, PackResult, PackSettings, is_valid_dimension
from ..type_hints import Blocks, Size
from ..utils.sizing import (
    calculate_adjusted_size,
    calculate_gapped_size,
    calculate_packed_size,
    sort_blocks,
)
from .fixed_size_packer import FixedSizePacker
from .growing_packer import GrowingPacker
from .space_tree import TreePacker, find_node, free_nodes, iter_nodes, split_node

__all__ = [
    "FixedSizePacker",
    "GrowingPacker",
    "TreePacker",
    "bin_size",
    "find_node",
    "free_nodes",
    "iter_nodes",
    "pack",
    "split_node",
]


def pack(blocks: Blocks, settings: Optional[PackSettings] = None) -> List[PackResult]:
    """Sort, pad and pack blocks with the packer named by the settings.

    Blocks are packed in sorted order, inflated by settings.gaps. The
    returned results follow the caller's original order and refer to the
    caller's block sizes, without the gaps. Use
    PackResult.get_top_left_corner(settings.gaps) for the inset position.
    """
    settings = settings or PackSettings()
    originals = [Block.from_any(item) for item in blocks]
    if not originals:
        return []

    order = sort_blocks(originals, settings.sort)
    gapped = [_gapped(originals[i], settings.gaps) for i in order]

    packer = _create_packer(settings, gapped)
    if packer is None:
        # Nothing to seed a growing bin with, so every block is invalid
        return [PackResult(b, error=InvalidDimension(b.width, b.height)) for b in originals]

    packed = packer.fit(gapped)

    results = [None] * len(originals)
    for index, result in zip(order, packed):
        results[index] = PackResult(originals[index], fit=result.fit, error=result.error)

    placed = sum(1 for r in results if r.placed)
    logger.info(
        "[pack] {} placed {}/{} blocks in {}x{}",
        settings.packer_type, placed, len(results), *packer.size
    )
    return results


def bin_size(results: List[PackResult], settings: Optional[PackSettings] = None) -> Size:
    """Bounding size of a packing run, adjusted by settings.size_strategy."""
    settings = settings or PackSettings()
    size = calculate_packed_size(results, settings.gaps)
    return calculate_adjusted_size(size, settings.size_strategy)


def _gapped(block: Block, gaps) -> Block:
    if gaps and is_valid_dimension(block.width) and is_valid_dimension(block.height):
        return Block(*calculate_gapped_size(block.size, gaps))
    return block


def _create_packer(settings: PackSettings, blocks: List[Block]) -> Optional[TreePacker]:
    if settings.packer_type == globs.PackerTypes.FIXED:
        return FixedSizePacker(settings.width, settings.height)
    if settings.size is not None:
        return GrowingPacker(*settings.size)
    return GrowingPacker.from_blocks(blocks)
