"""treepack: binary tree rectangle bin packing.

Blocks are placed into a bin by splitting free regions of a binary tree into
the used footprint plus right and down remainders. FixedSizePacker packs into
a bin of constant size, GrowingPacker starts at the seed size and grows the
bin right or down, keeping it close to the seed's aspect ratio.

Typical usage example:
    from treepack import PackSettings, pack

    results = pack([(100, 100), (80, 80), (80, 80)])
    for result in results:
        if result.placed:
            print(result.fit.x, result.fit.y)
"""

from .exceptions import ConfigurationError, InvalidDimension, PackerError, UnplaceableItem
from .packer_types import Block, Fit, Node, PackResult, PackSettings
from .packers import FixedSizePacker, GrowingPacker, bin_size, pack

__version__ = "1.0.0"

__all__ = [
    "Block",
    "ConfigurationError",
    "Fit",
    "FixedSizePacker",
    "GrowingPacker",
    "InvalidDimension",
    "Node",
    "PackResult",
    "PackSettings",
    "PackerError",
    "UnplaceableItem",
    "bin_size",
    "pack",
]
