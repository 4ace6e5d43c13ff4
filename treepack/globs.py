"""Global constants and defaults for treepack.

This module holds the names accepted by the configuration layer and the
defaults used when a caller does not provide them.
"""


class PackerTypes:
    """Names of the available packer variants."""

    GROWING = "GROWING"
    FIXED = "FIXED"


class SortModes:
    """Orderings applied to the blocks before packing.

    Every mode sorts in descending order. MAX_SIDE gives the best results for
    the binary tree packers.
    """

    NONE = "NONE"
    MAX_SIDE = "MAX_SIDE"
    AREA = "AREA"
    HEIGHT = "HEIGHT"
    WIDTH = "WIDTH"


class SizeStrategies:
    """Post-processing applied to the packed bounding size."""

    AUTO = "AUTO"  # Keep the packed size as is
    PO2 = "PO2"  # Round each side up to a power of two
    QUAD = "QUAD"  # Square of the longer side


packer_types = (PackerTypes.GROWING, PackerTypes.FIXED)
sort_modes = (
    SortModes.NONE,
    SortModes.MAX_SIDE,
    SortModes.AREA,
    SortModes.HEIGHT,
    SortModes.WIDTH,
)
size_strategies = (SizeStrategies.AUTO, SizeStrategies.PO2, SizeStrategies.QUAD)

DEFAULT_PACKER = PackerTypes.GROWING
DEFAULT_SORT = SortModes.MAX_SIDE
DEFAULT_SIZE_STRATEGY = SizeStrategies.AUTO
DEFAULT_GAPS = 0
