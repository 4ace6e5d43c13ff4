import math
from collections.abc import Mapping
from numbers import Real
from typing import Optional, Union

from . import globs
from .exceptions import ConfigurationError, InvalidDimension, PackerError
from .type_hints import BlockLike, Corner, Number, Size


# __dict__ based baseclass
class _Base:
    def __repr__(self):
        items = ("{}={}".format(k, repr(v)) for k, v in self.__dict__.items())
        return "{}({})".format(type(self).__name__, ", ".join(items))

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.__dict__ == other.__dict__


def is_valid_dimension(value) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value > 0
    )


def validate_size(width, height) -> Size:
    """Return (width, height) or raise InvalidDimension."""
    if not (is_valid_dimension(width) and is_valid_dimension(height)):
        raise InvalidDimension(width, height)
    return width, height


class Block(_Base):
    def __init__(self, width: Number, height: Number):
        self.width = width
        self.height = height

    @property
    def size(self) -> Size:
        return self.width, self.height

    @property
    def area(self) -> Number:
        return self.width * self.height

    @classmethod
    def from_any(cls, item: BlockLike) -> "Block":
        """Normalize a (width, height) tuple, a mapping or an object with width/height.

        The dimensions are not validated here, invalid blocks are reported per
        item by the packers.
        """
        if isinstance(item, Block):
            return item
        if isinstance(item, (tuple, list)):
            if len(item) != 2:
                return cls(None, None)
            return cls(item[0], item[1])
        if isinstance(item, Mapping):
            return cls(item.get("width"), item.get("height"))
        return cls(getattr(item, "width", None), getattr(item, "height", None))


class Fit(_Base):
    def __init__(self, x: Number = 0, y: Number = 0):
        self.x = x
        self.y = y


class Node(_Base):
    """Rectangular region of the partition tree.

    A node is either a free leaf (used is False, no children) or a split node
    (used is True, both right and down present).
    """

    def __init__(self, x: Number, y: Number, width: Number, height: Number,
                 used: bool = False,
                 right: Optional["Node"] = None,
                 down: Optional["Node"] = None):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.used = used
        self.right = right
        self.down = down

    def fits(self, w: Number, h: Number) -> bool:
        return w <= self.width and h <= self.height

    def to_fit(self) -> Fit:
        return Fit(self.x, self.y)


class PackResult(_Base):
    def __init__(self,
                 block: Block,
                 fit: Optional[Fit] = None,
                 error: Optional[PackerError] = None):
        self.block = block
        self.fit = fit
        self.error = error

    @property
    def placed(self) -> bool:
        return self.fit is not None

    def get_top_left_corner(self, gaps: Number = 0) -> Optional[Corner]:
        fit = self.fit
        if fit:
            x = fit.x + gaps / 2
            y = fit.y + gaps / 2
            return x, y
        else:
            return None


class PackSettings(_Base):
    """Options for treepack.packers.pack.

    width and height are the bin size of the FIXED packer and the seed size
    of the GROWING packer. Leaving them unset for GROWING seeds the packer
    with the first block after sorting.
    """

    def __init__(self,
                 packer_type: str = globs.DEFAULT_PACKER,
                 sort: str = globs.DEFAULT_SORT,
                 gaps: Number = globs.DEFAULT_GAPS,
                 size_strategy: str = globs.DEFAULT_SIZE_STRATEGY,
                 width: Optional[Number] = None,
                 height: Optional[Number] = None):
        self.packer_type = packer_type
        self.sort = sort
        self.gaps = gaps
        self.size_strategy = size_strategy
        self.width = width
        self.height = height
        self.validate()

    def validate(self) -> None:
        if self.packer_type not in globs.packer_types:
            raise ConfigurationError("Unknown packer type: {}".format(self.packer_type))
        if self.sort not in globs.sort_modes:
            raise ConfigurationError("Unknown sort mode: {}".format(self.sort))
        if self.size_strategy not in globs.size_strategies:
            raise ConfigurationError("Unknown size strategy: {}".format(self.size_strategy))
        if not (self.gaps == 0 or is_valid_dimension(self.gaps)):
            raise ConfigurationError("Gaps must be a non-negative number, got {}".format(self.gaps))

        if (self.width is None) != (self.height is None):
            raise ConfigurationError("Width and height must be set together")
        if self.width is not None:
            validate_size(self.width, self.height)
        elif self.packer_type == globs.PackerTypes.FIXED:
            raise ConfigurationError("FIXED packer needs width and height")

    @property
    def size(self) -> Union[Size, None]:
        if self.width is None:
            return None
        return self.width, self.height
