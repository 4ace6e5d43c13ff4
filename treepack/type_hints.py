# Shared type hints

from typing import Any, Iterable, Tuple, Union

from numpy import ndarray

Number = Union[int, float]

Size = Tuple[Number, Number]
Corner = Tuple[Number, Number]

# Anything with width/height attributes, or a (width, height) tuple
BlockLike = Union[Size, Any]
Blocks = Iterable[BlockLike]

BoxArray = ndarray
