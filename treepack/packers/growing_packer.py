"""Binary tree bin packer that grows the bin as needed.

Instead of starting off with a fixed width and height, the bin starts with
the seed size (usually the first block) and grows right or down to
accommodate each block that finds no free node. Growth is biased by the
aspect ratio of the seed so the bin stays close to that shape.

The bin can only grow right OR down. A block that is both wider and taller
than the current bin is rejected, so the input should be sorted with the
largest blocks first, ideally by max(width, height).

Original algorithm by Jake Gordon
https://github.com/jakesgordon/bin-packing

Typical usage example:
    blocks = [(100, 200), (150, 100)]
    packer = GrowingPacker.from_blocks(blocks)
    results = packer.fit(blocks)
"""

from typing import Optional

from loguru import logger

from ..packer_types import Block, Node, is_valid_dimension
from ..type_hints import Blocks, Number
from .space_tree import TreePacker, find_node, split_node


class GrowingPacker(TreePacker):
    """Packs blocks into a bin that starts at the seed size and grows.

    Attributes:
        root: The root node of the packing tree, replaced on every growth.
        aspect_ratio: Longer over shorter side of the seed, fixed at
            construction.
    """

    name = "GrowingPacker"

    def init(self, width: Number, height: Number) -> None:
        super().init(width, height)
        self.aspect_ratio = max(width, height) / min(width, height)

    @classmethod
    def from_blocks(cls, blocks: Blocks) -> Optional["GrowingPacker"]:
        """Create a packer seeded with the size of the first valid block.

        Returns:
            A new packer, or None if no block has a valid size.
        """
        for item in blocks:
            block = Block.from_any(item)
            if is_valid_dimension(block.width) and is_valid_dimension(block.height):
                return cls(block.width, block.height)
        return None

    def handle_miss(self, w: Number, h: Number) -> Optional[Node]:
        return self.grow_node(w, h)

    def miss_reason(self, w: Number, h: Number) -> str:
        return "wider and taller than the {}x{} bin, cannot grow in one direction".format(*self.size)

    def grow_node(self, w: Number, h: Number) -> Optional[Node]:
        """Grow the root so that a w x h block fits, and place it.

        Growing right is preferred while the bin is too tall for the aspect
        ratio, growing down while it is too wide.

        Returns:
            The node the block was placed in, or None if the block is both
            wider and taller than the bin.
        """
        root = self.root
        can_grow_down = w <= root.width
        can_grow_right = h <= root.height

        should_grow_right = can_grow_right and root.height * self.aspect_ratio >= root.width + w
        should_grow_down = can_grow_down and root.width / self.aspect_ratio >= root.height + h

        if should_grow_right:
            return self.grow_right(w, h)
        elif should_grow_down:
            return self.grow_down(w, h)
        elif can_grow_right:
            return self.grow_right(w, h)
        elif can_grow_down:
            return self.grow_down(w, h)
        return None

    def grow_right(self, w: Number, h: Number) -> Optional[Node]:
        old_root = self.root
        new_width = old_root.width + w
        # Tall seeds would otherwise shrink the bin
        new_height = max(old_root.height, new_width / self.aspect_ratio)
        self.root = Node(
            0, 0, new_width, new_height,
            used=True,
            down=old_root,
            right=Node(old_root.width, 0, w, new_height),
        )
        logger.debug("[{}] grew right to {}x{}", self.name, new_width, new_height)
        node = find_node(self.root, w, h)
        return split_node(node, w, h) if node else None

    def grow_down(self, w: Number, h: Number) -> Optional[Node]:
        old_root = self.root
        new_height = old_root.height + h
        # Never narrower than the old root
        new_width = max(old_root.width, new_height * self.aspect_ratio)
        self.root = Node(
            0, 0, new_width, new_height,
            used=True,
            down=Node(0, old_root.height, new_width, h),
            right=old_root,
        )
        logger.debug("[{}] grew down to {}x{}", self.name, new_width, new_height)
        node = find_node(self.root, w, h)
        return split_node(node, w, h) if node else None
