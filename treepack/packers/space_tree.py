"""Binary tree space partitioning shared by the treepack packers.

The tree starts as a single free node covering the bin. Placing a block
splits the free node it lands in into the used footprint plus two free
remainders: the strip to the right of the block (as tall as the block) and
the strip below it (as wide as the node).

Original algorithm by Jake Gordon
https://github.com/jakesgordon/bin-packing

Copyright (c) 2011, 2012, 2013, 2014, 2015, 2016 Jake Gordon and contributors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

from typing import Iterator, List, Optional

from loguru import logger

from ..exceptions import InvalidDimension, UnplaceableItem
from ..packer_types import Block, Node, PackResult, validate_size
from ..type_hints import Blocks, Number


def find_node(root: Node, w: Number, h: Number) -> Optional[Node]:
    """Find the first free node that can hold a w x h block.

    Used nodes are searched right child first, then down child. The first
    free node large enough is returned, without looking for a tighter one.

    Args:
        root: Node to start the search from.
        w: Width required.
        h: Height required.

    Returns:
        Suitable node or None if none is found.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.used:
            stack.append(node.down)
            stack.append(node.right)
        elif node.fits(w, h):
            return node
    return None


def split_node(node: Node, w: Number, h: Number) -> Node:
    """Carve a w x h block out of the top-left corner of a free node.

    The node keeps its original size; only its x and y are meaningful as
    the placement of the block. A block as wide (or as tall) as the node
    leaves a zero width right (or zero height down) child behind.

    Args:
        node: Free node to split.
        w: Width of the placed block.
        h: Height of the placed block.

    Returns:
        The same node, now marked as used.
    """
    node.used = True
    node.down = Node(node.x, node.y + h, node.width, node.height - h)
    node.right = Node(node.x + w, node.y, node.width - w, h)
    return node


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node of the tree, parents before children."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.used:
            stack.append(node.down)
            stack.append(node.right)


def free_nodes(root: Node) -> List[Node]:
    """Free leaves with a positive area, in search order."""
    return [node for node in iter_nodes(root) if not node.used and node.width > 0 and node.height > 0]


class TreePacker:
    """Common packing loop of the binary tree packers.

    Attributes:
        root: The root node of the packing tree.
    """

    name = "TreePacker"

    def __init__(self, width: Number, height: Number) -> None:
        self.root = None
        self.init(width, height)

    def init(self, width: Number, height: Number) -> None:
        """(Re)start with an empty tree of the given size."""
        width, height = validate_size(width, height)
        self.root = Node(0, 0, width, height)

    @property
    def size(self):
        return self.root.width, self.root.height

    def fit(self, blocks: Blocks) -> List[PackResult]:
        """Place every block, in input order.

        Failures never abort the run: a block that is invalid or does not fit
        gets a result with its error set and packing continues with the next
        block.

        Args:
            blocks: (width, height) tuples, mappings or objects with width
                    and height attributes.

        Returns:
            One PackResult per block, in the same order.
        """
        results = []
        for item in blocks:
            block = Block.from_any(item)
            try:
                w, h = validate_size(block.width, block.height)
            except InvalidDimension as e:
                logger.warning("[{}] skipping block: {}", self.name, e)
                results.append(PackResult(block, error=e))
                continue

            node = find_node(self.root, w, h)
            node = split_node(node, w, h) if node else self.handle_miss(w, h)

            if node is None:
                error = UnplaceableItem(w, h, self.miss_reason(w, h))
                logger.warning("[{}] {}", self.name, error)
                results.append(PackResult(block, error=error))
            else:
                results.append(PackResult(block, fit=node.to_fit()))
        return results

    def handle_miss(self, w: Number, h: Number) -> Optional[Node]:
        return None

    def miss_reason(self, w: Number, h: Number) -> str:
        return "no free region of the {}x{} bin fits".format(*self.size)
