"""Binary tree bin packer with a fixed bin size.

The bin is sized up front and never changes. Each block goes into the first
free node where it fits, and blocks that fit nowhere are reported as
unplaced.

Typical usage example:
    packer = FixedSizePacker(500, 500)
    for result in packer.fit([(100, 100), (80, 80)]):
        if result.placed:
            draw(result.fit.x, result.fit.y, *result.block.size)
"""

from .space_tree import TreePacker


class FixedSizePacker(TreePacker):
    """Packs blocks into a bin of constant width and height.

    Calling fit again continues packing into the space left by earlier
    calls. Use init to start over with an empty bin.
    """

    name = "FixedSizePacker"
