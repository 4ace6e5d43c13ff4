from treepack.packer_types import Node
from treepack.packers import find_node, free_nodes, iter_nodes, split_node


def test_find_node_returns_free_root_when_block_fits():
    root = Node(0, 0, 100, 100)
    assert find_node(root, 100, 100) is root
    assert find_node(root, 101, 10) is None
    assert find_node(root, 10, 101) is None


def test_split_node_carves_right_and_down_remainders():
    node = Node(10, 20, 100, 60)
    result = split_node(node, 30, 40)

    assert result is node
    assert node.used
    assert (node.x, node.y, node.width, node.height) == (10, 20, 100, 60)
    assert node.down == Node(10, 60, 100, 20)
    assert node.right == Node(40, 20, 70, 40)


def test_split_node_full_width_leaves_zero_width_right():
    node = split_node(Node(0, 0, 50, 80), 50, 30)
    assert node.right.width == 0
    assert find_node(node.right, 1, 1) is None
    # The down remainder is still usable
    assert find_node(node, 50, 50) is node.down


def test_find_node_prefers_right_over_down():
    root = split_node(Node(0, 0, 100, 100), 50, 50)
    # Both remainders can hold 50x50, right wins
    found = find_node(root, 50, 50)
    assert (found.x, found.y) == (50, 0)
    # Only the down remainder is wide enough
    found = find_node(root, 100, 50)
    assert (found.x, found.y) == (0, 50)


def test_find_node_does_not_mutate():
    root = split_node(Node(0, 0, 100, 100), 40, 40)
    before = list(iter_nodes(root))
    find_node(root, 10, 10)
    after = list(iter_nodes(root))
    assert len(before) == len(after) == 3
    assert not any(node.used for node in after[1:])


def test_iter_nodes_follows_search_order():
    root = split_node(Node(0, 0, 100, 100), 50, 50)
    split_node(root.right, 20, 20)
    positions = [(n.x, n.y) for n in iter_nodes(root)]
    assert positions == [(0, 0), (50, 0), (70, 0), (50, 20), (0, 50)]


def test_free_nodes_skips_degenerate_leaves():
    root = split_node(Node(0, 0, 100, 100), 100, 40)
    free = free_nodes(root)
    assert [(n.x, n.y, n.width, n.height) for n in free] == [(0, 40, 100, 60)]
