import pytest

from treekit.traversal import inorder, levelorder, postorder, preorder
from treekit.tree import Node


def _sample():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _chain(length, side):
    root = Node(0)
    node = root
    for value in range(1, length):
        child = Node(value, node)
        setattr(node, side, child)
        node = child
    return root


def test_preorder():
    assert list(preorder(_sample())) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder():
    assert list(inorder(_sample())) == [6, 12, 56, 98, 256, 402, 512]


def test_postorder():
    assert list(postorder(_sample())) == [6, 56, 12, 256, 512, 402, 98]


def test_levelorder():
    assert list(levelorder(_sample())) == [98, 12, 402, 6, 56, 256, 512]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_empty_tree_yields_nothing(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_every_traversal_visits_each_node_once(walk):
    assert sorted(walk(_sample())) == sorted(levelorder(_sample()))


def test_deep_left_chain_does_not_recurse():
    root = _chain(5000, "left")
    assert list(inorder(root)) == list(range(4999, -1, -1))
    assert list(preorder(root)) == list(range(5000))


def test_deep_right_chain_postorder():
    root = _chain(5000, "right")
    assert list(postorder(root)) == list(range(4999, -1, -1))
    assert list(levelorder(root)) == list(range(5000))