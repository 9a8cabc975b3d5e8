import pytest

from treekit.tree import Node, delete, depth, insert_left, insert_right, is_leaf, is_root


def _basic_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    insert_right(root.left, 54)
    insert_right(root, 128)
    return root


def test_node_creation_sets_fields():
    parent = Node(98)
    child = Node(12, parent)
    assert child.value == 12
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert parent.left is None and parent.right is None


def test_insert_left_displaces_existing_child():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    new_right_left = insert_left(root.right, 128)
    new_left = insert_left(root, 54)
    assert root.right.left is new_right_left
    assert new_right_left.value == 128
    assert new_right_left.parent is root.right
    assert root.left is new_left
    assert new_left.value == 54
    assert new_left.left.value == 12
    assert new_left.left.parent is new_left


def test_insert_right_displaces_existing_child():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    insert_right(root.left, 54)
    new = insert_right(root, 128)
    assert root.left.right.value == 54
    assert root.right is new
    assert new.right.value == 402
    assert new.right.parent is new


@pytest.mark.parametrize("func", [insert_left, insert_right])
def test_insert_without_parent_raises(func):
    with pytest.raises(ValueError):
        func(None, 1)


def test_is_leaf():
    root = _basic_tree()
    assert is_leaf(root) is False
    assert is_leaf(root.right) is False
    assert is_leaf(root.right.right) is True
    assert is_leaf(None) is False


def test_is_root():
    root = _basic_tree()
    assert is_root(root) is True
    assert is_root(root.right) is False
    assert is_root(root.right.right) is False
    assert is_root(None) is False


def test_depth():
    root = _basic_tree()
    assert depth(root) == 0
    assert depth(root.right) == 1
    assert depth(root.left.right) == 2
    assert depth(None) == 0


def test_delete_subtree_detaches_from_parent():
    root = _basic_tree()
    subtree = root.right
    grandchild = subtree.right
    delete(subtree)
    assert root.right is None
    assert root.left.value == 12
    assert subtree.parent is None and subtree.right is None
    assert grandchild.parent is None


def test_delete_whole_tree_unlinks_everything():
    root = _basic_tree()
    nodes = [root, root.left, root.right, root.left.right, root.right.right]
    delete(root)
    assert all(n.parent is None and n.left is None and n.right is None for n in nodes)


def test_delete_none_is_harmless():
    root = _basic_tree()
    delete(None)
    assert root.left.value == 12