"""Measurements, shape checks and relative lookups on binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .tree import Node, depth, is_leaf


def _children(node: Node) -> Iterator[Node]:
    return (child for child in (node.left, node.right) if child is not None)


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(_children(node))


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path (0 for None)."""
    if tree is None:
        return 0
    return max((1 + height(child) for child in _children(tree)), default=0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if is_leaf(node))


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not is_leaf(node))


def _levels(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right subtree's (0 for None)."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every inner node has two children and all leaves share a level."""
    if tree is None:
        return False
    leaf = tree
    while not is_leaf(leaf):
        leaf = leaf.left if leaf.left is not None else leaf.right
    leaf_level = depth(leaf) - depth(tree)
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if is_leaf(node):
            if level != leaf_level:
                return False
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.left, level + 1))
        stack.append((node.right, level + 1))
    return True


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled, the last one from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.right if parent.left is node else parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, or None."""
    if node is None or node.parent is None or node.parent.parent is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both (a node counts as its own)."""
    if first is None or second is None:
        return None
    ancestors = set()
    node: Optional[Node] = first
    while node is not None:
        ancestors.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in ancestors:
            return node
        node = node.parent
    return None