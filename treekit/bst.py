"""Binary search trees built from plain ``Node`` links."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional

from .metrics import size
from .traversal import inorder
from .tree import Node


def _is_bst_within(tree: Optional[Node], low: float, high: float) -> bool:
    stack = [(tree, low, high)]
    while stack:
        node, lo, hi = stack.pop()
        if node is None:
            continue
        if not lo < node.value < hi:
            return False
        stack.append((node.left, lo, node.value))
        stack.append((node.right, node.value, hi))
    return True


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a valid binary search tree without duplicates."""
    if tree is None:
        return False
    return _is_bst_within(tree, -math.inf, math.inf)


def _minimum(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """A binary search tree of distinct integers; ``root`` is None when empty."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        seen: set[int] = set()
        for value in values:
            if value not in seen:
                seen.add(value)
                self.insert(value)

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return its new node.

        Raises ValueError if the value is already in the tree.
        """
        if self.root is None:
            self.root = Node(value)
            return self.root
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value, current)
                    return current.left
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value, current)
                    return current.right
                current = current.right
            else:
                raise ValueError(f"value {value} is already in the tree")

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding ``value``, or None if there is none."""
        current = self.root
        while current is not None:
            if current.value == value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def remove(self, value: int) -> None:
        """Remove ``value`` from the tree.

        A node with two children takes its in-order successor's value, and
        the successor's node is removed instead. Raises KeyError if the
        value is not in the tree.
        """
        node = self.search(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor = _minimum(node.right)
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a BST from ``values`` in order, skipping repeats; return its root."""
    return BinarySearchTree(values).root