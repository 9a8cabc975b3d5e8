"""Binary tree nodes and basic structural operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives.

    Creating a node does not attach it to ``parent``; the caller links it
    into the parent's ``left`` or ``right`` slot.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)


def _require_parent(parent: Optional[Node]) -> Node:
    if parent is None:
        raise ValueError("a parent node is required")
    return parent


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    parent = _require_parent(parent)
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    parent = _require_parent(parent)
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def delete(tree: Optional[Node]) -> None:
    """Delete a whole (sub)tree, detaching it and unlinking every node in it."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    pending = [tree]
    while pending:
        node = pending.pop()
        pending.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def depth(node: Optional[Node]) -> int:
    """Return the number of edges from ``node`` up to its root (0 for None)."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count