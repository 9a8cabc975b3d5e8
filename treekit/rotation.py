"""Left and right rotations of binary trees."""

from __future__ import annotations

from typing import Optional

from .tree import Node


def _replace_in_parent(old: Node, new: Node) -> None:
    parent = old.parent
    old.parent = new
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Rotate ``tree`` left around its right child and return the new subtree root."""
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    moved = pivot.left
    pivot.left = tree
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    _replace_in_parent(tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Rotate ``tree`` right around its left child and return the new subtree root."""
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    moved = pivot.right
    pivot.right = tree
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    _replace_in_parent(tree, pivot)
    return pivot