# treekit

A small library of binary trees whose nodes know their parent. It covers
building and editing trees, walking them, measuring them, rotating them,
drawing them as text, and binary search trees of distinct integers.

## Installing

```
pip install .
```

To install it with the test tools as well:

```
pip install ".[test]"
pytest
```

## Building a tree

`treekit.tree.Node` holds an integer `value` and `parent`, `left` and `right`
links. Creating a node does not attach it to its parent, so you link it in
yourself:

```python
from treekit.tree import Node, insert_left, insert_right, delete, depth, is_leaf, is_root

root = Node(98)
root.left = Node(12, root)
root.right = Node(402, root)
insert_right(root.left, 54)
insert_right(root, 128)

depth(root.left.right)   # 2
is_leaf(root.right)      # False, since 128 now sits between 98 and 402
is_root(root)            # True
```

`insert_left` and `insert_right` put the new node where the old child was,
and the old child becomes the new node's child on the same side. Both raise
`ValueError` when the parent is `None`.

`delete(node)` detaches a subtree from its parent and clears the links of
every node in it.

## Walking a tree

```python
from treekit.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
list(levelorder(root))
```

Each function is a generator that yields the node values in its own order.
An empty tree (`None`) yields nothing.

## Measuring a tree

`treekit.metrics` has:

- `height`, `size`, `leaves`, `internal_nodes` and `balance`, each giving 0
  for `None`;
- `is_full`, `is_perfect` and `is_complete`, each giving `False` for `None`;
- `sibling` and `uncle`, which return a node or `None`;
- `lowest_common_ancestor(first, second)`, in which a node counts as its own
  ancestor; it returns `None` when either node is `None` or the two share no
  root.

## Rotations

`treekit.rotation.rotate_left` and `rotate_right` rotate around the given
node and return the new root of that subtree, keeping all parent links
correct. `rotate_left` raises `ValueError` if the node has no right child,
`rotate_right` if it has no left child.

## Binary search trees

```python
from treekit.bst import BinarySearchTree, array_to_bst, is_bst

tree = BinarySearchTree([79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95])
tree.search(32)     # the Node holding 32, or None if absent
tree.remove(79)
79 in tree          # False
list(tree)          # values in ascending order
len(tree)           # 15
is_bst(tree.root)   # True

root = array_to_bst([5, 3, 5, 8])   # root Node of the tree, repeats skipped
```

The constructor and `array_to_bst` skip values that repeat earlier ones.
`BinarySearchTree.insert` returns the new node and raises `ValueError` if the
value is already in the tree. `remove` raises `KeyError` for a value that is
not there; when the removed node has two children, it takes its in-order
successor's value and the successor's node is removed instead.

`is_bst` returns `False` for `None` and for trees with repeated values.

## Drawing a tree

```python
from treekit.printing import render, print_tree

print_tree(root)
```

This writes an ASCII drawing, one line per level, in which every value is
padded to three digits, for example `(098)`. `print_tree` writes to standard
output unless given a `file`; `render` returns the same drawing as a string
(empty for `None`).

## What it does not do

treekit is a library only: it installs no command-line tool, and it does not
store trees anywhere or read them from files.