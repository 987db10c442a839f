# bintrees_kit

Linked binary trees in plain Python. Each node knows its parent and its
children. The package gives you traversals and measurements, rotations, and
three ordered trees built on the same node: binary search trees, AVL trees
and max heaps. A text renderer draws any tree as boxed values joined by
dashes.

## Install

```
pip install .
```

## Nodes

```python
from bintrees_kit.node import Node
from bintrees_kit.printing import print_tree, render

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)

list(root.preorder())   # [98, 12, 54, 402]
root.height()           # 2
root.size()             # 4
root.leaves()           # 2
root.is_full()          # False
print_tree(root)
```

`Node(value, parent=None)` does not attach itself to `parent`. Assign it to
`parent.left` or `parent.right` yourself, or use `insert_left` and
`insert_right`. These two push an existing child one level down below the
new node.

Other `Node` methods:

- `inorder()` and `postorder()` are generators, like `preorder()`.
- `depth()` counts the edges up to the root.
- `internal_nodes()` counts the nodes that have at least one child.
- `balance()` is the height of the left subtree minus the height of the right one.
- `is_leaf()`, `is_root()` and `is_perfect()` test the shape.
- `sibling()` and `uncle()` return a node or `None`.

`render(tree)` returns the drawing as a string. It returns an empty string
for `None`. `print_tree(tree)` writes the drawing to standard output.

## Structure

```python
from bintrees_kit.structure import ancestor, levelorder, is_complete, rotate_left, rotate_right
```

- `ancestor(first, second)` returns the lowest common ancestor of two nodes. A node counts as its own ancestor. It returns `None` if the nodes are not in the same tree.
- `levelorder(tree)` yields the values breadth first, left to right.
- `is_complete(tree)` reports whether the tree is complete. An empty tree is not complete.
- `rotate_left(tree)` and `rotate_right(tree)` return the new root of the subtree and update the links of the parent. They raise `ValueError` when the needed child is missing.

## Search trees and heaps

```python
from bintrees_kit.bst import BinarySearchTree, is_bst
from bintrees_kit.avl import AVLTree, is_avl, sorted_to_avl
from bintrees_kit.heap import MaxHeap, is_heap

tree = BinarySearchTree([79, 47, 68, 87])
tree.insert(21)         # the new Node, or None if 21 was already there
tree.search(68)         # the Node holding 68, or None
tree.remove(79)         # new root; KeyError if the value is absent
list(tree)              # values in order; len() and `in` also work

avl = AVLTree([79, 47, 68, 87, 84, 91])
avl.remove(47)

heap = MaxHeap([79, 47, 68, 87, 84])
heap.extract()          # 87
heap.to_sorted_list()   # [84, 79, 68, 47], and the heap is left empty
```

The search trees keep distinct values only. Inserting a value that is
already present changes nothing and returns `None`.

When `remove` deletes a node with two children, that node takes the value of
its in-order successor. `AVLTree.remove` then rebalances the tree with single
rotations.

`sorted_to_avl(values)` builds a balanced tree of `Node`s from a sorted
sequence. For an even count it takes the lower of the two middle elements as
the root.

`MaxHeap.extract()` raises `IndexError` on an empty heap.

`is_bst`, `is_avl` and `is_heap` check any tree of `Node`s and return
`False` for `None`.

## What it does not do

This is a library only:

- It has no command-line program.
- It does not store trees on disk.
- It holds integer values only. It has no key/value mapping.

## Tests

```
pip install .[test]
pytest
```