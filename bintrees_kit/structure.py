"""Structural queries and rotations on binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from bintrees_kit.node import Node


def ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the lowest common ancestor of two nodes.

    A node counts as its own ancestor. Returns None when either node is
    missing or the two nodes do not share a tree.
    """
    if first is None or second is None:
        return None
    lineage: set[Node] = set()
    node: Node | None = first
    while node is not None:
        lineage.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in lineage:
            return node
        node = node.parent
    return None


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of ``tree`` level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def is_complete(tree: Node | None) -> bool:
    """Return True if every level is full except possibly the last, whose
    nodes are packed to the left. An empty tree is not complete."""
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


def _relink_parent(old: Node, new: Node) -> None:
    parent = old.parent
    old.parent = new
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Node | None) -> Node | None:
    """Left-rotate the subtree rooted at ``tree`` and return its new root.

    Raises ValueError if ``tree`` has no right child.
    """
    if tree is None:
        return None
    pivot = tree.right
    if pivot is None:
        raise ValueError("cannot rotate left: node has no right child")
    tree.right = pivot.left
    if tree.right is not None:
        tree.right.parent = tree
    pivot.left = tree
    _relink_parent(tree, pivot)
    return pivot


def rotate_right(tree: Node | None) -> Node | None:
    """Right-rotate the subtree rooted at ``tree`` and return its new root.

    Raises ValueError if ``tree`` has no left child.
    """
    if tree is None:
        return None
    pivot = tree.left
    if pivot is None:
        raise ValueError("cannot rotate right: node has no left child")
    tree.left = pivot.right
    if tree.left is not None:
        tree.left.parent = tree
    pivot.right = tree
    _relink_parent(tree, pivot)
    return pivot