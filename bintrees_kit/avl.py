"""AVL trees: validation, balanced insertion, removal and building from sorted data."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from bintrees_kit.bst import BinarySearchTree, is_bst
from bintrees_kit.node import Node
from bintrees_kit.structure import rotate_left, rotate_right


def _walk(tree: Node) -> Iterator[Node]:
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def is_avl(tree: Node | None) -> bool:
    """Return True if ``tree`` is a binary search tree in which the subtree
    heights of every node differ by at most one. An empty tree is not AVL."""
    if tree is None:
        return False
    return is_bst(tree) and all(abs(node.balance()) <= 1 for node in _walk(tree))


def sorted_to_avl(values: Sequence[int]) -> Node | None:
    """Build a balanced tree from ``values``, which must already be sorted.

    The middle element becomes the root; for an even count the lower of the
    two middle elements is taken. Returns None for an empty sequence.
    """

    def build(low: int, high: int, parent: Node | None) -> Node | None:
        count = high - low
        if count == 0:
            return None
        middle = low + (count // 2 if count % 2 else count // 2 - 1)
        node = Node(values[middle], parent)
        node.left = build(low, middle, node)
        node.right = build(middle + 1, high, node)
        return node

    return build(0, len(values), None)


def _rebalance(node: Node | None) -> Node | None:
    """Rebalance bottom-up with single rotations; return the subtree's root."""
    if node is None or node.is_leaf():
        return node
    _rebalance(node.left)
    _rebalance(node.right)
    factor = node.balance()
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


class AVLTree(BinarySearchTree):
    """A self-balancing binary search tree of distinct integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(values)

    def insert(self, value: int) -> Node | None:
        """Insert ``value`` and rebalance.

        Returns the node holding the new value, or None if it was present.
        """
        new = super().insert(value)
        if new is None:
            return None
        node = new.parent
        while node is not None:
            parent = node.parent
            factor = node.balance()
            subtree = node
            if factor > 1 and node.left is not None:
                if value > node.left.value:
                    rotate_left(node.left)
                subtree = rotate_right(node)
            elif factor < -1 and node.right is not None:
                if value < node.right.value:
                    rotate_right(node.right)
                subtree = rotate_left(node)
            if parent is None:
                self.root = subtree
            node = parent
        return new

    def remove(self, value: int) -> Node | None:
        """Remove ``value``, rebalance and return the new root.

        Raises KeyError if ``value`` is absent.
        """
        super().remove(value)
        self.root = _rebalance(self.root)
        return self.root