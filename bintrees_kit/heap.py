"""Max binary heaps stored as linked complete binary trees."""

from __future__ import annotations

from collections.abc import Iterable

from bintrees_kit.node import Node
from bintrees_kit.structure import is_complete


def is_heap(tree: Node | None) -> bool:
    """Return True if ``tree`` is complete and every parent is strictly
    greater than its children. An empty tree is not a heap."""
    if tree is None or not is_complete(tree):
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if node.value <= child.value:
                    return False
                stack.append(child)
    return True


class MaxHeap:
    """A max binary heap of integers built on ``Node``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def _node_at(self, index: int) -> Node:
        """Return the node at 1-based level-order position ``index``."""
        node = self.root
        assert node is not None
        for bit in bin(index)[3:]:
            child = node.right if bit == "1" else node.left
            assert child is not None
            node = child
        return node

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node where it settled."""
        if self.root is None:
            self.root = Node(value)
            self._size = 1
            return self.root
        index = self._size + 1
        parent = self._node_at(index // 2)
        node = Node(value, parent)
        if index % 2:
            parent.right = node
        else:
            parent.left = node
        self._size += 1
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from empty heap")
        value = self.root.value
        if self._size == 1:
            self.root = None
            self._size = 0
            return value
        last = self._node_at(self._size)
        self.root.value = last.value
        parent = last.parent
        assert parent is not None
        if parent.right is last:
            parent.right = None
        else:
            parent.left = None
        last.parent = None
        self._size -= 1
        self._sift_down(self.root)
        return value

    @staticmethod
    def _sift_down(node: Node) -> None:
        while node.left is not None:
            child = node.left
            if node.right is not None and not node.left.value > node.right.value:
                child = node.right
            if node.value > child.value:
                break
            node.value, child.value = child.value, node.value
            node = child

    def to_sorted_list(self) -> list[int]:
        """Empty the heap and return its values in descending order."""
        return [self.extract() for _ in range(len(self))]