"""Binary tree nodes with parent links and the basic tree measurements."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value and links to its relatives.

    Creating a node does not attach it to ``parent``; the caller assigns it
    to ``parent.left`` or ``parent.right`` as needed.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def _nodes(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order (node, left, right)."""
        for node in self._nodes():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order (left, node, right)."""
        stack: list[Node] = []
        current: Node | None = self
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.value
            current = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order (left, right, node)."""
        stack = [self]
        reversed_order: list[int] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    def height(self) -> int:
        """Number of edges on the longest path from this node down to a leaf."""
        best = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            best = max(best, level)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, level + 1))
        return best

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in the tree rooted here."""
        return sum(1 for _ in self._nodes())

    def leaves(self) -> int:
        """Number of leaves in the tree rooted here."""
        return sum(1 for node in self._nodes() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes with at least one child."""
        return sum(1 for node in self._nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self._nodes()
        )

    def is_perfect(self) -> bool:
        """Return True if every internal node has two children and all
        leaves lie at the same level."""
        leaf_depth = 0
        node = self
        while not node.is_leaf():
            node = node.left if node.left is not None else node.right
            leaf_depth += 1
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if node.is_leaf():
                if level != leaf_depth:
                    return False
                continue
            if node.left is None or node.right is None:
                return False
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
        return True

    def sibling(self) -> Node | None:
        """The other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def _levels(node: Node | None) -> int:
    """Height counted in nodes: 0 for an empty tree, 1 for a single node."""
    return 0 if node is None else node.height() + 1