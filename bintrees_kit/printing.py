"""Text rendering of binary trees as labelled boxes joined by dashes."""

from __future__ import annotations

from bintrees_kit.node import Node


def _label(node: Node) -> str:
    return f"({node.value:03d})"


def _put(row: list[str], index: int, char: str) -> None:
    if 0 <= index < len(row):
        row[index] = char


def _fill(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw ``node`` and its subtrees into ``rows``; return the width used."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = _label(node)
    width = len(label)
    left = _fill(node.left, offset, depth + 1, rows)
    right = _fill(node.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for i in range(count):
            _put(above, start + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _span(node: Node) -> tuple[int, int]:
    """Total label width of the tree and the widest single label."""
    widths = [len(f"({value:03d})") for value in node.preorder()]
    return sum(widths), max(widths)


def render(tree: Node | None) -> str:
    """Return the drawing of ``tree`` as lines joined by newlines.

    An empty tree renders as an empty string.
    """
    if tree is None:
        return ""
    total, widest = _span(tree)
    line_width = total + widest
    rows = [[" "] * line_width for _ in range(tree.height() + 1)]
    _fill(tree, 0, 0, rows)
    return "\n".join("".join(row).rstrip(" ") for row in rows)


def print_tree(tree: Node | None) -> None:
    """Print the drawing of ``tree`` to standard output."""
    text = render(tree)
    if text:
        print(text)