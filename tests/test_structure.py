import pytest

from bintrees_kit.node import Node
from bintrees_kit.structure import (
    ancestor,
    is_complete,
    levelorder,
    rotate_left,
    rotate_right,
)


def _attach(parent, value, side):
    child = Node(value, parent)
    setattr(parent, side, child)
    return child


@pytest.fixture
def ancestor_tree():
    root = Node(98)
    n12 = _attach(root, 12, "left")
    n402 = _attach(root, 402, "right")
    n54 = _attach(n12, 54, "right")
    n128 = _attach(n402, 128, "right")
    n10 = _attach(n12, 10, "left")
    n45 = _attach(n402, 45, "left")
    n92 = _attach(n128, 92, "left")
    n65 = _attach(n128, 65, "right")
    return {
        98: root, 12: n12, 402: n402, 54: n54, 128: n128,
        10: n10, 45: n45, 92: n92, 65: n65,
    }


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (12, 402, 98),
        (45, 65, 402),
        (128, 65, 128),
        (98, 128, 98),
        (128, 98, 98),
        (98, 10, 98),
        (10, 98, 98),
        (92, 65, 128),
        (54, 10, 12),
        (10, 65, 98),
        (45, 45, 45),
        (65, 402, 402),
    ],
)
def test_ancestor(ancestor_tree, a, b, expected):
    assert ancestor(ancestor_tree[a], ancestor_tree[b]) is ancestor_tree[expected]


def test_ancestor_is_symmetric(ancestor_tree):
    for a in ancestor_tree.values():
        for b in ancestor_tree.values():
            assert ancestor(a, b) is ancestor(b, a)


def test_ancestor_missing_or_disconnected():
    assert ancestor(None, Node(1)) is None
    assert ancestor(Node(1), Node(2)) is None


def test_levelorder():
    root = Node(98)
    left = _attach(root, 12, "left")
    right = _attach(root, 402, "right")
    _attach(left, 6, "left")
    _attach(left, 56, "right")
    _attach(right, 256, "left")
    _attach(right, 512, "right")
    assert list(levelorder(root)) == [98, 12, 402, 6, 56, 256, 512]


def test_levelorder_empty():
    assert list(levelorder(None)) == []


def test_is_complete_sequence():
    root = Node(98)
    left = _attach(root, 12, "left")
    right = _attach(root, 128, "right")
    left_right = _attach(left, 54, "right")
    right.right = Node(402, root)
    left_left = _attach(left, 10, "left")

    assert is_complete(root) is False
    assert is_complete(left) is True

    _attach(right, 112, "left")
    assert is_complete(root) is True

    _attach(left_left, 8, "left")
    assert is_complete(root) is True

    _attach(left_right, 23, "left")
    assert is_complete(root) is False


def test_is_complete_empty_and_single():
    assert is_complete(None) is False
    assert is_complete(Node(1)) is True


def test_rotate_left_sequence():
    root = Node(98)
    mid = _attach(root, 128, "right")
    _attach(mid, 402, "right")

    root = rotate_left(root)
    assert root.value == 128
    assert root.parent is None
    assert list(root.preorder()) == [128, 98, 402]
    assert root.left.parent is root and root.right.parent is root

    _attach(root.right, 450, "right")
    _attach(root.right, 420, "left")
    root = rotate_left(root)
    assert root.value == 402
    assert root.parent is None
    assert list(root.preorder()) == [402, 128, 98, 420, 450]
    assert root.left.right.value == 420
    assert root.left.right.parent is root.left


def test_rotate_right_sequence():
    root = Node(98)
    mid = _attach(root, 64, "left")
    _attach(mid, 32, "left")

    root = rotate_right(root)
    assert root.value == 64
    assert root.parent is None
    assert list(root.preorder()) == [64, 32, 98]

    _attach(root.left, 20, "left")
    _attach(root.left, 56, "right")
    root = rotate_right(root)
    assert root.value == 32
    assert list(root.preorder()) == [32, 20, 64, 56, 98]
    assert root.right.left.value == 56
    assert root.right.left.parent is root.right


def test_rotate_relinks_parent():
    top = Node(1)
    sub = _attach(top, 10, "right")
    _attach(sub, 20, "right")
    pivot = rotate_left(sub)
    assert top.right is pivot
    assert pivot.parent is top
    assert sub.parent is pivot


def test_rotate_errors():
    assert rotate_left(None) is None
    assert rotate_right(None) is None
    with pytest.raises(ValueError):
        rotate_left(Node(1))
    with pytest.raises(ValueError):
        rotate_right(Node(1))