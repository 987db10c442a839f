from bintrees_kit.node import Node
from bintrees_kit.printing import print_tree, render


def _seven_node_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_render_full_tree():
    expected = "\n".join(
        [
            "       .-------(098)-------.",
            "  .--(012)--.         .--(402)--.",
            "(006)     (016)     (256)     (512)",
        ]
    )
    assert render(_seven_node_tree()) == expected


def test_render_three_nodes():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    assert render(root) == "  .--(098)--.\n(012)     (402)"


def test_render_after_left_insertions():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.right.insert_left(128)
    root.insert_left(54)
    expected = "\n".join(
        [
            "       .--(098)-------.",
            "  .--(054)       .--(402)",
            "(012)          (128)",
        ]
    )
    assert render(root) == expected


def test_render_single_node_and_negative_value():
    assert render(Node(5)) == "(005)"
    assert render(Node(-5)) == "(-05)"


def test_render_empty_tree():
    assert render(None) == ""


def test_render_subtree_starts_at_left_margin():
    root = _seven_node_tree()
    assert render(root.left) == "  .--(012)--.\n(006)     (016)"


def test_print_tree_writes_rendering(capsys):
    root = _seven_node_tree()
    print_tree(root)
    assert capsys.readouterr().out == render(root) + "\n"


def test_print_tree_empty_prints_nothing(capsys):
    print_tree(None)
    assert capsys.readouterr().out == ""