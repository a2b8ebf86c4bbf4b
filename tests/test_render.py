import io

import pytest

from bintree.render import print_tree, render
from bintree.tree import Node


@pytest.fixture
def full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_render_full_tree(full_tree):
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(full_tree) == expected


def test_render_single_node_uses_padded_label():
    assert render(Node(7)) == "(007)\n"


def test_render_none_is_empty():
    assert render(None) == ""


def test_render_line_count_matches_height(full_tree):
    chain = Node(1)
    chain.insert_left(2).insert_left(3).insert_right(4)
    for tree in (full_tree, chain):
        lines = render(tree).splitlines()
        assert len(lines) == tree.height() + 1


def test_render_has_no_trailing_spaces(full_tree):
    for line in render(full_tree).splitlines():
        assert line == line.rstrip(" ")


def test_render_contains_every_label(full_tree):
    text = render(full_tree)
    for value in full_tree.preorder():
        assert f"({value:03d})" in text


def test_render_labels_in_inorder_position(full_tree):
    text = render(full_tree)
    lines = text.splitlines()
    columns = []
    for value in full_tree.inorder():
        label = f"({value:03d})"
        columns.append(next(line.index(label) for line in lines if label in line))
    assert columns == sorted(columns)


def test_render_subtree_ignores_outer_parent(full_tree):
    assert render(full_tree.left).splitlines()[-1] == "(006)     (016)"


def test_print_tree_writes_render_output(full_tree):
    buffer = io.StringIO()
    print_tree(full_tree, buffer)
    assert buffer.getvalue() == render(full_tree)


def test_print_tree_defaults_to_stdout(full_tree, capsys):
    print_tree(full_tree)
    assert capsys.readouterr().out == render(full_tree)


def test_print_tree_none_writes_nothing(capsys):
    print_tree(None)
    assert capsys.readouterr().out == ""