"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.tree import Node


def _place(row: list[str], pos: int, text: str) -> None:
    end = pos + len(text)
    if len(row) < end:
        row.extend(" " * (end - len(row)))
    row[pos:end] = text


def _layout(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, depth + 1, rows)
    right = _layout(node.right, offset + left + width, depth + 1, rows)
    _place(rows[depth], offset + left, label)
    if depth:
        above = rows[depth - 1]
        if is_left:
            _place(above, offset + left + width // 2, "-" * (width + right))
        else:
            _place(above, max(offset - width // 2, 0), "-" * (left + width))
        _place(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, each line ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _layout(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    out = sys.stdout if file is None else file
    out.write(render(tree))