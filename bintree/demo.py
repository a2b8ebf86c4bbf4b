"""Small example programs that build trees, draw them and report on them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from bintree.render import print_tree
from bintree.tree import Node


def _sample_tree() -> Node:
    """98 with children 12 and 402, then 54 right of 12 and 128 right of 98."""
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _full_tree(left_right: int) -> Node:
    """A complete tree of seven nodes rooted at 98."""
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(left_right, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _demo_create(out: TextIO) -> None:
    print_tree(_full_tree(16), out)


def _demo_insert_left(out: TextIO) -> None:
    root: Node | None = None
    # Insertion needs a parent, so nothing is created here.
    if root is not None:
        root.insert_left(54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root: Node | None = None
    if root is not None:
        root.insert_right(128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    root.delete()


def _report(out: TextIO, root: Node, template: str, query: Callable[[Node], object]) -> None:
    assert root.left is not None and root.right is not None
    assert root.left.right is not None
    for node in (root, root.right, root.left.right):
        print(template.format(value=node.value, result=query(node)), file=out)


def _demo_is_leaf(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    assert root.right is not None and root.right.right is not None
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a leaf: {int(node.is_leaf())}", file=out)
    print("Is (nil) a leaf: 0", file=out)


def _demo_is_root(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    assert root.right is not None and root.right.right is not None
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a root: {int(node.is_root())}", file=out)


def _traversal_demo(order: Callable[[Node], object]) -> Callable[[TextIO], None]:
    def demo(out: TextIO) -> None:
        root = _full_tree(56)
        print_tree(root, out)
        for value in order(root):  # type: ignore[attr-defined]
            print(value, file=out)

    return demo


def _demo_height(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    _report(out, root, "Height from {value}: {result}", Node.height)


def _demo_depth(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    _report(out, root, "Depth of {value}: {result}", Node.depth)


def _demo_size(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    _report(out, root, "Size of {value}: {result}", Node.size)


def _demo_leaves(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    _report(out, root, "Leaves in {value}: {result}", Node.leaves)


def _demo_nodes(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    _report(out, root, "Nodes in {value}: {result}", Node.internal_nodes)


def _demo_balance(out: TextIO) -> None:
    root = _sample_tree()
    root.insert_left(45)
    assert root.left is not None and root.left.left is not None
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    assert root.left.left.left is not None
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    assert root.right is not None and root.left.left.right is not None
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {node.balance():+d}", file=out)


_DEMOS: dict[str, Callable[[TextIO], None]] = {
    "0": _demo_create,
    "1": _demo_insert_left,
    "2": _demo_insert_right,
    "3": _demo_delete,
    "4": _demo_is_leaf,
    "5": _demo_is_root,
    "6": _traversal_demo(Node.preorder),
    "7": _traversal_demo(Node.inorder),
    "8": _traversal_demo(Node.postorder),
    "9": _demo_height,
    "10": _demo_depth,
    "11": _demo_size,
    "12": _demo_leaves,
    "13": _demo_nodes,
    "14": _demo_balance,
}

DEMO_NAMES = tuple(_DEMOS)


def run_demo(name: str, out: TextIO | None = None) -> None:
    """Run the named demo, writing its output to out (standard output by default)."""
    try:
        demo = _DEMOS[str(name)]
    except KeyError:
        raise ValueError(f"unknown demo: {name!r}") from None
    demo(sys.stdout if out is None else out)


def main(argv: list[str] | None = None) -> int:
    """Run the demos named on the command line, or all of them."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo", description="Build, draw and measure sample binary trees."
    )
    parser.add_argument("names", nargs="*", choices=DEMO_NAMES, metavar="NAME",
                        help="demo to run: " + ", ".join(DEMO_NAMES))
    args = parser.parse_args(argv)
    for name in args.names or DEMO_NAMES:
        run_demo(name, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())