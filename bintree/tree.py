"""Binary tree nodes with parent links and the usual structural queries."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer, linked to its parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _walk(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Detach this subtree from its parent and unlink every node in it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        self.parent = None
        stack = [self]
        while stack:
            node = stack.pop()
            for child in node._children():
                child.parent = None
                stack.append(child)
            node.left = None
            node.right = None

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left, right."""
        for node in self._walk():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left, node, right."""
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
        """Yield values in post-order: left, right, node."""
        stack = [self]
        reversed_order: list[int] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            stack.extend(node._children())
        yield from reversed(reversed_order)

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        level = [self]
        height = -1
        while level:
            height += 1
            level = [child for node in level for child in node._children()]
        return height

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return sum(1 for _ in self._walk())

    def leaves(self) -> int:
        """Number of leaves in this subtree."""
        return sum(1 for node in self._walk() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes in this subtree with at least one child."""
        return sum(1 for node in self._walk() if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left side minus height of the right side."""
        left = self.left.height() + 1 if self.left is not None else 0
        right = self.right.height() + 1 if self.right is not None else 0
        return left - right

    def is_full(self) -> bool:
        """True if this node has either no children or both children."""
        return (self.left is None) == (self.right is None)