"""Red-black binary search tree of integer keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class Color(Enum):
    """Node colour in a red-black tree."""

    RED = "R"
    BLACK = "B"


@dataclass(eq=False)
class RBNode:
    """Tree node; new nodes start red."""

    key: int
    color: Color = Color.RED
    parent: RBNode | None = field(default=None, repr=False)
    left: RBNode | None = field(default=None, repr=False)
    right: RBNode | None = field(default=None, repr=False)


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is Color.RED


def _is_black(node: RBNode | None) -> bool:
    return node is None or node.color is Color.BLACK


def _subtree_minimum(node: RBNode | None) -> RBNode | None:
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


class RBTree:
    """Multiset of integers kept in a red-black search tree.

    Equal keys are allowed; a repeated key is placed to the right of its equal.
    """

    def __init__(self) -> None:
        self.root: RBNode | None = None
        self._size = 0

    def _rotate_left(self, node: RBNode) -> None:
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self.root = pivot
        elif node.parent.left is node:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: RBNode) -> None:
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self.root = pivot
        elif node.parent.right is node:
            node.parent.right = pivot
        else:
            node.parent.left = pivot
        pivot.right = node
        node.parent = pivot

    def _transplant(self, old: RBNode, new: RBNode | None) -> None:
        if old.parent is None:
            self.root = new
        elif old.parent.left is old:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def search(self, key: int) -> RBNode | None:
        """Return a node holding ``key``, or None."""
        node = self.root
        while node is not None:
            if node.key < key:
                node = node.right
            elif node.key > key:
                node = node.left
            else:
                return node
        return None

    def minimum(self) -> RBNode | None:
        """Return the node with the smallest key, or None for an empty tree."""
        return _subtree_minimum(self.root)

    def insert(self, key: int) -> None:
        """Add ``key``; duplicates are kept."""
        node = RBNode(key)
        parent: RBNode | None = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if key < current.key else current.right

        node.parent = parent
        if parent is None:
            self.root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

        self._fix_after_insert(node)
        assert self.root is not None
        self.root.color = Color.BLACK

    def _fix_after_insert(self, node: RBNode) -> None:
        while node is not self.root and node.parent is not None and node.parent.color is Color.RED:
            parent = node.parent
            grand = parent.parent
            assert grand is not None
            uncle = grand.right if parent is grand.left else grand.left

            if _is_red(uncle):
                assert uncle is not None
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grand.color = Color.RED
                node = grand
                continue

            zig_zag = (node is parent.right and parent is grand.left) or (
                node is parent.left and parent is grand.right
            )
            if zig_zag:
                if node is parent.right:
                    self._rotate_left(parent)
                    assert node.left is not None
                    node = node.left
                else:
                    self._rotate_right(parent)
                    assert node.right is not None
                    node = node.right
                assert node.parent is not None
                grand = node.parent.parent
                assert grand is not None
                node.parent.color = Color.BLACK
                grand.color = Color.RED
                if node is node.parent.left:
                    self._rotate_right(grand)
                else:
                    self._rotate_left(grand)
            else:
                parent.color = Color.BLACK
                grand.color = Color.RED
                if node is parent.left:
                    self._rotate_right(grand)
                else:
                    self._rotate_left(grand)
            break

    def delete(self, key: int) -> None:
        """Remove one occurrence of ``key`` if present."""
        node = self.search(key)
        if node is None:
            return

        removed_color = node.color
        fix: RBNode | None
        if node.left is None:
            fix = node.right
            self._transplant(node, fix)
        elif node.right is None:
            fix = node.left
            self._transplant(node, fix)
        else:
            successor = _subtree_minimum(node.right)
            assert successor is not None
            removed_color = successor.color
            fix = successor.right
            if successor.parent is not node:
                self._transplant(successor, successor.right)
                successor.right = node.right
                successor.right.parent = successor
            self._transplant(node, successor)
            successor.left = node.left
            if successor.left is not None:
                successor.left.parent = successor
            successor.color = node.color

        if removed_color is Color.BLACK:
            self._fix_after_delete(fix)
        if fix is not None:
            fix.color = Color.BLACK
        self._size -= 1

    def _fix_after_delete(self, node: RBNode | None) -> None:
        while node is not None and node is not self.root and node.color is Color.BLACK:
            assert node.parent is not None
            if node.parent.left is node:
                node = self._fix_left_child(node)
            else:
                node = self._fix_right_child(node)

    def _fix_left_child(self, node: RBNode) -> RBNode:
        while node is not self.root and node.color is Color.BLACK:
            assert node.parent is not None
            sibling = node.parent.right
            if sibling is None:
                return node.parent

            if sibling.color is Color.RED:
                sibling.color = Color.BLACK
                node.parent.color = Color.RED
                self._rotate_left(node.parent)
            elif _is_black(sibling.left) and _is_black(sibling.right):
                sibling.color = Color.RED
                node = node.parent
            else:
                if _is_red(sibling.left):
                    assert sibling.left is not None
                    sibling.left.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_right(sibling)
                    assert node.parent is not None
                    sibling = node.parent.right
                    assert sibling is not None
                assert node.parent is not None
                sibling.color = node.parent.color
                node.parent.color = Color.BLACK
                if sibling.right is not None:
                    sibling.right.color = Color.BLACK
                self._rotate_left(node.parent)
                assert self.root is not None
                node = self.root
        return node

    def _fix_right_child(self, node: RBNode) -> RBNode:
        while node is not self.root and node.color is Color.BLACK:
            assert node.parent is not None
            sibling = node.parent.left
            if sibling is None:
                return node.parent

            if sibling.color is Color.RED:
                sibling.color = Color.BLACK
                node.parent.color = Color.RED
                self._rotate_right(node.parent)
            elif _is_black(sibling.right) and _is_black(sibling.left):
                sibling.color = Color.RED
                node = node.parent
            else:
                if _is_red(sibling.right):
                    assert sibling.right is not None
                    sibling.right.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_left(sibling)
                    assert node.parent is not None
                    sibling = node.parent.left
                    assert sibling is not None
                assert node.parent is not None
                sibling.color = node.parent.color
                node.parent.color = Color.BLACK
                if sibling.left is not None:
                    sibling.left.color = Color.BLACK
                self._rotate_right(node.parent)
                assert self.root is not None
                node = self.root
        return node

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        stack: list[RBNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right