"""Weight-balanced binary search tree of integer keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class WBNode:
    """Tree node; ``weight`` is the number of nodes in its subtree."""

    key: int
    weight: int = 1
    parent: WBNode | None = field(default=None, repr=False)
    left: WBNode | None = field(default=None, repr=False)
    right: WBNode | None = field(default=None, repr=False)


def _weight(node: WBNode | None) -> int:
    return node.weight if node is not None else 0


def _update_weight(node: WBNode | None) -> None:
    if node is not None:
        node.weight = 1 + _weight(node.left) + _weight(node.right)


def _update_upwards(node: WBNode | None) -> None:
    while node is not None:
        _update_weight(node)
        node = node.parent


def _rotate_left(node: WBNode) -> WBNode:
    pivot = node.right
    assert pivot is not None
    inner = pivot.left
    pivot.parent = node.parent
    pivot.left = node
    node.parent = pivot
    node.right = inner
    if inner is not None:
        inner.parent = node
    _update_weight(node)
    _update_weight(pivot)
    return pivot


def _rotate_right(node: WBNode) -> WBNode:
    pivot = node.left
    assert pivot is not None
    inner = pivot.right
    pivot.parent = node.parent
    pivot.right = node
    node.parent = pivot
    node.left = inner
    if inner is not None:
        inner.parent = node
    _update_weight(node)
    _update_weight(pivot)
    return pivot


class WBTree:
    """Set of integers kept in a weight-balanced search tree."""

    def __init__(self) -> None:
        self.root: WBNode | None = None

    def _rebalance(self, node: WBNode | None) -> None:
        while node is not None:
            original = node
            left, right = node.left, node.right
            left_weight, right_weight = _weight(left), _weight(right)

            if right_weight * 5 + 2 < left_weight * 2:
                assert left is not None
                if _weight(left.left) * 5 < left_weight * 2:
                    node.left = _rotate_left(left)
                top = _rotate_right(node)
            elif left_weight * 5 + 2 < right_weight * 2:
                assert right is not None
                if _weight(right.right) * 5 < _weight(right.left) * 2:
                    node.right = _rotate_right(right)
                top = _rotate_left(node)
            else:
                node.weight = left_weight + right_weight + 1
                break

            node = top.parent
            if node is None:
                self.root = top
            elif node.left is original:
                node.left = top
            else:
                node.right = top

    def search(self, key: int) -> WBNode | None:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None:
            if node.key < key:
                node = node.right
            elif node.key > key:
                node = node.left
            else:
                return node
        return None

    def insert(self, key: int) -> None:
        """Add ``key``; a key already present is ignored."""
        parent: WBNode | None = None
        node = self.root
        while node is not None:
            if node.key == key:
                return
            parent = node
            node = node.right if node.key < key else node.left

        new = WBNode(key, parent=parent)
        if parent is None:
            self.root = new
            return
        if parent.key < key:
            parent.right = new
        else:
            parent.left = new

        _update_upwards(parent)
        self._rebalance(parent)

    def delete(self, key: int) -> None:
        """Remove ``key`` if present."""
        node = self.search(key)
        if node is None:
            return

        parent, left, right = node.parent, node.left, node.right
        replacement: WBNode | None
        start: WBNode | None = None

        if right is None:
            replacement = left
            start = parent
        elif right.left is not None:
            replacement = right
            while replacement.left is not None:
                start = replacement
                replacement = replacement.left
            orphan = replacement.right
            assert start is not None
            start.left = orphan
            if orphan is not None:
                orphan.parent = start
        else:
            start = right
            replacement = right

        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

        if replacement is not None:
            replacement.parent = parent
            if left is not None and left is not replacement:
                replacement.left = left
                left.parent = replacement
            if right is not None and right is not replacement:
                replacement.right = right
                right.parent = replacement

        _update_upwards(start)
        self._rebalance(start)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __len__(self) -> int:
        return _weight(self.root)

    def __iter__(self) -> Iterator[int]:
        stack: list[WBNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def format(self, max_key: int) -> str:
        """List the keys from 1 to ``max_key`` in ascending order."""
        parts = []
        for key in self:
            if key > max_key:
                break
            if key >= 1:
                parts.append(f"{key}, ")
        return "WBTree:\n" + "".join(parts)