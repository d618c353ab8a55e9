from collections import Counter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from keybench.rbtree import Color, RBNode, RBTree


def _nodes(tree):
    result = []
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        result.append(node)
        for child in (node.left, node.right):
            if child is not None:
                stack.append(child)
    return result


def _check_links(tree):
    if tree.root is not None:
        assert tree.root.parent is None
    for node in _nodes(tree):
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node


def _black_height(node):
    if node is None:
        return 1
    if node.color is Color.RED:
        assert node.left is None or node.left.color is Color.BLACK
        assert node.right is None or node.right.color is Color.BLACK
    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _check_red_black(tree):
    if tree.root is not None:
        assert tree.root.color is Color.BLACK
    _black_height(tree.root)


def test_color_values_match_markers():
    tree = RBTree()
    tree.insert(1)
    tree.insert(2)
    assert tree.root.color.value == "B"
    assert tree.root.right.color.value == "R"
    assert RBNode(3).color.value == "R"


def test_new_node_is_red():
    assert RBNode(7).color is Color.RED


def test_empty_tree():
    tree = RBTree()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.minimum() is None
    assert tree.search(3) is None
    assert 3 not in tree


def test_three_ascending_inserts_rotate_to_middle_root():
    tree = RBTree()
    for key in (1, 2, 3):
        tree.insert(key)
    assert tree.root.key == 2
    assert tree.root.color is Color.BLACK
    assert tree.root.left.color is Color.RED
    assert tree.root.right.color is Color.RED
    _check_links(tree)


def test_search_returns_node_with_key():
    tree = RBTree()
    for key in (10, 5, 15, 3):
        tree.insert(key)
    node = tree.search(5)
    assert node.key == 5
    assert tree.search(4) is None


def test_minimum_is_smallest():
    tree = RBTree()
    for key in (40, 20, 60, 10, 30):
        tree.insert(key)
    assert tree.minimum().key == 10


def test_duplicates_are_kept():
    tree = RBTree()
    tree.insert(5)
    tree.insert(5)
    assert len(tree) == 2
    assert list(tree) == [5, 5]
    tree.delete(5)
    assert list(tree) == [5]
    assert 5 in tree
    tree.delete(5)
    assert list(tree) == []
    assert 5 not in tree


def test_delete_missing_key_is_noop():
    tree = RBTree()
    for key in (1, 2, 3):
        tree.insert(key)
    tree.delete(99)
    assert list(tree) == [1, 2, 3]
    assert len(tree) == 3


def test_delete_root_with_two_children():
    tree = RBTree()
    for key in (50, 25, 75, 10, 30, 60, 90):
        tree.insert(key)
    root_key = tree.root.key
    tree.delete(root_key)
    assert root_key not in tree
    assert list(tree) == sorted({50, 25, 75, 10, 30, 60, 90} - {root_key})
    _check_links(tree)


def test_contains_rejects_non_int():
    tree = RBTree()
    tree.insert(1)
    assert "1" not in tree


def test_negative_keys_supported():
    tree = RBTree()
    for key in (-5, 0, 5):
        tree.insert(key)
    assert list(tree) == [-5, 0, 5]
    assert tree.minimum().key == -5


@pytest.mark.parametrize("keys", [list(range(100)), list(range(100, 0, -1))])
def test_sorted_inserts_keep_red_black_properties(keys):
    tree = RBTree()
    for key in keys:
        tree.insert(key)
    _check_red_black(tree)
    _check_links(tree)
    assert list(tree) == sorted(keys)


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200))
def test_inserts_preserve_red_black_properties(keys):
    tree = RBTree()
    for key in keys:
        tree.insert(key)
    _check_red_black(tree)
    _check_links(tree)
    assert list(tree) == sorted(keys)
    assert len(tree) == len(keys)
    assert len(_nodes(tree)) == len(keys)