import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from keybench.benchmark import (
    Timing,
    main,
    random_id,
    timed_deletes,
    timed_inserts,
    timed_random_operations,
    timed_searches,
)
from keybench.hashtable import HashTable
from keybench.rbtree import RBTree
from keybench.wbtree import WBTree


def _keys(seed, n):
    rng = random.Random(seed)
    return [random_id(rng) for _ in range(n)]


@given(st.integers(min_value=0, max_value=2**32))
@settings(max_examples=50)
def test_random_id_is_within_30_bits(seed):
    rng = random.Random(seed)
    for _ in range(20):
        key = random_id(rng)
        assert 0 <= key < 2**30


def test_random_id_is_reproducible_for_a_seed():
    first = _keys(7, 25)
    second = _keys(7, 25)
    assert len(first) == 25
    assert first == second
    assert len(set(first)) > 1
    assert all(0 <= key < 2**30 for key in first)
    assert first != _keys(8, 25)


def test_timing_string_matches_report_format():
    timing = Timing("WBTree", "insert", 3, 1.5)
    assert str(timing) == "Time spent on 3 insert operations in WBTree: 1.500000 seconds"


@pytest.mark.parametrize("factory", [WBTree, RBTree, lambda: HashTable(10)])
def test_timed_inserts_adds_generated_keys(factory):
    container = factory()
    timing = timed_inserts(container, 200, random.Random(3))
    assert timing.operation == "insert"
    assert timing.count == 200
    assert timing.seconds >= 0
    assert timing.structure == type(container).__name__
    assert all(key in container for key in _keys(3, 200))


@pytest.mark.parametrize("factory", [WBTree, RBTree, lambda: HashTable(10)])
def test_timed_searches_leave_container_unchanged(factory):
    container = factory()
    timed_inserts(container, 100, random.Random(5))
    before = sorted(container)
    timing = timed_searches(container, 100, random.Random(6))
    assert timing.operation == "search"
    assert sorted(container) == before


@pytest.mark.parametrize("factory", [WBTree, RBTree, lambda: HashTable(10)])
def test_timed_deletes_with_same_keys_empties_container(factory):
    container = factory()
    timed_inserts(container, 150, random.Random(11))
    timing = timed_deletes(container, 150, random.Random(11))
    assert timing.operation == "delete"
    assert len(container) == 0
    assert list(container) == []


def test_structure_names_in_report():
    rng = random.Random(1)
    names = [timed_inserts(c, 1, rng).structure for c in (WBTree(), RBTree(), HashTable(0))]
    assert names == ["WBTree", "RBTree", "HashTable"]


def test_random_operations_agree_between_set_containers():
    tree = WBTree()
    table = HashTable(10)
    first = timed_random_operations(tree, 500, random.Random(42))
    second = timed_random_operations(table, 500, random.Random(42))
    assert first.operation == second.operation == "random"
    assert list(tree) == sorted(table)
    assert len(tree) <= 500


def test_main_prints_every_timing(capsys):
    assert main(["--min-size", "1000", "--max-size", "1000", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    reports = [line for line in lines if line.startswith("Time spent on 1000 ")]
    assert len(reports) == 12
    assert sum(" random operations " in line for line in reports) == 3
    assert sum(" in HashTable: " in line for line in reports) == 4


def test_main_rejects_inverted_size_range():
    with pytest.raises(SystemExit):
        main(["--min-size", "1000", "--max-size", "10"])