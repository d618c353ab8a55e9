# keybench

This package provides three containers of integer keys and a small benchmark
that times them against one another.

- `HashTable` (`keybench.hashtable`) uses open addressing with double hashing
  and tombstones for deleted keys. Capacities come from a fixed list of
  primes. The table grows by about 1.5 times to the next listed prime once it
  is two-thirds full. A requested size larger than the biggest listed prime
  raises `ValueError`.
- `WBTree` (`keybench.wbtree`) is a weight-balanced binary search tree. Each
  `WBNode` stores the size of its subtree in `weight`.
- `RBTree` (`keybench.rbtree`) is a red-black tree. Its nodes are `RBNode`
  objects, and each node has a `Color` of `RED` or `BLACK`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Using the containers

All three containers support `insert`, `search`, `delete`, `in`, `len()` and
iteration.

```python
from keybench.hashtable import HashTable
from keybench.wbtree import WBTree
from keybench.rbtree import RBTree

table = HashTable(100)
for key in (7, 42, 1000):
    table.insert(key)
table.delete(42)
print(42 in table, len(table))   # False 2
print(str(table))                # "HashTable:\n" and then the positive keys in slot order

tree = WBTree()
for key in (5, 3, 8, 1):
    tree.insert(key)
print(list(tree))                # [1, 3, 5, 8]
print(tree.format(5))            # "WBTree:\n1, 3, 5, "

rb = RBTree()
for key in (10, 20, 30, 20):
    rb.insert(key)
print(len(rb), rb.minimum().key) # 4 10
```

What each container does with certain keys and calls:

- Deleting a key that is not present does nothing in every container.
- `HashTable.search` returns the index of the slot that holds the key, or
  `None` if the key is absent.
- `HashTable.insert` ignores negative keys. It also skips a key it meets on
  the probe path before reaching a free or deleted slot.
- `WBTree.search` and `RBTree.search` return the node that holds the key, or
  `None` if the key is absent.
- `WBTree` ignores duplicate keys.
- `RBTree` keeps duplicate keys. Each copy counts towards `len()`, and
  `delete` removes one copy at a time.
- Iterating over either tree yields the keys in ascending order.
- Iterating over the hash table yields the keys in slot order.

## Running the benchmark

```
keybench
keybench --min-size 1000 --max-size 100000 --seed 1
```

`--min-size` and `--max-size` set the range of operation counts. They default
to 1000 and 100000000. The counts start at the minimum and are multiplied by
10 each step until they pass the maximum. `--seed` makes the random keys
repeatable.

The benchmark runs two phases. It prints one line per timed batch, for
example `Time spent on 1000 insert operations in WBTree: 0.001234 seconds`.

1. For each count N, fresh `WBTree`, `RBTree` and `HashTable(N // 10)`
   containers each receive N random inserts, then N random searches, then
   N random deletes.
2. For each count N, fresh containers each receive N operations. Each
   operation is chosen at random from insert, search and delete.

Keys come from `random_id`, which returns a non-negative 30-bit integer.

You can also call the timing functions in `keybench.benchmark` yourself:
`timed_inserts`, `timed_searches`, `timed_deletes` and
`timed_random_operations`. Each takes a container, a count and a
`random.Random` instance, and returns a `Timing`. A `Timing` holds
`structure`, `operation`, `count` and `seconds`, and formats itself as the
line shown above.

## Tests

```
pytest
```