"""Timing runs of insert, search and delete over the key containers."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from keybench.hashtable import HashTable
from keybench.rbtree import RBTree
from keybench.wbtree import WBTree

_MAX_INT = 2147483647


class KeyContainer(Protocol):
    """Anything offering integer insert, search and delete."""

    def insert(self, key: int) -> None: ...

    def search(self, key: int) -> object: ...

    def delete(self, key: int) -> None: ...


@dataclass(frozen=True)
class Timing:
    """Wall-clock time spent on a batch of operations against one structure."""

    structure: str
    operation: str
    count: int
    seconds: float

    def __str__(self) -> str:
        return (
            f"Time spent on {self.count} {self.operation} operations "
            f"in {self.structure}: {self.seconds:.6f} seconds"
        )


def random_id(rng: random.Random) -> int:
    """Return a non-negative 30-bit key assembled from two 15-bit draws."""
    high = rng.getrandbits(15)
    low = rng.getrandbits(15)
    return ((high << 15) | low) % _MAX_INT


def _timed(
    container: KeyContainer,
    n: int,
    operation: str,
    step: Callable[[int], None],
) -> Timing:
    start = time.perf_counter()
    for _ in range(n):
        step(0)
    elapsed = time.perf_counter() - start
    return Timing(type(container).__name__, operation, n, elapsed)


def _timed_single(
    container: KeyContainer,
    n: int,
    rng: random.Random,
    operation: str,
    action: Callable[[int], object],
) -> Timing:
    return _timed(container, n, operation, lambda _: action(random_id(rng)) and None)


def timed_inserts(container: KeyContainer, n: int, rng: random.Random) -> Timing:
    """Insert ``n`` random keys and report the time taken."""
    return _timed_single(container, n, rng, "insert", container.insert)


def timed_searches(container: KeyContainer, n: int, rng: random.Random) -> Timing:
    """Look up ``n`` random keys and report the time taken."""
    return _timed_single(container, n, rng, "search", container.search)


def timed_deletes(container: KeyContainer, n: int, rng: random.Random) -> Timing:
    """Delete ``n`` random keys and report the time taken."""
    return _timed_single(container, n, rng, "delete", container.delete)


def timed_random_operations(container: KeyContainer, n: int, rng: random.Random) -> Timing:
    """Run ``n`` operations, each a random choice of insert, search or delete."""
    actions: tuple[Callable[[int], object], ...] = (
        container.insert,
        container.search,
        container.delete,
    )

    def step(_: int) -> None:
        action = actions[rng.randrange(3)]
        action(random_id(rng))

    return _timed(container, n, "random", step)


def _sizes(min_size: int, max_size: int) -> list[int]:
    sizes = []
    n = min_size
    while n <= max_size:
        sizes.append(n)
        n *= 10
    return sizes


def _fresh_containers(n: int) -> list[KeyContainer]:
    return [WBTree(), RBTree(), HashTable(n // 10)]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="keybench",
        description="Time weight-balanced tree, red-black tree and hash table operations.",
    )
    parser.add_argument("--min-size", type=int, default=1000,
                        help="smallest number of operations per run (default: 1000)")
    parser.add_argument("--max-size", type=int, default=100_000_000,
                        help="largest number of operations per run (default: 100000000)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the key generator (default: from the system)")
    args = parser.parse_args(argv)
    if args.min_size < 1:
        parser.error("--min-size must be at least 1")
    if args.max_size < args.min_size:
        parser.error("--max-size must not be smaller than --min-size")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the insert/search/delete passes, then the mixed random passes."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    sizes = _sizes(args.min_size, args.max_size)

    for n in sizes:
        for container in _fresh_containers(n):
            print(timed_inserts(container, n, rng))
            print(timed_searches(container, n, rng))
            print(timed_deletes(container, n, rng))
            print()

    for n in sizes:
        for container in _fresh_containers(n):
            print(timed_random_operations(container, n, rng))
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())