"""A thread-safe pool of numbered slots kept as a segment tree of free counts."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Sequence


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


class SignalTree:
    """Hands out free leaves in ``range(capacity)`` and takes them back.

    Nodes are stored in segment-tree order: index 0 is unused, internal
    nodes ``1 .. capacity-1`` hold the number of free leaves below them,
    and leaves ``capacity .. 2*capacity-1`` hold 1 (free) or 0 (taken).
    """

    def __init__(self, capacity: int) -> None:
        if not isinstance(capacity, int) or not _is_power_of_two(capacity):
            raise ValueError(
                f"capacity must be a positive power of two, got {capacity!r}"
            )
        self._capacity = capacity
        self._lock = threading.Lock()
        self._tree = [1] * (2 * capacity)
        for node in range(capacity - 1, 0, -1):
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def acquire(self) -> int | None:
        """Take a free leaf and return its index, or None if all are taken."""
        with self._lock:
            tree = self._tree
            if tree[1] <= 0:
                return None
            tree[1] -= 1
            node = 1
            while node < self._capacity:
                left, right = 2 * node, 2 * node + 1
                if left >= self._capacity:
                    # Children are leaves; the root count guarantees one is free.
                    node = left if tree[left] == 1 else right
                    tree[node] = 0
                    break
                node = left if tree[left] > 0 else right
                tree[node] -= 1
            return node - self._capacity

    def release(self, index: int) -> None:
        """Return a previously acquired leaf to the free state."""
        if not 0 <= index < self._capacity:
            raise IndexError(f"release() called with invalid index {index!r}")
        with self._lock:
            leaf = self._capacity + index
            if self._tree[leaf] != 0:
                raise ValueError(f"leaf {index} is not acquired")
            self._tree[leaf] = 1
            parent = leaf // 2
            while parent >= 1:
                self._tree[parent] += 1
                parent //= 2

    @property
    def is_free(self) -> bool:
        """True if at least one leaf is free."""
        return self.free_count > 0

    @property
    def free_count(self) -> int:
        """Number of free leaves."""
        with self._lock:
            return self._tree[1]

    @property
    def capacity(self) -> int:
        """Number of leaves."""
        return self._capacity

    def __len__(self) -> int:
        return self._capacity

    def __repr__(self) -> str:
        return f"SignalTree(capacity={self._capacity}, free={self.free_count})"


def main(argv: Sequence[str] | None = None) -> int:
    """Acquire and release one leaf of an eight-leaf tree, reporting each step."""
    parser = argparse.ArgumentParser(
        description="Acquire and release a leaf of a SignalTree."
    )
    parser.parse_args(argv)

    tree = SignalTree(8)
    leaf = tree.acquire()
    print(f"Acquired leaf index: {leaf}")
    tree.release(leaf)
    print(f"Released leaf index: {leaf}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())