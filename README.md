# leaftree

`leaftree` hands out numbered slots from a fixed-size pool and takes them
back. Any number of threads can share one pool. Slots are tracked in a
segment tree. Each leaf is one slot. Each inner node holds the number of free
slots below it, so finding a free slot is a walk from the root down to a leaf.
Every change to the tree is made under a lock.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Usage

```python
from leaftree.signal_tree import SignalTree

tree = SignalTree(8)          # capacity must be a positive power of two
assert tree.capacity == 8
assert len(tree) == 8
assert tree.free_count == 8

slot = tree.acquire()         # an index in range(8), or None when none is free
if slot is not None:
    try:
        ...                   # work with the slot
    finally:
        tree.release(slot)

assert tree.is_free
```

`capacity`, `free_count` and `is_free` are read-only properties.

A capacity that is not a positive power of two raises `ValueError`.

`release` raises in two cases:

- `IndexError` if the index is outside `range(capacity)`;
- `ValueError` if the slot is not currently acquired, for example after a
  double release.

`leaftree.work_pool.WorkPool` checks and holds a capacity under the same
power-of-two rule:

```python
from leaftree.work_pool import WorkPool

pool = WorkPool(8)
assert pool.capacity == 8
```

## Command line

A short demonstration acquires one slot from an eight-slot tree, releases it,
and prints both steps:

```
leaftree-demo
```

The same thing runs with `python -m leaftree.signal_tree`.

## What it does not do

`WorkPool` only validates and stores its capacity. It does not schedule,
queue or run any work, and it does not hand out slots; use `SignalTree` for
that. The command above is a demonstration only, not a benchmark.