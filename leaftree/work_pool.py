"""A fixed-size pool of work slots."""

from __future__ import annotations


class WorkPool:
    """A pool whose capacity is a positive power of two."""

    def __init__(self, capacity: int) -> None:
        if (
            not isinstance(capacity, int)
            or capacity <= 0
            or capacity & (capacity - 1) != 0
        ):
            raise ValueError(
                f"capacity must be a positive power of two, got {capacity!r}"
            )
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of slots."""
        return self._capacity

    def __repr__(self) -> str:
        return f"WorkPool(capacity={self._capacity})"