"""Fixed-size slot pools: a thread-safe segment tree of free slots and a capacity-checked work pool."""

__version__ = "0.1.0"
__all__ = ["signal_tree", "work_pool"]