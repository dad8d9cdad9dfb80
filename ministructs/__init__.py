"""Small classic data structures: hash table, linked lists, queue, skip list and tree."""

__version__ = "0.1.0"
__all__ = ["hashmap", "linklist", "fifo", "skiplist", "tree", "demo"]