"""A FIFO queue of integers backed by a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterator

from ministructs.linklist import DoublyLinkedList


class Queue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._items = DoublyLinkedList()

    def push(self, value: int) -> None:
        """Add ``value`` at the back."""
        self._items.push_back(value)

    def pop(self) -> int:
        """Remove and return the front value; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.pop_front()

    def front(self) -> int:
        """Return the front value; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.first()

    def back(self) -> int:
        """Return the back value; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.last()

    def empty(self) -> bool:
        """Return whether the queue holds no values."""
        return len(self._items) == 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)