"""Singly and doubly linked lists of integers."""

from __future__ import annotations

from collections.abc import Iterator


class _SinglyNode:
    __slots__ = ("value", "next")

    def __init__(self, value: int, next_node: _SinglyNode | None = None) -> None:
        self.value = value
        self.next = next_node


class _DoublyNode:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: _DoublyNode | None = None
        self.prev: _DoublyNode | None = None


class SinglyLinkedList:
    """A singly linked list with a sentinel head."""

    def __init__(self) -> None:
        self._head = _SinglyNode(0)
        self._size = 0

    def push_front(self, value: int) -> None:
        """Insert ``value`` at the front."""
        self._head.next = _SinglyNode(value, self._head.next)
        self._size += 1

    def push_back(self, value: int) -> None:
        """Append ``value`` at the end."""
        node = self._head
        while node.next is not None:
            node = node.next
        node.next = _SinglyNode(value)
        self._size += 1

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; raise ``ValueError`` if none does."""
        previous = self._head
        while previous.next is not None:
            if previous.next.value == value:
                previous.next = previous.next.next
                self._size -= 1
                return
            previous = previous.next
        raise ValueError(f"{value} not in list")

    def __iter__(self) -> Iterator[int]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Return one value per line."""
        return "".join(f"{value}\n" for value in self)


class DoublyLinkedList:
    """A doubly linked list with a sentinel head."""

    def __init__(self) -> None:
        self._head = _DoublyNode(0)
        self._tail = self._head
        self._size = 0

    def _link_after(self, anchor: _DoublyNode, value: int) -> None:
        node = _DoublyNode(value)
        node.prev = anchor
        node.next = anchor.next
        if anchor.next is not None:
            anchor.next.prev = node
        else:
            self._tail = node
        anchor.next = node
        self._size += 1

    def _unlink(self, node: _DoublyNode) -> None:
        assert node.prev is not None
        node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        self._size -= 1

    def push_front(self, value: int) -> None:
        """Insert ``value`` at the front."""
        self._link_after(self._head, value)

    def push_back(self, value: int) -> None:
        """Append ``value`` at the end."""
        self._link_after(self._tail, value)

    def pop_front(self) -> int:
        """Remove and return the first value; raise ``IndexError`` if empty."""
        node = self._head.next
        if node is None:
            raise IndexError("pop from empty list")
        self._unlink(node)
        return node.value

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; raise ``ValueError`` if none does."""
        node = self._head.next
        while node is not None:
            if node.value == value:
                self._unlink(node)
                return
            node = node.next
        raise ValueError(f"{value} not in list")

    def first(self) -> int:
        """Return the first value; raise ``IndexError`` if empty."""
        if self._head.next is None:
            raise IndexError("list is empty")
        return self._head.next.value

    def last(self) -> int:
        """Return the last value; raise ``IndexError`` if empty."""
        if self._tail is self._head:
            raise IndexError("list is empty")
        return self._tail.value

    def __iter__(self) -> Iterator[int]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Return a count line followed by one value per line."""
        lines = [f"一共{self._size}个数据\n"]
        lines.extend(f"{value}\n" for value in self)
        return "".join(lines)