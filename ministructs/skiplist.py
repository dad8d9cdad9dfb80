"""A skip list mapping integer keys to string values."""

from __future__ import annotations

import random
from collections.abc import Iterator

HEIGHT = 5


class _SkipNode:
    __slots__ = ("key", "value", "forward")

    def __init__(self, key: int | None, value: str | None, level: int) -> None:
        self.key = key
        self.value = value
        self.forward: list[_SkipNode | None] = [None] * level


class SkipList:
    """Ordered map from ``int`` to ``str`` with up to ``HEIGHT`` levels."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._header = _SkipNode(None, None, HEIGHT)
        self._level = 1
        self._size = 0

    @property
    def level(self) -> int:
        """The number of levels currently in use."""
        return self._level

    def random_level(self) -> int:
        """Draw a level for a new node, from 1 to ``HEIGHT - 1``."""
        return self._rng.randrange(1, HEIGHT)

    def _predecessors(self, key: int) -> list[_SkipNode]:
        update = [self._header] * HEIGHT
        current = self._header
        for i in reversed(range(self._level)):
            while True:
                following = current.forward[i]
                if following is None or following.key >= key:
                    break
                current = following
            update[i] = current
        return update

    def _locate(self, key: int) -> _SkipNode | None:
        node = self._predecessors(key)[0].forward[0]
        if node is not None and node.key == key:
            return node
        return None

    def insert(self, key: int, value: str) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        update = self._predecessors(key)
        existing = update[0].forward[0]
        if existing is not None and existing.key == key:
            existing.value = value
            return
        level = self.random_level()
        if level > self._level:
            self._level = level
        node = _SkipNode(key, value, level)
        for i in range(level):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        self._size += 1

    def find(self, key: int) -> str | None:
        """Return the value under ``key``, or ``None`` if it is absent."""
        node = self._locate(key)
        return node.value if node is not None else None

    def update(self, key: int, value: str) -> None:
        """Replace the value under an existing ``key``; raise ``KeyError`` if absent."""
        node = self._locate(key)
        if node is None:
            raise KeyError(key)
        node.value = value

    def delete(self, key: int) -> None:
        """Remove ``key``; raise ``KeyError`` if it is absent."""
        update = self._predecessors(key)
        node = update[0].forward[0]
        if node is None or node.key != key:
            raise KeyError(key)
        for i in range(self._level):
            if update[i].forward[i] is not node:
                break
            update[i].forward[i] = node.forward[i]
        self._size -= 1
        while self._level > 1 and self._header.forward[self._level - 1] is None:
            self._level -= 1

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._locate(key) is not None

    def __iter__(self) -> Iterator[tuple[int, str]]:
        node = self._header.forward[0]
        while node is not None:
            yield node.key, node.value
            node = node.forward[0]

    def __len__(self) -> int:
        return self._size