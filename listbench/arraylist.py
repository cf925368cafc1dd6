"""Growable integer array that doubles its capacity when it fills up."""

from __future__ import annotations

import random
from collections.abc import Iterator

INITIAL_CAPACITY = 10


class ArrayList:
    """Integer array with positional insert and remove, growing by doubling."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._capacity = INITIAL_CAPACITY

    @property
    def capacity(self) -> int:
        """Number of slots reserved before the next growth step."""
        return self._capacity

    def add(self, value: int, index: int) -> None:
        """Insert ``value`` at ``index``, shifting later elements right."""
        size = len(self._items)
        if not 0 <= index <= size:
            raise IndexError(f"index {index} out of bounds for size {size}")
        if size == self._capacity:
            self._capacity *= 2
        self._items.insert(index, value)

    def remove(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        size = len(self._items)
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of bounds for size {size}")
        return self._items.pop(index)

    def search(self, value: int) -> bool:
        """Return whether ``value`` is stored in the array."""
        return value in self._items

    def fill_random(
        self,
        count: int,
        low: int = 0,
        high: int = 1000,
        rng: random.Random | None = None,
    ) -> None:
        """Append ``count`` random integers drawn uniformly from ``low``..``high``."""
        gen = rng if rng is not None else random.Random()
        for _ in range(count):
            self.add(gen.randint(low, high), len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r})"