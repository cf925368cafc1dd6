"""Singly linked list of integers with head and tail pointers."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

RANDOM_VALUE_LIMIT = 100000
_EMPTY_MESSAGE = "list is empty - there is nothing to remove"


@dataclass(slots=True)
class _Node:
    value: int
    next: _Node | None = None


class SinglyLinkedList:
    """Linked list where each node knows only its successor.

    All relinking goes through ``_new_node``, ``_link_after``,
    ``_unlink_after`` and ``_before_tail``, so a list that also keeps
    backward links only has to refine those.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _new_node(self, value: int, prev: _Node | None) -> _Node:
        return _Node(value)

    def _link_after(self, prev: _Node | None, value: int) -> _Node:
        """Link a new node after ``prev``, or at the head when it is None."""
        node = self._new_node(value, prev)
        node.next = self._head if prev is None else prev.next
        if prev is None:
            self._head = node
        else:
            prev.next = node
        if node.next is None:
            self._tail = node
        self._size += 1
        return node

    def _unlink_after(self, prev: _Node | None) -> _Node:
        """Unlink the node after ``prev``, or the head when it is None."""
        node = self._head if prev is None else prev.next
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node.next is None:
            self._tail = prev
        self._size -= 1
        return node

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def _before(self, index: int) -> _Node | None:
        return self._node_at(index - 1) if index > 0 else None

    def _before_tail(self) -> _Node | None:
        return self._before(self._size - 1)

    def _require_items(self) -> None:
        if self._head is None:
            raise IndexError(_EMPTY_MESSAGE)

    @staticmethod
    def _generator(rng: random.Random | None):
        return rng if rng is not None else random

    def push_front(self, value: int) -> None:
        """Add ``value`` before the first element."""
        self._link_after(None, value)

    def push_back(self, value: int) -> None:
        """Add ``value`` after the last element."""
        self._link_after(self._tail, value)

    def remove_front(self) -> int:
        """Remove and return the first element."""
        self._require_items()
        return self._unlink_after(None).value

    def remove_back(self) -> int:
        """Remove and return the last element."""
        self._require_items()
        return self._unlink_after(self._before_tail()).value

    def find(self, value: int) -> bool:
        """Return whether ``value`` occurs in the list."""
        return any(item == value for item in self)

    def remove_at(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        self._require_items()
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of bounds for size {self._size}")
        return self._unlink_after(self._before(index)).value

    def remove_random(self, rng: random.Random | None = None) -> int:
        """Remove and return an element at a uniformly chosen position."""
        self._require_items()
        return self.remove_at(self._generator(rng).randrange(self._size))

    def insert_at(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at ``index``.

        An empty list takes the value whatever the index.
        """
        if self._head is None:
            self.push_front(value)
            return
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of bounds for size {self._size}")
        self._link_after(self._before(index), value)

    def insert_random(self, value: int, rng: random.Random | None = None) -> None:
        """Insert ``value`` at a uniformly chosen position, ends included."""
        if self._head is None:
            self.push_front(value)
            return
        self.insert_at(self._generator(rng).randrange(self._size + 1), value)

    def fill_random(self, count: int, rng: random.Random | None = None) -> None:
        """Append ``count`` random integers below 100000."""
        gen = self._generator(rng)
        for _ in range(count):
            self.push_back(gen.randrange(RANDOM_VALUE_LIMIT))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"