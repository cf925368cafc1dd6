"""Doubly linked list of integers with head and tail pointers."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from listbench.singly import SinglyLinkedList, _Node


@dataclass(slots=True)
class _DoubleNode(_Node):
    prev: _DoubleNode | None = None


def _rng_args(rng: random.Random | None) -> tuple[random.Random, ...]:
    return () if rng is None else (rng,)


class DoublyLinkedList(SinglyLinkedList):
    """Linked list where each node knows its predecessor and successor."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(values)

    def push_front(self, value: int) -> None:
        """Add ``value`` at the front of the list."""
        super().push_front(value)

    def push_back(self, value: int) -> None:
        """Add ``value`` at the back of the list."""
        super().push_back(value)

    def remove_front(self) -> int:
        """Remove and return the first element."""
        return super().remove_front()

    def remove_back(self) -> int:
        """Remove and return the last element, stepping back from the tail."""
        return super().remove_back()

    def find(self, value: int) -> bool:
        """Return whether ``value`` occurs in the list."""
        return super().find(value)

    def remove_at(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        return super().remove_at(index)

    def remove_random(self, rng: random.Random | None = None) -> int:
        """Remove and return an element at a random position."""
        return super().remove_random(*_rng_args(rng))

    def insert_at(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        super().insert_at(index, value)

    def insert_random(self, value: int, rng: random.Random | None = None) -> None:
        """Insert ``value`` at a random position, both ends included."""
        super().insert_random(value, *_rng_args(rng))

    def fill_random(self, count: int, rng: random.Random | None = None) -> None:
        """Append ``count`` random values to the back of the list."""
        super().fill_random(count, *_rng_args(rng))

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[int]:
        return super().__iter__()

    def _new_node(self, value: int, prev: _Node | None) -> _Node:
        return _DoubleNode(value, prev=prev)

    def _link_after(self, prev: _Node | None, value: int) -> _Node:
        node = super()._link_after(prev, value)
        if node.next is not None:
            node.next.prev = node
        return node

    def _unlink_after(self, prev: _Node | None) -> _Node:
        node = super()._unlink_after(prev)
        if node.next is not None:
            node.next.prev = prev
        return node

    def _before_tail(self) -> _Node | None:
        return self._tail.prev

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev