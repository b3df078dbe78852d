"""Linear array, circular array and linked FIFO queues."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .linked_list import LinkedList

__all__ = ["QueueFullError", "QueueEmptyError", "ArrayQueue", "CircularQueue", "LinkedQueue"]


class QueueFullError(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


def _check_size(size: int) -> int:
    if size < 1:
        raise ValueError("queue size must be positive")
    return size


class ArrayQueue:
    """Linear queue over a fixed array.

    Slots are never reused: once size items have been enqueued the queue
    stays full, even after they have all been dequeued.
    """

    def __init__(self, size: int) -> None:
        self.size = _check_size(size)
        self._items: list[Any] = []
        self._front = 0

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def enqueue(self, data: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(data)

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        data = self._items[self._front]
        self._items[self._front] = None
        self._front += 1
        return data


class CircularQueue:
    """Queue over a ring of size slots, holding at most size - 1 items."""

    def __init__(self, size: int) -> None:
        self.size = _check_size(size)
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def is_full(self) -> bool:
        return (self._rear + 1) % self.size == self._front

    def is_empty(self) -> bool:
        return self._front == self._rear

    def enqueue(self, data: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._rear = (self._rear + 1) % self.size
        self._slots[self._rear] = data

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._front = (self._front + 1) % self.size
        data, self._slots[self._front] = self._slots[self._front], None
        return data


class LinkedQueue:
    """Unbounded queue built from linked nodes."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def __iter__(self) -> Iterator[Any]:
        """Yield items from front to rear."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self._items.head is None

    def enqueue(self, data: Any) -> None:
        self._items.insert_at_end(data)

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items.delete_first()