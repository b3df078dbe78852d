"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any

from .linked_list import LinkedList

__all__ = ["StackOverflowError", "StackUnderflowError", "ArrayStack", "LinkedStack"]


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


def _check_position(position: int, length: int) -> None:
    if not 1 <= position <= length:
        raise IndexError("stack position out of range")


class ArrayStack:
    """Stack with a fixed capacity."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("stack size must not be negative")
        self.size = size
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def is_empty(self) -> bool:
        return not self._items

    def push(self, data: Any) -> None:
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(data)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Return the item at 1-based position counted from the top."""
        _check_position(position, len(self))
        return self._items[-position]


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def __iter__(self) -> Iterator[Any]:
        """Yield items from top to bottom."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self._items.head is None

    def push(self, data: Any) -> None:
        self._items.insert_at_start(data)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items.delete_first()

    def peek(self, position: int) -> Any:
        """Return the item at 1-based position counted from the top."""
        _check_position(position, len(self))
        return next(islice(self._items, position - 1, None))