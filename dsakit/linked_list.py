"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a chain: a value and the node that follows it."""

    data: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list whose positions are counted from 0 at the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> Node:
        if not 0 <= index < self._size:
            raise IndexError("linked list index out of range")
        node = self.head
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _link_after(self, node: Node, data: Any) -> Node:
        new = Node(data, node.next)
        node.next = new
        self._size += 1
        return new

    def insert_at_start(self, data: Any) -> Node:
        """Put data in front of the head and return its new node."""
        self.head = Node(data, self.head)
        self._size += 1
        return self.head

    def insert_at_index(self, index: int, data: Any) -> Node:
        """Insert data so that it ends up at position index."""
        if index == 0:
            return self.insert_at_start(data)
        if not 0 < index <= self._size:
            raise IndexError("linked list index out of range")
        return self._link_after(self._node_at(index - 1), data)

    def insert_at_end(self, data: Any) -> Node:
        """Append data after the last node."""
        if self.head is None:
            return self.insert_at_start(data)
        return self._link_after(self._node_at(self._size - 1), data)

    def insert_after(self, node: Node, data: Any) -> Node:
        """Insert data right after a node of this list."""
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("node does not belong to this list")
        return self._link_after(node, data)

    def delete_first(self) -> Any:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("delete from empty linked list")
        removed = self.head
        self.head = removed.next
        self._size -= 1
        return removed.data

    def delete_at_index(self, index: int) -> Any:
        """Remove the node at position index and return its value."""
        if index == 0:
            return self.delete_first()
        if not 0 < index < self._size:
            raise IndexError("linked list index out of range")
        prev = self._node_at(index - 1)
        removed = prev.next
        prev.next = removed.next  # type: ignore[union-attr]
        self._size -= 1
        return removed.data  # type: ignore[union-attr]

    def delete_last(self) -> Any:
        """Remove the last node and return its value."""
        if self._size == 0:
            raise IndexError("delete from empty linked list")
        return self.delete_at_index(self._size - 1)

    def delete_by_value(self, value: Any) -> bool:
        """Remove the first node holding value; report whether one was found."""
        prev: Node | None = None
        for node in self._nodes():
            if node.data == value:
                if prev is None:
                    self.head = node.next
                else:
                    prev.next = node.next
                self._size -= 1
                return True
            prev = node
        return False