"""Circular doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    prev: Optional[_Node] = None
    next: Optional[_Node] = None


class CircularDoublyLinkedList:
    """A ring of nodes linked both ways; positions count from 0 at the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(self._size, value)

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            yield node.data  # type: ignore[union-attr]
            node = node.next  # type: ignore[union-attr]

    def __reversed__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            yield node.data  # type: ignore[union-attr]
            node = node.prev  # type: ignore[union-attr]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position`` (0 to length)."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        node = _Node(value)
        if self._head is None:
            node.prev = node.next = node
            self._head = node
        else:
            anchor = self._head.prev if position == 0 else self._node_at(position - 1)
            node.prev = anchor
            node.next = anchor.next  # type: ignore[union-attr]
            anchor.next.prev = node  # type: ignore[union-attr]
            anchor.next = node  # type: ignore[union-attr]
            if position == 0:
                self._head = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove and return the value at ``position`` (0 to length - 1)."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} out of range")
        node = self._node_at(position)
        if self._size == 1:
            self._head = None
        else:
            node.prev.next = node.next  # type: ignore[union-attr]
            node.next.prev = node.prev  # type: ignore[union-attr]
            if node is self._head:
                self._head = node.next
        self._size -= 1
        return node.data

    def reverse(self) -> None:
        """Reverse the ring by swapping every node's links; the old tail becomes head."""
        if self._head is None:
            return
        node = self._head
        for _ in range(self._size):
            node.prev, node.next = node.next, node.prev
            node = node.prev  # type: ignore[assignment]
        self._head = self._head.next