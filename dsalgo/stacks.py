"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or reading the top of an empty stack."""


class ArrayStack(Generic[T]):
    """A stack that holds at most ``size`` values."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("stack size must be non-negative")
        self.size = size
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top; raise StackOverflowError when full."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self, position: int) -> T:
        """Return the value ``position`` places down, where 1 is the top."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"invalid position {position}")
        return self._items[-position]

    def top(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top down."""
        return reversed(self._items)


@dataclass
class _Node(Generic[T]):
    value: T
    below: Optional[_Node[T]] = None


class LinkedStack(Generic[T]):
    """An unbounded stack made of linked nodes."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._top: _Node[T] | None = None
        self._count = 0
        for value in values:
            self.push(value)

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._count += 1

    def pop(self) -> T:
        """Remove and return the top value; raise StackUnderflowError when empty."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.below
        self._count -= 1
        return node.value

    def peek(self, position: int) -> T:
        """Return the value ``position`` places down, where 1 is the top."""
        if not 1 <= position <= self._count:
            raise IndexError(f"invalid position {position}")
        for index, value in enumerate(self, start=1):
            if index == position:
                return value
        raise IndexError(f"invalid position {position}")

    def top(self) -> T:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below