"""Queues: linear and circular arrays, linked storage, and a pair of stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class QueueOverflowError(OverflowError):
    """Raised when adding to a full queue."""


class QueueUnderflowError(IndexError):
    """Raised when taking from or reading an empty queue."""


class ArrayQueue(Generic[T]):
    """A linear array queue: each of its ``size`` slots is used once.

    Slots freed by dequeuing are not reused, so the queue stays full after
    ``size`` values have been enqueued.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("queue size must be non-negative")
        self.size = size
        self._slots: list[T] = []
        self._front = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear; raise QueueOverflowError when full."""
        if self.is_full():
            raise QueueOverflowError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value; raise QueueUnderflowError when empty."""
        if self.is_empty():
            raise QueueUnderflowError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self.size

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[self._front :])


class CircularQueue(Generic[T]):
    """A ring of ``size`` slots holding at most ``size - 1`` values."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("queue size must be positive")
        self.size = size
        self._slots: list[Optional[T]] = [None] * size
        self._front = 0
        self._rear = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear; raise QueueOverflowError when full."""
        if self.is_full():
            raise QueueOverflowError("queue overflow")
        self._rear = (self._rear + 1) % self.size
        self._slots[self._rear] = value

    def dequeue(self) -> T:
        """Remove and return the front value; raise QueueUnderflowError when empty."""
        if self.is_empty():
            raise QueueUnderflowError("queue underflow")
        self._front = (self._front + 1) % self.size
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % self.size == self._front

    def front(self) -> T:
        """Return the value that would be dequeued next."""
        if self.is_empty():
            raise QueueUnderflowError("queue is empty")
        return self._slots[(self._front + 1) % self.size]  # type: ignore[return-value]

    def rear(self) -> T:
        """Return the most recently enqueued value."""
        if self.is_empty():
            raise QueueUnderflowError("queue is empty")
        return self._slots[self._rear]  # type: ignore[return-value]

    def __len__(self) -> int:
        return (self._rear - self._front) % self.size

    def __iter__(self) -> Iterator[T]:
        for offset in range(1, len(self) + 1):
            yield self._slots[(self._front + offset) % self.size]  # type: ignore[misc]


class LinkedQueue(Generic[T]):
    """An unbounded first-in first-out queue."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(values)

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value; raise QueueUnderflowError when empty."""
        if not self._items:
            raise QueueUnderflowError("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def front(self) -> T:
        if not self._items:
            raise QueueUnderflowError("queue is empty, no front element")
        return self._items[0]

    def rear(self) -> T:
        if not self._items:
            raise QueueUnderflowError("queue is empty, no rear element")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


class TwoStackQueue(Generic[T]):
    """A queue built from an inbox stack and an outbox stack."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._inbox: list[T] = list(values)
        self._outbox: list[T] = []

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        self._inbox.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value; raise QueueUnderflowError when empty."""
        if not self._outbox:
            if not self._inbox:
                raise QueueUnderflowError("queue underflow")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)