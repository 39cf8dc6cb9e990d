"""Singly linked list with insertion, deletion, reversal, merging and loop detection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A list node holding one value and a link to the next node."""

    data: Any
    next: Optional[Node] = None


def has_loop(head: Node | None) -> bool:
    """Return True if following ``next`` links from ``head`` never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


class LinkedList:
    """A singly linked list whose first node is ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _tail(self) -> Node | None:
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def sum(self) -> Any:
        """Return the total of all values (0 when empty)."""
        return sum(self)

    def maximum(self) -> Any:
        """Return the largest value; raise ValueError when empty."""
        if self.head is None:
            raise ValueError("maximum of an empty list")
        return max(self)

    def search(self, key: Any) -> Node:
        """Return the first node holding ``key``; raise KeyError if none does."""
        for node in self._nodes():
            if node.data == key:
                return node
        raise KeyError(key)

    def move_to_head(self, key: Any) -> Node:
        """Move the first node holding ``key`` to the front and return it."""
        previous: Node | None = None
        for node in self._nodes():
            if node.data == key:
                if previous is not None:
                    previous.next = node.next
                    node.next = self.head
                    self.head = node
                return node
            previous = node
        raise KeyError(key)

    def insert_first(self, value: Any) -> None:
        """Put ``value`` at the front."""
        self.head = Node(value, self.head)

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 0-based ``position``."""
        if position == 0:
            self.insert_first(value)
            return
        if not 0 < position <= len(self):
            raise IndexError(f"position {position} out of range")
        before = self.head
        for _ in range(position - 1):
            before = before.next  # type: ignore[union-attr]
        before.next = Node(value, before.next)  # type: ignore[union-attr]

    def append(self, value: Any) -> None:
        """Put ``value`` at the end."""
        tail = self._tail()
        if tail is None:
            self.head = Node(value)
        else:
            tail.next = Node(value)

    def insert_sorted(self, value: Any) -> None:
        """Insert ``value`` into an ascending list, before the first value not smaller."""
        if self.head is None or value < self.head.data:
            self.insert_first(value)
            return
        before = self.head
        while before.next is not None and before.next.data < value:
            before = before.next
        before.next = Node(value, before.next)

    def delete_first(self) -> Any:
        """Remove and return the first value; raise IndexError when empty."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        node = self.head
        self.head = node.next
        return node.data

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        if not 1 <= position <= len(self):
            raise IndexError(f"position {position} out of range")
        if position == 1:
            return self.delete_first()
        before = self.head
        for _ in range(position - 2):
            before = before.next  # type: ignore[union-attr]
        node = before.next  # type: ignore[union-attr]
        before.next = node.next  # type: ignore[union-attr]
        return node.data  # type: ignore[union-attr]

    def is_sorted(self) -> bool:
        """Return True if no value is greater than the one after it."""
        return all(node.data <= node.next.data for node in self._nodes() if node.next)

    def remove_sorted_duplicates(self) -> None:
        """Drop adjacent repeats, leaving one node per run of equal values."""
        node = self.head
        while node is not None and node.next is not None:
            if node.data == node.next.data:
                node.next = node.next.next
            else:
                node = node.next

    def reverse_values(self) -> None:
        """Reverse the order by rewriting the values in place, keeping the links."""
        values = list(self)
        for node, value in zip(self._nodes(), reversed(values)):
            node.data = value

    def reverse(self) -> None:
        """Reverse the order by turning every link around."""
        previous: Node | None = None
        node = self.head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self.head = previous

    def concat(self, other: LinkedList) -> None:
        """Move all nodes of ``other`` onto the end of this list, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        tail = self._tail()
        if tail is None:
            self.head = other.head
        else:
            tail.next = other.head
        other.head = None

    def merge(self, other: LinkedList) -> None:
        """Merge the ascending list ``other`` into this ascending list, emptying ``other``.

        On equal values the node from ``other`` comes first.
        """
        if other is self:
            raise ValueError("cannot merge a list with itself")
        anchor = Node(None)
        last = anchor
        p, q = self.head, other.head
        while p is not None and q is not None:
            if p.data < q.data:
                last.next, p = p, p.next
            else:
                last.next, q = q, q.next
            last = last.next
        last.next = p if p is not None else q
        self.head = anchor.next
        other.head = None

    def middle(self) -> Any:
        """Return the middle value; of two middles, the second. Raise IndexError when empty."""
        if self.head is None:
            raise IndexError("middle of an empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[assignment]
            fast = fast.next.next
        return slow.data