"""Array-backed max-heap operations and heap sort."""

from __future__ import annotations

from collections.abc import Iterable


def _sift_down(heap: list[int], index: int, end: int) -> None:
    """Move ``heap[index]`` down until both children within ``end`` are smaller."""
    while (child := 2 * index + 1) < end:
        if child + 1 < end and heap[child + 1] > heap[child]:
            child += 1
        if heap[index] >= heap[child]:
            break
        heap[index], heap[child] = heap[child], heap[index]
        index = child


def insert_max_heap(heap: list[int], key: int) -> None:
    """Push ``key`` onto the max-heap ``heap`` in place."""
    heap.append(key)
    i = len(heap) - 1
    while i > 0 and key > heap[(i - 1) // 2]:
        parent = (i - 1) // 2
        heap[i] = heap[parent]
        i = parent
    heap[i] = key


def create_max_heap(values: Iterable[int]) -> list[int]:
    """Build a max-heap by inserting the values one at a time."""
    heap: list[int] = []
    for value in values:
        insert_max_heap(heap, value)
    return heap


def delete_max_heap(heap: list[int]) -> int:
    """Remove and return the largest element of the max-heap ``heap``."""
    if not heap:
        raise IndexError("delete from an empty heap")
    top = heap[0]
    last = heap.pop()
    if heap:
        heap[0] = last
        _sift_down(heap, 0, len(heap))
    return top


def heapify(values: Iterable[int]) -> list[int]:
    """Arrange the values into a max-heap bottom-up and return it."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, i, n)
    return items


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort ascending by repeatedly moving the heap maximum to the end."""
    items = heapify(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items