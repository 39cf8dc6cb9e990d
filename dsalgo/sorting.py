"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new ascending list; the
input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain


def _require_non_negative(items: list[int]) -> None:
    if any(value < 0 for value in items):
        raise ValueError("distribution sorts need non-negative integers")


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(n - 1 - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def bubble_sort_adaptive(values: Iterable[int]) -> tuple[list[int], int]:
    """Bubble sort that stops after a pass without swaps.

    Returns the sorted list and the number of passes made.
    """
    items = list(values)
    n = len(items)
    passes = 0
    for i in range(n - 1):
        passes += 1
        swapped = False
        for j in range(n - 1 - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items, passes


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        k = min(range(i, n), key=items.__getitem__)
        items[i], items[k] = items[k], items[i]
    return items


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[low]
    i = low + 1
    j = high
    while True:
        while i <= j and items[i] <= pivot:
            i += 1
        while j >= i and items[j] >= pivot:
            j -= 1
        if i > j:
            break
        items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quick sort using the first element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = _partition(items, low, high)
            pending.append((low, p - 1))
            pending.append((p + 1, high))
    return items


def _merge(items: list[int], low: int, mid: int, high: int) -> None:
    left = items[low : mid + 1]
    right = items[mid + 1 : high + 1]
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[low : high + 1] = merged


def _merge_sort_range(items: list[int], low: int, high: int) -> None:
    if low < high:
        mid = (low + high) // 2
        _merge_sort_range(items, low, mid)
        _merge_sort_range(items, mid + 1, high)
        _merge(items, low, mid, high)


def merge_sort(values: Iterable[int]) -> list[int]:
    """Top-down recursive merge sort."""
    items = list(values)
    _merge_sort_range(items, 0, len(items) - 1)
    return items


def merge_sort_iterative(values: Iterable[int]) -> list[int]:
    """Bottom-up merge sort over runs of doubling width."""
    items = list(values)
    n = len(items)
    width = 2
    while width <= n:
        for low in range(0, n, width):
            high = min(low + width - 1, n - 1)
            mid = min(low + width // 2 - 1, high)
            _merge(items, low, mid, high)
        width *= 2
    if width // 2 < n:
        _merge(items, 0, width // 2 - 1, n - 1)
    return items


def count_sort(values: Iterable[int]) -> list[int]:
    """Counting sort for non-negative integers."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items)
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def shell_sort(values: Iterable[int]) -> list[int]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap >= 1:
        for j in range(gap, n):
            current = items[j]
            i = j - gap
            while i >= 0 and items[i] > current:
                items[i + gap] = items[i]
                i -= gap
            items[i + gap] = current
        gap //= 2
    return items


def bin_sort(values: Iterable[int]) -> list[int]:
    """Bin (bucket) sort with one bin per value, for non-negative integers."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items)
    bins: list[list[int]] = [[] for _ in range(max(items) + 1)]
    for value in items:
        bins[value].append(value)
    return list(chain.from_iterable(bins))


def _digit_count(number: int) -> int:
    digits = 0
    while number != 0:
        number //= 10
        digits += 1
    return digits


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort for non-negative integers."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items)
    for place in range(_digit_count(max(items))):
        divisor = 10**place
        bins: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            bins[(value // divisor) % 10].append(value)
        items = list(chain.from_iterable(bins))
    return items