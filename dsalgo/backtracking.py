"""Backtracking searches over subsets, combinations, partitions and permutations."""

from __future__ import annotations

from collections.abc import Iterable
from math import factorial


def subset_sums(values: Iterable[int]) -> list[int]:
    """Return the sum of every subset, excluding each element before including it."""
    items = list(values)

    def collect(index: int, total: int) -> list[int]:
        if index == len(items):
            return [total]
        return collect(index + 1, total) + collect(index + 1, total + items[index])

    return collect(0, 0)


def subsets_with_duplicates(values: Iterable[int]) -> list[list[int]]:
    """Return every distinct subset of the sorted values, each only once."""
    items = sorted(values)
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int) -> None:
        result.append(list(chosen))
        for i in range(start, len(items)):
            if i != start and items[i] == items[i - 1]:
                continue
            chosen.append(items[i])
            search(i + 1)
            chosen.pop()

    search(0)
    return result


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return combinations of candidates, each usable any number of times, summing to target."""
    items = list(candidates)
    if any(c <= 0 for c in items):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(index: int, remaining: int) -> None:
        if index == len(items):
            if remaining == 0:
                result.append(list(chosen))
            return
        if items[index] <= remaining:
            chosen.append(items[index])
            search(index, remaining - items[index])
            chosen.pop()
        search(index + 1, remaining)

    search(0, target)
    return result


def combination_sum_unique(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return distinct combinations using each candidate at most once, summing to target."""
    items = sorted(candidates)
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        for i in range(start, len(items)):
            if i > start and items[i] == items[i - 1]:
                continue
            if items[i] > remaining:
                break
            chosen.append(items[i])
            search(i + 1, remaining - items[i])
            chosen.pop()

    search(0, target)
    return result


def palindrome_partitions(text: str) -> list[list[str]]:
    """Return every way to cut the text into palindromic pieces."""
    result: list[list[str]] = []
    path: list[str] = []

    def search(start: int) -> None:
        if start == len(text):
            result.append(list(path))
            return
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if piece == piece[::-1]:
                path.append(piece)
                search(end)
                path.pop()

    search(0)
    return result


def kth_permutation(n: int, k: int) -> str:
    """Return the k-th (1-based) permutation of 1..n in lexicographic order, as digits joined."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= factorial(n):
        raise ValueError(f"k must lie between 1 and {n}!")
    numbers = list(range(1, n + 1))
    block = factorial(n - 1)
    k -= 1
    parts: list[str] = []
    while True:
        parts.append(str(numbers.pop(k // block)))
        if not numbers:
            break
        k %= block
        block //= len(numbers)
    return "".join(parts)