"""Sliding-window problems over strings and integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def longest_unique_substring(text: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    left = best = 0
    for right, char in enumerate(text):
        if last_seen.get(char, -1) >= left:
            left = last_seen[char] + 1
        best = max(best, right - left + 1)
        last_seen[char] = right
    return best


def max_consecutive_ones(values: Iterable[int], k: int) -> int:
    """Longest run of ones obtainable by flipping at most ``k`` zeros."""
    if k < 0:
        raise ValueError("k must be non-negative")
    items = list(values)
    left = zeroes = best = 0
    for right, value in enumerate(items):
        if value == 0:
            zeroes += 1
        if zeroes > k:
            if items[left] == 0:
                zeroes -= 1
            left += 1
        if zeroes <= k:
            best = max(best, right - left + 1)
    return best


def fruits_in_baskets(values: Iterable[Hashable]) -> int:
    """Longest contiguous stretch holding at most two distinct kinds."""
    items = list(values)
    counts: Counter[Hashable] = Counter()
    left = best = 0
    for right, fruit in enumerate(items):
        counts[fruit] += 1
        if len(counts) > 2:
            dropped = items[left]
            counts[dropped] -= 1
            if counts[dropped] == 0:
                del counts[dropped]
            left += 1
        if len(counts) <= 2:
            best = max(best, right - left + 1)
    return best


def longest_repeating_replacement(text: str, k: int) -> int:
    """Longest run of one character after replacing at most ``k`` characters."""
    if k < 0:
        raise ValueError("k must be non-negative")
    counts: Counter[str] = Counter()
    left = best = max_freq = 0
    for right, char in enumerate(text):
        counts[char] += 1
        max_freq = max(max_freq, counts[char])
        length = right - left + 1
        if length - max_freq > k:
            counts[text[left]] -= 1
            left += 1
        else:
            best = max(best, length)
    return best


def _count_at_most(weights: Sequence[int], limit: int) -> int:
    """Number of subarrays whose non-negative weights sum to at most ``limit``."""
    if limit < 0:
        return 0
    left = total = count = 0
    for right, weight in enumerate(weights):
        total += weight
        while total > limit:
            total -= weights[left]
            left += 1
        count += right - left + 1
    return count


def binary_subarrays_with_sum(values: Iterable[int], goal: int) -> int:
    """Number of subarrays of non-negative values summing exactly to ``goal``."""
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("values must be non-negative")
    return _count_at_most(items, goal) - _count_at_most(items, goal - 1)


def nice_subarrays(values: Iterable[int], k: int) -> int:
    """Number of subarrays holding exactly ``k`` odd numbers."""
    parity = [v % 2 for v in values]
    return _count_at_most(parity, k) - _count_at_most(parity, k - 1)


def substrings_with_all_three(text: str) -> int:
    """Number of substrings of an a/b/c string that contain all three letters."""
    last = {"a": -1, "b": -1, "c": -1}
    count = 0
    for i, char in enumerate(text):
        if char not in last:
            raise ValueError(f"unexpected character {char!r}")
        last[char] = i
        earliest = min(last.values())
        if earliest != -1:
            count += earliest + 1
    return count


def max_card_points(values: Iterable[int], k: int) -> int:
    """Best total from taking ``k`` cards off the two ends of the row."""
    items = list(values)
    if not 0 <= k <= len(items):
        raise ValueError("k must lie between 0 and the number of cards")
    left_sum = sum(items[:k])
    right_sum = 0
    best = left_sum
    for taken in range(1, k + 1):
        left_sum -= items[k - taken]
        right_sum += items[-taken]
        best = max(best, left_sum + right_sum)
    return best