"""Greedy algorithms: knapsack, coins, meetings, platforms, jobs, intervals, cookies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Item:
    """A divisible item with a value and a weight."""

    value: float
    weight: float


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if done by ``deadline``."""

    id: int
    deadline: int
    profit: int


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Return the best value packable into ``capacity``, taking fractions of items."""
    goods = list(items)
    if any(item.weight <= 0 for item in goods):
        raise ValueError("item weights must be positive")
    load = 0.0
    total = 0.0
    for item in sorted(goods, key=lambda it: it.value / it.weight, reverse=True):
        if load + item.weight <= capacity:
            load += item.weight
            total += item.value
        else:
            total += item.value / item.weight * (capacity - load)
            break
    return total


def min_coins(coins: Iterable[int], goal: int) -> list[int]:
    """Pay ``goal`` greedily with the largest coins first and return the coins used."""
    denominations = sorted(coins, reverse=True)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coins must be positive")
    paid: list[int] = []
    for coin in denominations:
        while goal >= coin:
            goal -= coin
            paid.append(coin)
    return paid


def max_meetings(starts: Sequence[int], ends: Sequence[int]) -> list[int]:
    """Return 1-based positions of the meetings one room can hold, by earliest end.

    A meeting may begin only strictly after the previous one ends.
    """
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    order = sorted(range(len(starts)), key=lambda i: (ends[i], i))
    chosen: list[int] = []
    last_end: int | None = None
    for i in order:
        if last_end is None or starts[i] > last_end:
            chosen.append(i + 1)
            last_end = ends[i]
    return chosen


def min_platforms(arrivals: Iterable[int], departures: Iterable[int]) -> int:
    """Return how many platforms keep every train from waiting."""
    arrive = sorted(arrivals)
    depart = sorted(departures)
    if len(arrive) != len(depart):
        raise ValueError("arrivals and departures must have the same length")
    n = len(arrive)
    if n == 0:
        return 0
    platforms = result = 1
    i, j = 1, 0
    while i < n and j < n:
        if arrive[i] <= depart[j]:
            platforms += 1
            i += 1
        else:
            platforms -= 1
            j += 1
        result = max(result, platforms)
    return result


def job_scheduling(jobs: Iterable[Job]) -> tuple[int, int]:
    """Schedule the most profitable jobs in the latest free slot; return (count, profit)."""
    ranked = sorted(jobs, key=attrgetter("profit"), reverse=True)
    if not ranked:
        return 0, 0
    slots: list[Job | None] = [None] * (max(0, max(j.deadline for j in ranked)) + 1)
    count = profit = 0
    for job in ranked:
        for slot in range(job.deadline, 0, -1):
            if slots[slot] is None:
                slots[slot] = job
                count += 1
                profit += job.profit
                break
    return count, profit


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping closed intervals and return them sorted."""
    merged: list[list[int]] = []
    for start, end in sorted((list(pair) for pair in intervals)):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def assign_cookies(greed: Iterable[int], sizes: Iterable[int]) -> int:
    """Return how many children get a cookie at least as large as their greed."""
    children = sorted(greed)
    fed = 0
    for cookie in sorted(sizes):
        if fed < len(children) and children[fed] <= cookie:
            fed += 1
    return fed