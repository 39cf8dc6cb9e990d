"""Small recursive definitions: factorials, Fibonacci, binomials and friends."""

from __future__ import annotations

from functools import lru_cache
from math import prod
from typing import TypeVar

Peg = TypeVar("Peg")


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` below one yields 1."""
    return prod(range(1, n + 1))


def fibonacci_iterative(n: int) -> int:
    """Return the n-th Fibonacci number with a running pair of terms."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by plain two-way recursion."""
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


@lru_cache(maxsize=None)
def _fibonacci_cached(n: int) -> int:
    if n <= 1:
        return n
    return _fibonacci_cached(n - 2) + _fibonacci_cached(n - 1)


def fibonacci_memoized(n: int) -> int:
    """Return the n-th Fibonacci number, remembering every term computed."""
    return _fibonacci_cached(n)


@lru_cache(maxsize=None)
def _choose(n: int, r: int) -> int:
    if n == r or r == 0:
        return 1
    return _choose(n - 1, r - 1) + _choose(n - 1, r)


def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r) via Pascal's rule."""
    if r < 0 or r > n:
        raise ValueError(f"r must lie between 0 and n, got n={n}, r={r}")
    return _choose(n, r)


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to a non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def sum_of_naturals(n: int) -> int:
    """Return ``1 + 2 + ... + n``; any ``n`` below one yields 0."""
    return sum(range(1, n + 1))


def taylor_exp(x: float, terms: int) -> float:
    """Approximate ``e**x`` with the first ``terms`` terms after the constant 1."""
    total = 1.0
    numerator = 1.0
    denominator = 1.0
    for k in range(1, terms + 1):
        numerator *= x
        denominator *= k
        total += numerator / denominator
    return total


def tower_of_hanoi(
    n: int, source: Peg = 1, auxiliary: Peg = 2, target: Peg = 3
) -> list[tuple[Peg, Peg]]:
    """Return the moves, as ``(from, to)`` pairs, that carry ``n`` disks to ``target``."""
    moves: list[tuple[Peg, Peg]] = []

    def solve(count: int, frm: Peg, via: Peg, to: Peg) -> None:
        if count > 0:
            solve(count - 1, frm, to, via)
            moves.append((frm, to))
            solve(count - 1, via, frm, to)

    solve(n, source, auxiliary, target)
    return moves


@lru_cache(maxsize=None)
def nested_recurrence(n: int) -> int:
    """Return f(n) where f(1) = 1 and f(n) = 1 + sum of f(k) * f(n - k) for k < n."""
    if n == 1:
        return 1
    return 1 + sum(nested_recurrence(k) * nested_recurrence(n - k) for k in range(1, n))