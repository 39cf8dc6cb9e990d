"""Bit manipulation tricks on Python integers."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor
from typing import TypeVar

T = TypeVar("T")


def _require_non_negative(number: int) -> None:
    if number < 0:
        raise ValueError("number must be non-negative")


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Exchange two integers with three XORs and return them swapped."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def is_bit_set(number: int, index: int) -> bool:
    """Return True if bit ``index`` of ``number`` is 1."""
    return number & (1 << index) != 0


def set_bit(number: int, index: int) -> int:
    """Return ``number`` with bit ``index`` set."""
    return number | (1 << index)


def clear_bit(number: int, index: int) -> int:
    """Return ``number`` with bit ``index`` cleared."""
    return number & ~(1 << index)


def toggle_bit(number: int, index: int) -> int:
    """Return ``number`` with bit ``index`` flipped."""
    return number ^ (1 << index)


def remove_last_set_bit(number: int) -> int:
    """Return ``number`` with its lowest set bit cleared."""
    return number & (number - 1)


def is_power_of_two(number: int) -> bool:
    """Return True if ``number`` has at most one set bit (so 0 counts too)."""
    return number & (number - 1) == 0


def count_set_bits(number: int) -> int:
    """Count set bits by testing the lowest bit and shifting right."""
    _require_non_negative(number)
    count = 0
    while number:
        count += number & 1
        number >>= 1
    return count


def count_set_bits_kernighan(number: int) -> int:
    """Count set bits by clearing the lowest one until none remain."""
    _require_non_negative(number)
    count = 0
    while number:
        number &= number - 1
        count += 1
    return count


def divide(dividend: int, divisor: int) -> int:
    """Integer quotient of non-negative numbers by subtracting shifted divisors."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend < 0 or divisor < 0:
        raise ValueError("operands must be non-negative")
    quotient = 0
    while dividend >= divisor:
        shift = 0
        while dividend >= divisor << (shift + 1):
            shift += 1
        quotient += 1 << shift
        dividend -= divisor << shift
    return quotient


def min_bit_flips(a: int, b: int) -> int:
    """Number of bits to flip to turn ``a`` into ``b``."""
    return count_set_bits_kernighan(a ^ b)


def single_number(values: Iterable[int]) -> int:
    """Return the one value that appears an odd number of times when all others pair up."""
    return reduce(xor, values, 0)


def power_set(values: Iterable[T]) -> list[list[T]]:
    """Return every subset, ordered by the bit mask that selects it."""
    items = list(values)
    return [
        [item for j, item in enumerate(items) if mask >> j & 1]
        for mask in range(1 << len(items))
    ]


def xor_upto(n: int) -> int:
    """XOR of all integers from 0 to ``n``."""
    remainder = n % 4
    if remainder == 0:
        return n
    if remainder == 1:
        return 1
    if remainder == 2:
        return n + 1
    return 0


def xor_range(left: int, right: int) -> int:
    """XOR of all integers from ``left`` to ``right`` inclusive."""
    return xor_upto(left - 1) ^ xor_upto(right)


def two_single_numbers(values: Iterable[int]) -> tuple[int, int]:
    """Return the two values that appear once when every other value appears twice.

    The first has the lowest differing bit set, the second does not.
    """
    items = list(values)
    combined = reduce(xor, items, 0)
    lowest = combined & -combined
    with_bit = reduce(xor, (v for v in items if v & lowest), 0)
    without_bit = reduce(xor, (v for v in items if not v & lowest), 0)
    return with_bit, without_bit