from functools import reduce
from operator import xor

import pytest
from hypothesis import given, strategies as st

from dsalgo.bits import (
    clear_bit,
    count_set_bits,
    count_set_bits_kernighan,
    divide,
    is_bit_set,
    is_power_of_two,
    min_bit_flips,
    power_set,
    remove_last_set_bit,
    set_bit,
    single_number,
    toggle_bit,
    two_single_numbers,
    xor_range,
    xor_swap,
    xor_upto,
)

naturals = st.integers(min_value=0, max_value=10**9)
indices = st.integers(min_value=0, max_value=40)


@given(st.integers(), st.integers())
def test_xor_swap(a, b):
    assert xor_swap(a, b) == (b, a)


@given(naturals, indices)
def test_single_bit_operations(number, index):
    assert is_bit_set(set_bit(number, index), index)
    assert not is_bit_set(clear_bit(number, index), index)
    assert is_bit_set(toggle_bit(number, index), index) != is_bit_set(number, index)
    assert toggle_bit(toggle_bit(number, index), index) == number
    assert is_bit_set(number, index) == bool((number >> index) & 1)


@given(st.integers(min_value=1, max_value=10**9))
def test_remove_last_set_bit(number):
    result = remove_last_set_bit(number)
    assert count_set_bits(result) == count_set_bits(number) - 1
    assert number - result == number & -number


@pytest.mark.parametrize("exponent", range(0, 20))
def test_powers_of_two(exponent):
    assert is_power_of_two(2**exponent)


@pytest.mark.parametrize("number", [3, 6, 12, 100, 1023])
def test_non_powers_of_two(number):
    assert not is_power_of_two(number)


def test_zero_passes_power_of_two_check():
    assert is_power_of_two(0)


@given(naturals)
def test_set_bit_counters_agree(number):
    expected = bin(number).count("1")
    assert count_set_bits(number) == expected
    assert count_set_bits_kernighan(number) == expected


@pytest.mark.parametrize("counter", [count_set_bits, count_set_bits_kernighan])
def test_set_bit_counters_reject_negative(counter):
    with pytest.raises(ValueError):
        counter(-1)


@given(naturals, st.integers(min_value=1, max_value=10**6))
def test_divide_matches_floor_division(dividend, divisor):
    assert divide(dividend, divisor) == dividend // divisor


def test_divide_equal_operands():
    assert divide(5, 5) == 5 // 5


def test_divide_errors():
    with pytest.raises(ZeroDivisionError):
        divide(4, 0)
    with pytest.raises(ValueError):
        divide(-4, 2)


@given(naturals, naturals)
def test_min_bit_flips(a, b):
    assert min_bit_flips(a, b) == bin(a ^ b).count("1")
    assert min_bit_flips(a, a) == 0


@given(st.lists(st.integers(), max_size=10), st.integers())
def test_single_number(pairs, single):
    values = pairs + [single] + pairs[::-1]
    assert single_number(values) == single


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], ["a", "b", "c", "d"]])
def test_power_set(values):
    subsets = power_set(values)
    assert len(subsets) == 2 ** len(values)
    assert subsets[0] == []
    assert subsets[-1] == values
    assert len({tuple(s) for s in subsets}) == len(subsets)
    for subset in subsets:
        assert all(item in values for item in subset)


@pytest.mark.parametrize("n", range(0, 50))
def test_xor_upto(n):
    assert xor_upto(n) == reduce(xor, range(n + 1), 0)


@given(st.integers(min_value=0, max_value=300), st.integers(min_value=0, max_value=300))
def test_xor_range(left, span):
    right = left + span
    assert xor_range(left, right) == reduce(xor, range(left, right + 1), 0)


@given(
    st.lists(st.integers(min_value=0, max_value=1000), unique=True, min_size=2, max_size=12),
    st.randoms(),
)
def test_two_single_numbers(distinct, rnd):
    first, second, *paired = distinct
    values = [first, second] + paired + paired
    rnd.shuffle(values)
    a, b = two_single_numbers(values)
    assert {a, b} == {first, second}
    lowest = (first ^ second) & -(first ^ second)
    assert a & lowest and not b & lowest