import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.sliding_window import (
    binary_subarrays_with_sum,
    fruits_in_baskets,
    longest_repeating_replacement,
    longest_unique_substring,
    max_card_points,
    max_consecutive_ones,
    nice_subarrays,
    substrings_with_all_three,
)

bits = st.lists(st.integers(0, 1), max_size=30)


def test_longest_unique_substring_example():
    assert longest_unique_substring("abcabcbb") == 3


@given(st.text(alphabet="abcde", max_size=30))
def test_longest_unique_substring_bounds(text):
    result = longest_unique_substring(text)
    assert result <= len(set(text))
    assert (result == 0) == (text == "")


def test_longest_unique_substring_all_distinct():
    assert longest_unique_substring("qwerty") == len("qwerty")


@given(bits, st.integers(0, 5))
def test_max_consecutive_ones_monotone_in_k(values, k):
    assert max_consecutive_ones(values, k) <= max_consecutive_ones(values, k + 1)
    assert max_consecutive_ones(values, k) <= len(values)


@given(bits)
def test_max_consecutive_ones_enough_flips(values):
    assert max_consecutive_ones(values, values.count(0)) == len(values)


def test_max_consecutive_ones_rejects_negative_k():
    with pytest.raises(ValueError):
        max_consecutive_ones([1, 0], -1)


@given(st.lists(st.integers(0, 4), max_size=30))
def test_fruits_in_baskets_bounds(values):
    result = fruits_in_baskets(values)
    assert result <= len(values)
    if len(set(values)) <= 2:
        assert result == len(values)


@given(st.text(alphabet="AB", max_size=20), st.integers(0, 5))
def test_longest_repeating_replacement_monotone(text, k):
    assert longest_repeating_replacement(text, k) <= longest_repeating_replacement(
        text, k + 1
    )


@given(st.text(alphabet="ABC", max_size=20))
def test_longest_repeating_replacement_full_budget(text):
    assert longest_repeating_replacement(text, len(text)) == len(text)


@given(bits)
def test_binary_subarrays_partition_all_subarrays(values):
    n = len(values)
    total = sum(binary_subarrays_with_sum(values, g) for g in range(n + 1))
    assert total == n * (n + 1) // 2


def test_binary_subarrays_rejects_negative_values():
    with pytest.raises(ValueError):
        binary_subarrays_with_sum([1, -1], 0)


@given(st.lists(st.integers(-20, 20), max_size=30))
def test_nice_subarrays_partition_all_subarrays(values):
    n = len(values)
    total = sum(nice_subarrays(values, k) for k in range(n + 1))
    assert total == n * (n + 1) // 2


def test_substrings_with_all_three_example():
    assert substrings_with_all_three("abcabc") == 10


def test_substrings_with_all_three_missing_letter():
    assert substrings_with_all_three("ababab") == 0


def test_substrings_with_all_three_rejects_other_letters():
    with pytest.raises(ValueError):
        substrings_with_all_three("abcd")


def test_max_card_points_example():
    assert max_card_points([1, 2, 3, 4, 5, 6, 1], 3) == 12


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=20), st.data())
def test_max_card_points_beats_one_sided_picks(values, data):
    k = data.draw(st.integers(0, len(values)))
    result = max_card_points(values, k)
    assert result >= sum(values[:k])
    assert result >= sum(values[len(values) - k :])
    assert max_card_points(values, len(values)) == sum(values)


def test_max_card_points_rejects_large_k():
    with pytest.raises(ValueError):
        max_card_points([1, 2], 3)