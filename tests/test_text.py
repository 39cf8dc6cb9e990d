import itertools
from collections import Counter

import pytest
from hypothesis import given, strategies as st

from dsalgo.text import (
    TextStats,
    bitwise_duplicates,
    duplicate_counts,
    is_alphanumeric,
    is_anagram,
    is_palindrome,
    permutations,
    reverse_string,
    string_length,
    swap_permutations,
    text_stats,
    toggle_case,
)

lowercase_text = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", max_size=30)


def test_is_anagram_source_example():
    assert is_anagram("pgequalsbj", "bjequalspg")


def test_is_anagram_rejects_different_lengths_and_letters():
    assert not is_anagram("abc", "abcc")
    assert not is_anagram("abc", "abd")


@given(lowercase_text, st.randoms())
def test_is_anagram_of_shuffle(text, rnd):
    chars = list(text)
    rnd.shuffle(chars)
    assert is_anagram(text, "".join(chars))


def test_text_stats_words_and_letters():
    stats = text_stats("how are you")
    assert isinstance(stats, TextStats)
    assert stats.words == len("how are you".split())
    assert stats.vowels + stats.consonants == len("howareyou")


def test_text_stats_vowels_and_consonants():
    assert text_stats("aeiou").vowels == len("aeiou")
    assert text_stats("bcd").consonants == len("bcd")
    assert text_stats("bcd").vowels == 0


@given(st.text(alphabet="abcxyz EIO", max_size=30))
def test_text_stats_ignores_case(text):
    assert text_stats(text.upper()) == text_stats(text.lower())


def test_text_stats_repeated_spaces_count_once():
    assert text_stats("a  b").words == text_stats("a b").words


@given(lowercase_text)
def test_duplicate_counts_invariants(text):
    result = duplicate_counts(text)
    assert list(result) == sorted(result)
    for c, n in result.items():
        assert n > 1
        assert text.count(c) == n
    for c in set(text) - set(result):
        assert text.count(c) == 1


def test_bitwise_duplicates_source_example():
    assert bitwise_duplicates("kartikgautam") == ["k", "a", "t", "a"]


@given(lowercase_text)
def test_bitwise_duplicates_count(text):
    repeats = bitwise_duplicates(text)
    assert len(repeats) == len(text) - len(set(text))
    assert Counter(repeats) + Counter(set(text)) == Counter(text)


def test_is_alphanumeric():
    assert is_alphanumeric("howareyou")
    assert is_alphanumeric("abc123")
    assert not is_alphanumeric("how are you")
    assert not is_alphanumeric("a-b")


@given(st.text(alphabet=st.characters(blacklist_characters="\0"), max_size=30))
def test_string_length_without_nul(text):
    assert string_length(text) == len(text)


def test_string_length_stops_at_nul():
    assert string_length("bhavu\0tail") == string_length("bhavu")


def test_is_palindrome():
    assert is_palindrome("nitin")
    assert not is_palindrome("nitn")


@given(lowercase_text)
def test_palindrome_of_mirrored_text(text):
    assert is_palindrome(text + reverse_string(text))


@pytest.mark.parametrize("text", ["", "a", "abc", "abcd"])
def test_permutations_order(text):
    expected = ["".join(p) for p in itertools.permutations(text)]
    assert list(permutations(text)) == expected


@pytest.mark.parametrize("text", ["ab", "abc", "abcd"])
def test_swap_permutations_preserve_characters(text):
    results = swap_permutations(text)
    assert len(results) == len(list(itertools.permutations(text)))
    for result in results:
        assert sorted(result) == sorted(text)


@given(st.text(max_size=30))
def test_reverse_round_trip(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_toggle_case_source_example():
    assert toggle_case("Bhavu") == "bHAVU"


@given(st.text(max_size=30))
def test_toggle_case_is_involution(text):
    assert toggle_case(toggle_case(text)) == text
    assert len(toggle_case(text)) == len(text)