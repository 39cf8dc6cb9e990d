"""String exercises: anagrams, counts, duplicates, palindromes and permutations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from string import ascii_lowercase, ascii_uppercase

_VOWELS = frozenset("aeiou")
_TOGGLE = str.maketrans(ascii_lowercase + ascii_uppercase, ascii_uppercase + ascii_lowercase)


@dataclass(frozen=True)
class TextStats:
    """Letter and word counts of a piece of text."""

    vowels: int
    consonants: int
    words: int


def is_anagram(first: str, second: str) -> bool:
    """Return True if both strings hold the same characters the same number of times."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def text_stats(text: str) -> TextStats:
    """Count vowels, consonants and space-separated words, ignoring case."""
    lowered = text.lower()
    vowels = sum(1 for c in lowered if c in _VOWELS)
    consonants = sum(1 for c in lowered if c in ascii_lowercase and c not in _VOWELS)
    words = 1 + sum(
        1 for previous, current in zip(lowered, lowered[1:]) if current == " " and previous != " "
    )
    return TextStats(vowels, consonants, words)


def duplicate_counts(text: str) -> dict[str, int]:
    """Map each character that occurs more than once to its count, in character order."""
    return {c: n for c, n in sorted(Counter(text).items()) if n > 1}


def bitwise_duplicates(text: str) -> list[str]:
    """Return every repeated occurrence, in order, found with a bit mask of seen characters."""
    seen = 0
    repeats: list[str] = []
    for c in text:
        bit = 1 << ord(c)
        if seen & bit:
            repeats.append(c)
        else:
            seen |= bit
    return repeats


def is_alphanumeric(text: str) -> bool:
    """Return True if every character is a letter or a digit."""
    return all(c.isalpha() or c.isdigit() for c in text)


def string_length(text: str) -> int:
    """Count characters up to the first NUL, or to the end."""
    return len(text.split("\0", 1)[0])


def is_palindrome(text: str) -> bool:
    """Return True if the text reads the same backwards."""
    return text == text[::-1]


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters, choosing unused positions in order."""
    chars = list(text)
    used = [False] * len(chars)
    current: list[str] = []

    def build() -> Iterator[str]:
        if len(current) == len(chars):
            yield "".join(current)
            return
        for i, c in enumerate(chars):
            if not used[i]:
                used[i] = True
                current.append(c)
                yield from build()
                current.pop()
                used[i] = False

    yield from build()


def swap_permutations(text: str) -> list[str]:
    """Return the strings produced by the swap-and-recurse scheme.

    Each level swaps its first position with the last before recursing and
    with the loop position afterwards, so arrangements may repeat.
    """
    results: list[str] = []
    high = len(text) - 1

    def permute(chars: list[str], low: int) -> None:
        if low == high:
            results.append("".join(chars))
            return
        for i in range(low, high + 1):
            chars[low], chars[high] = chars[high], chars[low]
            permute(list(chars), low + 1)
            chars[low], chars[i] = chars[i], chars[low]

    permute(list(text), 0)
    return results


def reverse_string(text: str) -> str:
    """Return the text reversed."""
    return text[::-1]


def toggle_case(text: str) -> str:
    """Swap upper and lower case of ASCII letters, leaving everything else alone."""
    return text.translate(_TOGGLE)