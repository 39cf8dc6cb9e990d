"""Hash tables: separate chaining and open addressing with three probe schemes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import insort
from collections.abc import Iterator

_CHAIN_BUCKETS = 10
_SECONDARY_PRIME = 7


class ChainedHashTable:
    """Ten buckets keyed by ``key % 10``, each holding a sorted chain."""

    def __init__(self) -> None:
        self._buckets: list[list[int]] = [[] for _ in range(_CHAIN_BUCKETS)]

    def _bucket(self, key: int) -> list[int]:
        return self._buckets[key % _CHAIN_BUCKETS]

    def insert(self, key: int) -> None:
        """Add ``key`` to its bucket, keeping the chain in ascending order."""
        insort(self._bucket(key), key)

    def search(self, key: int) -> int:
        """Return ``key`` if stored; raise KeyError otherwise."""
        if key in self._bucket(key):
            return key
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and key in self._bucket(key)


class OpenAddressingTable(ABC):
    """Fixed-size table that resolves collisions by probing for a free slot."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._slots: list[int | None] = [None] * size

    @abstractmethod
    def _offset(self, key: int, attempt: int) -> int:
        """Distance from the home slot on the given probe attempt."""

    def _probe(self, key: int) -> Iterator[int]:
        home = key % self.size
        for attempt in range(self.size):
            yield (home + self._offset(key, attempt)) % self.size

    def insert(self, key: int) -> int:
        """Store ``key`` in the first free slot of its probe sequence and return the slot."""
        for slot in self._probe(key):
            if self._slots[slot] is None:
                self._slots[slot] = key
                return slot
        raise OverflowError(f"no free slot for {key}")

    def search(self, key: int) -> int:
        """Return the slot holding ``key``; raise KeyError if it is not stored."""
        for slot in self._probe(key):
            stored = self._slots[slot]
            if stored is None:
                break
            if stored == key:
                return slot
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        try:
            self.search(key)
        except KeyError:
            return False
        return True


class LinearProbingTable(OpenAddressingTable):
    """Probes ``h, h+1, h+2, ...``."""

    def _offset(self, key: int, attempt: int) -> int:
        return attempt


class QuadraticProbingTable(OpenAddressingTable):
    """Probes ``h, h+1, h+4, h+9, ...``."""

    def _offset(self, key: int, attempt: int) -> int:
        return attempt * attempt


class DoubleHashingTable(OpenAddressingTable):
    """Probes in steps of ``7 - key % 7``."""

    def _offset(self, key: int, attempt: int) -> int:
        return attempt * (_SECONDARY_PRIME - key % _SECONDARY_PRIME)