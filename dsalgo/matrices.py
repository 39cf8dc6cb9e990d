"""Compactly stored special square matrices, indexed from 1, and matrix zeroing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class _PackedSquareMatrix(ABC):
    """An ``n`` by ``n`` matrix that stores only the entries outside its zero region.

    Positions are ``(row, column)`` pairs counted from 1. Writing into the zero
    region is ignored.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("dimension must be non-negative")
        self.n = n
        self._data = [0] * self._storage_size(n)

    @staticmethod
    @abstractmethod
    def _storage_size(n: int) -> int:
        """Number of stored entries for dimension ``n``."""

    @abstractmethod
    def _slot(self, row: int, col: int) -> int | None:
        """Storage index of a position, or None when it is always zero."""

    def _locate(self, position: tuple[int, int]) -> int | None:
        row, col = position
        if not (1 <= row <= self.n and 1 <= col <= self.n):
            raise IndexError(f"position {position} outside a {self.n}x{self.n} matrix")
        return self._slot(row, col)

    def _get(self, position: tuple[int, int]) -> int:
        slot = self._locate(position)
        return 0 if slot is None else self._data[slot]

    def _set(self, position: tuple[int, int], value: int) -> None:
        slot = self._locate(position)
        if slot is not None:
            self._data[slot] = value

    def _rows(self) -> list[list[int]]:
        return [
            [self._get((row, col)) for col in range(1, self.n + 1)]
            for row in range(1, self.n + 1)
        ]


class DiagonalMatrix(_PackedSquareMatrix):
    """Square matrix that is zero off the main diagonal."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n

    def _slot(self, row: int, col: int) -> int | None:
        return row - 1 if row == col else None

    def __getitem__(self, position: tuple[int, int]) -> int:
        return self._get(position)

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        self._set(position, value)

    def rows(self) -> list[list[int]]:
        """Return the full matrix as a list of rows."""
        return self._rows()


class LowerTriangularMatrix(_PackedSquareMatrix):
    """Square matrix that is zero above the diagonal, stored row by row."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, row: int, col: int) -> int | None:
        return row * (row - 1) // 2 + col - 1 if row >= col else None

    def __getitem__(self, position: tuple[int, int]) -> int:
        return self._get(position)

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        self._set(position, value)

    def rows(self) -> list[list[int]]:
        """Return the full matrix as a list of rows."""
        return self._rows()


class UpperTriangularMatrix(_PackedSquareMatrix):
    """Square matrix that is zero below the diagonal, stored column by column."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, row: int, col: int) -> int | None:
        return col * (col - 1) // 2 + row - 1 if row <= col else None

    def __getitem__(self, position: tuple[int, int]) -> int:
        return self._get(position)

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        self._set(position, value)

    def rows(self) -> list[list[int]]:
        """Return the full matrix as a list of rows."""
        return self._rows()


def set_matrix_zeroes(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy with every row and column that holds a zero set to zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]