import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.matrices import (
    DiagonalMatrix,
    LowerTriangularMatrix,
    UpperTriangularMatrix,
    set_matrix_zeroes,
)

FULL = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def _fill(matrix, values):
    for r, row in enumerate(values, start=1):
        for c, value in enumerate(row, start=1):
            matrix[r, c] = value
    return matrix


def test_diagonal_source_example():
    d = DiagonalMatrix(4)
    for i, value in enumerate([6, 7, 8, 9], start=1):
        d[i, i] = value
    assert d[1, 2] == 0
    assert d[3, 3] == 8
    assert d[2, 4] == 0
    assert d[4, 4] == 9
    assert d.rows() == [[6, 0, 0, 0], [0, 7, 0, 0], [0, 0, 8, 0], [0, 0, 0, 9]]


def test_diagonal_ignores_off_diagonal_writes():
    d = _fill(DiagonalMatrix(3), FULL)
    assert d.rows() == [[1, 0, 0], [0, 5, 0], [0, 0, 9]]


def test_lower_triangular_keeps_lower_part():
    m = _fill(LowerTriangularMatrix(3), FULL)
    assert m.rows() == [[1, 0, 0], [4, 5, 0], [7, 8, 9]]
    assert m[1, 2] == 0
    assert m[2, 1] == 4


def test_upper_triangular_keeps_upper_part():
    m = _fill(UpperTriangularMatrix(3), FULL)
    assert m.rows() == [[1, 2, 3], [0, 5, 6], [0, 0, 9]]
    assert m[2, 1] == 0
    assert m[1, 2] == 2


@pytest.mark.parametrize(
    "cls", [DiagonalMatrix, LowerTriangularMatrix, UpperTriangularMatrix]
)
def test_out_of_range_positions_raise(cls):
    m = cls(2)
    m[1, 1] = 4
    with pytest.raises(IndexError):
        m[0, 1]
    with pytest.raises(IndexError):
        m[3, 1] = 5
    assert m.rows() == [[4, 0], [0, 0]]


def test_negative_dimension_raises():
    with pytest.raises(ValueError):
        LowerTriangularMatrix(-1)


@given(st.integers(1, 6), st.data())
def test_triangular_round_trip(n, data):
    lower = LowerTriangularMatrix(n)
    upper = UpperTriangularMatrix(n)
    row = data.draw(st.integers(1, n))
    col = data.draw(st.integers(1, row))
    value = data.draw(st.integers(-100, 100))
    lower[row, col] = value
    upper[col, row] = value
    assert lower[row, col] == value
    assert upper[col, row] == value
    assert sum(map(sum, lower.rows())) == value
    assert sum(map(sum, upper.rows())) == value


def test_set_matrix_zeroes_source_example():
    matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    assert set_matrix_zeroes(matrix) == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]
    assert matrix == [[1, 1, 1], [1, 0, 1], [1, 1, 1]]


def test_set_matrix_zeroes_without_zeros_is_unchanged():
    assert set_matrix_zeroes(FULL) == FULL