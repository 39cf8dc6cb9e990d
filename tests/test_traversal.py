import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.traversal import bfs, dfs

GRAPH = [
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 1, 1, 0, 0, 0],
    [0, 1, 0, 0, 1, 0, 0],
    [0, 1, 0, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]


@st.composite
def symmetric_matrices(draw):
    n = draw(st.integers(1, 8))
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            if draw(st.booleans()):
                matrix[i][j] = matrix[j][i] = 1
    start = draw(st.integers(0, n - 1))
    return matrix, start


def test_bfs_source_example():
    assert bfs(GRAPH, 1) == [1, 2, 3, 4, 5, 6]


def test_dfs_source_example():
    assert dfs(GRAPH, 3) == [3, 1, 2, 4, 5, 6]


def test_isolated_vertex_is_not_reached():
    assert 0 not in bfs(GRAPH, 1)
    assert 0 not in dfs(GRAPH, 1)
    assert bfs(GRAPH, 0) == [0]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_out_of_range_start_raises(traverse):
    with pytest.raises(IndexError):
        traverse(GRAPH, 7)


@given(symmetric_matrices())
def test_bfs_and_dfs_reach_same_vertices(case):
    matrix, start = case
    breadth = bfs(matrix, start)
    depth = dfs(matrix, start)
    assert breadth[0] == start
    assert depth[0] == start
    assert len(breadth) == len(set(breadth))
    assert len(depth) == len(set(depth))
    assert set(breadth) == set(depth)


@given(symmetric_matrices())
def test_every_visited_vertex_after_start_has_an_earlier_neighbour(case):
    matrix, start = case
    for order in (bfs(matrix, start), dfs(matrix, start)):
        for position, vertex in enumerate(order[1:], start=1):
            assert any(matrix[earlier][vertex] for earlier in order[:position])