"""Breadth-first and depth-first traversal of graphs given as adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _check_start(matrix: Matrix, start: int) -> None:
    if not 0 <= start < len(matrix):
        raise IndexError(f"start vertex {start} is not in the graph")


def bfs(matrix: Matrix, start: int) -> list[int]:
    """Return vertices in breadth-first order from ``start``; nonzero entries are edges."""
    _check_start(matrix, start)
    visited = [False] * len(matrix)
    visited[start] = True
    order = [start]
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour, edge in enumerate(matrix[vertex]):
            if edge and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs(matrix: Matrix, start: int) -> list[int]:
    """Return vertices in depth-first order from ``start``; nonzero entries are edges."""
    _check_start(matrix, start)
    visited = [False] * len(matrix)
    order: list[int] = []

    def visit(vertex: int) -> None:
        visited[vertex] = True
        order.append(vertex)
        for neighbour, edge in enumerate(matrix[vertex]):
            if edge and not visited[neighbour]:
                visit(neighbour)

    visit(start)
    return order