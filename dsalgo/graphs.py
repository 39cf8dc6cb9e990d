"""Cycle detection, topological sorting, distinct islands and bipartite checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Adjacency = Sequence[Sequence[int]]

_UNCOLOURED = -1
_UNSEEN, _ON_PATH, _DONE = 0, 1, 2


def has_cycle_undirected_bfs(adjacency: Adjacency) -> bool:
    """Return True if the undirected graph has a cycle, searching breadth-first."""
    visited = [False] * len(adjacency)
    for source in range(len(adjacency)):
        if visited[source]:
            continue
        visited[source] = True
        queue = deque([(source, -1)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False


def has_cycle_undirected_dfs(adjacency: Adjacency) -> bool:
    """Return True if the undirected graph has a cycle, searching depth-first."""
    visited = [False] * len(adjacency)

    def visit(node: int, parent: int) -> bool:
        visited[node] = True
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                if visit(neighbour, node):
                    return True
            elif neighbour != parent:
                return True
        return False

    return any(not visited[v] and visit(v, -1) for v in range(len(adjacency)))


def _dfs_order(adjacency: Adjacency) -> list[int] | None:
    """Return vertices by finishing time, or None when a back edge is met."""
    state = [_UNSEEN] * len(adjacency)
    finished: list[int] = []

    def visit(node: int) -> bool:
        state[node] = _ON_PATH
        for neighbour in adjacency[node]:
            if state[neighbour] == _ON_PATH:
                return False
            if state[neighbour] == _UNSEEN and not visit(neighbour):
                return False
        state[node] = _DONE
        finished.append(node)
        return True

    for vertex in range(len(adjacency)):
        if state[vertex] == _UNSEEN and not visit(vertex):
            return None
    return finished


def _kahn_order(adjacency: Adjacency) -> list[int]:
    indegree = [0] * len(adjacency)
    for targets in adjacency:
        for target in targets:
            indegree[target] += 1
    queue = deque(v for v, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in adjacency[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def has_cycle_directed_dfs(adjacency: Adjacency) -> bool:
    """Return True if the directed graph has a cycle, looking for back edges."""
    return _dfs_order(adjacency) is None


def has_cycle_directed_bfs(adjacency: Adjacency) -> bool:
    """Return True if Kahn's algorithm cannot place every vertex."""
    return len(_kahn_order(adjacency)) != len(adjacency)


def topological_sort_bfs(adjacency: Adjacency) -> list[int]:
    """Return a topological order by Kahn's algorithm; raise ValueError on a cycle."""
    order = _kahn_order(adjacency)
    if len(order) != len(adjacency):
        raise ValueError("graph has a cycle")
    return order


def topological_sort_dfs(adjacency: Adjacency) -> list[int]:
    """Return vertices by decreasing finishing time; raise ValueError on a cycle."""
    finished = _dfs_order(adjacency)
    if finished is None:
        raise ValueError("graph has a cycle")
    return finished[::-1]


def count_distinct_islands(grid: Sequence[Sequence[int]]) -> int:
    """Count islands of 4-connected 1 cells, treating translated copies as one shape."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen = [[False] * cols for _ in range(rows)]
    shapes: set[frozenset[tuple[int, int]]] = set()
    for r0 in range(rows):
        for c0 in range(cols):
            if seen[r0][c0] or grid[r0][c0] != 1:
                continue
            seen[r0][c0] = True
            stack = [(r0, c0)]
            cells: list[tuple[int, int]] = []
            while stack:
                r, c = stack.pop()
                cells.append((r - r0, c - c0))
                for nr, nc in ((r - 1, c), (r, c - 1), (r + 1, c), (r, c + 1)):
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and not seen[nr][nc]
                        and grid[nr][nc] == 1
                    ):
                        seen[nr][nc] = True
                        stack.append((nr, nc))
            shapes.add(frozenset(cells))
    return len(shapes)


def is_bipartite_bfs(adjacency: Adjacency) -> bool:
    """Return True if the graph can be two-coloured, colouring breadth-first."""
    colour = [_UNCOLOURED] * len(adjacency)
    for start in range(len(adjacency)):
        if colour[start] != _UNCOLOURED:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if colour[neighbour] == _UNCOLOURED:
                    colour[neighbour] = 1 - colour[node]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def is_bipartite_dfs(adjacency: Adjacency) -> bool:
    """Return True if the graph can be two-coloured, colouring depth-first."""
    colour = [_UNCOLOURED] * len(adjacency)

    def paint(node: int, shade: int) -> bool:
        colour[node] = shade
        for neighbour in adjacency[node]:
            if colour[neighbour] == _UNCOLOURED:
                if not paint(neighbour, 1 - shade):
                    return False
            elif colour[neighbour] == shade:
                return False
        return True

    return all(
        colour[v] != _UNCOLOURED or paint(v, 0) for v in range(len(adjacency))
    )