"""Minimum spanning trees by Prim's and Kruskal's algorithms."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from math import inf
from operator import attrgetter


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between ``u`` and ``v``."""

    u: Hashable
    v: Hashable
    cost: float


class DisjointSet:
    """Union-find over arbitrary hashable items, with union by size and path compression.

    Items are added on first use.
    """

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        for item in items:
            self.find(item)

    def find(self, u: Hashable) -> Hashable:
        """Return the representative of the set holding ``u``."""
        if u not in self._parent:
            self._parent[u] = u
            self._size[u] = 1
            return u
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while u != root:
            following = self._parent[u]
            self._parent[u] = root
            u = following
        return root

    def union(self, u: Hashable, v: Hashable) -> bool:
        """Join the sets of ``u`` and ``v``; return False if they were already one set."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] > self._size[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_u] = root_v
        self._size[root_v] += self._size[root_u]
        return True


def prims_mst(cost: Sequence[Sequence[float]]) -> list[Edge]:
    """Return the edges of a minimum spanning tree of a symmetric cost matrix.

    Vertices are the matrix indices and ``math.inf`` marks a missing edge.
    The tree starts from the cheapest edge of the graph. Raises ValueError if
    the graph is not connected.
    """
    n = len(cost)
    if any(len(row) != n for row in cost):
        raise ValueError("cost matrix must be square")
    if n < 2:
        return []
    best = inf
    u = v = -1
    for i in range(n):
        for j in range(i + 1, n):
            if cost[i][j] < best:
                best, u, v = cost[i][j], i, j
    if best == inf:
        raise ValueError("graph is not connected")
    tree = [Edge(u, v, best)]
    near = {
        k: (u if cost[k][u] < cost[k][v] else v) for k in range(n) if k not in (u, v)
    }
    while near:
        k = min(near, key=lambda j: cost[j][near[j]])
        weight = cost[k][near[k]]
        if weight == inf:
            raise ValueError("graph is not connected")
        tree.append(Edge(k, near.pop(k), weight))
        for j in near:
            if cost[j][k] < cost[j][near[j]]:
                near[j] = k
    return tree


def kruskals_mst(edges: Iterable[Edge], vertex_count: int) -> list[Edge]:
    """Return a minimum spanning tree over ``vertex_count`` vertices from an edge list.

    Edges are taken cheapest first, in input order among equal costs. Raises
    ValueError if the edges do not connect that many vertices.
    """
    if vertex_count < 1:
        raise ValueError("a spanning tree needs at least one vertex")
    needed = vertex_count - 1
    forest = DisjointSet()
    tree: list[Edge] = []
    for edge in sorted(edges, key=attrgetter("cost")):
        if len(tree) == needed:
            break
        if forest.union(edge.u, edge.v):
            tree.append(edge)
    if len(tree) < needed:
        raise ValueError("graph is not connected")
    return tree