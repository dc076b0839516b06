"""Graph traversal, ordering and shortest-path algorithms.

Vertices are the integers ``0 .. n-1``.  Where a distance cannot be reached,
``None`` stands in for infinity, both in inputs and in results.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from functools import lru_cache


class Graph:
    """A directed graph stored as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge from u to v."""
        if not (0 <= u < self.vertices and 0 <= v < self.vertices):
            raise IndexError(f"edge ({u}, {v}) has a vertex outside the graph")
        self.adjacency[u].append(v)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from start."""
        if not 0 <= start < self.vertices:
            raise IndexError(f"vertex {start} is outside the graph")
        visited = [False] * self.vertices
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self.adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order


def bfs_distances(
    adjacency: Sequence[Iterable[int]], source: int
) -> tuple[list[int], list[int | None]]:
    """Breadth-first search that also counts edges from the source.

    Returns the visiting order and, for each vertex, its edge distance from
    the source or None if it cannot be reached.
    """
    n = len(adjacency)
    distances: list[int | None] = [None] * n
    distances[source] = 0
    order = [source]
    for node in order:
        for neighbour in adjacency[node]:
            if distances[neighbour] is None:
                distances[neighbour] = distances[node] + 1
                order.append(neighbour)
    return order, distances


def topological_sort(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Kahn's algorithm.

    Vertices caught in a cycle never reach in-degree zero and are left out,
    so the result is shorter than the vertex count when the graph is cyclic.
    """
    n = len(adjacency)
    edges = [list(targets) for targets in adjacency]
    indegree = [0] * n
    for targets in edges:
        for target in targets:
            indegree[target] += 1
    queue = deque(node for node in range(n) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in edges[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def _finite_or_none(values: Iterable[float]) -> list[int | None]:
    return [None if value == math.inf else value for value in values]


def dijkstra_dense(
    adjacency: Sequence[Iterable[tuple[int, int]]], source: int
) -> list[int | None]:
    """O(V^2) Dijkstra over a weight matrix built from (target, weight) lists.

    A weight of zero counts as no edge, and a later edge between the same
    pair of vertices replaces an earlier one.
    """
    n = len(adjacency)
    weights = [[0] * n for _ in range(n)]
    for u, edges in enumerate(adjacency):
        for v, w in edges:
            weights[u][v] = w

    distance: list[float] = [math.inf] * n
    distance[source] = 0
    visited = [False] * n
    for _ in range(n):
        nearest = min(
            (node for node in range(n) if not visited[node]),
            key=distance.__getitem__,
        )
        visited[nearest] = True
        for k in range(n):
            w = weights[nearest][k]
            if not visited[k] and w != 0 and distance[k] > distance[nearest] + w:
                distance[k] = distance[nearest] + w
    return _finite_or_none(distance)


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, int]]], source: int
) -> list[int | None]:
    """Dijkstra with a binary heap over (target, weight) adjacency lists."""
    n = len(adjacency)
    distance: list[float] = [math.inf] * n
    distance[source] = 0
    visited = [False] * n
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        for neighbour, w in adjacency[node]:
            if distance[neighbour] > d + w:
                distance[neighbour] = d + w
                heapq.heappush(heap, (distance[neighbour], neighbour))
    return _finite_or_none(distance)


def floyd_warshall(graph: Sequence[Sequence[int | None]]) -> list[list[int | None]]:
    """All-pairs shortest paths from a square weight matrix (None = no edge)."""
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("weight matrix must be square")
    dist = [[math.inf if w is None else w for w in row] for row in graph]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for j in range(n):
                if via + through[j] < row[j]:
                    row[j] = via + through[j]
    return [_finite_or_none(row) for row in dist]


def articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, in ascending order, the cut vertices of an undirected graph."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for x, y in edges:
        adjacency[x].append(y)
        adjacency[y].append(x)

    disc = [0] * n
    low = [0] * n
    cut: set[int] = set()
    timer = 0
    for root in range(n):
        if disc[root]:
            continue
        timer += 1
        disc[root] = low[root] = timer
        root_children = 0
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            descended = False
            for child in neighbours:
                if disc[child] == 0:
                    timer += 1
                    disc[child] = low[child] = timer
                    if node == root:
                        root_children += 1
                    stack.append((child, node, iter(adjacency[child])))
                    descended = True
                    break
                if child != parent:
                    low[node] = min(low[node], disc[child])
            if descended:
                continue
            stack.pop()
            if stack:
                up = stack[-1][0]
                low[up] = min(low[up], low[node])
                if up != root and disc[up] <= low[node]:
                    cut.add(up)
        if root_children > 1:
            cut.add(root)
    return sorted(cut)


def tsp_min_cost(dists: Sequence[Sequence[int]]) -> int:
    """Cost of the cheapest tour that starts and ends at vertex 0."""
    n = len(dists)
    if n == 0:
        raise ValueError("at least one city is required")
    full = (1 << n) - 1

    @lru_cache(maxsize=None)
    def best(node: int, mask: int) -> float:
        if mask == full:
            return dists[node][0]
        result = math.inf
        for nxt in range(n):
            bit = 1 << nxt
            if nxt != node and not mask & bit:
                result = min(result, dists[node][nxt] + best(nxt, mask | bit))
        return result

    return best(0, 1)