"""Graph representations and classic traversals on vertices numbered 1..n."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Iterator, Mapping, Sequence

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]
Adjacency = Mapping[int, Sequence[int]]


class NotBipartiteError(ValueError):
    """Raised when a graph has an odd cycle and cannot be two-coloured."""


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"vertex count must not be negative, got {n}")


def _check_vertex(vertex: int, n: int, low: int = 1) -> None:
    if not low <= vertex <= n:
        raise ValueError(f"vertex {vertex} is outside the range {low}..{n}")


def adjacency_list(n: int, edges: Iterable[Edge]) -> dict[int, list[int]]:
    """Build an undirected adjacency list for vertices 1..n, keeping edge order."""
    _check_count(n)
    graph: dict[int, list[int]] = {vertex: [] for vertex in range(1, n + 1)}
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        graph[u].append(v)
        graph[v].append(u)
    return graph


def adjacency_matrix(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Build an (n+1) x (n+1) undirected 0/1 matrix; row and column 0 are included."""
    _check_count(n)
    matrix = [[0] * (n + 1) for _ in range(n + 1)]
    for u, v in edges:
        _check_vertex(u, n, low=0)
        _check_vertex(v, n, low=0)
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def bfs(adjacency: Adjacency, source: int) -> tuple[list[int], dict[int, int]]:
    """Breadth-first search from ``source``.

    Returns the visiting order and the level (edge distance) of every reached vertex.
    """
    if source not in adjacency:
        raise ValueError(f"source {source} is not a vertex of the graph")
    order: list[int] = []
    levels = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        order.append(current)
        for child in adjacency[current]:
            if child not in levels:
                levels[child] = levels[current] + 1
                queue.append(child)
    return order, levels


def dfs_order(adjacency: Adjacency, source: int) -> list[int]:
    """Return vertices in the order a recursive depth-first search enters them."""
    if source not in adjacency:
        raise ValueError(f"source {source} is not a vertex of the graph")
    visited = {source}
    order = [source]
    stack: list[Iterator[int]] = [iter(adjacency[source])]
    while stack:
        for child in stack[-1]:
            if child not in visited:
                visited.add(child)
                order.append(child)
                stack.append(iter(adjacency[child]))
                break
        else:
            stack.pop()
    return order


def _components(graph: Mapping[int, list[int]]) -> Iterator[list[int]]:
    seen: set[int] = set()
    for start in graph:
        if start in seen:
            continue
        component = dfs_order(graph, start)
        seen.update(component)
        yield component


def count_connected_components(n: int, edges: Iterable[Edge]) -> int:
    """Count the connected components of an undirected graph on 1..n."""
    return sum(1 for _ in _components(adjacency_list(n, edges)))


def count_cyclic_components(n: int, edges: Iterable[Edge]) -> int:
    """Count components that contain a cycle.

    Self-loops and parallel edges count as cycles.
    """
    graph = adjacency_list(n, edges)
    count = 0
    for component in _components(graph):
        edge_count = sum(len(graph[vertex]) for vertex in component) // 2
        if edge_count >= len(component):
            count += 1
    return count


def bipartition(n: int, edges: Iterable[Edge]) -> tuple[list[int], list[int]]:
    """Split vertices 1..n into two sides so that every edge crosses sides.

    The lowest vertex of each component goes to the first side.
    Raises NotBipartiteError when that is impossible.
    """
    graph = adjacency_list(n, edges)
    colour: dict[int, int] = {}
    for start in graph:
        if start in colour:
            continue
        colour[start] = 1
        stack = [start]
        while stack:
            vertex = stack.pop()
            for child in graph[vertex]:
                if child not in colour:
                    colour[child] = 3 - colour[vertex]
                    stack.append(child)
                elif colour[child] == colour[vertex]:
                    raise NotBipartiteError(
                        f"edge {vertex}-{child} joins two vertices of the same side"
                    )
    first = [vertex for vertex in graph if colour[vertex] == 1]
    second = [vertex for vertex in graph if colour[vertex] == 2]
    return first, second


def dijkstra(
    n: int, edges: Iterable[WeightedEdge], source: int
) -> dict[int, int | None]:
    """Shortest distances from ``source`` along directed weighted edges.

    Unreachable vertices map to None. Weights must not be negative.
    """
    _check_count(n)
    _check_vertex(source, n)
    graph: dict[int, list[tuple[int, int]]] = {v: [] for v in range(1, n + 1)}
    for u, v, weight in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        if weight < 0:
            raise ValueError(f"edge {u}->{v} has negative weight {weight}")
        graph[u].append((v, weight))

    dist: dict[int, int] = {source: 0}
    heap = [(0, source)]
    while heap:
        d, vertex = heapq.heappop(heap)
        if d > dist[vertex]:
            continue
        for child, weight in graph[vertex]:
            candidate = d + weight
            if child not in dist or candidate < dist[child]:
                dist[child] = candidate
                heapq.heappush(heap, (candidate, child))
    return {vertex: dist.get(vertex) for vertex in range(1, n + 1)}


def floyd_warshall(
    n: int, edges: Iterable[WeightedEdge]
) -> dict[int, dict[int, int | None]]:
    """All-pairs shortest distances along directed weighted edges.

    A later edge between the same pair replaces an earlier one. Unreachable
    pairs map to None.
    """
    _check_count(n)
    vertices = range(1, n + 1)
    dist: dict[int, dict[int, float]] = {
        i: {j: 0 if i == j else math.inf for j in vertices} for i in vertices
    }
    for u, v, weight in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        dist[u][v] = weight
    for k in vertices:
        row_k = dist[k]
        for i in vertices:
            row_i = dist[i]
            through = row_i[k]
            if through == math.inf:
                continue
            for j in vertices:
                candidate = through + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate
    return {
        i: {j: None if d == math.inf else int(d) for j, d in row.items()}
        for i, row in dist.items()
    }