"""Depth-first computations on trees with vertices numbered 1..n."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from algonotes.graphs import adjacency_list

Edge = tuple[int, int]

MOD = 10**9 + 7


def _rooted(
    n: int, edges: Iterable[Edge], root: int
) -> tuple[list[int], dict[int, int | None], dict[int, list[int]]]:
    """Root the tree: return preorder, parent map and child lists of reached vertices."""
    graph = adjacency_list(n, edges)
    if root not in graph:
        raise ValueError(f"root {root} is outside the range 1..{n}")
    parent: dict[int, int | None] = {root: None}
    children: dict[int, list[int]] = {}
    order: list[int] = []
    stack = [root]
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        kids = [child for child in graph[vertex] if child not in parent]
        for child in kids:
            parent[child] = vertex
        children[vertex] = kids
        stack.extend(reversed(kids))
    return order, parent, children


def depths_and_heights(
    n: int, edges: Iterable[Edge], root: int = 1
) -> tuple[dict[int, int], dict[int, int]]:
    """Return the depth and the height of every vertex when rooted at ``root``."""
    order, _, children = _rooted(n, edges, root)
    depth = {vertex: 0 for vertex in range(1, n + 1)}
    height = dict(depth)
    for vertex in order:
        for child in children[vertex]:
            depth[child] = depth[vertex] + 1
    for vertex in reversed(order):
        for child in children[vertex]:
            height[vertex] = max(height[vertex], height[child] + 1)
    return depth, height


def tree_diameter(n: int, edges: Iterable[Edge]) -> int:
    """Return the number of edges on the longest path of the tree."""
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    edges = list(edges)
    depth, _ = depths_and_heights(n, edges, 1)
    farthest = max(depth, key=lambda vertex: (depth[vertex], -vertex))
    depth, _ = depths_and_heights(n, edges, farthest)
    return max(depth.values())


def _subtree_totals(
    n: int, edges: Iterable[Edge], values: Sequence[int], root: int
) -> dict[int, int]:
    order, _, children = _rooted(n, edges, root)
    totals = {vertex: 0 for vertex in range(1, n + 1)}
    for vertex in reversed(order):
        totals[vertex] = values[vertex - 1] + sum(totals[c] for c in children[vertex])
    return totals


def max_split_product(n: int, edges: Iterable[Edge], values: Sequence[int]) -> int:
    """Best (sum of one part * sum of the other) mod 1e9+7 over single edge removals.

    ``values[i - 1]`` is the value of vertex i. The product is reduced modulo
    1e9+7 before the maximum is taken.
    """
    if len(values) != n:
        raise ValueError(f"expected {n} vertex values, got {len(values)}")
    if n < 1:
        return 0
    totals = _subtree_totals(n, edges, values, 1)
    whole = totals[1]
    return max(
        (totals[v] * (whole - totals[v]) % MOD for v in range(2, n + 1)), default=0
    )


def lowest_common_ancestor(
    n: int, edges: Iterable[Edge], x: int, y: int, root: int = 1
) -> int:
    """Return the deepest vertex that is an ancestor of both ``x`` and ``y``."""
    _, parent, _ = _rooted(n, edges, root)

    def path(vertex: int) -> list[int]:
        if vertex not in parent:
            raise ValueError(f"vertex {vertex} is not connected to root {root}")
        trail: list[int] = []
        current: int | None = vertex
        while current is not None:
            trail.append(current)
            current = parent[current]
        trail.reverse()
        return trail

    ancestor = root
    for a, b in zip(path(x), path(y)):
        if a != b:
            break
        ancestor = a
    return ancestor


def subtree_stats(
    n: int, edges: Iterable[Edge], root: int = 1
) -> dict[int, tuple[int, int]]:
    """Map each vertex to (sum of labels, count of even labels) in its subtree."""
    order, _, children = _rooted(n, edges, root)
    stats = {vertex: (0, 0) for vertex in range(1, n + 1)}
    for vertex in reversed(order):
        total = vertex
        evens = 1 if vertex % 2 == 0 else 0
        for child in children[vertex]:
            child_total, child_evens = stats[child]
            total += child_total
            evens += child_evens
        stats[vertex] = (total, evens)
    return stats