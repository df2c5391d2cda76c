"""Shortest paths on weighted directed graphs with vertices 0..n-1."""

from __future__ import annotations

import heapq
import math
from typing import Iterable, Optional, Tuple

Edge = Tuple[int, int, int]


class NegativeCycleError(ValueError):
    """A negative cycle is reachable from the source vertex."""


def _check_vertex(n: int, v: int) -> None:
    if not 0 <= v < n:
        raise IndexError(f"vertex {v} outside 0..{n - 1}")


def bellman_ford(n: int, edges: Iterable[Edge], source: int) -> list:
    """Distances from source; math.inf marks unreachable vertices.

    Negative weights are allowed; raises NegativeCycleError when a
    negative cycle can be reached from source.
    """
    _check_vertex(n, source)
    edge_list = list(edges)
    dist: list = [math.inf] * n
    dist[source] = 0
    for iteration in range(1, n + 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] == math.inf:
                continue
            if dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
        if iteration == n:
            raise NegativeCycleError("negative cycle reachable from source")
    return dist


def _run_dijkstra(
    n: int, edges: Iterable[Edge], source: int
) -> tuple[list, list[Optional[int]]]:
    _check_vertex(n, source)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        if w < 0:
            raise ValueError("Dijkstra requires non-negative weights")
        adjacency[u].append((v, w))
    dist: list = [math.inf] * n
    prev: list[Optional[int]] = [None] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        cost, v = heapq.heappop(heap)
        if cost != dist[v]:
            continue
        for nxt, w in adjacency[v]:
            if dist[nxt] > cost + w:
                dist[nxt] = cost + w
                prev[nxt] = v
                heapq.heappush(heap, (cost + w, nxt))
    return dist, prev


def dijkstra(n: int, edges: Iterable[Edge], source: int) -> list:
    """Distances from source with non-negative weights; math.inf if unreachable."""
    return _run_dijkstra(n, edges, source)[0]


def dijkstra_path(n: int, edges: Iterable[Edge], source: int, target: int) -> list[int]:
    """Vertices of one shortest path from source to target, both included."""
    _check_vertex(n, target)
    dist, prev = _run_dijkstra(n, edges, source)
    if dist[target] == math.inf:
        raise ValueError(f"vertex {target} is unreachable from {source}")
    path = [target]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return path


def floyd_warshall(n: int, edges: Iterable[Edge]) -> list[list]:
    """All-pairs distance matrix; math.inf where no path exists."""
    dist: list[list] = [[math.inf] * n for _ in range(n)]
    for i, row in enumerate(dist):
        row[i] = 0
    for u, v, w in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        if w < dist[u][v]:
            dist[u][v] = w
    for k in range(n):
        via = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, rest in enumerate(via):
                if to_k + rest < row[j]:
                    row[j] = to_k + rest
    return dist