"""Traversals, disjoint sets, minimum spanning trees, topological order and SCCs."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Mapping, Sequence, Tuple, Union

Adjacency = Union[Sequence[Iterable[int]], Mapping[int, Iterable[int]]]


def dfs_order(adjacency: Adjacency, start: int) -> list[int]:
    """Vertices reachable from start in depth-first preorder."""
    visited = {start}
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(iter(adjacency[nxt]))
                break
        else:
            stack.pop()
    return order


def bfs_order(adjacency: Adjacency, start: int) -> list[int]:
    """Vertices reachable from start in breadth-first order."""
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        v = queue.popleft()
        order.append(v)
        for nxt in adjacency[v]:
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return order


class DisjointSet:
    """Union-find over 0..n-1 with path compression."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))

    def find(self, v: int) -> int:
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of u and v; False if they were already one set."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        self._parent[u] = v
        return True


def kruskal(n: int, edges: Iterable[Tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning forest of (u, v, weight) edges."""
    sets = DisjointSet(n)
    return sum(
        w for w, u, v in sorted((w, u, v) for u, v, w in edges) if sets.union(u, v)
    )


def topological_sort(n: int, edges: Iterable[Tuple[int, int]]) -> list[int]:
    """Kahn's order of vertices 0..n-1; raises ValueError on a cycle."""
    graph: list[list[int]] = [[] for _ in range(n)]
    indegree = [0] * n
    for u, v in edges:
        graph[u].append(v)
        indegree[v] += 1
    queue = deque(v for v in range(n) if not indegree[v])
    order = []
    while queue:
        v = queue.popleft()
        order.append(v)
        for nxt in graph[v]:
            indegree[nxt] -= 1
            if not indegree[nxt]:
                queue.append(nxt)
    if len(order) != n:
        raise ValueError("graph has a cycle")
    return order


def strongly_connected_components(
    n: int, edges: Iterable[Tuple[int, int]]
) -> list[list[int]]:
    """Strongly connected components, listed in topological order."""
    graph: list[list[int]] = [[] for _ in range(n)]
    reverse: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        graph[u].append(v)
        reverse[v].append(u)

    seen = [False] * n
    finished: list[int] = []
    for root in range(n):
        if seen[root]:
            continue
        seen[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            v, neighbours = stack[-1]
            for nxt in neighbours:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append((nxt, iter(graph[nxt])))
                    break
            else:
                stack.pop()
                finished.append(v)

    component = [-1] * n
    components: list[list[int]] = []
    for root in reversed(finished):
        if component[root] != -1:
            continue
        cid = len(components)
        component[root] = cid
        members = [root]
        stack = [iter(reverse[root])]
        while stack:
            for nxt in stack[-1]:
                if component[nxt] == -1:
                    component[nxt] = cid
                    members.append(nxt)
                    stack.append(iter(reverse[nxt]))
                    break
            else:
                stack.pop()
        components.append(members)
    return components