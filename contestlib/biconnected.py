"""Cut vertices, bridges and vertex-biconnected components of undirected graphs."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Optional


@dataclass
class _DfsTree:
    order: list[int]
    low: list[int]
    parent: list[int]
    children: list[list[int]]


class BiconnectedComponents:
    """Undirected multigraph on vertices 0..n-1; self loops are rejected."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._edges: Counter = Counter()
        self._tree: Optional[_DfsTree] = None

    def add_edge(self, u: int, v: int) -> None:
        for x in (u, v):
            if not 0 <= x < self.n:
                raise IndexError(f"vertex {x} outside 0..{self.n - 1}")
        if u == v:
            raise ValueError("self loops are not supported")
        self._adj[u].append(v)
        self._adj[v].append(u)
        self._edges[(min(u, v), max(u, v))] += 1
        self._tree = None

    def _analyse(self) -> _DfsTree:
        if self._tree is not None:
            return self._tree
        n = self.n
        order = [0] * n
        low = [0] * n
        parent = [-1] * n
        children: list[list[int]] = [[] for _ in range(n)]
        counter = 0
        for root in range(n):
            if order[root]:
                continue
            counter += 1
            order[root] = low[root] = counter
            stack = [(root, iter(self._adj[root]))]
            while stack:
                v, neighbours = stack[-1]
                for nxt in neighbours:
                    if nxt == parent[v]:
                        continue
                    if not order[nxt]:
                        parent[nxt] = v
                        children[v].append(nxt)
                        counter += 1
                        order[nxt] = low[nxt] = counter
                        stack.append((nxt, iter(self._adj[nxt])))
                        break
                    low[v] = min(low[v], order[nxt])
                else:
                    stack.pop()
                    if stack:
                        up = stack[-1][0]
                        low[up] = min(low[up], low[v])
        self._tree = _DfsTree(order, low, parent, children)
        return self._tree

    def cut_vertices(self) -> list[int]:
        """Vertices whose removal disconnects their component, ascending."""
        t = self._analyse()
        result = []
        for v, kids in enumerate(t.children):
            if t.parent[v] == -1:
                is_cut = len(kids) > 1
            else:
                is_cut = any(t.low[c] >= t.order[v] for c in kids)
            if is_cut:
                result.append(v)
        return result

    def cut_edges(self) -> list[tuple[int, int]]:
        """Bridges as sorted (smaller, larger) pairs; parallel edges are never bridges."""
        t = self._analyse()
        bridges = []
        for child, up in enumerate(t.parent):
            if up == -1:
                continue
            key = (min(up, child), max(up, child))
            if t.low[child] > t.order[up] and self._edges[key] == 1:
                bridges.append(key)
        return sorted(bridges)

    def vertex_components(self) -> list[list[int]]:
        """For each vertex, the ids of the biconnected components holding it."""
        t = self._analyse()
        components: list[list[int]] = [[] for _ in range(self.n)]
        counter = 0
        for root in range(self.n):
            if t.parent[root] != -1:
                continue
            stack: list = [(root, iter(t.children[root]), None)]
            while stack:
                v, kids, current = stack[-1]
                child = next(kids, None)
                if child is None:
                    stack.pop()
                    continue
                if t.order[v] <= t.low[child]:
                    cid = counter
                    counter += 1
                    components[v].append(cid)
                    components[child].append(cid)
                    stack.append((child, iter(t.children[child]), cid))
                else:
                    if current is not None:
                        components[child].append(current)
                    stack.append((child, iter(t.children[child]), current))
        for ids in components:
            if not ids:
                ids.append(counter)
                counter += 1
        return components