"""Maximum flow (Dinic) and minimum-cost flow on graphs with vertices 0..n-1."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass
class _FlowEdge:
    to: int
    rev: int
    capacity: int
    flow: int = 0


class Dinic:
    """Dinic's maximum flow; add an undirected edge with equal capacities both ways."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._graph: list[list[_FlowEdge]] = [[] for _ in range(n)]
        self._level = [0] * n
        self._next = [0] * n

    def add_edge(self, s: int, e: int, capacity: int, reverse_capacity: int = 0) -> None:
        self._graph[s].append(_FlowEdge(e, len(self._graph[e]), capacity))
        self._graph[e].append(_FlowEdge(s, len(self._graph[s]) - 1, reverse_capacity))

    def _bfs(self, s: int, t: int) -> bool:
        level = self._level
        level[:] = [0] * self.n
        level[s] = 1
        queue = deque([s])
        while queue:
            v = queue.popleft()
            for e in self._graph[v]:
                if not level[e.to] and e.capacity - e.flow > 0:
                    level[e.to] = level[v] + 1
                    queue.append(e.to)
        return level[t] != 0

    def _dfs(self, v: int, t: int, pushed):
        if v == t or pushed == 0:
            return pushed
        edges = self._graph[v]
        while self._next[v] < len(edges):
            e = edges[self._next[v]]
            residual = e.capacity - e.flow
            if self._level[e.to] == self._level[v] + 1 and residual:
                now = self._dfs(e.to, t, min(pushed, residual))
                if now:
                    e.flow += now
                    self._graph[e.to][e.rev].flow -= now
                    return now
            self._next[v] += 1
        return 0

    def maximum_flow(self, s: int, t: int) -> int:
        """Push as much additional flow from s to t as possible; return it."""
        if s == t:
            raise ValueError("source and sink must differ")
        flow = 0
        while self._bfs(s, t):
            self._next[:] = [0] * self.n
            while augment := self._dfs(s, t, math.inf):
                flow += augment
        return flow

    def minimum_cut(
        self, s: int, t: int
    ) -> tuple[int, list[int], list[int], list[tuple[int, int]]]:
        """Return (cut value, source side, sink side, edges crossing the cut)."""
        flow = self.maximum_flow(s, t)
        self._bfs(s, t)
        source_side = [v for v in range(self.n) if self._level[v]]
        sink_side = [v for v in range(self.n) if not self._level[v]]
        crossing = [
            (v, e.to)
            for v in source_side
            for e in self._graph[v]
            if e.capacity != 0 and not self._level[e.to]
        ]
        return flow, source_side, sink_side, crossing


@dataclass
class _CostEdge:
    to: int
    rev: int
    capacity: int
    cost: int


class MinCostFlow:
    """Successive shortest paths (SPFA) minimum-cost flow."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._graph: list[list[_CostEdge]] = [[] for _ in range(n)]

    def add_edge(self, s: int, e: int, capacity: int, cost: int) -> None:
        self._graph[s].append(_CostEdge(e, len(self._graph[e]), capacity, cost))
        self._graph[e].append(_CostEdge(s, len(self._graph[s]) - 1, 0, -cost))

    def _shortest_path(self, s: int, t: int):
        dist: list = [math.inf] * self.n
        prev = [-1] * self.n
        via = [-1] * self.n
        queued = [False] * self.n
        dist[s] = 0
        queued[s] = True
        queue = deque([s])
        while queue:
            v = queue.popleft()
            queued[v] = False
            for i, e in enumerate(self._graph[v]):
                if e.capacity > 0 and dist[e.to] > dist[v] + e.cost:
                    dist[e.to] = dist[v] + e.cost
                    prev[e.to] = v
                    via[e.to] = i
                    if not queued[e.to]:
                        queued[e.to] = True
                        queue.append(e.to)
        if dist[t] == math.inf:
            return None
        return dist[t], prev, via

    def run(self, s: int, t: int, limit: Optional[int] = None) -> tuple[int, int]:
        """Send up to limit units (unbounded if None); return (flow, cost)."""
        if s == t:
            raise ValueError("source and sink must differ")
        if limit is not None and limit < 0:
            raise ValueError("limit must be non-negative")
        flow = cost = 0
        while limit is None or limit > 0:
            found = self._shortest_path(s, t)
            if found is None:
                break
            length, prev, via = found
            path = []
            v = t
            while v != s:
                path.append(self._graph[prev[v]][via[v]])
                v = prev[v]
            pushed = min(e.capacity for e in path)
            if limit is not None:
                pushed = min(pushed, limit)
                limit -= pushed
            for e in path:
                e.capacity -= pushed
                self._graph[e.to][e.rev].capacity += pushed
            flow += pushed
            cost += pushed * length
        return flow, cost