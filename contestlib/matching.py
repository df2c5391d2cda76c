"""Hopcroft-Karp bipartite matching and minimum vertex cover."""

from __future__ import annotations

from collections import deque


class HopcroftKarp:
    """Bipartite graph with left vertices 0..n-1 and right vertices 0..m-1."""

    def __init__(self, n: int, m: int) -> None:
        self.n = n
        self.m = m
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self._dist = [0] * n
        self._left = [-1] * n
        self._right = [-1] * m
        self._visited = [False] * n

    def add_edge(self, left: int, right: int) -> None:
        if not 0 <= left < self.n or not 0 <= right < self.m:
            raise IndexError(f"edge ({left}, {right}) out of range")
        self._graph[left].append(right)

    def _bfs(self) -> bool:
        found = False
        self._dist = [1 if match == -1 else 0 for match in self._left]
        queue = deque(v for v, match in enumerate(self._left) if match == -1)
        while queue:
            v = queue.popleft()
            for r in self._graph[v]:
                partner = self._right[r]
                if partner == -1:
                    found = True
                elif not self._dist[partner]:
                    self._dist[partner] = self._dist[v] + 1
                    queue.append(partner)
        return found

    def _dfs(self, v: int) -> bool:
        if self._visited[v]:
            return False
        self._visited[v] = True
        for r in self._graph[v]:
            partner = self._right[r]
            if partner == -1 or (
                not self._visited[partner]
                and self._dist[partner] == self._dist[v] + 1
                and self._dfs(partner)
            ):
                self._left[v] = r
                self._right[r] = v
                return True
        return False

    def maximum_matching(self) -> int:
        """Size of a maximum matching."""
        result = 0
        self._left = [-1] * self.n
        self._right = [-1] * self.m
        while self._bfs():
            self._visited = [False] * self.n
            for v in range(self.n):
                if self._left[v] == -1 and self._dfs(v):
                    result += 1
        return result

    def maximum_matching_edges(self) -> list[tuple[int, int]]:
        """Pairs (left, right) of a maximum matching."""
        self.maximum_matching()
        return [(v, r) for v, r in enumerate(self._left) if r != -1]

    def minimum_vertex_cover(self) -> tuple[list[int], list[int], int]:
        """Return (left vertices, right vertices, size) of a minimum vertex cover."""
        self.maximum_matching()
        track = [False] * (self.n + self.m)
        stack = [v for v, r in enumerate(self._left) if r == -1]
        while stack:
            v = stack.pop()
            if track[v]:
                continue
            track[v] = True
            for r in self._graph[v]:
                track[self.n + r] = True
                if self._right[r] != -1:
                    stack.append(self._right[r])
        left = [v for v in range(self.n) if not track[v]]
        right = [r for r in range(self.m) if track[self.n + r]]
        return left, right, len(left) + len(right)