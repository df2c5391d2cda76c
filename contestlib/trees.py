"""Lowest common ancestors and heavy-light path sums on trees with vertices 0..n-1."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Tuple

from contestlib.segment_tree import SegmentTree


def _rooted(n: int, edges: Iterable[Tuple[int, int]], root: int):
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    if not 0 <= root < n:
        raise IndexError(f"root {root} outside 0..{n - 1}")
    edge_list = list(edges)
    if len(edge_list) != n - 1:
        raise ValueError("a tree on n vertices has n - 1 edges")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edge_list:
        adjacency[u].append(v)
        adjacency[v].append(u)
    parent = [-1] * n
    depth = [0] * n
    seen = [False] * n
    seen[root] = True
    order = []
    queue = deque([root])
    while queue:
        v = queue.popleft()
        order.append(v)
        for nxt in adjacency[v]:
            if not seen[nxt]:
                seen[nxt] = True
                parent[nxt] = v
                depth[nxt] = depth[v] + 1
                queue.append(nxt)
    if len(order) != n:
        raise ValueError("edges do not form a tree")
    return parent, depth, order


class LowestCommonAncestor:
    """Binary lifting over a rooted tree."""

    def __init__(self, n: int, edges: Iterable[Tuple[int, int]], root: int = 0) -> None:
        parent, self._depth, _ = _rooted(n, edges, root)
        first = [root if p == -1 else p for p in parent]
        self._up = [first]
        for _ in range(1, max(1, (n - 1).bit_length())):
            prev = self._up[-1]
            self._up.append([prev[p] for p in prev])

    def lca(self, u: int, v: int) -> int:
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        diff = self._depth[u] - self._depth[v]
        for row in self._up:
            if not diff:
                break
            if diff & 1:
                u = row[u]
            diff >>= 1
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._up[0][u]


class HeavyLightDecomposition:
    """Vertex values with point assignment and path-sum queries."""

    def __init__(self, n: int, edges: Iterable[Tuple[int, int]], root: int = 0) -> None:
        parent, depth, order = _rooted(n, edges, root)
        children: list[list[int]] = [[] for _ in range(n)]
        for v in order[1:]:
            children[parent[v]].append(v)
        size = [1] * n
        for v in reversed(order[1:]):
            size[parent[v]] += size[v]
        heavy = [max(kids, key=size.__getitem__, default=-1) for kids in children]

        top = [root] * n
        position = [0] * n
        stack = [root]
        counter = 0
        while stack:
            v = stack.pop()
            position[v] = counter
            counter += 1
            for child in reversed(children[v]):
                if child != heavy[v]:
                    top[child] = child
                    stack.append(child)
            if heavy[v] != -1:
                top[heavy[v]] = top[v]
                stack.append(heavy[v])

        self._parent = parent
        self._depth = depth
        self._top = top
        self._position = position
        self._tree = SegmentTree(n)

    def update(self, vertex: int, value: int) -> None:
        """Set the value stored at vertex."""
        self._tree.set(self._position[vertex], value)

    def path_sum(self, u: int, v: int) -> int:
        """Sum of vertex values on the path from u to v, both included."""
        top, pos, depth = self._top, self._position, self._depth
        total = 0
        while top[u] != top[v]:
            if depth[top[u]] < depth[top[v]]:
                u, v = v, u
            total += self._tree.sum(pos[top[u]], pos[u])
            u = self._parent[top[u]]
        if pos[u] > pos[v]:
            u, v = v, u
        return total + self._tree.sum(pos[u], pos[v])