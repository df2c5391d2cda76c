"""Persistent counting segment tree for k-th smallest queries over versions."""

from __future__ import annotations

from typing import Optional, Tuple

_Node = Optional[Tuple[object, object, int]]


def _count(node: _Node) -> int:
    return node[2] if node else 0


def _left(node: _Node) -> _Node:
    return node[0] if node else None


def _right(node: _Node) -> _Node:
    return node[1] if node else None


class PersistentSegmentTree:
    """Multiset of values in [0, size); each add makes a new version.

    Version 0 is empty. Between versions older < newer, kth returns the
    k-th smallest of the values added after older up to newer.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._roots: list[_Node] = [None]

    @property
    def versions(self) -> int:
        return len(self._roots)

    def add(self, version: int, value: int) -> int:
        """Add value on top of version; return the new version number."""
        if not 0 <= value < self.size:
            raise ValueError(f"value {value} out of range")
        root = self._update(self._roots[version], 0, self.size - 1, value)
        self._roots.append(root)
        return len(self._roots) - 1

    def _update(self, prev: _Node, s: int, e: int, x: int) -> _Node:
        if s == e:
            return (None, None, _count(prev) + 1)
        m = (s + e) // 2
        if x <= m:
            left, right = self._update(_left(prev), s, m, x), _right(prev)
        else:
            left, right = _left(prev), self._update(_right(prev), m + 1, e, x)
        return (left, right, _count(left) + _count(right))

    def kth(self, older: int, newer: int, k: int) -> int:
        """k-th smallest (1-based) value added between the two versions."""
        prev, now = self._roots[older], self._roots[newer]
        if not 1 <= k <= _count(now) - _count(prev):
            raise ValueError(f"k={k} out of range")
        s, e = 0, self.size - 1
        while s != e:
            m = (s + e) // 2
            diff = _count(_left(now)) - _count(_left(prev))
            if k <= diff:
                prev, now, e = _left(prev), _left(now), m
            else:
                prev, now, s, k = _right(prev), _right(now), m + 1, k - diff
        return s