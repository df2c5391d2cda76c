"""Maximum queries over a set of lines y = slope * x + intercept."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right


class MonotoneCHT:
    """Max-query hull; slopes added in non-decreasing order, queries with non-decreasing x."""

    def __init__(self) -> None:
        self._lines: list[tuple[int, int, int]] = []
        self._pos = 0

    def clear(self) -> None:
        self._lines.clear()
        self._pos = 0

    @staticmethod
    def _bad(a, b, c) -> bool:
        return (a[1] - b[1]) * (b[0] - c[0]) <= (c[1] - b[1]) * (b[0] - a[0])

    def add(self, slope: int, intercept: int, index: int) -> None:
        line = (slope, intercept, index)
        v = self._lines
        if len(v) > self._pos and v[-1][0] == slope:
            if intercept < v[-1][1]:
                line = v[-1]
            v.pop()
        while len(v) >= self._pos + 2 and self._bad(v[-2], v[-1], line):
            v.pop()
        v.append(line)

    def query(self, x: int) -> tuple[int, int]:
        """Return (maximum value, index of the line attaining it)."""
        v = self._lines
        if self._pos >= len(v):
            raise IndexError("no lines to query")

        def f(line):
            return line[0] * x + line[1]

        while self._pos + 1 < len(v) and f(v[self._pos]) <= f(v[self._pos + 1]):
            self._pos += 1
        best = v[self._pos]
        return f(best), best[2]


class LineContainer:
    """Max-query hull accepting lines and queries in any order."""

    def __init__(self) -> None:
        self._lines: list[list] = []  # [slope, intercept, last x where best]

    def _isect(self, x: int, y: int) -> bool:
        lines = self._lines
        if y == len(lines):
            lines[x][2] = math.inf
            return False
        a, b = lines[x], lines[y]
        if a[0] == b[0]:
            a[2] = math.inf if a[1] > b[1] else -math.inf
        else:
            a[2] = (b[1] - a[1]) // (a[0] - b[0])
        return a[2] >= b[2]

    def add(self, slope: int, intercept: int) -> None:
        lines = self._lines
        y = bisect_right(lines, slope, key=lambda line: line[0])
        lines.insert(y, [slope, intercept, 0])
        z = y + 1
        while self._isect(y, z):
            del lines[z]
        x = y
        if x != 0:
            x -= 1
            if self._isect(x, y):
                del lines[y]
                self._isect(x, y)
        while x != 0 and lines[x - 1][2] >= lines[x][2]:
            del lines[x]
            x -= 1
            self._isect(x, x + 1)

    def query(self, x: int) -> int:
        if not self._lines:
            raise ValueError("no lines to query")
        line = self._lines[bisect_left(self._lines, x, key=lambda ln: ln[2])]
        return line[0] * x + line[1]