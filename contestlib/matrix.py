"""Gauss-Jordan elimination: reduced row echelon form, rank, determinant, inverse."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional, Sequence

_EPS = 1e-9


@dataclass
class GaussResult:
    rref: list[list[Any]]
    rank: int
    determinant: Any
    inverse: Optional[list[list[Any]]]


def _is_zero(x: Any) -> bool:
    if isinstance(x, (float, complex)):
        return abs(x) < _EPS
    return x == 0


def gauss(matrix: Sequence[Sequence[Any]], square: bool = True) -> GaussResult:
    """Eliminate matrix; integer input is handled with exact fractions.

    With square set, the matrix must be square and the inverse is tracked;
    it is None when the matrix is singular or square is off.
    """
    a = [list(row) for row in matrix]
    if not a or not a[0]:
        raise ValueError("matrix must be non-empty")
    n, m = len(a), len(a[0])
    if any(len(row) != m for row in a):
        raise ValueError("rows differ in length")
    if square and n != m:
        raise ValueError("matrix is not square")
    if all(isinstance(x, int) for row in a for x in row):
        a = [[Fraction(x) for x in row] for row in a]
    out = [[1 if square and i == k else 0 for k in range(m)] for i in range(n)]
    det: Any = 1
    rank = 0
    for i in range(m):
        if rank == n:
            break
        if _is_zero(a[rank][i]):
            best, idx = 0, -1
            for j in range(rank + 1, n):
                if best < abs(a[j][i]):
                    best, idx = abs(a[j][i]), j
            if idx == -1 or _is_zero(a[idx][i]):
                det = 0
                continue
            a[rank] = [x + y for x, y in zip(a[rank], a[idx])]
            if square:
                out[rank] = [x + y for x, y in zip(out[rank], out[idx])]
        pivot = a[rank][i]
        det = det * pivot
        coeff = 1 / pivot
        a[rank] = [x * coeff for x in a[rank]]
        if square:
            out[rank] = [x * coeff for x in out[rank]]
        for j in range(n):
            if j == rank:
                continue
            t = a[j][i]
            a[j] = [x - r * t for x, r in zip(a[j], a[rank])]
            if square:
                out[j] = [x - r * t for x, r in zip(out[j], out[rank])]
        rank += 1
    inverse = out if square and rank == n else None
    return GaussResult(a, rank, det, inverse)