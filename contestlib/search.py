"""Searching helpers, LIS, coordinate compression and bit tricks."""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")


def last_true(lo: int, hi: int, check: Callable[[int], bool]) -> int:
    """Last position in [lo, hi] where check holds, for a 1..1 0..0 predicate."""
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if check(mid):
            lo = mid
        else:
            hi = mid - 1
    return lo


def first_true(lo: int, hi: int, check: Callable[[int], bool]) -> int:
    """First position in [lo, hi] where check holds, for a 0..0 1..1 predicate."""
    while lo < hi:
        mid = (lo + hi) // 2
        if check(mid):
            hi = mid
        else:
            lo = mid + 1
    return lo


def ternary_search_min(lo: int, hi: int, func: Callable[[int], T]) -> tuple[int, T]:
    """Minimum of a unimodal function on [lo, hi]; returns (smallest argmin, value)."""
    if lo > hi:
        raise ValueError("empty interval")
    while lo + 3 <= hi:
        left = (lo + lo + hi) // 3
        right = (lo + hi + hi) // 3
        if func(left) > func(right):
            lo = left
        else:
            hi = right
    best_index = lo
    best = func(lo)
    for i in range(lo + 1, hi + 1):
        now = func(i)
        if now < best:
            best, best_index = now, i
    return best_index, best


def longest_increasing_subsequence(values: Sequence[T]) -> list[T]:
    """One longest strictly increasing subsequence."""
    tails: list = []
    lengths = []
    for x in values:
        idx = bisect_left(tails, x)
        if idx == len(tails):
            tails.append(x)
        else:
            tails[idx] = x
        lengths.append(idx + 1)
    remaining = len(tails)
    result = []
    for x, length in zip(reversed(values), reversed(lengths)):
        if length == remaining:
            result.append(x)
            remaining -= 1
    result.reverse()
    return result


def compress_coordinates(values: Sequence[T]) -> list[int]:
    """Map values to ranks in [0, distinct count) keeping their order."""
    distinct = sorted(set(values))
    return [bisect_left(distinct, x) for x in values]


def next_bit_permutation(v: int) -> int:
    """Next larger integer with the same number of set bits."""
    if v <= 0:
        raise ValueError("v must be positive")
    t = v | (v - 1)
    trailing = (v & -v).bit_length() - 1
    return (t + 1) | (((~t & (t + 1)) - 1) >> (trailing + 1))


def count_digit(n: int, digit: int) -> int:
    """How many times digit occurs when writing the numbers 1..n."""
    if not 0 <= digit <= 9:
        raise ValueError("digit must be in 0..9")
    lead = 1 if digit == 0 else 0
    total = 0
    j = 1
    while j <= n:
        if n // j // 10 >= lead:
            current = n // j % 10
            if current > digit:
                extra = j
            elif current == digit:
                extra = n % j + 1
            else:
                extra = 0
            total += (n // 10 // j - lead) * j + extra
        j *= 10
    return total