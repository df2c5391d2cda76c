"""Point-update and range-add segment trees over sums."""

from __future__ import annotations


def _capacity(size: int) -> int:
    if size < 1:
        raise ValueError("size must be positive")
    cap = 1
    while cap < size:
        cap *= 2
    return cap


class SegmentTree:
    """Point assignment and inclusive range sums."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._base = _capacity(size)
        self._tree = [0] * (2 * self._base)

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} out of range")

    def set(self, index: int, value: int) -> None:
        self._check(index)
        x = index + self._base
        self._tree[x] = value
        x //= 2
        while x:
            self._tree[x] = self._tree[2 * x] + self._tree[2 * x + 1]
            x //= 2

    def sum(self, left: int, right: int) -> int:
        """Sum of elements left..right inclusive; 0 if left > right."""
        if left > right:
            return 0
        self._check(left)
        self._check(right)
        res = 0
        lo, hi = left + self._base, right + self._base
        while lo <= hi:
            if lo % 2 == 1:
                res += self._tree[lo]
                lo += 1
            if hi % 2 == 0:
                res += self._tree[hi]
                hi -= 1
            lo //= 2
            hi //= 2
        return res


class LazySegmentTree:
    """Range addition and inclusive range sums."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._base = _capacity(size)
        self._tree = [0] * (2 * self._base)
        self._lazy = [0] * (2 * self._base)

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self.size:
            raise IndexError(f"range [{left}, {right}] invalid")

    def _push(self, node: int, s: int, e: int) -> None:
        pending = self._lazy[node]
        if not pending:
            return
        self._tree[node] += (e - s + 1) * pending
        if s != e:
            self._lazy[2 * node] += pending
            self._lazy[2 * node + 1] += pending
        self._lazy[node] = 0

    def range_add(self, left: int, right: int, value: int) -> None:
        self._check(left, right)
        self._add(left, right, value, 1, 0, self._base - 1)

    def _add(self, l: int, r: int, v: int, node: int, s: int, e: int) -> None:
        self._push(node, s, e)
        if r < s or e < l:
            return
        if l <= s and e <= r:
            self._lazy[node] += v
            self._push(node, s, e)
            return
        m = (s + e) // 2
        self._add(l, r, v, 2 * node, s, m)
        self._add(l, r, v, 2 * node + 1, m + 1, e)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def range_sum(self, left: int, right: int) -> int:
        self._check(left, right)
        return self._sum(left, right, 1, 0, self._base - 1)

    def _sum(self, l: int, r: int, node: int, s: int, e: int) -> int:
        self._push(node, s, e)
        if r < s or e < l:
            return 0
        if l <= s and e <= r:
            return self._tree[node]
        m = (s + e) // 2
        return self._sum(l, r, 2 * node, s, m) + self._sum(l, r, 2 * node + 1, m + 1, e)