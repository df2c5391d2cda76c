"""String algorithms: hashing, KMP, Manacher, suffix array, Z function."""

from __future__ import annotations


class PolynomialHash:
    """Rolling hash of a string; substrings hashed in O(1)."""

    def __init__(self, text: str, base: int = 917, modulus: int = 998244353) -> None:
        self.base = base
        self.modulus = modulus
        self._h = [0]
        self._p = [1]
        for ch in text:
            self._h.append((self._h[-1] * base + ord(ch)) % modulus)
            self._p.append(self._p[-1] * base % modulus)

    def get(self, start: int, end: int) -> int:
        """Hash of characters start..end, 1-based and inclusive."""
        if not 1 <= start <= end + 1 or end >= len(self._h):
            raise IndexError(f"range [{start}, {end}] invalid")
        return (self._h[end] - self._h[start - 1] * self._p[end - start + 1]) % self.modulus


def failure_function(pattern: str) -> list[int]:
    """Length of the longest proper border of each prefix."""
    fail = [0] * len(pattern)
    j = 0
    for i in range(1, len(pattern)):
        while j and pattern[i] != pattern[j]:
            j = fail[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
            fail[i] = j
    return fail


def kmp_search(text: str, pattern: str) -> list[int]:
    """Start positions of every occurrence of pattern in text."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    fail = failure_function(pattern)
    m = len(pattern)
    found = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = fail[j - 1]
        if ch == pattern[j]:
            if j + 1 == m:
                found.append(i - m + 1)
                j = fail[j]
            else:
                j += 1
    return found


def manacher(text: str) -> list[int]:
    """Palindrome radius at each position of text interleaved with '#'."""
    s = "#" + "".join(ch + "#" for ch in text)
    n = len(s)
    radius = [0] * n
    center, right = -1, -1
    for i in range(n):
        r = min(right - i, radius[2 * center - i]) if i <= right else 0
        while i - r - 1 >= 0 and i + r + 1 < n and s[i - r - 1] == s[i + r + 1]:
            r += 1
        radius[i] = r
        if i + r > right:
            right, center = i + r, i
    return radius


def suffix_array(text: str) -> tuple[list[int], list[int]]:
    """Suffix array and LCP array; lcp[i] pairs suffixes sa[i-1] and sa[i]."""
    n = len(text)
    if n == 0:
        return [], []
    rank = [ord(ch) for ch in text]
    sa = sorted(range(n), key=lambda i: rank[i])
    k = 1
    while True:
        def key(i: int, rank=rank, k=k) -> tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        sa.sort(key=key)
        new_rank = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
        rank = new_rank
        if rank[sa[-1]] == n - 1:
            break
        k *= 2
    lcp = [0] * n
    j = 0
    for i in range(n):
        if rank[i] == 0:
            j = 0
            continue
        other = sa[rank[i] - 1]
        while i + j < n and other + j < n and text[i + j] == text[other + j]:
            j += 1
        lcp[rank[i]] = j
        j = max(j - 1, 0)
    return sa, lcp


def z_function(text: str) -> list[int]:
    """z[i] is the length of the common prefix of text and text[i:]."""
    n = len(text)
    if n == 0:
        return []
    z = [0] * n
    z[0] = n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i - 1, z[i - left])
        while i + z[i] < n and text[i + z[i]] == text[z[i]]:
            z[i] += 1
        if i + z[i] > right:
            right, left = i + z[i], i
    return z