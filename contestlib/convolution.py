"""Polynomial multiplication with the fast Fourier transform."""

from __future__ import annotations

import math
from typing import Iterable, Sequence


def fft(values: Iterable[complex], inverse: bool = False) -> list[complex]:
    """Discrete Fourier transform of a power-of-two length sequence."""
    a = [complex(v) for v in values]
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j >= bit:
            j -= bit
            bit >>= 1
        j += bit
        if i < j:
            a[i], a[j] = a[j], a[i]
    ang = 2 * math.pi / n * (-1 if inverse else 1)
    roots = [complex(math.cos(ang * i), math.sin(ang * i)) for i in range(n // 2)]
    size = 2
    while size <= n:
        half, step = size // 2, n // size
        for start in range(0, n, size):
            for k in range(half):
                u = a[start + k]
                v = a[start + k + half] * roots[step * k]
                a[start + k] = u + v
                a[start + k + half] = u - v
        size <<= 1
    if inverse:
        a = [x / n for x in a]
    return a


def _padded_size(a: Sequence, b: Sequence) -> int:
    size = 2
    while size < len(a) + len(b):
        size <<= 1
    return size


def _strip(coeffs: list[int]) -> list[int]:
    while len(coeffs) > 1 and coeffs[-1] == 0:
        coeffs.pop()
    return coeffs


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two integer polynomials, trailing zeros removed."""
    size = _padded_size(a, b)
    fa = fft([*a, *[0] * (size - len(a))])
    fb = fft([*b, *[0] * (size - len(b))])
    product = fft((x * y for x, y in zip(fa, fb)), inverse=True)
    return _strip([round(z.real) for z in product])


def multiply_mod(a: Sequence[int], b: Sequence[int], modulus: int) -> list[int]:
    """Product of polynomials with non-negative coefficients, modulo modulus.

    Coefficients are split into 15-bit halves to keep the transform precise.
    """
    size = _padded_size(a, b)
    v1 = fft([complex(x >> 15, x & 32767) for x in a] + [0j] * (size - len(a)))
    v2 = fft([complex(x >> 15, x & 32767) for x in b] + [0j] * (size - len(b)))
    r1, r2 = [], []
    for i in range(size):
        j = (size - i) % size
        ans1 = (v1[i] + v1[j].conjugate()) * 0.5
        ans2 = (v1[i] - v1[j].conjugate()) * complex(0, -0.5)
        ans3 = (v2[i] + v2[j].conjugate()) * 0.5
        ans4 = (v2[i] - v2[j].conjugate()) * complex(0, -0.5)
        r1.append(ans1 * ans3 + ans1 * ans4 * 1j)
        r2.append(ans2 * ans3 + ans2 * ans4 * 1j)
    result = []
    for x, y in zip(fft(r1, inverse=True), fft(r2, inverse=True)):
        av = round(x.real) % modulus
        bv = (round(x.imag) + round(y.real)) % modulus
        cv = round(y.imag) % modulus
        result.append(((av << 30) + (bv << 15) + cv) % modulus)
    return _strip(result)