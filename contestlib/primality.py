"""Deterministic Miller-Rabin primality and Pollard's rho factorisation."""

from __future__ import annotations

import random
from functools import lru_cache
from math import gcd, isqrt

_SIEVE_LIMIT = 1_000_000
_BASES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)


@lru_cache(maxsize=1)
def _small_primes() -> bytearray:
    flags = bytearray([1]) * (_SIEVE_LIMIT + 1)
    flags[0] = flags[1] = 0
    for i in range(2, isqrt(_SIEVE_LIMIT) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, _SIEVE_LIMIT + 1, i)))
    return flags


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def miller_rabin(n: int, a: int) -> bool:
    """One Miller-Rabin round for odd n with base a; False proves n composite."""
    if n < 1:
        raise ValueError("n must be positive")
    if a % n == 0:
        return True
    cnt = _trailing_zeros(n - 1)
    p = pow(a, n >> cnt, n)
    if p == 1 or p == n - 1:
        return True
    for _ in range(cnt):
        p = p * p % n
        if p == n - 1:
            return True
    return False


def is_prime(n: int) -> bool:
    """Primality test, deterministic for all n below 2**64."""
    if n <= _SIEVE_LIMIT:
        return n >= 0 and bool(_small_primes()[n])
    if any(n % p == 0 for p in (2, 3, 5, 7, 11)):
        return False
    return all(miller_rabin(n, a) for a in _BASES)


def pollard_rho(n: int) -> int:
    """Return a prime divisor of n > 1."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if n % 2 == 0:
        return 2
    if is_prime(n):
        return n
    while True:
        x = random.randrange(2, n)
        y = x
        c = random.randrange(1, n)
        while True:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = gcd(abs(x - y), n)
            if d == 1:
                continue
            if is_prime(d):
                return d
            n = d
            break


def factorize(n: int) -> list[tuple[int, int]]:
    """Prime factorisation [(prime, exponent), ...]; order is not sorted."""
    if n < 1:
        raise ValueError("n must be positive")
    factors: list[tuple[int, int]] = []
    two = _trailing_zeros(n)
    if two:
        factors.append((2, two))
        n >>= two
    if n == 1:
        return factors
    while not is_prime(n):
        d = pollard_rho(n)
        count = 0
        while n % d == 0:
            n //= d
            count += 1
        factors.append((d, count))
        if n == 1:
            break
    if n != 1:
        factors.append((n, 1))
    return factors