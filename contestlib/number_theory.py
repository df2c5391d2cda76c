"""Elementary number theory: division, gcd, CRT, sieves and Lucas binomials."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


def floor_div(p: int, q: int) -> int:
    """Floor of p / q."""
    if q == 0:
        raise ZeroDivisionError("division by zero")
    return p // q


def ceil_div(p: int, q: int) -> int:
    """Ceiling of p / q."""
    if q == 0:
        raise ZeroDivisionError("division by zero")
    return -(-p // q)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of non-negative a and b."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of non-negative a and b."""
    g = gcd(a, b)
    return 0 if g == 0 else a // g * b


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g == gcd(a, b)."""
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def crt_pair(a1: int, m1: int, a2: int, m2: int) -> tuple[int, int]:
    """Solve x = a1 (mod m1), x = a2 (mod m2); return (x, lcm(m1, m2)).

    Raises ValueError when the system has no solution.
    """
    if m1 < 1 or m2 < 1:
        raise ValueError("moduli must be positive")
    g = gcd(m1, m2)
    if (a2 - a1) % g:
        raise ValueError("system has no solution")
    md = m2 // g
    s = (a2 - a1) // g % md
    t = ext_gcd(m1 // g % md, md)[1] % md
    return a1 + s * t % md * m1, m1 // g * m2


def crt(residues: Sequence[int], moduli: Sequence[int]) -> tuple[int, int]:
    """Solve x = residues[i] (mod moduli[i]) for all i; return (x, lcm)."""
    if len(residues) != len(moduli):
        raise ValueError("residues and moduli differ in length")
    if not moduli:
        raise ValueError("at least one congruence is required")
    a, m = residues[0], moduli[0]
    for ai, mi in zip(residues[1:], moduli[1:]):
        a, m = crt_pair(a, m, ai, mi)
    return a, m


def pow_mod(a: int, b: int, c: int) -> int:
    """a ** b modulo c for b >= 0 and c >= 1."""
    if c < 1:
        raise ValueError("modulus must be positive")
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if c == 1:
        return 0
    return pow(a, b, c)


def is_prime_trial(n: int) -> bool:
    """Primality by trial division."""
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def factorize_trial(n: int) -> list[tuple[int, int]]:
    """Prime factorisation [(prime, exponent), ...] by trial division."""
    if n < 1:
        raise ValueError("n must be positive")
    factors: list[tuple[int, int]] = []
    i = 2
    while i * i <= n:
        if n % i == 0:
            count = 0
            while n % i == 0:
                n //= i
                count += 1
            factors.append((i, count))
        i += 1
    if n != 1:
        factors.append((n, 1))
    return factors


class SmallestPrimeFactorSieve:
    """Smallest prime factor of every integer up to a limit."""

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        spf = [0] * (limit + 1)
        for i in range(2, limit + 1):
            if spf[i]:
                continue
            for j in range(i, limit + 1, i):
                if not spf[j]:
                    spf[j] = i
        self.smallest_factor = spf

    @property
    def primes(self) -> list[int]:
        return [i for i, p in enumerate(self.smallest_factor) if i >= 2 and p == i]

    def factorize(self, n: int) -> list[tuple[int, int]]:
        """Prime factorisation of 1 <= n <= limit."""
        if not 1 <= n <= self.limit:
            raise ValueError(f"{n} outside 1..{self.limit}")
        factors: list[tuple[int, int]] = []
        while n != 1:
            p = self.smallest_factor[n]
            if factors and factors[-1][0] == p:
                factors[-1] = (p, factors[-1][1] + 1)
            else:
                factors.append((p, 1))
            n //= p
        return factors


@dataclass
class SieveTables:
    """Multiplicative function tables indexed 0..n.

    sp holds the smallest prime factor of composites and 0 for primes;
    e holds the exponent of that smallest factor.
    """

    primes: list[int] = field(default_factory=list)
    sp: list[int] = field(default_factory=list)
    e: list[int] = field(default_factory=list)
    phi: list[int] = field(default_factory=list)
    mu: list[int] = field(default_factory=list)
    tau: list[int] = field(default_factory=list)
    sigma: list[int] = field(default_factory=list)


def linear_sieve(n: int) -> SieveTables:
    """Primes and phi, mu, tau, sigma for 0..n in linear time."""
    if n < 0:
        raise ValueError("n must be non-negative")
    size = n + 1
    primes: list[int] = []
    sp, e, phi, mu, tau, sigma = ([0] * size for _ in range(6))
    if n >= 1:
        phi[1] = mu[1] = tau[1] = sigma[1] = 1
    for i in range(2, size):
        if not sp[i]:
            primes.append(i)
            e[i], phi[i], mu[i], tau[i], sigma[i] = 1, i - 1, -1, 2, i + 1
        for j in primes:
            k = i * j
            if k > n:
                break
            sp[k] = j
            if i % j == 0:
                e[k] = e[i] + 1
                phi[k] = phi[i] * j
                mu[k] = 0
                tau[k] = tau[i] // e[k] * (e[k] + 1)
                sigma[k] = (
                    sigma[i] * (j - 1) // (j ** e[k] - 1) * (j ** (e[k] + 1) - 1) // (j - 1)
                )
                break
            e[k] = 1
            phi[k] = phi[i] * phi[j]
            mu[k] = mu[i] * mu[j]
            tau[k] = tau[i] * tau[j]
            sigma[k] = sigma[i] * sigma[j]
    return SieveTables(primes, sp, e, phi, mu, tau, sigma)


class Lucas:
    """Binomial coefficients modulo a prime p via Lucas' theorem."""

    def __init__(self, p: int) -> None:
        if p < 2:
            raise ValueError("modulus must be a prime")
        self.p = p
        fac = [1] * p
        for i in range(1, p):
            fac[i] = fac[i - 1] * i % p
        inv = [1] * p
        inv[p - 1] = pow(fac[p - 1], p - 2, p)
        for i in range(p - 2, -1, -1):
            inv[i] = inv[i + 1] * (i + 1) % p
        self._fac = fac
        self._inv = inv

    def _small(self, n: int, r: int) -> int:
        if r > n:
            return 0
        p = self.p
        return self._fac[n] * self._inv[r] % p * self._inv[n - r] % p

    def binomial(self, n: int, r: int) -> int:
        """C(n, r) mod p; 0 when r > n or either is negative."""
        if n < r or n < 0 or r < 0:
            return 0
        p = self.p
        result = 1
        while n and r and n != r:
            result = result * self._small(n % p, r % p) % p
            n //= p
            r //= p
        return result