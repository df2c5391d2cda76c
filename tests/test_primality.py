import math

import pytest
from hypothesis import given, settings, strategies as st

from contestlib.number_theory import is_prime_trial
from contestlib.primality import factorize, is_prime, miller_rabin, pollard_rho


def test_is_prime_small_range_matches_trial():
    for n in range(-5, 3000):
        assert is_prime(n) == is_prime_trial(n)


def test_is_prime_across_sieve_limit():
    for n in range(10**6 - 200, 10**6 + 200):
        assert is_prime(n) == is_prime_trial(n)


def test_is_prime_near_billion():
    for n in range(10**9, 10**9 + 60):
        assert is_prime(n) == is_prime_trial(n)


def test_is_prime_large_known_values():
    assert is_prime(998244353)
    assert is_prime(1_000_000_007)
    assert not is_prime(998244353 * 1_000_000_007)


def test_miller_rabin_accepts_primes():
    for p in (101, 998244353, 1_000_000_007):
        for a in (2, 3, 325, 9375):
            assert miller_rabin(p, a)


def test_miller_rabin_detects_carmichael_number():
    assert miller_rabin(561, 2) is False


@pytest.mark.parametrize("n", [15, 91, 1_000_003 * 1_000_033, 998244353 * 97])
def test_pollard_rho_finds_prime_divisor(n):
    d = pollard_rho(n)
    assert n % d == 0
    assert 1 < d < n
    assert is_prime(d)


def test_pollard_rho_rejects_small():
    with pytest.raises(ValueError):
        pollard_rho(1)


def test_factorize_source_value():
    assert sorted(factorize(72)) == [(2, 3), (3, 2)]


def test_factorize_semiprime():
    assert sorted(factorize(998244353 * 1_000_000_007)) == [(998244353, 1), (1_000_000_007, 1)]


@settings(max_examples=60)
@given(st.integers(1, 10**13))
def test_factorize_reconstructs(n):
    factors = factorize(n)
    assert math.prod(p**e for p, e in factors) == n
    assert all(is_prime(p) for p, _ in factors)
    assert len({p for p, _ in factors}) == len(factors)


def test_factorize_rejects_non_positive():
    with pytest.raises(ValueError):
        factorize(0)