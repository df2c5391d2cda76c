import math
from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from contestlib.number_theory import (
    Lucas,
    SmallestPrimeFactorSieve,
    ceil_div,
    crt,
    crt_pair,
    ext_gcd,
    factorize_trial,
    floor_div,
    gcd,
    is_prime_trial,
    lcm,
    linear_sieve,
    pow_mod,
)

ints = st.integers(-10**6, 10**6)
nonzero = ints.filter(lambda q: q != 0)
nonneg = st.integers(0, 10**9)


@given(ints, nonzero)
def test_floor_div_matches_exact_floor(p, q):
    assert floor_div(p, q) == math.floor(Fraction(p, q))


@given(ints, nonzero)
def test_ceil_div_matches_exact_ceiling(p, q):
    assert ceil_div(p, q) == math.ceil(Fraction(p, q))


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        floor_div(1, 0)
    with pytest.raises(ZeroDivisionError):
        ceil_div(1, 0)


@given(nonneg, nonneg)
def test_gcd_and_lcm_agree_with_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    assert lcm(a, b) == math.lcm(a, b)


@given(nonneg, nonneg)
def test_ext_gcd_bezout_identity(a, b):
    g, x, y = ext_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@st.composite
def crt_systems(draw):
    m1 = draw(st.integers(1, 1000))
    m2 = draw(st.integers(1, 1000))
    x = draw(st.integers(0, math.lcm(m1, m2) - 1))
    return m1, m2, x


@given(crt_systems())
def test_crt_pair_recovers_unique_solution(system):
    m1, m2, x = system
    assert crt_pair(x % m1, m1, x % m2, m2) == (x, math.lcm(m1, m2))


def test_crt_pair_without_solution_raises():
    with pytest.raises(ValueError):
        crt_pair(1, 4, 2, 6)


@given(st.lists(st.integers(1, 50), min_size=1, max_size=5), st.integers(0, 10**9))
def test_crt_of_many_congruences(moduli, value):
    total = math.lcm(*moduli)
    residues = [value % m for m in moduli]
    assert crt(residues, moduli) == (value % total, total)


def test_crt_rejects_bad_input():
    with pytest.raises(ValueError):
        crt([], [])
    with pytest.raises(ValueError):
        crt([1, 2], [3])


@given(st.integers(0, 10**12), st.integers(0, 10**6), st.integers(2, 10**9))
def test_pow_mod_agrees_with_builtin(a, b, c):
    assert pow_mod(a, b, c) == pow(a, b, c)


def test_pow_mod_edge_cases():
    assert pow_mod(5, 3, 1) == 0
    with pytest.raises(ValueError):
        pow_mod(2, -1, 7)


def test_is_prime_trial_source_examples():
    assert is_prime_trial(2) is True
    assert is_prime_trial(4) is False


def test_is_prime_trial_matches_sieve():
    sieve = SmallestPrimeFactorSieve(2000)
    for n in range(2, 2001):
        assert is_prime_trial(n) == (sieve.smallest_factor[n] == n)
    assert not is_prime_trial(1)
    assert not is_prime_trial(0)


def test_factorize_trial_source_example():
    assert factorize_trial(72) == [(2, 3), (3, 2)]
    assert factorize_trial(1) == []


@given(st.integers(1, 10**9))
def test_factorize_trial_reconstructs(n):
    factors = factorize_trial(n)
    assert math.prod(p**e for p, e in factors) == n
    assert all(is_prime_trial(p) for p, _ in factors)
    assert [p for p, _ in factors] == sorted({p for p, _ in factors})


def test_factorize_trial_rejects_non_positive():
    with pytest.raises(ValueError):
        factorize_trial(0)


def test_spf_sieve_factorize():
    sieve = SmallestPrimeFactorSieve(1000)
    assert sieve.factorize(72) == [(2, 3), (3, 2)]
    for n in range(1, 1001):
        assert sieve.factorize(n) == factorize_trial(n)


def test_spf_sieve_out_of_range():
    sieve = SmallestPrimeFactorSieve(100)
    with pytest.raises(ValueError):
        sieve.factorize(0)
    with pytest.raises(ValueError):
        sieve.factorize(101)


def test_linear_sieve_tables():
    n = 300
    tables = linear_sieve(n)
    assert tables.primes == SmallestPrimeFactorSieve(n).primes
    for k in range(2, n + 1):
        factors = factorize_trial(k)
        if is_prime_trial(k):
            assert tables.sp[k] == 0
        else:
            assert tables.sp[k] == factors[0][0]
            assert tables.e[k] == factors[0][1]
        assert tables.tau[k] == math.prod(e + 1 for _, e in factors)
        assert tables.sigma[k] == sum(d for d in range(1, k + 1) if k % d == 0)
        assert tables.phi[k] == sum(1 for d in range(1, k + 1) if math.gcd(d, k) == 1)
        expected_mu = 0 if any(e > 1 for _, e in factors) else (-1) ** len(factors)
        assert tables.mu[k] == expected_mu
    assert (tables.phi[1], tables.mu[1], tables.tau[1], tables.sigma[1]) == (1, 1, 1, 1)


def test_linear_sieve_rejects_negative():
    with pytest.raises(ValueError):
        linear_sieve(-1)


def test_lucas_source_examples():
    lucas = Lucas(13)
    assert lucas.binomial(5, 3) == 10
    assert lucas.binomial(10, 2) == 6


@pytest.mark.parametrize("p", [2, 3, 5, 7, 13])
def test_lucas_matches_comb(p):
    lucas = Lucas(p)
    for n in range(40):
        for r in range(45):
            assert lucas.binomial(n, r) == math.comb(n, r) % p


def test_lucas_negative_arguments():
    lucas = Lucas(7)
    assert lucas.binomial(-1, 2) == 0
    assert lucas.binomial(5, -2) == 0