import math

import pytest

from contestkit.factors import prime_factors


def _is_prime(value):
    if value < 2:
        return False
    return all(value % d for d in range(2, math.isqrt(value) + 1))


@pytest.mark.parametrize("exponent", range(2, 12))
def test_powers_of_two_fully_factored(exponent):
    n = 2**exponent
    factors = prime_factors(n)
    assert math.prod(factors) == n
    assert set(factors) == {2}


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 31])
def test_square_of_prime(p):
    assert prime_factors(p * p) == [p, p]


@pytest.mark.parametrize("p", [2, 3, 13, 97, 101])
def test_prime_gives_no_factors(p):
    assert prime_factors(p) == []


def test_factors_are_prime_sorted_and_divide_n():
    for n in range(2, 600):
        factors = prime_factors(n)
        assert all(_is_prime(f) for f in factors)
        assert factors == sorted(factors)
        assert n % math.prod(factors) == 0


def test_large_cofactor_is_left_out():
    factors = prime_factors(12)
    assert math.prod(factors) < 12
    assert 12 % math.prod(factors) == 0


@pytest.mark.parametrize("n", [-10, 0, 1])
def test_small_and_negative_inputs(n):
    assert prime_factors(n) == []