import math
import random

import pytest

from primetools.arith import (
    absolute,
    euclidean_gcd,
    euler_totient,
    floor_divmod,
    gcd,
    is_prime,
    miller_rabin,
    modexp,
    next_prime,
)

MERSENNE_EXPONENTS = (2, 3, 5, 7, 13, 17, 19, 31, 61, 89, 107, 127)


@pytest.mark.parametrize("a", [0, 1, 12, 35, 1071, 2**40])
@pytest.mark.parametrize("b", [0, 1, 8, 462, 3**20])
def test_euclidean_gcd_matches_stdlib(a, b):
    assert euclidean_gcd(a, b) == math.gcd(a, b)


def test_euclidean_gcd_with_zero_returns_other():
    assert euclidean_gcd(987654321, 0) == 987654321


@pytest.mark.parametrize("p", [2, 3, 5, 7, 101, 7919])
def test_totient_of_prime(p):
    assert euler_totient(p) == p - 1


def test_totient_of_prime_power():
    assert euler_totient(3**5) == 3**5 - 3**4


def test_totient_is_multiplicative_for_coprime_arguments():
    assert euler_totient(16 * 27) == euler_totient(16) * euler_totient(27)
    assert euler_totient(7 * 11 * 13) == euler_totient(7) * euler_totient(11) * euler_totient(13)


def test_totient_of_one():
    assert euler_totient(1) == 1


@pytest.mark.parametrize("value", [-17, -7, 0, 7, 17, 10**30 + 3])
@pytest.mark.parametrize("divisor", [-5, 2, 9])
def test_floor_divmod_round_trip(value, divisor):
    quotient, remainder = floor_divmod(value, divisor)
    assert quotient * divisor + remainder == value
    assert abs(remainder) < abs(divisor)
    assert remainder == 0 or (remainder > 0) == (divisor > 0)


def test_floor_divmod_rounds_toward_negative_infinity():
    assert floor_divmod(-7, 2) == divmod(-7, 2)


def test_floor_divmod_by_zero():
    with pytest.raises(ZeroDivisionError):
        floor_divmod(5, 0)


@pytest.mark.parametrize("base,exponent,modulus", [(3, 200, 1000), (2, 10**6, 2**61 - 1), (7, 0, 13)])
def test_modexp_matches_pow(base, exponent, modulus):
    assert modexp(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.parametrize("p", [2**31 - 1, 2**61 - 1])
def test_modexp_fermat_little_theorem(p):
    assert modexp(12345, p - 1, p) == 1


def test_modexp_negative_modulus_gives_non_negative_result():
    assert modexp(-3, 3, -5) == pow(-3, 3, 5)


def test_modexp_zero_modulus():
    with pytest.raises(ZeroDivisionError):
        modexp(2, 3, 0)


def test_absolute():
    assert absolute(-(10**40)) == 10**40
    assert absolute(42) == 42


def test_gcd_is_non_negative():
    assert gcd(-12, 18) == math.gcd(12, 18)
    assert gcd(0, 0) == 0


@pytest.mark.parametrize("n", [-3, 0, 1, 4])
def test_miller_rabin_small_non_primes(n):
    assert miller_rabin(n, 10) is False


@pytest.mark.parametrize("n", [2, 3, 5])
def test_miller_rabin_small_primes(n):
    assert miller_rabin(n, 10) is True


@pytest.mark.parametrize("exponent", MERSENNE_EXPONENTS)
def test_mersenne_primes_are_prime(exponent):
    assert miller_rabin(2**exponent - 1, 20, random.Random(1)) is True
    assert is_prime(2**exponent - 1) is True


@pytest.mark.parametrize("n", [3 * 11 * 17, 23 * 89, 41 * 101 * 271, (2**61 - 1) * (2**31 - 1)])
def test_composites_are_rejected(n):
    assert miller_rabin(n, 40, random.Random(7)) is False
    assert is_prime(n) is False


def test_products_of_small_numbers_are_not_prime():
    assert not any(is_prime(a * b) for a in range(2, 30) for b in range(2, 30))


def test_next_prime_below_two():
    assert next_prime(-5) == 2
    assert next_prime(1) == 2


def test_next_prime_finds_mersenne():
    assert next_prime(2**61 - 2) == 2**61 - 1


@pytest.mark.parametrize("n", [2, 13, 100, 1000, 10**9])
def test_next_prime_is_the_next_one(n):
    p = next_prime(n)
    assert p > n
    assert is_prime(p)
    assert not any(is_prime(k) for k in range(n + 1, p))