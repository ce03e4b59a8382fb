"""Integer arithmetic: gcd, totient, modular powers and primality testing."""

from __future__ import annotations

import math
import random
from typing import Optional

MILLER_RABIN_ROUNDS = 40


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, as in C."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def euclidean_gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def euler_totient(n: int) -> int:
    """Count of integers in [1, n] coprime to n, by trial factorisation."""
    result = n
    remaining = n
    p = 2
    while p * p <= remaining:
        if remaining % p == 0:
            while remaining % p == 0:
                remaining //= p
            result -= result // p
        p += 1
    if remaining > 1:
        result -= result // remaining
    return result


def floor_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Floor quotient and remainder; the remainder takes the divisor's sign."""
    return divmod(value, divisor)


def modexp(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent`` reduced modulo ``|modulus|``, never negative."""
    if modulus == 0:
        raise ZeroDivisionError("modulus must not be zero")
    return pow(base, exponent, abs(modulus))


def absolute(value: int) -> int:
    """Absolute value."""
    return abs(value)


def gcd(a: int, b: int) -> int:
    """Non-negative greatest common divisor."""
    return math.gcd(a, b)


def miller_rabin(n: int, k: int, rng: Optional[random.Random] = None) -> bool:
    """Probabilistic primality test with ``k`` random witnesses."""
    if n <= 1 or n == 4:
        return False
    if n <= 3:
        return True

    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    source = rng if rng is not None else random
    for _ in range(k):
        witness = source.randrange(n - 4) + 2
        x = pow(witness, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def is_prime(n: int) -> bool:
    """Miller-Rabin test with a fixed number of rounds."""
    return miller_rabin(n, MILLER_RABIN_ROUNDS)


def next_prime(n: int) -> int:
    """Smallest (probable) prime strictly greater than ``n``."""
    if n < 2:
        return 2
    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate