"""Factorisation by methods of increasing cost."""

from __future__ import annotations

import math
from functools import lru_cache
from itertools import compress
from typing import Callable, Optional

from primetools.arith import next_prime
from primetools.fermat import fermat_factorisation
from primetools.pollards_rho import brent_pollards_rho

SMALL_PRIME_COUNT = 100_000
FERMAT_MAX_ITERATIONS = 1 << 24

Factors = Optional[tuple[int, int]]


@lru_cache(maxsize=None)
def _first_primes(count: int) -> tuple[int, ...]:
    """The first ``count`` primes, by a sieve of Eratosthenes."""
    limit = max(16, int(count * (math.log(count) + math.log(math.log(count)))) + 10)
    while True:
        sieve = bytearray([1]) * (limit + 1)
        sieve[0:2] = b"\x00\x00"
        for p in range(2, math.isqrt(limit) + 1):
            if sieve[p]:
                sieve[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
        primes = tuple(compress(range(limit + 1), sieve))
        if len(primes) >= count:
            return primes[:count]
        limit *= 2


def _factorise_small_primes(n: int) -> Factors:
    if n < 2:
        return None
    return next(((p, n // p) for p in _first_primes(SMALL_PRIME_COUNT) if n % p == 0), None)


def factorise_perfect_square(n: int) -> Factors:
    """Return ``(r, r)`` when ``n`` is the square ``r*r`` (and ``n >= 2``)."""
    if n < 2:
        return None
    root = math.isqrt(n)
    return (root, root) if root * root == n else None


def factorise_primes_in_range(n: int, start: int, count: int) -> Factors:
    """Trial-divide ``n`` by ``start`` and the primes after it, ``count`` divisors in all."""
    if n < 2:
        return None
    divisor = start
    for _ in range(count):
        if n % divisor == 0:
            return divisor, n // divisor
        divisor = next_prime(divisor)
    return None


def factorise(n: int, report: Optional[Callable[[str], object]] = None) -> Factors:
    """Split ``n`` into two factors, trying cheap methods first.

    ``report`` is called with a message before each stage.
    """
    if n < 2:
        return None
    stages = (
        ("Checking for perfect square...", factorise_perfect_square),
        ("Checking small primes...", _factorise_small_primes),
        (
            "Trying Fermat's factorization...",
            lambda value: fermat_factorisation(value, 0, FERMAT_MAX_ITERATIONS),
        ),
        ("Trying Pollard's rho...", lambda value: brent_pollards_rho(value, max_iterations=None)),
    )
    for message, stage in stages:
        if report is not None:
            report(message)
        result = stage(n)
        if result is not None:
            return result
    return None