"""Pollard's rho factorisation and Brent's variant."""

from __future__ import annotations

import math
from itertools import count
from typing import Callable, Iterable, Optional

DEFAULT_MAX_ITERATIONS = 1 << 32
DEFAULT_STARTING_VALUE = 2
DEFAULT_BATCH = 1000

Polynomial = Callable[[int, int], int]


def _trunc_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _steps(max_iterations: Optional[int]) -> Iterable[int]:
    return count() if max_iterations is None else range(max_iterations)


def polynomial_minus_one(x: int, n: int) -> int:
    """``(x*x - 1) mod n`` with a remainder that follows the dividend's sign."""
    return _trunc_mod(x * x - 1, n)


def polynomial_plus_one(x: int, n: int) -> int:
    """``(x*x + 1) mod n``."""
    return _trunc_mod(x * x + 1, n)


def pollards_rho(
    n: int,
    polynomial: Polynomial = polynomial_plus_one,
    starting_value: int = DEFAULT_STARTING_VALUE,
    max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS,
) -> Optional[tuple[int, int]]:
    """Floyd-cycle Pollard's rho; returns a nontrivial ``(d, n // d)`` or None."""
    x = y = starting_value
    for _ in _steps(max_iterations):
        x = polynomial(x, n)
        y = polynomial(polynomial(y, n), n)
        d = math.gcd(x - y, n)
        if 1 < d < n:
            return d, n // d
    return None


def brent_pollards_rho(
    n: int,
    m: int = DEFAULT_BATCH,
    starting_value: int = DEFAULT_STARTING_VALUE,
    max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS,
) -> Optional[tuple[int, int]]:
    """Brent's cycle-finding rho, multiplying ``m`` differences before each gcd."""
    f = polynomial_plus_one
    x = y = starting_value
    d = q = length = 1
    xs = 0

    for _ in _steps(max_iterations):
        if d != 1:
            break
        y = x
        for _ in range(length):
            x = f(x, n)
        k = 0
        while k < length and d == 1:
            xs = x
            for _ in range(m):
                x = f(x, n)
                q = (q * abs(y - x)) % n
            d = math.gcd(q, n)
            k += m
        length *= 2

    if d == n:
        while True:
            xs = f(xs, n)
            q = (q * abs(y - xs)) % n
            d = math.gcd(q, n)
            if d != 1:
                break

    if 1 < d < n:
        return d, n // d
    return None