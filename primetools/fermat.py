"""Fermat's difference-of-squares factorisation."""

from __future__ import annotations

import math
from itertools import count
from typing import Iterable, Optional

# Residues of a modulo 20 that the sieve variant passes over.
_SIEVE_SKIP = frozenset({1, 9, 11, 19})


def _steps(max_iterations: Optional[int]) -> Iterable[int]:
    return count() if max_iterations is None else range(max_iterations)


def _square_root(value: int) -> Optional[int]:
    if value < 0:
        return None
    root = math.isqrt(value)
    return root if root * root == value else None


def _search(
    n: int, offset: int, max_iterations: Optional[int], skip_residues: frozenset
) -> Optional[tuple[int, int]]:
    if n < 2:
        return None
    a = math.isqrt(n) + 1 + offset
    for _ in _steps(max_iterations):
        if a % 20 not in skip_residues:
            b = _square_root(a * a - n)
            if b is not None:
                return a - b, a + b
        a += 1
    return None


def fermat_factorisation(
    n: int, offset: int = 0, max_iterations: Optional[int] = None
) -> Optional[tuple[int, int]]:
    """Find ``(a - b, a + b)`` with ``a*a - n == b*b``, starting just above sqrt(n).

    ``max_iterations`` of ``None`` searches without bound.
    """
    return _search(n, offset, max_iterations, frozenset())


def fermat_sieve(
    n: int, offset: int = 0, max_iterations: Optional[int] = None
) -> Optional[tuple[int, int]]:
    """Fermat's method skipping values of ``a`` congruent to 1, 9, 11 or 19 mod 20."""
    return _search(n, offset, max_iterations, _SIEVE_SKIP)