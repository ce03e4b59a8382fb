"""Command line entry point."""

from __future__ import annotations

import sys
from typing import Callable, Iterator, Optional, Sequence

from primetools.arith import is_prime, next_prime
from primetools.factorise import factorise
from primetools.fermat import fermat_factorisation, fermat_sieve
from primetools.pollards_rho import pollards_rho

PROG = "primetools"
DEFAULT_LOWER = 2**1023
DEFAULT_UPPER = 2**1024


def find_close_primes(
    lower: int = DEFAULT_LOWER, upper: int = DEFAULT_UPPER
) -> Iterator[tuple[int, int, int]]:
    """Walk consecutive primes above ``lower``, yielding each new smallest gap.

    Yields ``(p, q, q - p)`` for consecutive primes ``p < q`` with ``p < upper``.
    """
    smallest_gap = 0
    a = next_prime(lower)
    while a < upper:
        b = next_prime(a)
        if smallest_gap == 0 or b - a < smallest_gap:
            smallest_gap = b - a
            yield a, b, smallest_gap
        a = b


def format_factors(factors: Optional[tuple[int, int]]) -> str:
    """Render a factor pair, or a notice that none was found."""
    if factors is None:
        return "No factors found"
    return f"{factors[0]}, {factors[1]}"


def _parse_number(text: str) -> int:
    """Parse an integer with an optional 0x, 0b or leading-zero octal prefix."""
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if not digits or digits[0] in "+- ":
        raise ValueError(f"invalid number: {text!r}")
    lowered = digits.lower()
    if lowered.startswith(("0x", "0b")):
        value = int(digits, 0)
    elif len(digits) > 1 and digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits, 10)
    return -value if negative else value


def _run_factorise(n: int) -> None:
    print(format_factors(factorise(n, report=print)))


def _run_isprime(n: int) -> None:
    print(f"{n} is {'prime' if is_prime(n) else 'not prime'}.")


def _run_fermat(n: int) -> None:
    print(f"Fermat factorization of {n}")
    print(format_factors(fermat_factorisation(n)))


def _run_fermat_sieve(n: int) -> None:
    print(format_factors(fermat_sieve(n)))


def _run_pollards_rho(n: int) -> None:
    print(format_factors(pollards_rho(n)))


_ACTIONS: dict[str, tuple[str, Callable[[int], None]]] = {
    "factorise": ("factorise", _run_factorise),
    "factorize": ("factorise", _run_factorise),
    "isprime": ("isprime", _run_isprime),
    "fermat": ("fermat", _run_fermat),
    "fermat-sieve": ("fermat-sieve", _run_fermat_sieve),
    "pollardsrho": ("pollardsrho", _run_pollards_rho),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one action named by the first argument; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    action, operands = args[0], args[1:]

    if action == "findcloseprimes":
        for a, b, gap in find_close_primes():
            print(f"Found a smaller pair of primes: {a}, {b} ({gap})", flush=True)
        return 0

    entry = _ACTIONS.get(action)
    if entry is None:
        print(f"Unknown action: {action}", file=sys.stderr)
        return 0

    usage_name, run = entry
    if len(operands) != 1:
        print(f"Usage: {PROG} {usage_name} <number>", file=sys.stderr)
        return 1
    try:
        n = _parse_number(operands[0])
    except ValueError:
        print(f"Invalid number: {operands[0]}", file=sys.stderr)
        return 1

    run(n)
    return 0