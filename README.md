# primetools

Primality testing and integer factorisation for arbitrarily large integers,
in pure Python with no third-party dependencies.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Command line

The `primetools` command takes an action followed by a number:

```
primetools isprime 1000003
primetools factorise 8051
primetools fermat 5959
primetools fermat-sieve 5959
primetools pollardsrho 10403
primetools findcloseprimes
```

- `isprime` runs a probabilistic Miller-Rabin test with 40 random witnesses and
  prints `<n> is prime.` or `<n> is not prime.`.
- `factorise` (or `factorize`) tries, in order, a perfect-square check, trial
  division by the first 100,000 primes, Fermat's method (up to 2^24 steps) and
  then Brent's variant of Pollard's rho without an iteration limit. It prints a
  line before each stage, then one pair of factors or `No factors found`.
- `fermat` runs Fermat's method without an iteration limit; `fermat-sieve` does
  the same but skips values of `a` congruent to 1, 9, 11 or 19 modulo 20.
- `pollardsrho` runs Floyd-cycle Pollard's rho with the polynomial x² + 1,
  starting value 2 and at most 2^32 iterations.
- `findcloseprimes` walks consecutive primes from 2^1023 up to 2^1024 and
  prints each new smallest gap it finds. It runs for a very long time.

Numbers may be written in decimal, or with a `0x` (hexadecimal), `0b` (binary)
or leading `0` (octal) prefix, and may be negative.

Exit status: 1 when no action is given, when an action gets the wrong number
of operands (a usage line goes to standard error) or when the number cannot be
parsed; 0 otherwise. An unknown action is reported on standard error and
exits with 0.

## Library

```python
from primetools.arith import is_prime, next_prime, gcd, euler_totient, modexp
from primetools.fermat import fermat_factorisation, fermat_sieve
from primetools.pollards_rho import pollards_rho, brent_pollards_rho
from primetools.factorise import factorise, factorise_perfect_square
from primetools.cli import find_close_primes, format_factors

is_prime(1000003)            # True
euler_totient(36)            # 12
fermat_factorisation(5959)   # (59, 101)
factorise(8051)              # (83, 97)
factorise(8051, report=print)  # same, printing each stage's message
```

Modules:

- `primetools.arith`: `euclidean_gcd`, `gcd`, `euler_totient`,
  `floor_divmod`, `modexp`, `absolute`, `miller_rabin(n, k, rng=None)`
  (accepts a `random.Random` for repeatable runs), `is_prime` and `next_prime`.
- `primetools.fermat`: `fermat_factorisation` and `fermat_sieve`, both taking
  `offset` and `max_iterations` (`None` means no limit).
- `primetools.pollards_rho`: `pollards_rho` with a choice of polynomial
  (`polynomial_plus_one` by default, or `polynomial_minus_one`), and
  `brent_pollards_rho`, which multiplies `m` differences (1000 by default)
  before each gcd.
- `primetools.factorise`: `factorise_perfect_square`,
  `factorise_primes_in_range(n, start, count)` and `factorise`.
- `primetools.cli`: `find_close_primes(lower, upper)`, a generator of
  `(p, q, gap)` tuples, `format_factors` and `main`.

Each factorisation routine returns a pair of integers whose product is the
input, or `None` for inputs below 2 or when no factor is found within its
limit.

## What it does not do

The factorisation routines split a number into one pair of factors; they do
not produce a complete prime factorisation. Primality is tested
probabilistically only; there is no proof of primality.