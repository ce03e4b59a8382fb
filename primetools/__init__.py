"""Primality testing, Fermat and Pollard's rho factorisation, and a command line tool."""

__version__ = "0.1.0"
__all__ = ["arith", "fermat", "pollards_rho", "factorise", "cli"]