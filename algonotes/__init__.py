"""Classic data structures and algorithms for study: number routines, linear
structures, a prime sieve, tree traversals, ruler marking, sorting and a
small command line."""

__version__ = "0.1.0"

__all__ = ["cli", "fundamentals", "linear", "primes", "ruler", "sorting", "trees"]