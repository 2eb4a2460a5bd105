"""Sieve of Eratosthenes."""

from math import isqrt


def sieve(limit: int) -> list[int]:
    """Return all primes from 0 to ``limit`` inclusive, in ascending order."""
    if limit < 2:
        return []
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for factor in range(2, isqrt(limit) + 1):
        if flags[factor]:
            start = factor * factor
            flags[start::factor] = bytes(len(range(start, limit + 1, factor)))
    return [number for number, is_prime in enumerate(flags) if is_prime]