"""Prime sieves and prime lists on disk."""

from __future__ import annotations

from math import isqrt
from os import PathLike
from typing import Union

PathArg = Union[str, "PathLike[str]"]


def _sieve(limit: int) -> bytearray:
    """Flags for 0..limit, set where the index is prime."""
    flags = bytearray([1]) * (limit + 1)
    flags[0:2] = bytes(min(2, limit + 1))
    for i in range(2, isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return flags


def count_almost_primes(n: int) -> int:
    """How many integers in 2..n have exactly two distinct prime factors."""
    if n < 2:
        return 0
    factors = [0] * (n + 1)
    for i in range(2, n + 1):
        if factors[i] == 0:
            for j in range(i, n + 1, i):
                factors[j] += 1
    return sum(1 for count in factors if count == 2)


class PrimeSieve:
    """Primality test backed by a sieve up to limit and trial division beyond it."""

    def __init__(self, limit: int = 10_000_000) -> None:
        if limit < 2:
            raise ValueError("limit must be at least 2")
        self.limit = limit
        self._flags = _sieve(limit)
        self.primes = [i for i, flag in enumerate(self._flags) if flag]

    def is_prime(self, number: int) -> bool:
        """True when number is prime.

        Numbers above the limit are tested by division with the sieved primes;
        a number that cannot be decided that way raises ValueError.
        """
        if number < 2:
            return False
        if number <= self.limit:
            return bool(self._flags[number])
        for prime in self.primes:
            if prime * prime > number:
                return True
            if number % prime == 0:
                return False
        raise ValueError(f"{number} is too large for a sieve up to {self.limit}")


def segmented_primes(low: int, high: int) -> list[int]:
    """Primes p with low <= p <= high."""
    low = max(low, 2)
    if high < low:
        return []
    composite = bytearray(high - low + 1)
    for prime in primes_below(isqrt(high) + 1):
        start = max(prime * prime, -(-low // prime) * prime)
        for multiple in range(start, high + 1, prime):
            composite[multiple - low] = 1
    return [low + offset for offset, flag in enumerate(composite) if not flag]


def primes_below(limit: int) -> list[int]:
    """Primes smaller than limit."""
    if limit <= 2:
        return []
    return [i for i, flag in enumerate(_sieve(limit - 1)) if flag]


def write_primes(path: PathArg, limit: int = 100) -> None:
    """Append the primes below limit to a text file, each followed by a space."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write("".join(f"{prime} " for prime in primes_below(limit)))


def read_numbers(path: PathArg) -> list[int]:
    """All whitespace-separated integers in a text file."""
    with open(path, encoding="utf-8") as handle:
        return [int(token) for token in handle.read().split()]