"""Root finding, modular powers and matrix exponentiation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import lru_cache

MOD = 1_000_000_007
PALINDROME_LIMIT = 100_001


def cubic(x: float) -> float:
    """x^3 - 3x - 9."""
    return x * x * x - 3 * x - 9


def bisect_root(
    func: Callable[[float], float], left: float, right: float, tolerance: float = 1e-5
) -> float:
    """Root of func between left and right by bisection.

    The function must change sign over the interval, otherwise ValueError is raised.
    """
    if func(left) * func(right) >= 0.0:
        raise ValueError("function does not change sign over the interval")
    mid = left
    while right - left >= tolerance:
        mid = (left + right) / 2
        value = func(mid)
        if value == 0.0:
            break
        if value * func(left) > 0:
            left = mid
        else:
            right = mid
    return mid


def mod_pow(base: int, exponent: int, modulus: int = MOD) -> int:
    """base ** exponent modulo modulus; a base divisible by modulus gives 0."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    base %= modulus
    if base == 0:
        return 0
    return pow(base, exponent, modulus)


def palindromic_prefix_sums(limit: int = PALINDROME_LIMIT) -> list[int]:
    """Prefix sums of odd-length palindromes: entry i adds i's digits mirrored around the last one."""
    sums = [0]
    for i in range(1, limit + 1):
        digits = str(i)
        sums.append(sums[-1] + int(digits + digits[-2::-1]))
    return sums


@lru_cache(maxsize=1)
def _palindrome_table() -> tuple[int, ...]:
    return tuple(palindromic_prefix_sums(PALINDROME_LIMIT))


def chefora(left: int, right: int) -> int:
    """The left-th palindrome raised to the sum of palindromes left+1..right, modulo MOD."""
    if not 1 <= left <= right <= PALINDROME_LIMIT:
        raise ValueError(f"need 1 <= left <= right <= {PALINDROME_LIMIT}")
    table = _palindrome_table()
    base = table[left] - table[left - 1]
    return mod_pow(base, table[right] - table[left])


def _multiply(a: list[list[int]], b: list[list[int]]) -> list[list[int]]:
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % MOD for col in columns] for row in a]


def matrix_power(matrix: Sequence[Sequence[int]], exponent: int) -> list[list[int]]:
    """Square matrix raised to a non-negative power, entries modulo MOD."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = [[int(r == c) for c in range(size)] for r in range(size)]
    base = [[value % MOD for value in row] for row in matrix]
    while exponent:
        if exponent & 1:
            result = _multiply(result, base)
        base = _multiply(base, base)
        exponent >>= 1
    return result