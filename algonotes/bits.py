"""Bit manipulation helpers."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor


def is_odd(n: int) -> bool:
    """True when the lowest bit of n is set."""
    return bool(n & 1)


def get_bit(n: int, pos: int) -> bool:
    """True when bit pos of n is set."""
    return bool(n & (1 << pos))


def set_bit(n: int, pos: int) -> int:
    """n with bit pos set."""
    return n | (1 << pos)


def clear_bit(n: int, pos: int) -> int:
    """n with bit pos cleared."""
    return n & ~(1 << pos)


def update_bit(n: int, pos: int, bit: int) -> int:
    """n with bit pos replaced by bit (0 or 1)."""
    if bit not in (0, 1):
        raise ValueError("bit must be 0 or 1")
    return clear_bit(n, pos) | (bit << pos)


def clear_last_bits(num: int, count: int) -> int:
    """num with its lowest count bits cleared."""
    return num & (-1 << count)


def clear_bit_range(n: int, i: int, j: int) -> int:
    """n with bits i through j (inclusive) cleared."""
    if i > j:
        raise ValueError("range start must not exceed its end")
    mask = (-1 << (j + 1)) | ((1 << i) - 1)
    return n & mask


def max_xor_in_range(low: int, high: int) -> int:
    """Largest a ^ b for low <= a <= b <= high (order of the bounds does not matter)."""
    return (1 << (low ^ high).bit_length()) - 1


def two_unique_elements(values: Iterable[int]) -> tuple[int, int]:
    """The two values that occur an odd number of times, smaller first.

    Every other value must occur an even number of times.
    """
    items = list(values)
    combined = reduce(xor, items, 0)
    lowest = combined & -combined
    first = reduce(xor, (value for value in items if value & lowest), 0)
    second = first ^ combined
    return min(first, second), max(first, second)


def count_set_bits(n: int) -> int:
    """Number of set bits in a non-negative integer."""
    if n < 0:
        raise ValueError("n must not be negative")
    return bin(n).count("1")


def total_set_bits(n: int) -> int:
    """Total number of set bits over all integers from 1 to n."""
    return sum(count_set_bits(i) for i in range(1, n + 1))


def bits32(n: int) -> str:
    """The 32-bit two's complement binary representation of n."""
    return format(n & 0xFFFFFFFF, "032b")