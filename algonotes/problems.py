"""Small contest problems: matrices, strings, counters and number puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate, groupby
from math import gcd
from operator import or_
from typing import Optional


def or_matrix(matrix: Sequence[Sequence[int]]) -> Optional[list[list[int]]]:
    """Find a matrix A whose row-or-column OR at every cell gives matrix.

    Cells in any row or column of matrix that holds a zero are cleared; the
    candidate is returned when it reproduces matrix, otherwise None.
    """
    rows = [list(row) for row in matrix]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")

    zero_rows = {i for i, row in enumerate(rows) if 0 in row}
    zero_cols = {j for j, column in enumerate(zip(*rows)) if 0 in column}
    candidate = [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(rows)
    ]

    row_or = [reduce(or_, row, 0) for row in candidate]
    col_or = [reduce(or_, column, 0) for column in zip(*candidate)]
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            if value != row_or[i] | col_or[j]:
                return None
    return candidate


def single_segment(bits: str) -> bool:
    """True when a binary string holds exactly one run of ones."""
    if set(bits) - {"0", "1"}:
        raise ValueError("bits must contain only '0' and '1'")
    runs = sum(1 for key, _ in groupby(bits) if key == "1")
    return runs == 1


class RegistrationSystem:
    """Hands out unique user names, suffixing repeats with a counter."""

    def __init__(self) -> None:
        self._seen: Counter[str] = Counter()

    def register(self, name: str) -> str:
        """Return "OK" for a new name, otherwise the name followed by its repeat number."""
        count = self._seen[name]
        self._seen[name] += 1
        return "OK" if count == 0 else f"{name}{count}"


def all_zero(triples: Iterable[Sequence[int]]) -> bool:
    """True when every number across all the triples sums to zero."""
    return sum(sum(triple) for triple in triples) == 0


def weekly_max(days: int, x: int, y: int, z: int) -> int:
    """Better of earning x on all seven days, or y on the first days and z on the rest."""
    if not 0 <= days <= 7:
        raise ValueError("days must be between 0 and 7")
    return max(7 * x, y * days + z * (7 - days))


def _digits(number: int, base: int) -> Iterable[int]:
    while number:
        number, digit = divmod(number, base)
        yield digit


def smallest_uniform_base(number: int) -> Optional[int]:
    """Smallest base below number in which all digits of number are equal, or None."""
    for base in range(2, number):
        if len(set(_digits(number, base))) <= 1:
            return base
    return None


def digit_sum(text: str) -> int:
    """Sum of the decimal digits appearing in text."""
    return sum(int(ch) for ch in text if ch in "0123456789")


def min_notes(values: Sequence[int]) -> int:
    """Fewest notes paying every amount after changing one of them freely.

    One amount is replaced by the GCD of the others, chosen so the common note
    value is as large as possible; every amount is then paid in that note.
    """
    items = list(values)
    if not items:
        raise ValueError("no amounts given")
    if any(value <= 0 for value in items):
        raise ValueError("amounts must be positive")
    if len(items) == 1:
        return 1

    before = [0, *accumulate(items, gcd)][:-1]
    after = [*list(accumulate(reversed(items), gcd))[::-1][1:], 0]
    without = [gcd(left, right) for left, right in zip(before, after)]

    best = max(range(len(items)), key=lambda i: (without[i], items[i]))
    note = without[best]
    return 1 + sum(value // note for i, value in enumerate(items) if i != best)


def count_ending_239(low: int, high: int) -> int:
    """How many integers in low..high end in the digit 2, 3 or 9."""
    if low < 0:
        raise ValueError("low must not be negative")
    return sum(1 for i in range(low, high + 1) if i % 10 in (2, 3, 9))


def streak_broken(number: int) -> bool:
    """True when number is divisible by 21 or contains the digits 21 in a row."""
    if number < 0:
        raise ValueError("number must not be negative")
    return number % 21 == 0 or "21" in str(number)


class Greeter:
    """Produces greetings."""

    def say_hello(self, name: str) -> str:
        """Greeting for name."""
        return f"Hello, {name}"