"""Knapsack and subset enumeration by recursion and dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _check_items(weights: Sequence[int], values: Sequence[int], capacity: int) -> None:
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack_recursive(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value of items fitting in capacity, by plain recursion over the items."""
    _check_items(weights, values, capacity)

    @lru_cache(maxsize=None)
    def best(remaining: int, size: int) -> int:
        if remaining == 0 or size == 0:
            return 0
        weight = weights[size - 1]
        skip = best(remaining, size - 1)
        if weight <= remaining:
            return max(values[size - 1] + best(remaining - weight, size - 1), skip)
        return skip

    return best(capacity, len(weights))


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value of items fitting in capacity, by a bottom-up table."""
    _check_items(weights, values, capacity)
    table = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, 0, -1):
            if weight <= room:
                table[room] = max(table[room], value + table[room - weight])
    return table[capacity]


def subsets_divisible(values: Sequence[int], k: int) -> list[list[int]]:
    """Non-empty subsets whose sum is divisible by k, taking-first order."""
    if k == 0:
        raise ValueError("k must not be zero")
    found: list[list[int]] = []
    chosen: list[int] = []

    def walk(index: int, total: int) -> None:
        if index == len(values):
            if chosen and total % k == 0:
                found.append(list(chosen))
            return
        chosen.append(values[index])
        walk(index + 1, total + values[index])
        chosen.pop()
        walk(index + 1, total)

    walk(0, 0)
    return found


def string_subsets(text: str) -> list[str]:
    """Every subsequence of text, including the empty one, taking-first order."""
    found: list[str] = []

    def walk(index: int, prefix: str) -> None:
        if index == len(text):
            found.append(prefix)
            return
        walk(index + 1, prefix + text[index])
        walk(index + 1, prefix)

    walk(0, "")
    return found


def combination_sums(values: Sequence[int], target: int) -> list[list[int]]:
    """Combinations of values, each usable any number of times, summing to target."""
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")
    found: list[list[int]] = []
    chosen: list[int] = []

    def walk(index: int, remaining: int) -> None:
        if index == len(values):
            if chosen and remaining == 0:
                found.append(list(chosen))
            return
        value = values[index]
        if remaining >= value:
            chosen.append(value)
            walk(index, remaining - value)
            chosen.pop()
        walk(index + 1, remaining)

    walk(0, target)
    return found