"""Binary search, quicksort and three-way partitioning."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import MutableSequence, Sequence
from typing import Any, Optional


def lower_bound(values: Sequence[Any], element: Any) -> Optional[int]:
    """Index of the first value not less than element in a sorted sequence, or None."""
    index = bisect_left(values, element)
    return index if index < len(values) else None


def binary_search(
    values: Sequence[Any], target: Any, low: int = 0, high: Optional[int] = None
) -> Optional[int]:
    """Search the half-open range [low, high) of a sorted sequence for target.

    The search stops once fewer than two candidates remain, so a lone
    remaining candidate is not examined; None is returned when nothing matched.
    """
    if high is None:
        high = len(values)
    while high - low > 1:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid
    return None


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Lomuto partition of values[low..high] around values[high]; return the pivot's index."""
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def _quicksort(values: MutableSequence[Any], low: int, high: int) -> None:
    while low < high:
        pivot = partition(values, low, high)
        if pivot - low < high - pivot:
            _quicksort(values, low, pivot - 1)
            low = pivot + 1
        else:
            _quicksort(values, pivot + 1, high)
            high = pivot - 1


def quicksort(values: MutableSequence[Any]) -> None:
    """Sort values in place."""
    _quicksort(values, 0, len(values) - 1)


def three_way_partition(values: MutableSequence[Any], low_bound: Any, high_bound: Any) -> None:
    """Rearrange in place: values below low_bound, then those in range, then those above high_bound."""
    low, mid, high = 0, 0, len(values) - 1
    while mid <= high:
        value = values[mid]
        if value < low_bound:
            values[mid], values[low] = values[low], values[mid]
            mid += 1
            low += 1
        elif value <= high_bound:
            mid += 1
        else:
            values[mid], values[high] = values[high], values[mid]
            high -= 1