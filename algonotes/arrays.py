"""Array techniques: sliding windows, two pointers, voting and prefix sums."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from itertools import accumulate
from typing import Any, Optional


def distinct_window_counts(values: Sequence[Any], k: int) -> list[int]:
    """Number of distinct values in every window of k consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the number of values")
    counts = Counter(values[:k])
    result = [len(counts)]
    for leaving, entering in zip(values, values[k:]):
        counts[leaving] -= 1
        if counts[leaving] == 0:
            del counts[leaving]
        counts[entering] += 1
        result.append(len(counts))
    return result


def sliding_window_max(values: Sequence[Any], k: int) -> list[Any]:
    """Maximum of every window of k consecutive values; empty when k exceeds the length."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    result: list[Any] = []
    window: deque[int] = deque()
    for i, value in enumerate(values):
        if window and window[0] == i - k:
            window.popleft()
        while window and values[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(values[window[0]])
    return result


def smallest_subarray_over(values: Sequence[int], k: int) -> Optional[int]:
    """Length of the shortest contiguous run whose sum exceeds k, or None if there is none.

    The values are expected to be non-negative.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    n = len(values)
    best: Optional[int] = None
    start = end = 0
    total = 0
    while end < n:
        while end < n and total <= k:
            total += values[end]
            end += 1
        while start < end and total > k:
            length = end - start
            if best is None or length < best:
                best = length
            total -= values[start]
            start += 1
    return best


def majority_element(values: Sequence[Any]) -> Any:
    """Boyer-Moore voting candidate; it is the majority value whenever one exists."""
    if not values:
        raise ValueError("no values given")
    candidate = values[0]
    count = 0
    for value in values:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def majority_elements_ii(values: Sequence[Any]) -> list[Any]:
    """Values occurring more than len(values) // 3 times."""
    first: Any = None
    second: Any = None
    first_count = second_count = 0
    for value in values:
        if first_count and value == first or first is not None and value == first:
            first_count += 1
        elif second is not None and value == second:
            second_count += 1
        elif first_count == 0:
            first, first_count = value, 1
        elif second_count == 0:
            second, second_count = value, 1
        else:
            first_count -= 1
            second_count -= 1

    first_count = second_count = 0
    for value in values:
        if first is not None and value == first:
            first_count += 1
        elif second is not None and value == second:
            second_count += 1

    threshold = len(values) // 3
    result = []
    if first_count > threshold:
        result.append(first)
    if second_count > threshold:
        result.append(second)
    return result


def palindrome_merge_operations(values: Sequence[int]) -> int:
    """Fewest merges of adjacent elements (replacing them by their sum) to make a palindrome."""
    items = list(values)
    i, j = 0, len(items) - 1
    operations = 0
    while i <= j:
        if items[i] == items[j]:
            i += 1
            j -= 1
        elif items[i] < items[j]:
            i += 1
            items[i] += items[i - 1]
            operations += 1
        else:
            j -= 1
            items[j] += items[j + 1]
            operations += 1
    return operations


class RangeSum:
    """Constant-time sums of contiguous ranges through prefix sums."""

    def __init__(self, values: Sequence[int]) -> None:
        self._prefix = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def query(self, left: int, right: int) -> int:
        """Sum of the values at indices left through right, inclusive."""
        if not 0 <= left <= right < len(self):
            raise IndexError("range out of bounds")
        return self._prefix[right + 1] - self._prefix[left]


def occurrences(values: Sequence[Any], target: Any) -> list[int]:
    """Indices at which target occurs, in ascending order."""
    return [index for index, value in enumerate(values) if value == target]