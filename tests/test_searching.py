import random
from collections import Counter

import pytest

from algonotes.searching import (
    binary_search,
    lower_bound,
    partition,
    quicksort,
    three_way_partition,
)

SOURCE_ARRAY = [2, 3, 4, 6, 7, 8]


def test_binary_search_source_example():
    assert binary_search(SOURCE_ARRAY, 8, 0, 6) == 5


def test_binary_search_default_range():
    assert binary_search(SOURCE_ARRAY, 6) == 3


def test_binary_search_absent_value():
    assert binary_search(SOURCE_ARRAY, 5) is None
    assert binary_search([], 1) is None


@pytest.mark.parametrize("element", [0, 2, 3, 5, 6, 8])
def test_lower_bound_invariant(element):
    index = lower_bound(SOURCE_ARRAY, element)
    assert SOURCE_ARRAY[index] >= element
    assert index == 0 or SOURCE_ARRAY[index - 1] < element


def test_lower_bound_past_end():
    assert lower_bound(SOURCE_ARRAY, 9) is None
    assert lower_bound([], 1) is None


def test_lower_bound_exact_match():
    assert lower_bound(SOURCE_ARRAY, 7) == SOURCE_ARRAY.index(7)


def test_partition_places_pivot():
    values = [9, 3, 7, 1, 8, 5]
    pivot_value = values[-1]
    index = partition(values, 0, len(values) - 1)
    assert values[index] == pivot_value
    assert all(v <= pivot_value for v in values[:index])
    assert all(v > pivot_value for v in values[index + 1 :])


def test_partition_subrange_leaves_rest():
    values = [100, 4, 2, 3, -1]
    index = partition(values, 1, 3)
    assert values[0] == 100
    assert values[-1] == -1
    assert values[index] == 3
    assert sorted(values[1:4]) == [2, 3, 4]


@pytest.mark.parametrize("seed", range(8))
def test_quicksort_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(1, 100) for _ in range(rng.randint(0, 40))]
    expected = sorted(values)
    quicksort(values)
    assert values == expected


def test_quicksort_already_sorted_large():
    values = list(range(3000))
    quicksort(values)
    assert values == list(range(3000))


@pytest.mark.parametrize("seed", range(6))
def test_three_way_partition_groups(seed):
    rng = random.Random(seed)
    values = [rng.randint(1, 10) for _ in range(rng.randint(1, 20))]
    original = Counter(values)
    low_bound, high_bound = 3, 7
    three_way_partition(values, low_bound, high_bound)
    assert Counter(values) == original
    ranks = [0 if v < low_bound else 1 if v <= high_bound else 2 for v in values]
    assert ranks == sorted(ranks)


def test_three_way_partition_empty():
    values = []
    three_way_partition(values, 1, 2)
    assert values == []