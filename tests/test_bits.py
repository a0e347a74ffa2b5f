import pytest

from algonotes.bits import (
    bits32,
    clear_bit,
    clear_bit_range,
    clear_last_bits,
    count_set_bits,
    get_bit,
    is_odd,
    max_xor_in_range,
    set_bit,
    total_set_bits,
    two_unique_elements,
    update_bit,
)


def test_is_odd_on_source_value():
    assert is_odd(72) is False
    assert is_odd(73) is True


@pytest.mark.parametrize("n", [0, 1, 72, 127, 1000])
@pytest.mark.parametrize("pos", [0, 1, 3, 5, 9])
def test_set_and_clear_bit(n, pos):
    assert get_bit(set_bit(n, pos), pos) is True
    assert get_bit(clear_bit(n, pos), pos) is False
    assert clear_bit(set_bit(n, pos), pos) == clear_bit(n, pos)


@pytest.mark.parametrize("n", [0, 72, 255])
@pytest.mark.parametrize("pos", [0, 2, 5])
def test_update_bit_matches_set_and_clear(n, pos):
    assert update_bit(n, pos, 1) == set_bit(n, pos)
    assert update_bit(n, pos, 0) == clear_bit(n, pos)


def test_update_bit_rejects_bad_bit():
    with pytest.raises(ValueError):
        update_bit(5, 1, 2)


@pytest.mark.parametrize("num", [0, 127, 1023, 98765])
@pytest.mark.parametrize("count", [0, 1, 3, 7])
def test_clear_last_bits(num, count):
    result = clear_last_bits(num, count)
    assert result % (1 << count) == 0
    assert result >> count == num >> count


@pytest.mark.parametrize("n", [127, 1023, 54321])
@pytest.mark.parametrize("i,j", [(0, 0), (2, 3), (1, 6)])
def test_clear_bit_range(n, i, j):
    result = clear_bit_range(n, i, j)
    for pos in range(20):
        if i <= pos <= j:
            assert get_bit(result, pos) is False
        else:
            assert get_bit(result, pos) == get_bit(n, pos)


def test_clear_bit_range_rejects_reversed_range():
    with pytest.raises(ValueError):
        clear_bit_range(127, 4, 2)


@pytest.mark.parametrize("low,high", [(1, 1), (1, 2), (8, 16), (10, 15), (0, 31)])
def test_max_xor_in_range_is_attained(low, high):
    best = max(a ^ b for a in range(low, high + 1) for b in range(a, high + 1))
    assert max_xor_in_range(low, high) == best
    assert max_xor_in_range(high, low) == best


@pytest.mark.parametrize("uniques", [(3, 5), (1, 2), (10, 4), (0, 7)])
def test_two_unique_elements(uniques):
    values = [8, 9, 8, 11, 9, 11, uniques[0], 6, uniques[1], 6]
    assert two_unique_elements(values) == (min(uniques), max(uniques))


@pytest.mark.parametrize("k", range(0, 12))
def test_count_set_bits_powers(k):
    assert count_set_bits((1 << k) - 1) == k
    assert count_set_bits(1 << k) == 1


def test_count_set_bits_negative():
    with pytest.raises(ValueError):
        count_set_bits(-1)


@pytest.mark.parametrize("n", [1, 4, 17, 64])
def test_total_set_bits_increments(n):
    assert total_set_bits(n) - total_set_bits(n - 1) == count_set_bits(n)
    assert total_set_bits(0) == 0


@pytest.mark.parametrize("n", [0, 1, 72, 2**31 - 1, 2**32 - 1])
def test_bits32_round_trip(n):
    text = bits32(n)
    assert len(text) == 32
    assert int(text, 2) == n


def test_bits32_negative_is_twos_complement():
    assert bits32(-1) == "1" * 32