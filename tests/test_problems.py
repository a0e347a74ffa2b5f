import pytest

from algonotes.problems import (
    Greeter,
    RegistrationSystem,
    all_zero,
    count_ending_239,
    digit_sum,
    min_notes,
    or_matrix,
    single_segment,
    smallest_uniform_base,
    streak_broken,
    weekly_max,
)


def test_or_matrix_all_ones_is_its_own_answer():
    matrix = [[1, 1, 1], [1, 1, 1]]
    assert or_matrix(matrix) == matrix


def test_or_matrix_inconsistent_gives_none():
    assert or_matrix([[1, 0], [0, 0]]) is None


def test_or_matrix_mixed():
    assert or_matrix([[0, 1, 0], [1, 1, 1]]) == [[0, 0, 0], [0, 1, 0]]


def test_or_matrix_zero_matrix():
    zeros = [[0, 0], [0, 0], [0, 0]]
    assert or_matrix(zeros) == zeros


def test_or_matrix_does_not_modify_input():
    matrix = [[0, 1, 0], [1, 1, 1]]
    or_matrix(matrix)
    assert matrix == [[0, 1, 0], [1, 1, 1]]


def test_or_matrix_ragged_rows_rejected():
    with pytest.raises(ValueError):
        or_matrix([[1, 1], [1]])


@pytest.mark.parametrize(
    "bits, expected",
    [("001100", True), ("1", True), ("0101", False), ("000", False), ("", False), ("111", True)],
)
def test_single_segment(bits, expected):
    assert single_segment(bits) is expected


def test_single_segment_rejects_other_characters():
    with pytest.raises(ValueError):
        single_segment("012")


def test_registration_suffixes_repeats():
    system = RegistrationSystem()
    answers = [system.register(name) for name in ["first", "first", "second", "first"]]
    assert answers == ["OK", "first1", "OK", "first2"]


def test_registration_systems_are_independent():
    one, two = RegistrationSystem(), RegistrationSystem()
    one.register("name")
    assert two.register("name") == "OK"


@pytest.mark.parametrize(
    "triples, expected",
    [([(0, 0, 0)], True), ([(1, -1, 0), (4, 0, -4)], True), ([(1, 0, 0)], False), ([], True)],
)
def test_all_zero(triples, expected):
    assert all_zero(triples) is expected


@pytest.mark.parametrize("days, x, y, z", [(1, 5, 8, 4), (6, 2, 10, 1), (0, 3, 1, 4), (7, 1, 9, 9)])
def test_weekly_max_picks_the_better_plan(days, x, y, z):
    result = weekly_max(days, x, y, z)
    flat = 7 * x
    split = y * days + z * (7 - days)
    assert result >= flat and result >= split
    assert result in (flat, split)


def test_weekly_max_rejects_bad_days():
    with pytest.raises(ValueError):
        weekly_max(8, 1, 1, 1)


@pytest.mark.parametrize("number", [1, 2])
def test_smallest_uniform_base_none_for_tiny(number):
    assert smallest_uniform_base(number) is None


def test_smallest_uniform_base_seven_is_binary_ones():
    assert smallest_uniform_base(7) == 2


@pytest.mark.parametrize("number", range(3, 60))
def test_smallest_uniform_base_has_uniform_digits(number):
    base = smallest_uniform_base(number)
    assert 2 <= base <= number - 1
    digits = set()
    value = number
    while value:
        value, digit = divmod(value, base)
        digits.add(digit)
    assert len(digits) == 1


def test_digit_sum_single_digits():
    assert [digit_sum(str(d)) for d in range(10)] == list(range(10))


def test_digit_sum_ignores_letters_and_is_additive():
    assert digit_sum("abc") == 0
    assert digit_sum("x7y") == digit_sum("7")
    assert digit_sum("12ab34") == digit_sum("12") + digit_sum("34")


@pytest.mark.parametrize("values, expected", [([1, 2, 3], 4), ([8, 4, 2], 4), ([2, 2], 2)])
def test_min_notes_samples(values, expected):
    assert min_notes(values) == expected


def test_min_notes_single_amount():
    assert min_notes([1000]) == 1


def test_min_notes_equal_amounts_need_one_note_each():
    assert min_notes([6, 6, 6, 6, 6]) == 5


@pytest.mark.parametrize("values", [[], [3, 0], [-2, 4]])
def test_min_notes_rejects_bad_input(values):
    with pytest.raises(ValueError):
        min_notes(values)


@pytest.mark.parametrize("decade", [0, 1, 7, 42])
def test_count_ending_239_per_decade(decade):
    assert count_ending_239(decade * 10, decade * 10 + 9) == 3


def test_count_ending_239_additive():
    assert count_ending_239(5, 123) == count_ending_239(5, 60) + count_ending_239(61, 123)


def test_count_ending_239_empty_range():
    assert count_ending_239(10, 5) == 0


def test_count_ending_239_rejects_negative():
    with pytest.raises(ValueError):
        count_ending_239(-3, 5)


@pytest.mark.parametrize(
    "number, expected",
    [(21, True), (42, True), (1211, True), (0, True), (10, False), (12, False), (2, False)],
)
def test_streak_broken(number, expected):
    assert streak_broken(number) is expected


def test_greeter():
    assert Greeter().say_hello("Ada") == "Hello, Ada"