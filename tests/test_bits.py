import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.bits import (
    clear_bit,
    divide_by_power_of_two,
    is_bit_set,
    is_odd,
    is_power_of_two,
    mod_power_of_two,
    multiply_by_power_of_two,
    set_bit,
    to_binary,
    to_lower,
    to_upper,
    xor_swap,
)

ints = st.integers(-10**9, 10**9)
shifts = st.integers(0, 40)


@given(ints)
def test_is_odd_matches_remainder(n):
    assert is_odd(n) == (n % 2 == 1)


def test_powers_of_two_up_to_1024():
    found = {n for n in range(-4, 1025) if is_power_of_two(n)}
    assert found == {1 << i for i in range(11)}


def test_zero_is_not_power_of_two():
    assert is_power_of_two(0) is False


@given(ints, shifts)
def test_set_bit_sets_only_that_bit(n, k):
    result = set_bit(n, k)
    assert is_bit_set(result, k)
    assert clear_bit(result, k) == clear_bit(n, k)


@given(ints, shifts)
def test_clear_bit_clears_only_that_bit(n, k):
    result = clear_bit(n, k)
    assert not is_bit_set(result, k)
    assert set_bit(result, k) == set_bit(n, k)


@given(ints, shifts)
def test_is_bit_set_matches_division(n, k):
    assert is_bit_set(n, k) == ((n // 2**k) % 2 == 1)


@given(ints, shifts)
def test_shift_arithmetic(n, k):
    assert divide_by_power_of_two(n, k) == n // 2**k
    assert multiply_by_power_of_two(n, k) == n * 2**k
    assert mod_power_of_two(n, k) == n % 2**k


@pytest.mark.parametrize(
    "func",
    [is_bit_set, set_bit, clear_bit, divide_by_power_of_two,
     multiply_by_power_of_two, mod_power_of_two],
)
def test_negative_bit_position_rejected(func):
    with pytest.raises(ValueError):
        func(5, -1)


@given(st.integers(0, 2047))
def test_to_binary_round_trip(n):
    text = to_binary(n)
    assert len(text) == 11
    assert int(text, 2) == n


def test_to_binary_negative_one_is_all_ones():
    assert to_binary(-1) == "1" * 11
    assert to_binary(-1, 4) == "1111"


def test_to_binary_truncates_high_bits():
    assert to_binary(2048 + 3) == to_binary(3)


def test_to_binary_rejects_negative_width():
    with pytest.raises(ValueError):
        to_binary(3, -1)


@given(ints, ints)
def test_xor_swap_swaps(x, y):
    assert xor_swap(x, y) == (y, x)


@pytest.mark.parametrize("char", list(string.ascii_letters))
def test_case_conversion_matches_str_methods(char):
    assert to_lower(char) == char.lower()
    assert to_upper(char) == char.upper()


@pytest.mark.parametrize("char", ["1", " ", "_", "@"])
def test_non_letters_pass_through(char):
    assert to_lower(char) == char
    assert to_upper(char) == char


@pytest.mark.parametrize("bad", ["", "ab"])
def test_case_conversion_needs_one_character(bad):
    with pytest.raises(ValueError):
        to_lower(bad)
    with pytest.raises(ValueError):
        to_upper(bad)