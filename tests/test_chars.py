import string

import pytest

from fractscope.chars import (
    atol,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


def test_is_alpha_matches_ascii_letters():
    letters = {code for code in range(256) if is_alpha(code)}
    assert letters == {ord(ch) for ch in string.ascii_letters}


def test_is_digit_matches_ascii_digits():
    digits = {code for code in range(256) if is_digit(code)}
    assert digits == {ord(ch) for ch in string.digits}


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_range():
    printable = [code for code in range(256) if is_print(code)]
    assert printable == list(range(32, 127))


def test_accepts_single_character_strings():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_print("\n") is False


def test_rejects_multi_character_strings():
    with pytest.raises(TypeError):
        is_alpha("ab")


def test_case_mapping_agrees_with_str_for_ascii():
    for ch in string.printable:
        assert to_lower(ch) == ch.lower()
        assert to_upper(ch) == ch.upper()


def test_case_mapping_keeps_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_lower(ord("5")) == ord("5")


def test_case_mapping_leaves_non_ascii_alone():
    assert to_lower("É") == "É"
    assert to_upper("é") == "é"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n\v\f\r +17xyz", 17),
        ("-2147483648", -2147483648),
    ],
)
def test_atol_parses_leading_number(text, expected):
    assert atol(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-3", " - 4"])
def test_atol_without_digits_is_zero(text):
    assert atol(text) == 0


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trips_through_atol(n):
    text = itoa(n)
    assert atol(text) == n
    assert text == str(n)


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"