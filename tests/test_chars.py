import string

import pytest

from strkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)
    assert is_alpha(chr(code)) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_printable_ascii(code):
    assert is_print(code) == chr(code).isprintable()


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("ß") is False
    assert is_digit("٣") is False


def test_print_boundaries():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False
    assert is_print("\n") is False


@pytest.mark.parametrize("lower_c, upper_c", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_round_trip(lower_c, upper_c):
    assert to_upper(lower_c) == upper_c
    assert to_lower(upper_c) == lower_c
    assert to_lower(to_upper(lower_c)) == lower_c


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " \té"))
def test_case_conversion_leaves_non_letters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)