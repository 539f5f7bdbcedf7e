import pytest

from strkit.numbers import (
    atoi,
    atoi_base,
    check_base,
    convert_base,
    int_len,
    itoa,
    itoa_base,
    maximum,
)

DEC = "0123456789"
HEX = "0123456789abcdef"
BIN = "01"


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n-42xyz") == -42
    assert atoi("+17") == 17


def test_atoi_double_sign_gives_zero():
    assert atoi("--5") == 0
    assert atoi("abc") == 0


def test_atoi_none_is_zero():
    assert atoi(None) == 0


@pytest.mark.parametrize("n", [0, 1, -1, 7, 123456, -987654, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 5, -5, 10, -10, 99999, -100000, 2147483647])
def test_int_len_matches_formatted_length(n):
    assert int_len(n) == len(itoa(n))


@pytest.mark.parametrize("base", [BIN, DEC, HEX, "poneyvif"])
def test_check_base_accepts_valid(base):
    assert check_base(base) is True


@pytest.mark.parametrize("base", ["", "0", "011", "+01", "01-"])
def test_check_base_rejects_invalid(base):
    assert check_base(base) is False


def test_atoi_base_hex():
    assert atoi_base("ff", HEX) == 255


def test_atoi_base_sign_parity():
    assert atoi_base("--1011", BIN) == atoi_base("1011", BIN)
    assert atoi_base("-1011", BIN) == -atoi_base("1011", BIN)
    assert atoi_base("+-+1011", BIN) == -atoi_base("1011", BIN)


def test_atoi_base_stops_at_space_after_minus():
    assert atoi_base("- 1", BIN) == 0


def test_atoi_base_stops_at_foreign_char():
    assert atoi_base("1012", BIN) == atoi_base("101", BIN)


def test_itoa_base_zero_is_first_digit():
    assert itoa_base(0, BIN) == "0"
    assert itoa_base(0, "xyz") == "x"


def test_itoa_base_negative():
    assert itoa_base(-5, BIN) == "-101"


@pytest.mark.parametrize("base", [BIN, DEC, HEX, "poneyvif"])
@pytest.mark.parametrize("n", [0, 1, -1, 42, -4096, 2147483647])
def test_itoa_base_round_trip(n, base):
    assert atoi_base(itoa_base(n, base), base) == n


def test_convert_base_decimal_to_hex():
    assert convert_base("255", DEC, HEX) == "ff"


@pytest.mark.parametrize("text", ["0", "7", "-123", "65535"])
def test_convert_base_round_trip(text):
    assert convert_base(convert_base(text, DEC, BIN), BIN, DEC) == text


@pytest.mark.parametrize("bad", ["", "a", "aa", "01+"])
def test_convert_base_invalid_raises(bad):
    with pytest.raises(ValueError):
        convert_base("1", bad, DEC)
    with pytest.raises(ValueError):
        convert_base("1", DEC, bad)


def test_itoa_base_invalid_raises():
    with pytest.raises(ValueError):
        itoa_base(3, "00")


def test_maximum_all():
    assert maximum([3, 9, 2]) == 9


def test_maximum_limited_window():
    values = [3, 9, 2]
    assert maximum(values, 1) == 3
    assert maximum(values, 0) == 3
    assert maximum(values, 2) == 9


def test_maximum_chars():
    assert maximum("abz", 3) == "z"


def test_maximum_empty_raises():
    with pytest.raises(ValueError):
        maximum([])


def test_maximum_negative_size_raises():
    with pytest.raises(ValueError):
        maximum([1, 2], -1)