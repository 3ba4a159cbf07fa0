import pytest

from numwords.numbers import ULONG_MAX, is_numeric, parse_unsigned


@pytest.mark.parametrize("text", ["0", "42", "-5", "", "18446744073709551616"])
def test_is_numeric_accepts(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["-", "4a", "+5", " 1", "--3", "1-", "1.5"])
def test_is_numeric_rejects(text):
    assert is_numeric(text) is False


def test_parse_plain_digits():
    assert parse_unsigned("42") == 42


def test_parse_zero():
    assert parse_unsigned("0") == 0


def test_parse_stops_at_non_digit():
    assert parse_unsigned("123abc") == 123


def test_parse_minus_gives_zero():
    assert parse_unsigned("-5") == 0


def test_parse_skips_control_characters():
    assert parse_unsigned("\t\n\r77") == 77


def test_parse_does_not_skip_spaces():
    assert parse_unsigned(" 77") == 0


def test_parse_empty():
    assert parse_unsigned("") == 0


def test_parse_largest_value():
    assert parse_unsigned(str(ULONG_MAX)) == ULONG_MAX


def test_parse_saturates_on_overflow():
    assert parse_unsigned(str(ULONG_MAX) + "0") == ULONG_MAX
    assert parse_unsigned(str(ULONG_MAX + 1)) == ULONG_MAX


def test_ulong_max_is_64_bit():
    assert ULONG_MAX.bit_length() == 64
    assert (ULONG_MAX + 1) & ULONG_MAX == 0


@pytest.mark.parametrize("value", [1, 19, 100, 1000000, 10**18, ULONG_MAX - 1])
def test_parse_round_trip(value):
    assert parse_unsigned(str(value)) == value