import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.convert import atoi, atol, itoa

PARSERS = [atoi, atol]


@pytest.mark.parametrize("parse", PARSERS)
@given(st.integers(min_value=-(2**63), max_value=2**63 - 1))
def test_round_trip_with_itoa(parse, n):
    assert parse(itoa(n)) == n


@given(st.integers())
def test_itoa_matches_int_parsing(n):
    assert int(itoa(n)) == n


def test_itoa_int_min_boundary():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero_has_no_sign():
    assert itoa(0) == "0"


@pytest.mark.parametrize("prefix", [" ", "\t", "\n", "\v", "\f", "\r", " \t\n\v\f\r"])
def test_leading_whitespace_skipped(prefix):
    assert atoi(prefix + "42") == 42
    assert atoi(prefix + "-42") == -42
    assert atol(prefix + "42") == 42
    assert atol(prefix + "-42") == -42


def test_plus_sign_accepted():
    assert atoi("+17") == 17
    assert atol("+17") == 17


def test_stops_at_first_non_digit():
    assert atoi("123abc456") == 123
    assert atoi("-9 8") == -9
    assert atol("123abc456") == 123
    assert atol("-9 8") == -9


@pytest.mark.parametrize("text", ["", "   ", "abc", "+-5", "--5", "- 5", "\u0663"])
def test_no_digits_yields_zero(text):
    assert atoi(text) == 0
    assert atol(text) == 0


def test_whitespace_after_sign_not_skipped():
    assert atoi("+ 7") == 0
    assert atol("+ 7") == 0


def test_large_values_preserved():
    assert atoi("9223372036854775807") == 9223372036854775807
    assert atol("9223372036854775807") == 9223372036854775807


@given(st.text())
def test_atoi_and_atol_agree(text):
    assert atoi(text) == atol(text)


def test_atoi_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(5)


def test_atol_rejects_non_string():
    with pytest.raises(TypeError):
        atol(5)


@pytest.mark.parametrize("value", ["5", 1.0, True, None])
def test_itoa_rejects_non_int(value):
    with pytest.raises(TypeError):
        itoa(value)