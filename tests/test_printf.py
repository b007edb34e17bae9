import pytest

from ftlib.printf import FormatError, format_string, printf


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_percent_escape():
    assert format_string("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 7, 42, -1, -123456, 2147483647])
def test_signed_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


def test_int_min_and_wrap():
    assert format_string("%d", -2147483648) == "-2147483648"
    assert format_string("%d", 2**31) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 2**32 - 1])
def test_unsigned_and_hex_round_trip(n):
    assert int(format_string("%u", n)) == n
    assert int(format_string("%x", n), 16) == n
    assert format_string("%X", n) == format_string("%x", n).upper()


def test_negative_wraps_to_unsigned():
    assert int(format_string("%u", -1)) == 2**32 - 1
    assert int(format_string("%x", -1), 16) == 2**32 - 1


def test_hex_lowercase_digits():
    assert format_string("%x", 255) == "ff"


def test_char_conversions():
    assert format_string("%c%c", "a", 66) == "aB"


def test_string_and_null():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


def test_pointer():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"
    text = format_string("%p", 4096)
    assert text.startswith("0x")
    assert int(text, 16) == 4096


def test_mixed_format():
    assert format_string("%s=%d", "x", 5) == "x=5"


def test_unknown_conversion_raises():
    with pytest.raises(FormatError):
        format_string("%q", 1)


def test_lone_percent_raises():
    with pytest.raises(FormatError):
        format_string("abc%")


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_string("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "1")


def test_printf_writes_and_counts(capsys):
    count = printf("%s has %d items%c", "list", 3, "\n")
    out = capsys.readouterr().out
    assert out == format_string("%s has %d items%c", "list", 3, "\n")
    assert count == len(out)


def test_printf_none_writes_nothing(capsys):
    assert printf(None) == 0
    assert capsys.readouterr().out == ""