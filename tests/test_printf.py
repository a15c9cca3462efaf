import io

import pytest

from fractol.printf import format_printf, printf


def test_plain_text_passes_through():
    assert format_printf("hello world") == "hello world"


def test_percent_literal():
    assert format_printf("100%%") == "100%"


def test_char_from_code_and_string():
    assert format_printf("%c", 65) == "A"
    assert format_printf("%c", "z") == "z"


def test_string_and_null():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == "(null)"


@pytest.mark.parametrize("value", [0, 7, -42, 123456, -2147483648, 2147483647])
def test_signed_decimal(value):
    assert format_printf("%d", value) == str(value)
    assert format_printf("%i", value) == str(value)


def test_signed_decimal_wraps_to_32_bits():
    assert int(format_printf("%d", 2**31)) == 2**31 - 2**32


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(value):
    lower = format_printf("%x", value)
    upper = format_printf("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_pointer_format():
    text = format_printf("%p", 4096)
    assert text.startswith("0x")
    assert int(text, 16) == 4096
    assert format_printf("%p", None) == "0x0"


def test_unknown_specifier_and_trailing_percent_dropped():
    assert format_printf("a%qb") == "ab"
    assert format_printf("a%") == "a"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d\n", "x", 5, stream=stream)
    assert stream.getvalue() == "x=5\n"
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%c%c", "o", "k")
    assert capsys.readouterr().out == "ok"
    assert count == 2