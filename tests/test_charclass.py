import pytest

from fractol.charclass import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ASCII = range(128)


def test_isalpha_distinguishes_case():
    assert isalpha("a") == 2
    assert isalpha("A") == 1
    assert not isalpha("3")


@pytest.mark.parametrize("code", ASCII)
def test_isalpha_matches_ascii_letters(code):
    assert bool(isalpha(code)) == chr(code).isalpha()


@pytest.mark.parametrize("code", ASCII)
def test_isdigit_matches_ascii_digits(code):
    assert bool(isdigit(code)) == chr(code).isdigit()


@pytest.mark.parametrize("code", ASCII)
def test_isalnum_is_letter_or_digit(code):
    assert bool(isalnum(code)) == bool(isalpha(code) or isdigit(code))
    assert bool(isalnum(code)) == chr(code).isalnum()


def test_isalnum_examples():
    assert isalnum("A") == 1
    assert isalnum("1") == 1
    assert not isalnum("@")


def test_isascii_bounds():
    assert isascii(0) == 1
    assert isascii(127) == 1
    assert not isascii(128)
    assert not isascii(-42)


def test_isprint_bounds():
    assert not isprint(31)
    assert isprint(32) == 1
    assert isprint(126) == 1
    assert not isprint(127)


@pytest.mark.parametrize("code", ASCII)
def test_case_conversion_matches_str_methods(code):
    ch = chr(code)
    assert toupper(code) == ord(ch.upper())
    assert tolower(code) == ord(ch.lower())


def test_case_conversion_on_strings():
    assert toupper("q") == "Q"
    assert tolower("Q") == "q"
    assert toupper("5") == "5"


def test_non_ascii_codes_unchanged():
    assert toupper(200) == 200
    assert tolower(200) == 200


def test_round_trip_letters():
    for ch in "abcxyz":
        assert tolower(toupper(ch)) == ch


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        isalpha("ab")