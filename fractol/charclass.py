"""ASCII character classification and case conversion on character codes."""

from __future__ import annotations


def _code(code: int | str) -> int:
    """Accept a character code or a one-character string."""
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    return int(code)


def isalpha(code: int | str) -> int:
    """Return 2 for a lowercase ASCII letter, 1 for an uppercase one, else 0."""
    value = _code(code)
    if ord("a") <= value <= ord("z"):
        return 2
    return int(ord("A") <= value <= ord("Z"))


def isdigit(code: int | str) -> int:
    """Return 1 for an ASCII decimal digit, else 0."""
    value = _code(code)
    return int(ord("0") <= value <= ord("9"))


def isalnum(code: int | str) -> int:
    """Return 1 for an ASCII letter or digit, else 0."""
    return int(bool(isalpha(code) or isdigit(code)))


def isascii(code: int | str) -> int:
    """Return 1 for a code in the range 0..127, else 0."""
    return int(0 <= _code(code) <= 127)


def isprint(code: int | str) -> int:
    """Return 1 for a printable ASCII character (space through tilde), else 0."""
    return int(32 <= _code(code) <= 126)


def _convert(code: int | str, low: str, high: str, shift: int) -> int | str:
    value = _code(code)
    if ord(low) <= value <= ord(high):
        value += shift
    return chr(value) if isinstance(code, str) else value


def toupper(code: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; anything else is returned unchanged."""
    return _convert(code, "a", "z", -32)


def tolower(code: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; anything else is returned unchanged."""
    return _convert(code, "A", "Z", 32)