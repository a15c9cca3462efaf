"""String helpers with C-library semantics: parsing, searching, slicing and splitting."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable

_WHITESPACE = "\t\n\v\f\r "
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def _as_char(char: str | int) -> str:
    """Normalise a character given as a one-character string or a code."""
    if isinstance(char, int):
        return chr(char & 0xFF)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to 32 bits like a C int.

    Leading whitespace is skipped. A '+' is skipped unless a '-' follows it,
    so "+-5" reads as -5. Parsing stops at the first non-digit; a string with
    no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    if rest.startswith("+") and not rest.startswith("+-"):
        rest = rest[1:]
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split text on a single separator character, dropping empty pieces.

    A NUL or empty separator never occurs inside the text, so the whole text
    is one piece (or none if the text is empty).
    """
    if len(sep) > 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if sep in ("", "\0"):
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in chars from both ends of text."""
    return text.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find needle wholly inside the first length characters of haystack.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start that is negative or past the end gives an empty string.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if start < 0 or start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the code-point difference at the first mismatch.

    The shorter string behaves as if followed by a NUL character.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in islice(zip_longest(first, second, fillvalue="\0"), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strchr(text: str, char: str | int) -> int | None:
    """Return the index of the first occurrence of char, or None.

    Searching for NUL finds the terminator at len(text) when the text holds
    no NUL of its own. Integer codes are truncated to a byte.
    """
    target = _as_char(char)
    index = text.find(target)
    if index >= 0:
        return index
    if target == "\0":
        return len(text)
    return None


def strrchr(text: str, char: str | int) -> int | None:
    """Return the index of the last occurrence of char, or None.

    Searching for NUL finds the terminator at len(text). Integer codes are
    truncated to a byte.
    """
    target = _as_char(char)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return index if index >= 0 else None