"""ASCII character classification and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    """Return the integer code of *c*, which is an int or a one-character str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of the integer *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n == 0:
        return "0"
    digits = []
    magnitude = abs(n)
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))