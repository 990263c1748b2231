"""String helpers with bounded searching, copying and comparison."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _as_char(c: CharLike) -> str:
    """Return *c* as a one-character string; ints are taken as byte values."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, sep: CharLike) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    separator = _as_char(sep)
    return [word for word in s.split(separator) if word]


def trim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* starting at *start*.

    A start at or past the end of *s* yields an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find *needle* lying wholly within the first *limit* characters of *haystack*.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _non_negative("limit", limit)
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the copied text and the full length of *src*, so truncation
    happened when the length is not smaller than *size*.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting text and the length the full result would have
    needed; when *size* does not exceed the length of *dest*, that figure is
    the length of *src* plus *size*.
    """
    _non_negative("size", size)
    room = max(0, size - len(dest) - 1)
    result = dest + src[:room]
    if size > len(dest):
        needed = len(src) + len(dest)
    else:
        needed = len(src) + size
    return result, needed


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the code difference of the first differing characters, a shorter
    string comparing as if ended by NUL, or 0 when they agree.
    """
    _non_negative("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first *c* in *s*; searching for NUL finds the end."""
    char = _as_char(c)
    index = s.find(char)
    if index >= 0:
        return index
    return len(s) if char == _NUL else None


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last *c* in *s*; searching for NUL finds the end."""
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def map_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character of *s*."""
    return "".join(f(index, char) for index, char in enumerate(s))