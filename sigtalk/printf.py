"""A small printf with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

from sigtalk.chars import itoa

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    return ((value + 2**31) & _UINT32) - 2**31


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = _require_int(value, "p") & _UINT64
    if address == 0:
        return _NULL_POINTER
    return "0x" + format(address, "x")


def _signed(value: Any) -> str:
    return itoa(_as_int32(_require_int(value, "d")))


def _unsigned(value: Any) -> str:
    return itoa(_require_int(value, "u") & _UINT32)


def _hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") & _UINT32, "x")


def _hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & _UINT32, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _render(template: str, args: tuple) -> Iterator[str]:
    values = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # Unknown specifiers and a trailing '%' produce nothing.
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"missing argument for %{spec}") from None
        yield convert(value)


def format_printf(template: str, *args: Any) -> str:
    """Return *template* with its conversions filled in from *args*."""
    return "".join(_render(template, args))


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to *stream* (stdout by default); return its length."""
    text = format_printf(template, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of *n* to *stream* (stdout by default)."""
    (stream if stream is not None else sys.stdout).write(itoa(n))


def put_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *text* and a newline to *stream*; None writes nothing."""
    if text is None:
        return
    (stream if stream is not None else sys.stdout).write(text + "\n")