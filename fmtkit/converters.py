"""Rendering of single values according to a parsed directive."""

from dataclasses import replace
from typing import Callable

from .flags import FormatSpec

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n >= (1 << 31) else n


def _to_uint32(n: int) -> int:
    return n & _UINT_MASK


def _decimal_len(n: int) -> int:
    return len(str(n))


def _hex_len(n: int) -> int:
    return len(format(n, "x"))


def _padding(spec: FormatSpec, n: int, length_of: Callable[[int], int]) -> str:
    count = 0
    if n < 0:
        count = 1
        n = -n
    count += max(spec.precision, length_of(n))
    if spec.suppress_zero and n == 0:
        count = 0
    # The magnitude is never negative here, so a sign flag always counts.
    if spec.plus or spec.space:
        count += 1
    fill = "0" if spec.zero and not spec.left and not spec.dot else " "
    return fill * max(spec.width - count, 0)


def _justify(spec: FormatSpec, body: str, padding: str) -> str:
    return body + padding if spec.left else padding + body


def _pad_to_width(spec: FormatSpec, text: str) -> str:
    return text.ljust(spec.width) if spec.left else text.rjust(spec.width)


def _int_body(spec: FormatSpec, n: int) -> str:
    if n >= 0:
        sign = "+" if spec.plus else " " if spec.space else ""
    else:
        sign = "-"
        n = -n
    digits = str(n)
    return sign + "0" * max(spec.precision - len(digits), 0) + digits


def format_char(spec: FormatSpec, c: int | str) -> str:
    """Render a single character, given as a one-character string or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(c & 0xFF)
    return _pad_to_width(spec, ch)


def _null_string(spec: FormatSpec) -> str:
    width, precision = spec.width, spec.precision
    if width == 0 and precision == 0:
        return NULL_STRING
    if precision >= len(NULL_STRING) or not spec.dot:
        return NULL_STRING.rjust(width)
    return " " * width


def format_str(spec: FormatSpec, s: str | None) -> str:
    """Render a string; ``None`` stands for a missing string."""
    if s is None:
        return _null_string(spec)
    if not s:
        return " " * spec.width
    if spec.dot and spec.precision < len(s):
        s = s[:spec.precision]
    return _pad_to_width(spec, s)


def format_pointer(spec: FormatSpec, address: int | None) -> str:
    """Render an address as ``0x...``, or ``(nil)`` when it is null."""
    if not address:
        return _pad_to_width(spec, NULL_POINTER)
    return _pad_to_width(spec, "0x" + format(address & _ULONG_MASK, "x"))


def format_int(spec: FormatSpec, n: int) -> str:
    """Render a signed 32-bit integer."""
    n = _to_int32(n)
    if spec.suppress_zero and n == 0:
        return _padding(spec, n, _decimal_len)
    if spec.zero and spec.width and n < 0:
        spec = replace(spec, zero=False, precision=spec.width - 1)
    return _justify(spec, _int_body(spec, n), _padding(spec, n, _decimal_len))


def format_unsigned(spec: FormatSpec, n: int) -> str:
    """Render an unsigned 32-bit integer; sign flags are ignored."""
    n = _to_uint32(n)
    spec = replace(spec, plus=False, space=False)
    if spec.suppress_zero and n == 0:
        return _padding(spec, n, _decimal_len)
    return _justify(spec, _int_body(spec, n), _padding(spec, n, _decimal_len))


def format_hex(spec: FormatSpec, n: int) -> str:
    """Render an unsigned 32-bit integer in hex; ``X`` selects upper case."""
    n = _to_uint32(n)
    upper = spec.conversion == "X"
    if spec.suppress_zero and n == 0:
        body = ""
    else:
        prefix = ("0X" if upper else "0x") if spec.hash and n != 0 else ""
        digits = format(n, "X" if upper else "x")
        body = prefix + "0" * max(spec.precision - len(digits), 0) + digits
    return _justify(spec, body, _padding(spec, n, _hex_len))