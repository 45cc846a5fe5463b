"""Formatted output driven by ``%`` directives."""

import sys
from typing import Any, Callable, Iterable, Iterator, TextIO

from .converters import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_str,
    format_unsigned,
)
from .flags import FormatSpec, parse_spec

_RENDERERS: dict[str, Callable[[FormatSpec, Any], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": format_hex,
    "X": format_hex,
}


def _render(fmt: str, args: Iterable[Any]) -> Iterator[str]:
    values = iter(args)
    index = 0
    while index < len(fmt):
        if fmt[index] != "%":
            next_directive = fmt.find("%", index)
            if next_directive == -1:
                next_directive = len(fmt)
            yield fmt[index:next_directive]
            index = next_directive
            continue
        if index + 1 >= len(fmt):
            # A lone '%' at the very end has nothing to convert.
            break
        spec, index = parse_spec(fmt, index + 1)
        if spec.conversion == "%":
            yield "%"
            continue
        renderer = _RENDERERS.get(spec.conversion)
        if renderer is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        yield renderer(spec, value)


def sprintf(fmt: str | None, *args: Any) -> str:
    """Return ``fmt`` with its directives replaced by the formatted ``args``.

    Unknown conversions produce nothing and consume no argument; surplus
    arguments are ignored.
    """
    if not fmt:
        return ""
    return "".join(_render(fmt, args))


def printf(fmt: str | None, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)