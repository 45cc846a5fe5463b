"""Parsing of conversion directives such as ``%-08.3d``."""

from dataclasses import dataclass

FLAG_CHARS = frozenset("+-0# ")
CONVERSIONS = frozenset("cspdiuxX%")

_DIGITS = frozenset("0123456789")
_NONZERO_DIGITS = frozenset("123456789")
_SPEC_CHARS = FLAG_CHARS | _DIGITS | {"."}
# Integer conversions (and a missing one) for which ".0" hides a zero value.
_SUPPRESSIBLE = frozenset({"", "d", "i", "u", "x", "X"})


@dataclass
class FormatSpec:
    """Flags, width, precision and conversion of one ``%`` directive."""

    left: bool = False
    zero: bool = False
    space: bool = False
    plus: bool = False
    hash: bool = False
    width: int = 0
    dot: bool = False
    precision: int = 0
    suppress_zero: bool = False
    conversion: str = ""


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else ""


def _skip_digits(text: str, index: int) -> int:
    while _char_at(text, index) in _DIGITS:
        index += 1
    return index


def _read_width_precision(spec: FormatSpec, text: str, index: int) -> None:
    ch = _char_at(text, index)
    if ch != "." and ch not in _DIGITS:
        return
    digits_end = _skip_digits(text, index)
    if ch in _NONZERO_DIGITS:
        spec.width = int(text[index:digits_end])
    if _char_at(text, digits_end) == ".":
        spec.dot = True
        precision_end = _skip_digits(text, digits_end + 1)
        if precision_end > digits_end + 1:
            spec.precision = int(text[digits_end + 1:precision_end])


def _apply(spec: FormatSpec, text: str, index: int) -> None:
    ch = text[index]
    if ch == "-":
        spec.left = True
    elif ch == "0":
        spec.zero = True
    elif ch == " ":
        spec.space = True
    elif ch == "+":
        spec.plus = True
    elif ch == "#":
        spec.hash = True
    if spec.left:
        spec.zero = False
    if spec.plus:
        spec.space = False
    _read_width_precision(spec, text, index)


def parse_spec(text: str, start: int) -> tuple[FormatSpec, int]:
    """Parse the directive beginning at ``start``, just after its ``%``.

    Returns the parsed spec and the index of the first character after
    the directive.
    """
    if start < 0 or start > len(text):
        raise ValueError(f"start index {start} out of range")
    spec = FormatSpec()
    index = start
    while _char_at(text, index) in FLAG_CHARS:
        _apply(spec, text, index)
        index += 1
    ch = _char_at(text, index)
    if ch == "." or ch in _NONZERO_DIGITS:
        _apply(spec, text, index)
    while _char_at(text, index) == "." or _char_at(text, index) in _DIGITS:
        index += 1
    ch = _char_at(text, index)
    if ch in CONVERSIONS:
        spec.conversion = ch
    if spec.dot and spec.precision == 0 and spec.conversion in _SUPPRESSIBLE:
        spec.suppress_zero = True
    if spec.zero and spec.dot:
        spec.zero = False

    end = start
    while _char_at(text, end) in _SPEC_CHARS:
        end += 1
    if _char_at(text, end) in CONVERSIONS:
        end += 1
    return spec, end