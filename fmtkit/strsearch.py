"""Searching, comparing and converting strings."""

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n >= (1 << 31) else n


def _is_terminator(c: str) -> bool:
    return c in ("", "\0")


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) > 1:
        raise ValueError(f"expected a single character, got {c!r}")


def strlen(s: str | None) -> int:
    """Length of ``s``; a missing string has length 0."""
    return len(s) if s else 0


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``, or ``None`` if absent.

    An empty or NUL ``c`` finds the terminator, at index ``len(s)``.
    """
    _check_char(c)
    if _is_terminator(c):
        return len(s)
    index = s.find(c)
    return None if index == -1 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``, or ``None`` if absent.

    An empty or NUL ``c`` finds the terminator, at index ``len(s)``.
    """
    _check_char(c)
    if _is_terminator(c):
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if not haystack or length < len(needle):
        return None
    last_start = min(length - len(needle) + 1, len(haystack))
    return next(
        (pos for pos in range(last_start) if haystack.startswith(needle, pos)),
        None,
    )


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders them."""
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0 or i == n - 1:
            return a - b
    return 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and sign.

    Parsing stops at the first non-digit; the result wraps to 32 bits.
    """
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    start = index
    while index < len(text) and text[index] in _DIGITS:
        index += 1
    value = int(text[start:index]) if index > start else 0
    return _to_int32(sign * value)


def itoa(n: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    return str(_to_int32(n))