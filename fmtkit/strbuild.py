"""Building new strings from existing ones, and bounded copies into buffers."""

from typing import Callable, MutableSequence


def _check_text(s: str, name: str = "s") -> None:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a str, got {type(s).__name__}")


def _check_separator(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) > 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")


def _cstring(buf: bytes | bytearray) -> bytes:
    """The bytes of ``buf`` up to, not including, its first NUL."""
    end = buf.find(0)
    return bytes(buf if end == -1 else buf[:end])


def _check_size(dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer size {len(dst)}")


def strdup(s: str) -> str:
    """A copy of ``s``."""
    _check_text(s)
    return "".join(s)


def substr(s: str | None, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string; a missing string
    counts as empty.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = s or ""
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    _check_text(s1, "s1")
    _check_text(s2, "s2")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without the leading and trailing characters found in ``charset``."""
    _check_text(s)
    _check_text(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """The non-empty words of ``s`` delimited by the character ``sep``.

    An empty or NUL separator yields the whole string as one word.
    """
    _check_text(s)
    _check_separator(sep)
    if sep in ("", "\0"):
        return [s] if s else []
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string of ``f(index, char)`` for every character of ``s``."""
    _check_text(s)
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call ``f(index, char)`` on each character of ``s``, in place.

    A non-``None`` result replaces the character at that index.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence of characters")
    for index, ch in enumerate(list(s)):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes with the NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated.
    """
    _check_size(dst, size)
    text = _cstring(src)
    if size > 0:
        copied = text[:size - 1]
        dst[:len(copied)] = copied
        dst[len(copied)] = 0
    return len(text)


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the NUL-terminated text in ``dst`` within ``size`` bytes.

    Returns the length the full result would have: the length of ``dst``
    (at most ``size``) plus the length of ``src``.
    """
    _check_size(dst, size)
    text = _cstring(src)
    end = dst.find(0, 0, size)
    dst_len = size if end == -1 else end
    room = size - dst_len
    if room > 0:
        copied = text[:room - 1]
        dst[dst_len:dst_len + len(copied)] = copied
        dst[dst_len + len(copied)] = 0
    return dst_len + len(text)