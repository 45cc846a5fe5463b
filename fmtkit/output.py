"""Writing characters, strings and numbers to a text stream."""

from typing import TextIO


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n >= (1 << 31) else n


def putchar_fd(c: str | int, stream: TextIO) -> None:
    """Write one character, given as a string or a code, to ``stream``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
    else:
        stream.write(chr(c & 0xFF))


def putstr_fd(s: str | None, stream: TextIO) -> None:
    """Write ``s`` to ``stream``; ``None`` writes nothing."""
    if s:
        stream.write(s)


def putendl_fd(s: str | None, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    putstr_fd(s, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write a signed 32-bit integer in decimal to ``stream``."""
    stream.write(str(_to_int32(n)))