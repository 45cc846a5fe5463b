"""Byte-buffer operations on ``bytearray`` objects."""

_SIZE_MAX = (1 << 64) - 1


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if any(n > length for length in lengths):
        raise ValueError(f"byte count {n} exceeds buffer size")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_count(n, len(buf))
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > _SIZE_MAX:
        raise OverflowError("requested size overflows")
    return bytearray(total)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n``, or ``None``."""
    _check_count(n, len(buf))
    index = buf.find(c & 0xFF, 0, n)
    return None if index == -1 else index


def memcmp(b1: bytes | bytearray, b2: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; the sign of the result orders them."""
    _check_count(n, len(b1), len(b2))
    for i in range(n):
        if b1[i] != b2[i] or i == n - 1:
            return b1[i] - b2[i]
    return 0


def memcpy(
    dest: bytearray | None, src: bytes | bytearray | None, n: int
) -> bytearray | None:
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers are required")
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    buf[dest:dest + n] = buf[src:src + n]
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_count(n, len(buf))
    buf[:n] = bytes([c & 0xFF]) * n
    return buf