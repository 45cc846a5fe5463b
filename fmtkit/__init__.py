"""A printf-style formatter with character, string, byte-buffer and linked-list helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "converters",
    "flags",
    "linkedlist",
    "memory",
    "output",
    "printf",
    "strbuild",
    "strsearch",
]