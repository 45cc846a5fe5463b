# fmtkit

`fmtkit` is a small library with no dependencies. It is built around a
printf-style formatter and comes with helpers for characters, strings, byte
buffers and singly linked lists.

## Installation

```
pip install fmtkit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Formatting

`fmtkit.printf` has two functions:

- `sprintf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args, file=None)` writes the text to `file` and returns the
  number of characters written. If `file` is not given, the text goes to
  standard output.

```python
from fmtkit.printf import sprintf, printf

sprintf("%5d|%-5s|%#x", 42, "ab", 255)   # '   42|ab   |0xff'
sprintf("%05d", -1)                      # '-0001'
printf("%c%c\n", "o", "k")               # writes 'ok\n', returns 3
```

### Conversions

| Conversion | Argument | Output |
|------------|----------|--------|
| `c` | one-character string or int code | the character |
| `s` | string or `None` | the string, or `(null)` for `None` |
| `p` | int address or `None` | `0x` and lower-case hex, or `(nil)` for 0 / `None` |
| `d`, `i` | int, wrapped to signed 32 bits | decimal |
| `u` | int, wrapped to unsigned 32 bits | decimal |
| `x`, `X` | int, wrapped to unsigned 32 bits | lower- or upper-case hex |
| `%` | none | a literal `%` |

The flags are `-` (left-justify), `0` (zero-pad), `+`, space and `#`
(`0x`/`0X` prefix for a non-zero hex value). A field width and a
`.precision` may follow. For strings the precision truncates the text. For
integers it sets a minimum number of digits, and a precision of zero prints
nothing for the value 0.

Other behaviour:

- An unknown conversion produces no output and uses no argument.
- Extra arguments are ignored.
- Too few arguments raise `TypeError`.
- A lone `%` at the end of the format is dropped.
- An empty or `None` format gives `""`.

### Working with one directive

`fmtkit.flags.parse_spec(text, start)` parses the directive that starts at
index `start`, which is just after its `%`. It returns a `(FormatSpec, end)`
pair, where `end` is the index of the first character after the directive.
`FormatSpec` is a dataclass with these fields:

- the flags `left`, `zero`, `space`, `plus` and `hash`
- `width`, `dot` and `precision`
- `suppress_zero`
- `conversion`

The renderers in `fmtkit.converters` each take a spec and a value and return a
string. They are `format_char`, `format_str`, `format_pointer`, `format_int`,
`format_unsigned` and `format_hex`.

```python
from fmtkit.flags import parse_spec
from fmtkit.converters import format_hex

spec, end = parse_spec("%#08X", 1)   # end == 5
format_hex(spec, 255)                # '0X000000FF'
```

## Helpers

- `fmtkit.chars` has `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`,
  `tolower` and `toupper`. Each accepts an int code or a one-character string.
  The case functions return the same kind of value they are given.
- `fmtkit.output` writes to a text stream:
  - `putchar_fd(c, stream)`
  - `putstr_fd(s, stream)`
  - `putendl_fd(s, stream)`, which adds a newline
  - `putnbr_fd(n, stream)`, which writes a signed 32-bit decimal
- `fmtkit.strsearch` searches and converts strings:
  - `strlen`
  - `strchr` and `strrchr`, which return an index or `None`
  - `strnstr(haystack, needle, length)`
  - `strncmp(s1, s2, n)`
  - `atoi`, which reads a leading integer and wraps it to 32 bits
  - `itoa`
- `fmtkit.memory` works on `bytearray` buffers:
  - `bzero` and `calloc`
  - `memchr` and `memcmp`
  - `memcpy`
  - `memmove(buf, dest, src, n)`, which moves bytes between offsets within
    one buffer
  - `memset`

  A byte count that is negative or larger than the buffer raises
  `ValueError`.
- `fmtkit.strbuild` builds strings:
  - `strdup`, `substr`, `strjoin` and `strtrim`
  - `split`, which keeps only the non-empty words
  - `strmapi`
  - `striteri`, which works in place on a mutable sequence of characters
  - `strlcpy` and `strlcat`, which copy into a NUL-terminated `bytearray` and
    return the length the full result would have

```python
from fmtkit.strsearch import atoi
from fmtkit.strbuild import split, strlcpy
from fmtkit.memory import memmove

atoi("  -123abc")              # -123
split("  a b  c", " ")         # ['a', 'b', 'c']

dst = bytearray(8)
strlcpy(dst, b"hello world", 6)   # 11; dst starts with b'hello\x00'

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 3)             # bytearray(b'ababcf')
```

## Linked lists

`fmtkit.linkedlist` provides `Node`, a dataclass with `content` and `next`,
and `LinkedList`. A `LinkedList` can be built from any iterable and has these
methods:

- `add_front` and `add_back`, which return the new node
- `last`
- `clear(delete)`, which passes each content to `delete` and then empties the
  list
- `iterate(f)`
- `map(f, delete)`

`map` returns a new list. If `f` raises, the contents made so far are passed to
`delete` and the exception is re-raised. The list supports `len()` and
iteration over its contents.

```python
from fmtkit.linkedlist import LinkedList

items = LinkedList([1, 2])
items.add_front(0)
list(items)                                        # [0, 1, 2]
list(items.map(lambda x: x * 10, lambda x: None))  # [0, 10, 20]
```

## What is not included

The formatter does not support the following:

- floating-point conversions (`f`, `e`, `g`)
- length modifiers (`l`, `h`, `ll`)
- `*` widths or precisions
- positional arguments

There is no command-line tool. The package is a library only.