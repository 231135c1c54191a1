# ftkit

A small toolkit of low-level helpers that behave like their C library
counterparts, with no dependencies outside the standard library.

## Modules

- `ftkit.chars`: ASCII classification and case conversion: `is_alnum`,
  `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `is_space`, `to_lower`,
  `to_upper`. Each one takes a one-character string or an integer code point.
  The case conversions return the same kind of value they were given.
- `ftkit.numbers`: `atoi` and `atol` parse a leading decimal integer.
  They skip leading whitespace, accept one sign and stop at the first
  non-digit. Values wrap to 32 or 64 bits. `itoa` renders a 32-bit integer
  and raises `OverflowError` for anything outside that range.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream, or to standard output when no stream is given.
- `ftkit.strings`: `split`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strnstr`, `strjoin`, `strlcpy`, `strlcat`, `strmapi`, `striteri`, `strtrim`
  and `substr`.
  - The searches return an index, or `None` when nothing is found.
  - `strlcpy` and `strlcat` work on `bytearray` buffers that hold
    NUL-terminated data.
- `ftkit.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`
  and `memset` work on `bytearray` or writable `memoryview` buffers. Every
  count is checked against the buffers involved.
- `ftkit.linked_list`: `Node` and `LinkedList`, a singly linked list.
  - It has `push_front`, `push_back`, `last`, `len()` and iteration.
  - `for_each(f)` calls `f` on every content.
  - `map(f, delete=None)` builds a new list. If `f` raises, `delete` is
    called on each content produced so far and the exception propagates.
  - `clear(delete=None)` empties the list.
- `ftkit.printf`: `format(fmt, *args)` and `printf(fmt, *args, stream=None)`
  support `%c %s %p %d %i %u %x %X %%`. `printf` returns the number of
  characters written. `to_base(n, digits)` renders a non-negative integer
  in any digit alphabet.
- `ftkit.line_reader`: `LineReader(buffer_size=3)` reads lines, newline
  included, as `bytes`. It reads in chunks of `buffer_size` bytes.
  - A source is an integer file descriptor from 0 to 1024, or any object
    with a `read(size)` method.
  - Leftover data is kept separately for each source.
  - `next_line(fd)` returns `None` when the source is exhausted, and
    `lines(fd)` yields every remaining line.
  - `get_next_line(fd)` uses a shared reader with the default buffer size.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.printf import format
from ftkit.linked_list import LinkedList

atoi("  -42abc")                # -42
itoa(-7)                        # "-7"
split("  a b  c ", " ")         # ["a", "b", "c"]
strtrim("xxhixx", "x")          # "hi"
format("%d items, %x", 3, 255)  # "3 items, ff"

items = LinkedList([1, 2, 3])
items.push_front(0)
len(items)                      # 4
list(items.map(lambda x: x * 10))  # [0, 10, 20, 30]
```

Reading lines from a file descriptor:

```python
import os
import sys
from ftkit.line_reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(buffer_size=3)
for line in reader.lines(fd):
    sys.stdout.write(line.decode())
os.close(fd)
```

ftkit is a library only. It installs no command-line program.