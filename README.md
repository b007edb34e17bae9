# ftlib

A compact collection of utilities that follow the behaviour of classic C
library routines: ASCII character classification, decimal conversion,
NUL-terminated string searching and bounded copying, string building,
byte-buffer helpers, a singly linked list, file-descriptor output, a small
printf-style formatter, and a buffered line reader.

## Installation

```
pip install .
```

To include what the test suite needs:

```
pip install ".[test]"
```

## Modules

### `ftlib.chars`

`is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower`,
`to_upper`. Each accepts a one-character string or an integer code. The
predicates return a `bool` and test ASCII ranges only; `to_lower` and
`to_upper` change only ASCII letters and return a value of the same kind as
their argument (`to_upper("a") == "A"`, `to_upper(97) == 65`).

### `ftlib.convert`

- `atoi(text)` and `atol(text)` skip leading whitespace, take an optional
  `+` or `-`, then read ASCII digits until the first non-digit. Text with no
  digits there gives `0`. The two behave the same.
- `itoa(n)` returns the decimal form of an `int`.

### `ftlib.strings`

These treat a string as ending at its first NUL character. Searches return an
index, or `None` when nothing is found.

- `strchr(s, c)` and `strrchr(s, c)`: first or last index of `c`; searching
  for `"\0"` gives the length of the text.
- `strnstr(big, little, length)`: where `little` first occurs wholly within
  the first `length` characters of `big`; an empty `little` gives `0`.
- `strncmp(s1, s2, n)`: difference of character codes at the first of at most
  `n` positions that differ, or `0`.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)`: return a tuple of
  the resulting buffer text and the length they tried to create.

### `ftlib.transform`

- `split(s, sep)`: split on a single character, dropping empty words.
- `substr(s, start, length)`: at most `length` characters from `start`; a
  `start` past the end gives `""`.
- `strjoin(s1, s2)`: concatenation.
- `strtrim(s, charset)`: remove characters in `charset` from both ends.
- `strmapi(s, func)`: new string of `func(index, char)` for each character.
- `striteri(s, func)`: call `func(index, item)` on each item of a list or
  `bytearray`; a non-`None` result replaces the item in place.

### `ftlib.memory`

Functions that write take a `bytearray` or writable `memoryview`, change it
in place and return it. Counts larger than a buffer raise `ValueError`.

- `memset(buf, value, n)`, `bzero(buf, n)`
- `memchr(buf, value, n)`: index of the byte, or `None`
- `memcmp(a, b, n)`: difference of the first differing bytes, or `0`
- `memcpy(dst, src, n)`, `memmove(dst, src, n)`: overlapping regions are
  copied correctly by both
- `calloc(count, size)`: a zero-filled `bytearray`; raises `OverflowError`
  when the total size is too large
- `realloc(buf, new_size)`: a new `bytearray` holding the start of `buf`,
  zero-filled beyond it; `None` for `buf` gives a fresh buffer, and a
  `new_size` of `0` returns `None`

### `ftlib.linked_list`

`Node` (with `content` and `next`) and `LinkedList`, which can be built from
an iterable and offers `push_front`, `push_back`, `last`, `for_each`, `map`
(returns a new list), `clear` (optionally passing each content to a
`delete` callback), `len()` and iteration over contents.

### `ftlib.output`

`putchar_fd(c, fd)`, `putstr_fd(s, fd)`, `putendl_fd(s, fd)` and
`putnbr_fd(n, fd)` write to a file descriptor and return the number of bytes
written; strings are encoded as UTF-8. `print_error(message)` writes
`Error`, then the message, each on its own line, to standard error and exits
with status 1.

### `ftlib.printf`

`format_string(fmt, *args)` returns the formatted text; `printf(fmt, *args)`
writes it to standard output and returns its length. The conversions are
`%c %s %p %d %i %u %x %X %%`. `%d` and `%i` wrap to a signed 32-bit value;
`%u`, `%x` and `%X` wrap to an unsigned 32-bit value; `%s` prints `(null)`
for `None` and `%p` prints `(nil)` for `None` or `0`. An unknown
conversion, a trailing lone `%` or a missing argument raises `FormatError`.

### `ftlib.line_reader`

`LineReader(source, buffer_size=42)` reads lines of `bytes` from a file
descriptor or a binary file object; each line keeps its newline and the last
one may lack it. `read_line()` returns `None` at the end, and the reader is
iterable. `get_next_line(fd)` keeps a separate reader for each descriptor.

## Examples

```python
from ftlib.convert import atoi, itoa
from ftlib.transform import split, strtrim
from ftlib.printf import format_string
from ftlib.linked_list import LinkedList

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
format_string("%d items, %x", 3, 255)  # "3 items, ff"

items = LinkedList()
items.push_back(1)
items.push_back(2)
items.push_front(0)
list(items)                    # [0, 1, 2]
len(items)                     # 3
```

Reading lines from a file descriptor:

```python
import os
from ftlib.line_reader import LineReader

fd = os.open("data.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line.decode(), end="")
os.close(fd)
```

## What it does not do

This is a library only: it installs no command-line program.

## Running the tests

```
pytest
```