# cfmtkit

A small library of classic C-style helpers, written as ordinary Python.

## Modules

- `cfmtkit.chars`: ASCII classification and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
  Each accepts a one-character string or an integer code; `to_upper` and
  `to_lower` return the same kind they were given.
- `cfmtkit.convert`: `atoi` parses the leading decimal integer of a string
  (whitespace, one optional sign, digits; no digits gives 0), and `itoa`
  returns the decimal text of an integer.
- `cfmtkit.strings`: `strlcpy` and `strlcat` return the bounded result
  together with the length the full result would have had; `strchr`,
  `strrchr` and `strnstr` return an index or `None`; `strncmp` returns the
  difference of the first differing character codes; `substr`, `strjoin`
  and `strtrim` return new strings.
- `cfmtkit.memory`: `memset`, `bzero`, `memcpy`, `memmove` (within one
  buffer, overlap allowed), `memchr`, `memcmp` and `calloc`, working on
  `bytearray` buffers. `calloc` raises `OverflowError` when the total size
  cannot be represented.
- `cfmtkit.transform`: `split` (empty words dropped), `strmapi` (builds a
  string from `f(index, char)`) and `striteri` (replaces items in place
  with the non-`None` results of `f(index, item)`).
- `cfmtkit.lists`: `LinkedList`, a singly linked list of `Node`s, with
  `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()`
  and iteration.
- `cfmtkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, writing
  to a given text stream or to standard output.
- `cfmtkit.flags`: `Flags`, the flags, width and precision of one
  conversion, and `is_specifier`.
- `cfmtkit.radix`: `to_base` renders a non-negative integer with a given
  digit set.
- `cfmtkit.text_fields` and `cfmtkit.number_fields`: formatting of single
  `c`, `s`, `p` and `d`/`i`, `u`, `x`/`X` conversions under a `Flags`.
  Integer conversions take their values as 32-bit integers.
- `cfmtkit.printf`: `format_string` and `printf`, supporting the
  conversions `c s p d i u x X %` and the flags `- + space # 0`, width and
  precision.

## Installation

```
pip install .
```

## Usage

```python
from cfmtkit.printf import format_string, printf

text = format_string("[%-5d|%05x|%.3s]", 42, 255, "abcdef")
# text == "[42   |000ff|abc]"

count = printf("%s has %u items\n", "cart", 3)
# writes to standard output and returns the number of characters written
```

Characters between `%` and the conversion letter that are not flags, width
or precision are skipped. A conversion with no conversion letter before
the end of the format, or one with no argument left for it, raises
`cfmtkit.printf.FormatError`. Extra arguments are ignored. `None` prints as
`(null)` for `%s` and `(nil)` for `%p`.

```python
from cfmtkit.lists import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2, None)
print(list(doubled), len(doubled))  # [0, 2, 4, 6] 4
```

## What it does not do

This is a library only: it has no command-line program. The formatter
knows only the conversions listed above; there are no floating-point,
octal or length-modifier conversions.

## Tests

```
pip install .[test]
pytest
```