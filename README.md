# strkit

Small, predictable helpers for characters, strings, integers and lists of
strings. They follow the rules of classic C string routines: ASCII-only
character classes, `atoi`-style parsing, NUL as the end of a string. They
take and return ordinary Python values. Strings are never changed in place.
Every function returns a new value. A lookup that finds nothing returns
`None`. A bad argument raises `ValueError` or `IndexError`.

The package is a plain library. It has no dependencies, and it has no
command-line program.

## Installation

```
pip install strkit
```

## Modules

### `strkit.chars`

ASCII classification and case mapping. Each function accepts a
one-character string or an integer code:

- `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`
- `to_lower`, `to_upper`, which return a value of the same type as their
  argument

### `strkit.parsing`

- `skip_spaces(text, start=0)` returns the first position that is not
  whitespace. Whitespace is the space character and codes 9 through 13.
- `rev_skip_spaces(text, size=0)` scans backwards over whitespace.
- `rev_space_start(text, start)` returns `start`, after checking that it is
  in range.
- `count_sequence(text, mask, start=0, size=None)` counts back-to-back
  copies of `mask`. It returns a `SequenceCount(count, end)`.

### `strkit.numbers`

- `atoi(text)` skips leading whitespace, reads one optional sign and then
  reads digits. `None`, or text with no digits, gives `0`.
- `itoa(n)` writes `n` in decimal.
- `int_len(n)` gives the number of characters `n` takes in decimal, sign
  included.
- `check_base(base)` accepts a set of digits only if it:
  - has at least two characters,
  - repeats no character, and
  - contains no `+` or `-`.
- `atoi_base(text, base)` parses `text` in the given set of digits.
- `itoa_base(number, base)` writes `number` in the given set of digits.
- `convert_base(number, base_from, base_to)` rewrites a number from one set
  of digits into another.
- `maximum(values, size=None)` returns the largest of the first `size`
  values.

### `strkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream. The
default stream is standard output.

### `strkit.search`

- `str_len`
- `find_char`, `find_char_not`, `rfind_char`
- `str_compare`, `str_ncompare`, `str_ncompare_rev`
- `find_substring`, `find_substring_n`
- `find_any`, `is_any_char`
- `count_char`, `is_digits`, `count_words`

Searching for `"\0"` finds the end of the text.

### `strkit.edit`

- `dup_range`, `ndup`, `substr`
- `join`, `join_optional`
- `strlcpy` and `strlcat`, which return a `BoundedCopy(text, length)`
- `delete`, `insert`, `erase`
- `map_chars`, `iter_chars`
- `lower`, `upper`

### `strkit.transform`

- `trim(text, chars)`
- `squeeze_outside_quotes(text, char)` collapses runs of `char`. It stops
  collapsing at the first quote.
- `split(text, sep)` drops empty pieces.
- `join_all(*args)` skips `None` values.
- `append_strings(text, strings, sep)`

### `strkit.arrays`

Operations on lists of strings. Each one returns a new list:

- `last_word`, `before_last_word`
- `add_at`, `insert_at`, `append_at`
- `concat`, `append`
- `total_length`, `copy_limited`

## Examples

```python
from strkit.numbers import atoi, convert_base
from strkit.transform import split, trim
from strkit.search import count_words

atoi("   -42abc")                               # -42
convert_base("ff", "0123456789abcdef", "01")    # "11111111"
split("^^1^^2a,^^3^^", "^")                     # ["1", "2a,", "3"]
trim("xxhelloxx", "x")                          # "hello"
count_words("  two words ", " ")                # 2
```

```python
import sys
from strkit.output import put_nbr, put_endl

put_nbr(-2147483648, sys.stdout)
put_endl("", sys.stdout)
```

## Running the tests

```
pip install "strkit[test]"
pytest
```