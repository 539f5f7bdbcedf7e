"""Integer parsing and formatting in decimal and arbitrary digit sets."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Optional, Tuple, TypeVar

from strkit.parsing import skip_spaces

__all__ = [
    "atoi",
    "atoi_base",
    "check_base",
    "convert_base",
    "int_len",
    "itoa",
    "itoa_base",
    "maximum",
]

T = TypeVar("T")


def _is_space(ch: str) -> bool:
    return ch == " " or 9 <= ord(ch) <= 13


def _is_decimal(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(text: Optional[str]) -> int:
    """Parse a decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then ASCII
    digits up to the first non-digit.  ``None`` or text without digits
    gives zero.
    """
    if text is None:
        return 0
    pos = skip_spaces(text)
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(text) and _is_decimal(text[end]):
        end += 1
    if end == pos:
        return 0
    return sign * int(text[pos:end])


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(n)


def int_len(n: int) -> int:
    """Number of characters needed to write ``n`` in decimal, sign included."""
    length = 0
    if n <= 0:
        n = -n
        length += 1
    while n > 0:
        n //= 10
        length += 1
    return length


def check_base(base: str) -> bool:
    """True if ``base`` is a usable digit set.

    A digit set has at least two characters, no repeats, and neither
    ``+`` nor ``-``.
    """
    if len(base) < 2:
        return False
    if "+" in base or "-" in base:
        return False
    return len(set(base)) == len(base)


def _require_base(base: str) -> None:
    if not check_base(base):
        raise ValueError(f"invalid base {base!r}")


def _read_sign(text: str) -> Tuple[int, int]:
    """Read the run of signs and spaces before the digits.

    Whitespace is skipped until the first minus sign has been seen; any
    number of ``+`` and ``-`` may follow, and an odd count of ``-`` makes
    the value negative.  Returns the sign and the position of the digits.
    """
    minus_count = 0
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if _is_space(ch):
            if minus_count:
                break
        elif ch == "-":
            minus_count += 1
        elif ch != "+":
            break
        pos += 1
    return (-1 if minus_count % 2 else 1), pos


def atoi_base(text: str, base: str) -> int:
    """Parse ``text`` as a number written with the digit set ``base``.

    Parsing stops at the first character that is not a digit of ``base``.
    Raises ValueError if ``base`` is not a valid digit set.
    """
    _require_base(base)
    sign, pos = _read_sign(text)
    radix = len(base)
    value = 0
    for ch in text[pos:]:
        digit = base.find(ch)
        if digit < 0:
            break
        value = value * radix + digit
    return sign * value


def itoa_base(number: int, base: str) -> str:
    """Write ``number`` with the digit set ``base``, with a leading ``-`` if negative.

    Raises ValueError if ``base`` is not a valid digit set.
    """
    _require_base(base)
    if number == 0:
        return base[0]
    radix = len(base)
    remaining = abs(number)
    digits = []
    while remaining:
        remaining, digit = divmod(remaining, radix)
        digits.append(base[digit])
    body = "".join(reversed(digits))
    return "-" + body if number < 0 else body


def convert_base(number: str, base_from: str, base_to: str) -> str:
    """Re-write ``number`` from the digit set ``base_from`` into ``base_to``.

    Raises ValueError if either digit set is invalid.
    """
    _require_base(base_from)
    _require_base(base_to)
    return itoa_base(atoi_base(number, base_from), base_to)


def maximum(values: Iterable[T], size: Optional[int] = None) -> T:
    """Largest of the first ``size`` values (all of them when ``size`` is None).

    The first value is always considered, so a ``size`` of zero or one
    returns it.  Raises ValueError if there are no values or ``size`` is
    negative.
    """
    if size is not None and size < 0:
        raise ValueError("size must not be negative")
    window = list(values) if size is None else list(islice(values, max(size, 1)))
    if not window:
        raise ValueError("maximum of an empty sequence")
    return max(window)