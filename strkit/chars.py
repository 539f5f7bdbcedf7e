"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code.  Classification is strictly ASCII: characters outside
the ASCII range are never letters, digits or printable.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

__all__ = [
    "CharLike",
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "to_lower",
    "to_upper",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_upper(code):
        return _convert(c, code + _CASE_OFFSET)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_lower(code):
        return _convert(c, code - _CASE_OFFSET)
    return c