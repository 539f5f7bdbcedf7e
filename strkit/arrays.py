"""Operations on lists of strings: lookup, insertion, joining and copying.

Every function leaves its arguments untouched and returns a new list.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, List, Optional, Sequence

__all__ = [
    "add_at",
    "append",
    "append_at",
    "before_last_word",
    "concat",
    "copy_limited",
    "insert_at",
    "last_word",
    "total_length",
]


def last_word(strings: Sequence[str]) -> Optional[str]:
    """The last string of ``strings``, or None if there are none."""
    return strings[-1] if strings else None


def before_last_word(strings: Sequence[str]) -> Optional[str]:
    """The next-to-last string of ``strings``, or None if there are fewer than two."""
    return strings[-2] if len(strings) >= 2 else None


def _require_position(strings: Sequence[str], at: int, upper: int) -> None:
    if not 0 <= at <= upper:
        raise IndexError(
            f"position {at} out of range for a list of {len(strings)} strings"
        )


def add_at(
    first: Sequence[str], second: Iterable[str], at: int, erase: bool = False
) -> List[str]:
    """Place all of ``second`` into ``first`` before position ``at``.

    With ``erase`` the string of ``first`` at ``at`` is replaced by
    ``second`` rather than kept after it.
    """
    upper = len(first) - 1 if erase else len(first)
    _require_position(first, at, upper)
    tail = at + 1 if erase else at
    return [*first[:at], *second, *first[tail:]]


def insert_at(strings: Sequence[str], item: str, at: int) -> List[str]:
    """Insert ``item`` before position ``at``; a position past the end appends."""
    if at < 0:
        raise IndexError(f"position {at} must not be negative")
    at = min(at, len(strings))
    return [*strings[:at], item, *strings[at:]]


def concat(first: Iterable[str], second: Iterable[str]) -> List[str]:
    """All the strings of ``first`` followed by all those of ``second``."""
    return [*first, *second]


def append(strings: Iterable[str], item: str) -> List[str]:
    """A copy of ``strings`` with ``item`` added at the end."""
    return [*strings, item]


def append_at(strings: Sequence[str], item: str, at: int) -> List[str]:
    """A copy of ``strings`` with ``item`` placed before position ``at``.

    ``at`` may equal the length of the list, which appends.  Any other
    position outside the list raises IndexError.
    """
    _require_position(strings, at, len(strings))
    return [*strings[:at], item, *strings[at:]]


def total_length(strings: Iterable[str]) -> int:
    """Total number of characters over all the strings."""
    return sum(len(s) for s in strings)


def copy_limited(strings: Iterable[str], limit: int) -> List[str]:
    """A copy of at most the first ``limit`` strings."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return list(islice(strings, limit))