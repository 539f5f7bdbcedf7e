"""Whitespace scanning and repeated-sequence counting."""

from __future__ import annotations

from typing import NamedTuple, Optional

__all__ = [
    "SequenceCount",
    "count_sequence",
    "rev_skip_spaces",
    "rev_space_start",
    "skip_spaces",
]


def _is_space(ch: str) -> bool:
    return ch == " " or 9 <= ord(ch) <= 13


def _check_index(text: str, index: int) -> None:
    if not 0 <= index <= len(text):
        raise IndexError(f"index {index} out of range for text of length {len(text)}")


def skip_spaces(text: str, start: int = 0) -> int:
    """Return the first position at or after ``start`` that is not whitespace.

    Whitespace is the space character and codes 9 through 13.  The result
    equals ``len(text)`` if only whitespace follows ``start``.
    """
    _check_index(text, start)
    pos = start
    while pos < len(text) and _is_space(text[pos]):
        pos += 1
    return pos


def rev_skip_spaces(text: str, size: int = 0) -> int:
    """Scan backwards over whitespace from ``size`` and return one before where it stopped.

    A ``size`` of zero means the length of ``text``.  The position
    ``len(text)`` is the end of the string and never counts as whitespace,
    so scanning from there stops at once.
    """
    if size == 0:
        size = len(text)
    if size > len(text):
        raise IndexError(f"index {size} out of range for text of length {len(text)}")
    while 0 <= size < len(text) and _is_space(text[size]):
        size -= 1
    return size - 1


def rev_space_start(text: str, start: int) -> int:
    """Return the position a backward whitespace scan began at.

    The scan walks back over whitespace from ``start`` but its stopping
    point does not change the result, which is always ``start``.
    """
    _check_index(text, start)
    return start


class SequenceCount(NamedTuple):
    """How many back-to-back copies of a mask were found, and where scanning ended."""

    count: int
    end: int


def count_sequence(
    text: str, mask: str, start: int = 0, size: Optional[int] = None
) -> SequenceCount:
    """Count consecutive copies of ``mask`` in ``text`` beginning at ``start``.

    Scanning continues while the current position is below ``size`` (the
    end of ``text`` when ``size`` is None) and the mask matches there.
    ``end`` is the position just after the last copy found.
    """
    if not mask:
        raise ValueError("mask must not be empty")
    _check_index(text, start)
    limit = len(text) if size is None else size
    pos = start
    count = 0
    while pos < limit and text.startswith(mask, pos):
        count += 1
        pos += len(mask)
    return SequenceCount(count, pos)