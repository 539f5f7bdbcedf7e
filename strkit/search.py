"""Length, lookup, comparison and counting over strings.

Positions are returned as indices into the text.  A lookup that finds
nothing returns ``None``.  Searching for the NUL character ``"\\0"``
finds the end of the text, so it gives ``len(text)``.
"""

from __future__ import annotations

from typing import Optional

from strkit.chars import is_digit

__all__ = [
    "count_char",
    "count_words",
    "find_any",
    "find_char",
    "find_char_not",
    "find_substring",
    "find_substring_n",
    "is_any_char",
    "is_digits",
    "rfind_char",
    "str_compare",
    "str_len",
    "str_ncompare",
    "str_ncompare_rev",
]

_NUL = "\0"


def _require_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")


def str_len(text: Optional[str]) -> int:
    """Length of ``text``; ``None`` has length zero."""
    return 0 if text is None else len(text)


def find_char(text: Optional[str], c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None if it does not occur."""
    _require_char(c)
    if text is None:
        return None
    index = text.find(c)
    if index >= 0:
        return index
    return len(text) if c == _NUL else None


def find_char_not(text: Optional[str], c: str) -> Optional[int]:
    """Index of the first character of ``text`` that differs from ``c``."""
    _require_char(c)
    if text is None:
        return None
    for index, ch in enumerate(text):
        if ch != c:
            return index
    return len(text) if c == _NUL else None


def rfind_char(text: Optional[str], c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None if it does not occur."""
    _require_char(c)
    if text is None:
        return None
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def _none_order(s1: Optional[str], s2: Optional[str]) -> Optional[int]:
    """Ordering when either side is None: None sorts before any string."""
    if s1 is None and s2 is None:
        return 0
    if s1 is None:
        return -1
    if s2 is None:
        return 1
    return None


def _diff(s1: str, s2: str, limit: Optional[int]) -> int:
    length = max(len(s1), len(s2))
    if limit is not None:
        length = min(length, limit)
    for index in range(length):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b:
            return a - b
    return 0


def str_compare(s1: Optional[str], s2: Optional[str]) -> int:
    """Compare two strings character by character.

    Returns the difference of the codes of the first differing characters,
    where the end of a string counts as code zero, or zero if they are equal.
    """
    order = _none_order(s1, s2)
    if order is not None:
        return order
    return _diff(s1, s2, None)


def str_ncompare(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Like :func:`str_compare` but looks at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    order = _none_order(s1, s2)
    if order is not None:
        return order
    return _diff(s1, s2, n)


def str_ncompare_rev(s1: str, s2: str, n: int) -> int:
    """Compare up to ``n`` characters walking back from the ends of both strings.

    Stops as soon as either string runs out; only differing characters
    give a non-zero result.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b, _ in zip(reversed(s1), reversed(s2), range(n)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def find_substring(text: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle is found at 0."""
    if not needle:
        return 0
    index = text.find(needle)
    return index if index >= 0 else None


def find_substring_n(text: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = text.find(needle, 0, min(length, len(text)))
    return index if index >= 0 else None


def find_any(text: str, chars: str) -> Optional[int]:
    """Index of the first character of ``text`` that is one of ``chars``."""
    for index, ch in enumerate(text):
        if ch in chars:
            return index
    return None


def is_any_char(c: str, chars: str) -> bool:
    """True if the single character ``c`` is one of ``chars``."""
    _require_char(c)
    return c in chars


def count_char(text: str, c: str) -> int:
    """Number of times ``c`` occurs in ``text``."""
    _require_char(c)
    return text.count(c)


def is_digits(text: str) -> bool:
    """True if every character is an ASCII digit; the empty string qualifies."""
    return all(is_digit(ch) for ch in text)


def count_words(text: str, sep: str) -> int:
    """Number of runs of characters other than ``sep``."""
    _require_char(sep)
    words = 0
    previous = sep
    for ch in text:
        if ch != sep and previous == sep:
            words += 1
        previous = ch
    return words