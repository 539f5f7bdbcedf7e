"""Copying, joining, cutting and rewriting strings.

Python strings cannot be changed in place, so every function returns a
new string.  Positions that fall outside the text raise ``IndexError``.
Lengths that make no sense raise ``ValueError``.
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from strkit.chars import to_lower, to_upper

__all__ = [
    "BoundedCopy",
    "delete",
    "dup_range",
    "erase",
    "insert",
    "iter_chars",
    "join",
    "join_optional",
    "lower",
    "map_chars",
    "ndup",
    "strlcat",
    "strlcpy",
    "substr",
    "upper",
]


class BoundedCopy(NamedTuple):
    """The text a size-limited copy produced, and the length it tried to create."""

    text: str
    length: int


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _require_position(text: str, pos: int, name: str = "position") -> None:
    if not 0 <= pos <= len(text):
        raise IndexError(f"{name} {pos} out of range for text of length {len(text)}")


def dup_range(text: str, start: int, end: int) -> str:
    """Copy of the characters of ``text`` from ``start`` up to, not including, ``end``."""
    _require_position(text, start, "start")
    _require_position(text, end, "end")
    if end < start:
        raise ValueError("end must not come before start")
    return text[start:end]


def ndup(text: str, n: int) -> str:
    """Copy of at most the first ``n`` characters of ``text``."""
    _require_non_negative("n", n)
    return text[:n]


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Up to ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` past the end gives the empty string; ``None`` gives ``None``.
    """
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if text is None:
        return None
    start = min(start, len(text))
    return text[start : start + length]


def join(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return s1 + s2


def join_optional(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Join two strings either of which may be missing.

    A missing side is left out; if both are missing the result is ``None``.
    """
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def strlcpy(src: str, size: int) -> BoundedCopy:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    At most ``size - 1`` characters are kept; ``length`` is always
    ``len(src)``, so truncation shows as ``length >= size``.
    """
    _require_non_negative("size", size)
    if size == 0:
        return BoundedCopy("", len(src))
    return BoundedCopy(src[: size - 1], len(src))


def strlcat(dst: str, src: str, size: int) -> BoundedCopy:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters, terminator included.

    If ``size`` is no larger than ``dst`` nothing is appended and
    ``length`` is ``len(src) + size``; otherwise ``length`` is
    ``len(dst) + len(src)``.
    """
    _require_non_negative("size", size)
    if size <= len(dst):
        return BoundedCopy(dst, len(src) + size)
    room = size - 1 - len(dst)
    return BoundedCopy(dst + src[:room], len(dst) + len(src))


def delete(text: str, start: int, length: int) -> str:
    """Remove ``length`` characters of ``text`` beginning at ``start``.

    Raises ValueError if ``length`` is longer than the whole text.
    """
    _require_non_negative("length", length)
    if length > len(text):
        raise ValueError("cannot delete more characters than the text holds")
    _require_position(text, start, "start")
    return text[:start] + text[start + length :]


def insert(text: str, insertion: Optional[str], at: int) -> str:
    """Insert ``insertion`` into ``text`` before position ``at``.

    An empty or missing insertion returns ``text`` unchanged.
    """
    if not insertion:
        return text
    _require_position(text, at, "at")
    return text[:at] + insertion + text[at:]


def erase(buffer: str, insertion: str, at: int, length: int) -> str:
    """Overwrite ``length`` characters of ``buffer`` at ``at`` with ``insertion``.

    Only the first ``length`` characters of ``insertion`` are used; if it
    is shorter the rest of the span is filled with NUL characters.
    """
    _require_non_negative("length", length)
    _require_position(buffer, at, "at")
    if at + length > len(buffer):
        raise IndexError("the span to overwrite runs past the end of the buffer")
    piece = insertion[:length].ljust(length, "\0")
    return buffer[:at] + piece + buffer[at + length :]


def map_chars(text: str, func: Callable[[int, str], str]) -> str:
    """New string made of ``func(index, char)`` for every character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iter_chars(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for every character of ``text``.

    Where ``func`` returns a string it replaces that character; where it
    returns ``None`` the character is kept.
    """
    pieces = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)


def lower(text: Optional[str]) -> Optional[str]:
    """ASCII lower-case copy of ``text``; other characters are left as they are."""
    if text is None:
        return None
    return "".join(to_lower(ch) for ch in text)


def upper(text: Optional[str]) -> Optional[str]:
    """ASCII upper-case copy of ``text``; other characters are left as they are."""
    if text is None:
        return None
    return "".join(to_upper(ch) for ch in text)