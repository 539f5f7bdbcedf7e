"""Trimming, squeezing, splitting and joining whole strings."""

from __future__ import annotations

from typing import Iterable, List, Optional

__all__ = [
    "append_strings",
    "join_all",
    "split",
    "squeeze_outside_quotes",
    "trim",
]

_QUOTES = "'\""


def _require_char(c: str, name: str) -> None:
    if len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {len(c)} characters")


def trim(text: str, chars: str) -> str:
    """Remove every leading and trailing character of ``text`` that is in ``chars``.

    An empty ``chars`` leaves the text unchanged.  If every character is
    in ``chars`` the result is the empty string.
    """
    if not chars:
        return text
    start = 0
    end = len(text)
    while start < end and text[start] in chars:
        start += 1
    while end > start and text[end - 1] in chars:
        end -= 1
    return text[start:end]


def squeeze_outside_quotes(text: str, char: str) -> str:
    """Collapse each run of ``char`` into a single ``char``.

    Squeezing stops at the first single or double quote: that quote and
    everything after it are copied unchanged.
    """
    _require_char(char, "char")
    pieces: List[str] = []
    quoted = False
    previous: Optional[str] = None
    for ch in text:
        if ch in _QUOTES:
            quoted = True
        if quoted or ch != char or previous != char:
            pieces.append(ch)
        previous = ch
    return "".join(pieces)


def split(text: Optional[str], sep: str) -> Optional[List[str]]:
    """Split ``text`` on ``sep``, leaving out empty pieces.

    ``None`` gives ``None``.
    """
    _require_char(sep, "sep")
    if text is None:
        return None
    return [word for word in text.split(sep) if word]


def join_all(*args: Optional[str]) -> Optional[str]:
    """Concatenate all the strings given; ``None`` values are left out.

    With no arguments at all the result is ``None``.
    """
    if not args:
        return None
    return "".join(arg for arg in args if arg is not None)


def append_strings(text: str, strings: Iterable[str], sep: str) -> str:
    """Append every string of ``strings`` to ``text``, each preceded by ``sep``.

    With no strings to append, ``text`` is returned unchanged.
    """
    _require_char(sep, "sep")
    items = list(strings)
    if not items:
        return text
    return text + sep + sep.join(items)