"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = ["put_char", "put_endl", "put_nbr", "put_str"]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _target(stream).write(c)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``; ``None`` writes nothing."""
    if text:
        _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    out = _target(stream)
    put_str(text, out)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(n))