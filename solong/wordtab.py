"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re

__all__ = ["find", "find_outside_quotes", "split_words"]

_BLANKS = re.compile(r"[ \t]+")


def find(text: str, needle: str, length: int) -> int:
    """Return the first index of ``needle`` in ``text``, or -1.

    The search fails at once when ``needle`` is longer than ``length``.
    """
    if len(needle) > length:
        return -1
    return text.find(needle)


def find_outside_quotes(text: str, needle: str, length: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted text."""
    size = len(needle)
    if size > length:
        return -1
    quoted = False
    for pos in range(len(text) - size + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _BLANKS.split(text) if word]