"""Small text helpers: integer parsing and formatting, splitting, line reading."""

from __future__ import annotations

import string
from collections.abc import Iterator
from typing import Protocol

__all__ = ["atoi", "itoa", "split", "LineReader"]

_SPACES = "\t\n\v\f\r "
_DIGITS = frozenset(string.digits)
_LLONG_MAX = (1 << 63) - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading white space and one sign are accepted; parsing stops at the
    first non-digit. A magnitude beyond the 64-bit range gives -1 for a
    positive number and 0 for a negative one; otherwise the result wraps
    to 32 bits.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
        if value > _LLONG_MAX:
            return 0 if sign < 0 else -1
    return _to_int32(value * sign)


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus when negative."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if not sep:
        return [text] if text else []
    return [piece for piece in text.split(sep[0]) if piece]


class _Readable(Protocol):
    def read(self, size: int = ..., /) -> str: ...


class LineReader:
    """Read newline-terminated lines from a text stream in fixed-size chunks."""

    BUFFER_SIZE = 1024

    def __init__(self, stream: _Readable) -> None:
        self._stream = stream
        self._rest = ""

    def next_line(self) -> str | None:
        """Return the next line with its newline, or None at end of input."""
        while True:
            newline = self._rest.find("\n")
            if newline != -1:
                line, self._rest = self._rest[: newline + 1], self._rest[newline + 1 :]
                return line
            chunk = self._stream.read(self.BUFFER_SIZE)
            if not chunk:
                break
            self._rest += chunk
        line, self._rest = self._rest, ""
        return line or None

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line