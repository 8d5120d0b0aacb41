"""Reading XPM images into 32-bit pixel arrays."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from .colors import color_by_name
from .textutil import atoi
from .wordtab import find, find_outside_quotes, split_words

__all__ = [
    "XpmError",
    "XpmImage",
    "strip_comments",
    "extract_quoted_lines",
    "parse_xpm_lines",
    "load_xpm_text",
    "load_xpm",
]

TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: row-major 32-bit pixels, 0xAARRGGBB."""

    width: int
    height: int
    pixels: tuple[int, ...]


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count :]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quotes with spaces, keeping length."""
    size = len(text)
    while (begin := find_outside_quotes(text, "/*", size)) != -1:
        end = find(text[begin + 2 :], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_outside_quotes(text, "//", size)) != -1:
        end = find(text[begin + 2 :], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def extract_quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in order."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def _color_key(chars: str, cpp: int) -> int:
    key = 0
    for char in chars[:cpp].ljust(cpp, "\0"):
        key = ((key << 8) + ord(char)) & 0xFFFFFFFF
    return key


def _header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad header: {line!r}")
    values = tuple(atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad header: {line!r}")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the XPM string lines (header, colours, pixels)."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    width, height, ncolors, cpp = _header(next_line("header"))
    # One or two characters per pixel: later definitions replace earlier ones.
    last_wins = cpp <= 2
    colors: dict[int, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour in {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour in {line!r}")
        suffix = words[index + 1] if index + 1 < len(words) else None
        value = color_by_name(words[index], suffix)
        key = _color_key(line, cpp)
        if last_wins:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    pixels: list[int] = []
    for _ in range(height):
        line = next_line("pixel row")
        for x in range(width):
            value = colors.get(_color_key(line[cpp * x :], cpp), 0)
            pixels.append(TRANSPARENT if value == -1 else value & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def load_xpm_text(text: str) -> XpmImage:
    """Decode the contents of an XPM file."""
    return parse_xpm_lines(extract_quoted_lines(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return load_xpm_text(text)