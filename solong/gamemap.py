"""Reading and validating game maps."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .textutil import LineReader

__all__ = [
    "MapError",
    "Elements",
    "GameMap",
    "check_map_path",
    "read_map",
    "parse_map",
]

MAP_EXTENSION = ".ber"
ELEMENT_CHARS = frozenset("E01CPX")


class MapError(Exception):
    """Raised when a map file or its contents are unusable."""


@dataclass
class Elements:
    """How many of each counted element a map holds."""

    exit: int = 0
    tic: int = 0
    start: int = 0
    enemy: int = 0


@dataclass
class GameMap:
    """A validated map grid with the player and enemy start positions.

    The player's start cell is stored as floor; the enemy stays on the grid.
    """

    rows: list[list[str]]
    player: tuple[int, int]
    enemy: tuple[int, int]
    elements: Elements

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def cell(self, x: int, y: int) -> str:
        """Return the character at column ``x`` of row ``y``."""
        return self.rows[y][x]

    def set_cell(self, x: int, y: int, value: str) -> None:
        """Replace the character at column ``x`` of row ``y``."""
        self.rows[y][x] = value


def check_map_path(args: Sequence[str]) -> Path:
    """Check the command arguments name one readable ``.ber`` file."""
    if not args:
        raise MapError("No map!")
    if len(args) > 1:
        raise MapError("Too many arguments!")
    name = args[0]
    try:
        with open(name, "rb"):
            pass
    except OSError:
        raise MapError("Wrong files!") from None
    dot = name.rfind(".")
    # Only as many characters as the suffix itself has are compared.
    if dot == -1 or not MAP_EXTENSION.startswith(name[dot:]):
        raise MapError("Wrong extension!")
    return Path(name)


def read_map(stream: TextIO) -> GameMap:
    """Read newline-terminated map lines from a stream and validate them."""
    lines = list(LineReader(stream))
    if not lines:
        raise MapError("Empty map!")
    return parse_map(lines)


def _check_lines(lines: list[str]) -> Elements:
    width = len(lines[0]) - 1
    height = len(lines)
    counts: Counter[str] = Counter()
    for index, line in enumerate(lines, start=1):
        if len(line) - 1 != width:
            raise MapError("Not stable line!")
        row = line[:width]
        if index in (1, height):
            walled = all(char == "1" for char in row)
        else:
            walled = bool(row) and row[0] == "1" and row[-1] == "1"
        if not walled:
            raise MapError("Wall problem!")
        inner = row[1:]
        if any(char not in ELEMENT_CHARS for char in inner):
            raise MapError("Wrong elements!")
        counts.update(inner)
    elements = Elements(
        exit=counts["E"], tic=counts["C"], start=counts["P"], enemy=counts["X"]
    )
    if not (elements.exit and elements.start and elements.tic and elements.enemy):
        raise MapError("Not enough elements!")
    if elements.start > 1:
        raise MapError("Too many starting points!")
    if elements.enemy > 1:
        raise MapError("Too many enemy!")
    return elements


def parse_map(lines: Iterable[str]) -> GameMap:
    """Validate map lines (each ending in a newline) and build the grid."""
    lines = list(lines)
    if not lines:
        raise MapError("Empty map!")
    elements = _check_lines(lines)
    width = len(lines[0]) - 1
    rows: list[list[str]] = []
    player = enemy = (0, 0)
    for y, line in enumerate(lines):
        row = list(line[:width])
        for x, char in enumerate(row):
            if char == "P":
                player = (x, y)
                row[x] = "0"
            elif char == "X":
                enemy = (x, y)
        rows.append(row)
    return GameMap(rows=rows, player=player, enemy=enemy, elements=elements)