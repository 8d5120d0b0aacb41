"""Command entry point: check the map argument, load the map, play."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .display import run
from .game import Game
from .gamemap import MapError, check_map_path, read_map
from .xpm import XpmError

__all__ = ["main"]


def _report(message: str) -> None:
    sys.stderr.write(f"Error\n{message}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named in ``argv``; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = check_map_path(args)
        with open(path, encoding="latin-1", newline="") as stream:
            game_map = read_map(stream)
    except MapError as error:
        _report(str(error))
        return 1
    try:
        return run(Game(game_map))
    except XpmError as error:
        _report(str(error))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())