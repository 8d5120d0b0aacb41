"""Game rules: player moves, the wandering enemy, and what to draw."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .gamemap import GameMap
from .textutil import itoa

__all__ = ["Key", "Draw", "GameOver", "Game", "player_sprite"]


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESC = 53


@dataclass(frozen=True)
class Draw:
    """Draw a sprite at a tile, or, for sprite ``"count"``, the move counter."""

    sprite: str
    x: int
    y: int
    text: str = ""


class GameOver(Exception):
    """Raised when the game ends; ``message`` is what to print."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


_PLAYER_MOVES = {
    Key.W: (0, -1, "b"),
    Key.S: (0, 1, "f"),
    Key.A: (-1, 0, "l"),
    Key.D: (1, 0, "r"),
}

_ENEMY_MOVES = {
    0: (-1, 0, "enemy2"),
    1: (-1, 0, "enemy2"),
    2: (0, -1, "enemy2"),
    3: (1, 0, "enemy"),
    4: (1, 0, "enemy"),
    5: (0, 1, "enemy"),
}

_TILE_SPRITES = {"1": "wall", "C": "ticket", "E": "exit", "X": "enemy"}


def player_sprite(direction: str, count: int) -> str:
    """Name the player frame facing ``direction`` ("f", "b", "l", "r")."""
    if direction not in ("f", "b", "l", "r"):
        raise ValueError(f"unknown direction: {direction!r}")
    if count % 2 == 0:
        frame = 0
    elif count % 4 == 1:
        frame = 1
    else:
        frame = 2
    return f"p{direction}{frame}"


class Game:
    """State of one game, advanced one key press at a time."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.player = game_map.player
        self.enemy = game_map.enemy
        self.tickets = game_map.elements.tic
        self.count = 0
        self.steps = 0

    def move_enemy(self, step: int) -> list[Draw]:
        """Move the enemy in the direction chosen by ``step`` (0 to 5)."""
        move = _ENEMY_MOVES.get(step)
        if move is None:
            return []
        dx, dy, sprite = move
        ex, ey = self.enemy
        tx, ty = ex + dx, ey + dy
        if self.map.cell(tx, ty) in ("C", "E", "1"):
            return []
        self.map.set_cell(ex, ey, "0")
        self.map.set_cell(tx, ty, "X")
        self.enemy = (tx, ty)
        return [Draw("bg", ex, ey), Draw(sprite, tx, ty)]

    def _check_enemy(self) -> None:
        if self.map.cell(*self.player) == "X":
            raise GameOver("Enemy faced!")

    def _step(self, dx: int, dy: int, direction: str) -> list[Draw]:
        x, y = self.player
        tx, ty = x + dx, y + dy
        target = self.map.cell(tx, ty)
        if target == "1" or (target == "E" and self.tickets):
            return []
        draws: list[Draw] = []
        if target == "C":
            self.tickets -= 1
            self.map.set_cell(tx, ty, "0")
            draws.append(Draw("bg", tx, ty))
        elif target == "E":
            raise GameOver("Congraturation!")
        self.count += 1
        draws.append(Draw("count", 0, 0, itoa(self.count)))
        draws.append(Draw("bg", x, y))
        draws.append(Draw(player_sprite(direction, self.count), tx, ty))
        self.player = (tx, ty)
        return draws

    def press(self, keycode: int) -> list[Draw]:
        """Handle one key press and return what to redraw.

        Every press moves the enemy first. Raises :class:`GameOver` when
        the game ends.
        """
        draws = [Draw("wall", 0, 0)]
        draws += self.move_enemy(self.steps % 6)
        self.steps += 1
        self._check_enemy()
        move = _PLAYER_MOVES.get(keycode)
        if move is not None:
            draws += self._step(*move)
        elif keycode == Key.ESC:
            raise GameOver("Bye!")
        self._check_enemy()
        return draws

    def initial_draws(self) -> list[Draw]:
        """Everything to draw for the whole board."""
        draws: list[Draw] = []
        for y, row in enumerate(self.map.rows):
            for x, char in enumerate(row):
                draws.append(Draw("bg", x, y))
                if (x, y) == self.player:
                    draws.append(Draw("pf0", x, y))
                elif char in _TILE_SPRITES:
                    draws.append(Draw(_TILE_SPRITES[char], x, y))
        return draws