"""Drawing the game in a window and feeding it key presses."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

import pygame

from .game import Draw, Game, GameOver, Key
from .xpm import XpmImage, load_xpm

__all__ = ["SpriteSet", "SPRITE_FILES", "load_sprites", "xpm_to_surface", "run"]

TILE = 64
TITLE = "so_long"

SPRITE_FILES: Mapping[str, str] = {
    "bg": "bg.xpm",
    "ticket": "ticket.xpm",
    "exit": "exit_x.xpm",
    "wall": "wall.xpm",
    "enemy": "enemy.xpm",
    "enemy2": "enemy2.xpm",
    **{
        f"p{direction}{frame}": f"p{direction}{frame}.xpm"
        for direction in "lfbr"
        for frame in range(3)
    },
}

_KEYCODES = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_ESCAPE: Key.ESC,
}
_UNMAPPED_KEY = -1
_TEXT_COLOR = (0, 0, 0)


@dataclass
class SpriteSet:
    """Loaded sprite surfaces, looked up by name."""

    images: dict[str, pygame.Surface] = field(default_factory=dict)

    def __getitem__(self, name: str) -> pygame.Surface:
        return self.images[name]

    def __contains__(self, name: object) -> bool:
        return name in self.images


def xpm_to_surface(image: XpmImage) -> pygame.Surface:
    """Turn a decoded XPM image into a surface with per-pixel alpha.

    The top byte of each pixel is transparency: 0 is opaque.
    """
    data = bytearray()
    for pixel in image.pixels:
        data += bytes(
            (
                (pixel >> 16) & 0xFF,
                (pixel >> 8) & 0xFF,
                pixel & 0xFF,
                0xFF - ((pixel >> 24) & 0xFF),
            )
        )
    surface = pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA")
    return surface.copy()


def load_sprites(image_dir: str | PathLike[str] = "images") -> SpriteSet:
    """Load every sprite the game uses from ``image_dir``."""
    folder = Path(image_dir)
    return SpriteSet(
        {name: xpm_to_surface(load_xpm(folder / filename)) for name, filename in SPRITE_FILES.items()}
    )


class _Painter:
    def __init__(self, screen: pygame.Surface, sprites: SpriteSet) -> None:
        self._screen = screen
        self._sprites = sprites
        self._font: pygame.font.Font | None = None

    def _text(self, text: str, x: int, y: int) -> None:
        if self._font is None:
            self._font = pygame.font.Font(None, 20)
        self._screen.blit(self._font.render(text, True, _TEXT_COLOR), (x, y))

    def apply(self, draws: Iterable[Draw]) -> None:
        for draw in draws:
            if draw.sprite == "count":
                self._text("MOVE", TILE // 2 - 16, TILE // 2 - 10)
                self._text(draw.text, TILE // 2 - (len(draw.text) + 5), TILE // 2)
            else:
                self._screen.blit(self._sprites[draw.sprite], (draw.x * TILE, draw.y * TILE))


def run(game: Game, image_dir: str | PathLike[str] = "images") -> int:
    """Open the game window and play until the game ends; return the exit status."""
    pygame.init()
    try:
        size = (game.map.width * TILE, game.map.height * TILE)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(TITLE)
        painter = _Painter(screen, load_sprites(image_dir))
        painter.apply(game.initial_draws())
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    print("Bye!")
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                try:
                    draws = game.press(_KEYCODES.get(event.key, _UNMAPPED_KEY))
                except GameOver as over:
                    print(over.message)
                    return 0
                painter.apply(draws)
                pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()