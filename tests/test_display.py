from unittest import mock

import pygame
import pytest

from solong.display import SPRITE_FILES, load_sprites, run, xpm_to_surface
from solong.game import Game
from solong.gamemap import parse_map
from solong.xpm import XpmError, XpmImage

TINY_XPM = '/* XPM */\nstatic char *x[] = {\n"1 1 1 1",\n"a c #FF0000",\n"a"\n};\n'
BLUE_XPM = '/* XPM */\nstatic char *x[] = {\n"1 1 1 1",\n"a c #0000FF",\n"a"\n};\n'
BOXED = ["1111111\n", "1P0C1X1\n", "1E00111\n", "1111111\n"]


@pytest.fixture
def image_dir(tmp_path):
    for filename in SPRITE_FILES.values():
        (tmp_path / filename).write_text(TINY_XPM)
    return tmp_path


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def test_xpm_to_surface_colors_and_alpha():
    image = XpmImage(2, 1, (0x00FF0000, 0xFF000000))
    surface = xpm_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert surface.get_at((1, 0)).a == 0


def test_load_sprites(image_dir):
    sprites = load_sprites(image_dir)
    assert set(sprites.images) == set(SPRITE_FILES)
    assert sprites["exit"].get_size() == (1, 1)
    assert tuple(sprites["pf0"].get_at((0, 0)))[:3] == (255, 0, 0)
    assert "pr2" in sprites


def test_exit_sprite_loaded_from_exit_x(image_dir):
    (image_dir / "exit_x.xpm").write_text(BLUE_XPM)
    sprites = load_sprites(image_dir)
    assert len(sprites.images) == 18
    assert tuple(sprites["exit"].get_at((0, 0)))[:3] == (0, 0, 255)
    assert tuple(sprites["wall"].get_at((0, 0)))[:3] == (255, 0, 0)


def test_load_sprites_missing_file(image_dir):
    (image_dir / "wall.xpm").unlink()
    with pytest.raises(XpmError):
        load_sprites(image_dir)


def test_missing_sprite_lookup(image_dir):
    sprites = load_sprites(image_dir)
    assert "nothing" not in sprites
    with pytest.raises(KeyError) as info:
        sprites["nothing"]
    assert "nothing" in str(info.value)


def test_run_escape(headless, image_dir, capsys):
    game = Game(parse_map(BOXED))
    with mock.patch("pygame.event.get", return_value=[key(pygame.K_ESCAPE)]):
        status = run(game, image_dir)
    assert status == 0
    assert capsys.readouterr().out == "Bye!\n"


def test_run_window_closed(headless, image_dir, capsys):
    game = Game(parse_map(BOXED))
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        status = run(game, image_dir)
    assert status == 0
    assert capsys.readouterr().out == "Bye!\n"


def test_run_until_win(headless, image_dir, capsys):
    game = Game(parse_map(BOXED))
    batches = [[key(k)] for k in (pygame.K_d, pygame.K_d, pygame.K_a, pygame.K_a, pygame.K_s)]
    with mock.patch("pygame.event.get", side_effect=batches):
        status = run(game, image_dir)
    assert status == 0
    assert capsys.readouterr().out == "Congraturation!\n"
    assert game.count == 4