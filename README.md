# solong

A small tile-based puzzle game. Walk through a walled map, pick up every
ticket, keep away from the wandering enemy, and leave through the exit.

## Installing

```
pip install .
```

The game window is drawn with pygame. For the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument: a readable map file whose name
ends in `.ber`. Sprites are read as XPM files from an `images/` directory
in the current working directory:

- `bg.xpm`, `wall.xpm`, `ticket.xpm`, `exit_x.xpm`, `enemy.xpm`, `enemy2.xpm`
- player frames `pf0.xpm` … `pf2.xpm`, `pb0.xpm` … `pb2.xpm`,
  `pl0.xpm` … `pl2.xpm`, `pr0.xpm` … `pr2.xpm`

Keys:

- `W`, `A`, `S`, `D` move up, left, down and right
- `Esc` quits

Every key press, whatever the key, first moves the enemy one step along
its patrol (left, left, up, right, right, down, then again); the enemy
does not step onto walls, tickets or the exit. The move counter is drawn
as text over the top-left tile.

When the game ends, the command prints one line to standard output
(`Congraturation!`, `Enemy faced!` or `Bye!`) and exits with status 0.
Closing the window also prints `Bye!`.

## Map format

A map is a rectangle of characters, one row per line, and every line,
the last one included, ends with a newline:

| Char | Meaning           |
|------|-------------------|
| `1`  | wall              |
| `0`  | empty floor       |
| `P`  | player start      |
| `C`  | ticket to collect |
| `E`  | exit              |
| `X`  | enemy             |

Rules a map must follow:

- every row has the same width;
- the first and last rows are all walls, and every row starts and ends
  with a wall;
- only the characters above appear;
- there is at least one exit and at least one ticket, exactly one player
  start and exactly one enemy.

The exit stays closed until every ticket has been picked up. Walking into
the enemy, or being walked into by it, ends the game.

Example:

```
1111111
1P0C0E1
10X0001
1111111
```

A bad argument, a map that breaks a rule, or a sprite that cannot be read
is reported as `Error` followed by a one-line reason on standard error,
and the command exits with status 1.

## Using it as a library

```python
from solong.gamemap import read_map
from solong.game import Game, GameOver, Key

with open("level.ber", newline="") as stream:
    game_map = read_map(stream)

game = Game(game_map)
try:
    draws = game.press(Key.D)   # list of Draw(sprite, x, y, text)
except GameOver as over:
    print(over.message)
```

- `solong.gamemap`: `check_map_path`, `read_map`, `parse_map`, `GameMap`,
  `Elements`, `MapError`.
- `solong.game`: `Game` (with `press`, `move_enemy`, `initial_draws`),
  `Draw`, `Key`, `GameOver`, `player_sprite`.
- `solong.xpm`: `load_xpm`, `load_xpm_text`, `parse_xpm_lines` decode XPM
  images into an `XpmImage` of 0xAARRGGBB pixels; `XpmError` on bad input.
- `solong.colors`: `color_by_name` looks up X11 colour names and `#rrggbb`
  values.
- `solong.textutil`: `atoi`, `itoa`, `split` and `LineReader`.
- `solong.display`: `load_sprites`, `xpm_to_surface` and `run`, which opens
  the pygame window.

## What it does not do

There is a single level per run and no level editor, no saved games, no
score table and no sound. Only XPM sprites are read.