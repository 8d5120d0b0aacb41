import io

import pytest

from solong.gamemap import (
    Elements,
    MapError,
    check_map_path,
    parse_map,
    read_map,
)

GOOD = ["1111111\n", "1P0C1X1\n", "1E00111\n", "1111111\n"]


def test_parse_valid_map_positions_and_counts():
    game_map = parse_map(GOOD)
    assert game_map.player == (1, 1)
    assert game_map.enemy == (5, 1)
    assert game_map.elements == Elements(exit=1, tic=1, start=1, enemy=1)
    assert (game_map.width, game_map.height) == (7, 4)


def test_player_cell_becomes_floor_enemy_stays():
    game_map = parse_map(GOOD)
    assert game_map.cell(1, 1) == "0"
    assert game_map.cell(5, 1) == "X"
    assert game_map.cell(3, 1) == "C"


def test_set_cell_round_trip():
    game_map = parse_map(GOOD)
    game_map.set_cell(3, 1, "0")
    assert game_map.cell(3, 1) == "0"
    assert "".join(game_map.rows[1]) == "10001X1"


def test_read_map_from_stream():
    game_map = read_map(io.StringIO("".join(GOOD)))
    assert ["".join(row) for row in game_map.rows] == [
        "1111111",
        "1001" + "1X1",
        "1E00111",
        "1111111",
    ]


def test_read_empty_stream():
    with pytest.raises(MapError, match="Empty map!"):
        read_map(io.StringIO(""))


def test_parse_empty_lines():
    with pytest.raises(MapError, match="Empty map!"):
        parse_map([])


@pytest.mark.parametrize(
    "lines, message",
    [
        (["1111\n", "1P1\n", "1111\n"], "Not stable line!"),
        (["11111\n", "1PCE0\n", "1X001\n", "11111\n"], "Wall problem!"),
        (["11111\n", "1PCE1\n", "1X001\n", "11101\n"], "Wall problem!"),
        (["11111\n", "1PZE1\n", "1XC01\n", "11111\n"], "Wrong elements!"),
        (["11111\n", "1PCE1\n", "11111\n"], "Not enough elements!"),
        (["111111\n", "1PPCE1\n", "1X0001\n", "111111\n"], "Too many starting points!"),
        (["111111\n", "1PXCE1\n", "1X0001\n", "111111\n"], "Too many enemy!"),
    ],
)
def test_invalid_maps(lines, message):
    with pytest.raises(MapError) as info:
        parse_map(lines)
    assert str(info.value) == message


def test_last_line_without_newline_is_unstable():
    lines = GOOD[:-1] + ["1111111"]
    with pytest.raises(MapError, match="Not stable line!"):
        parse_map(lines)


def test_several_exits_allowed():
    lines = ["111111\n", "1PCEE1\n", "1X0001\n", "111111\n"]
    assert parse_map(lines).elements.exit == 2


def test_check_no_args():
    with pytest.raises(MapError, match="No map!"):
        check_map_path([])


def test_check_too_many_args():
    with pytest.raises(MapError, match="Too many arguments!"):
        check_map_path(["a.ber", "b.ber"])


def test_check_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MapError, match="Wrong files!"):
        check_map_path(["absent.ber"])


@pytest.mark.parametrize("name", ["map.txt", "mapfile", "map.berx"])
def test_check_wrong_extension(tmp_path, monkeypatch, name):
    monkeypatch.chdir(tmp_path)
    (tmp_path / name).write_text("1\n")
    with pytest.raises(MapError, match="Wrong extension!"):
        check_map_path([name])


@pytest.mark.parametrize("name", ["map.ber", "map.b"])
def test_check_accepted_names(tmp_path, monkeypatch, name):
    monkeypatch.chdir(tmp_path)
    (tmp_path / name).write_text("1\n")
    assert str(check_map_path([name])) == name