import pytest

from solong.colors import COLOR_TABLE, NAMED_COLORS, color_by_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [("red", 0xFF0000), ("snow", 0xFFFAFA), ("navy", 0x80), ("black", 0x0)],
)
def test_plain_names(name, expected):
    assert color_by_name(name) == expected


def test_lookup_ignores_case():
    assert color_by_name("ReD") == color_by_name("red")
    assert color_by_name("LIGHTGREEN") == color_by_name("lightgreen")


def test_suffix_joins_with_space():
    assert color_by_name("navy", "blue") == color_by_name("navy blue")
    assert color_by_name("ghost", "white") == 0xF8F8FF


def test_first_duplicate_wins():
    assert color_by_name("dark", "slate") == 0x2F4F4F
    assert color_by_name("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert color_by_name("None") == -1


def test_unknown_name_gives_zero():
    assert color_by_name("no-such-colour") == 0


def test_hex_specification():
    assert color_by_name("#FF00FF") == 0xFF00FF
    assert color_by_name("#ff00ff", "ignored") == 0xFF00FF


def test_hex_stops_at_invalid_digit():
    assert color_by_name("#zz") == 0
    assert color_by_name("#ffg") == color_by_name("#ff")


def test_every_table_name_resolves_to_first_entry():
    seen = set()
    for name, value in NAMED_COLORS:
        if name in seen:
            continue
        seen.add(name)
        assert color_by_name(name.upper()) == value
    assert set(COLOR_TABLE) == seen


def test_overlong_joined_name_is_truncated():
    assert color_by_name("x" * 40, "y" * 40) == 0