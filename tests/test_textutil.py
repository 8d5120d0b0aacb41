import io

import pytest

from solong.textutil import LineReader, atoi, itoa, split


@pytest.mark.parametrize("n", [0, 1, -1, 7, 42, -42, 2147483647, -2147483648, 1000])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_of_zero():
    assert itoa(0) == "0"


def test_itoa_negative_has_minus_prefix():
    text = itoa(-305)
    assert text.startswith("-")
    assert atoi(text[1:]) == 305


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 and more") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("+-5") == 0


def test_atoi_overflow_positive_and_negative():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_pieces():
    assert split("a,b,,c,", ",") == ["a", "b", "c"]
    assert split(",,,", ",") == []


def test_split_rejoin_invariant():
    text = "  one two   three "
    parts = split(text, " ")
    assert " ".join(parts) == " ".join(text.split())


def test_line_reader_returns_lines_with_newlines():
    reader = LineReader(io.StringIO("ab\ncd\nef"))
    assert list(reader) == ["ab\n", "cd\n", "ef"]


def test_line_reader_end_of_input_is_none():
    reader = LineReader(io.StringIO("x\n"))
    assert reader.next_line() == "x\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_line_reader_empty_stream():
    assert LineReader(io.StringIO("")).next_line() is None


def test_line_reader_long_lines_reassemble():
    content = "a" * 3000 + "\n" + "b" * 1500 + "\n" + "c" * 10
    lines = list(LineReader(io.StringIO(content)))
    assert "".join(lines) == content
    assert len(lines) == 3
    assert all(line.endswith("\n") for line in lines[:-1])