import pytest

from solong.cli import main


def test_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\nNo map!\n"


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().err == "Error\nToo many arguments!\n"


def test_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["absent.ber"]) == 1
    assert capsys.readouterr().err == "Error\nWrong files!\n"


def test_wrong_extension(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "map.txt").write_text("111\n")
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().err == "Error\nWrong extension!\n"


def test_empty_map(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "map.ber").write_text("")
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().err == "Error\nEmpty map!\n"


@pytest.mark.parametrize(
    "content, message",
    [
        ("11111\n1PCE0\n1X001\n11111\n", "Wall problem!"),
        ("11111\n1PCE1\n11111\n", "Not enough elements!"),
    ],
)
def test_invalid_map(tmp_path, monkeypatch, capsys, content, message):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "map.ber").write_text(content)
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().err == f"Error\n{message}\n"


def test_crlf_lines_are_rejected(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "map.ber").write_bytes(b"11111\r\n1PCE1\r\n1X001\r\n11111\r\n")
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().err.startswith("Error\n")