import pytest

from wirefdf.mapfile import (
    MapError,
    Point,
    count_points,
    has_fdf_extension,
    is_map_char,
    load_map,
    parse_color,
    parse_hex,
    parse_int,
    parse_map,
    parse_row,
)


@pytest.mark.parametrize("c", list("0123456789,xXafAF-"))
def test_map_chars(c):
    assert is_map_char(c) is True


@pytest.mark.parametrize("c", [" ", "\n", "g", "+", "\t"])
def test_non_map_chars(c):
    assert is_map_char(c) is False


def test_count_points():
    assert count_points("0 1 2\n") == 3
    assert count_points("10,0xFF  -3") == 2
    assert count_points("   \n") == 0


def test_parse_int():
    assert parse_int("-42 ", 0) == (-42, 3)
    assert parse_int("17,0xff", 0) == (17, 2)
    assert parse_int("x", 0) == (0, 0)


def test_parse_hex():
    assert parse_hex("ff", 0) == (0xFF, 2)
    assert parse_hex("FF00 1", 0) == (0xFF00, 4)


def test_parse_color():
    assert parse_color(",0xFF0000", 0) == (0xFF0000, 9)
    assert parse_color(",0XabCDef", 0) == (0xABCDEF, 9)
    assert parse_color(" ", 0) == (0x33FF33, 0)
    assert parse_color(",5", 0) == (0x33FF33, 1)
    assert parse_color("", 0) == (0x33FF33, 0)


def test_extension():
    assert has_fdf_extension("a.fdf") is True
    assert has_fdf_extension("maps/42.fdf") is True
    assert has_fdf_extension(".fdf") is False
    assert has_fdf_extension("map.txt") is False


def test_parse_row():
    row = parse_row("0 5,0xff -2\n", 3)
    assert [p.x for p in row] == [0, 1, 2]
    assert all(p.y == 3 for p in row)
    assert [p.z for p in row] == [0, 5, -2]
    assert [p.color for p in row] == [0x33FF33, 0xFF, 0x33FF33]


def test_parse_row_length_matches_count():
    line = "1 -2,0x10 abc , 7\n"
    assert len(parse_row(line, 0)) == count_points(line)


def test_parse_map_shape():
    rows = parse_map(["0 0 0\n", "1 2 3\n"])
    assert len(rows) == 2
    assert all(len(row) == 3 for row in rows)
    assert rows[1][2] == Point(x=2, y=1, z=3)


def test_parse_map_ragged():
    with pytest.raises(MapError):
        parse_map(["0 0 0\n", "1 2\n"])


def test_parse_map_empty():
    with pytest.raises(MapError):
        parse_map([])


def test_load_map(tmp_path):
    path = tmp_path / "t.fdf"
    path.write_text("0 1\n2 3,0xFF\n")
    rows = load_map(path)
    assert [[p.z for p in row] for row in rows] == [[0, 1], [2, 3]]
    assert rows[1][1].color == 0xFF


def test_load_map_without_trailing_newline(tmp_path):
    path = tmp_path / "t.fdf"
    path.write_text("4 5\n6 7")
    rows = load_map(path)
    assert [[p.z for p in row] for row in rows] == [[4, 5], [6, 7]]


def test_load_map_wrong_extension(tmp_path):
    path = tmp_path / "t.txt"
    path.write_text("0 1\n")
    with pytest.raises(MapError):
        load_map(path)


def test_load_map_missing(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "missing.fdf")


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "e.fdf"
    path.write_text("")
    with pytest.raises(MapError):
        load_map(path)