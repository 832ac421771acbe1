"""Reading of .fdf height maps into grids of points."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Point",
    "MapError",
    "is_map_char",
    "count_points",
    "parse_int",
    "parse_hex",
    "parse_color",
    "has_fdf_extension",
    "parse_row",
    "parse_map",
    "load_map",
]

DEFAULT_COLOR = 0x33FF33
_MAP_CHARS = frozenset("0123456789,xXabcdefABCDEF-")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_EXTENSION = ".fdf"


class MapError(ValueError):
    """Raised when a map file cannot be read or is malformed."""


@dataclass
class Point:
    """A map point: grid position, height and colour, plus its projection."""

    x: int
    y: int
    z: int
    color: int = DEFAULT_COLOR
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0


def is_map_char(c):
    """Tell whether ``c`` can be part of a map value."""
    return c in _MAP_CHARS


def _runs(line):
    """Yield the start index of each run of map characters."""
    inside = False
    for pos, c in enumerate(line):
        if is_map_char(c):
            if not inside:
                yield pos
            inside = True
        else:
            inside = False


def count_points(line):
    """Count the values on one map line."""
    return sum(1 for _ in _runs(line))


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def parse_int(text, pos):
    """Read an optionally negative decimal at ``pos``; return (value, next pos)."""
    sign = 1
    if pos < len(text) and text[pos] == "-":
        sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + int(text[pos])
        pos += 1
    return _to_int32(value * sign), pos


def parse_hex(text, pos):
    """Read hex digits at ``pos``; return (32-bit value, next pos)."""
    value = 0
    while pos < len(text) and text[pos] in _HEX_DIGITS:
        value = value * 16 + int(text[pos], 16)
        pos += 1
    return value & 0xFFFFFFFF, pos


def parse_color(text, pos):
    """Read an optional ",0xRRGGBB" suffix; return (colour, next pos).

    Without one, the default colour 0x33FF33 is returned.
    """
    if pos < len(text) and text[pos] == ",":
        pos += 1
        if text[pos:pos + 1] == "0" and text[pos + 1:pos + 2] in ("x", "X"):
            return parse_hex(text, pos + 2)
    return DEFAULT_COLOR, pos


def has_fdf_extension(path):
    """Tell whether ``path`` names a file with a non-empty stem and .fdf suffix."""
    path = str(path)
    return len(path) > len(_EXTENSION) and path.endswith(_EXTENSION)


def parse_row(line, y):
    """Parse one map line into the points of row ``y``."""
    points = []
    pos = 0
    while pos < len(line):
        if not is_map_char(line[pos]):
            pos += 1
            continue
        z, pos = parse_int(line, pos)
        color, pos = parse_color(line, pos)
        points.append(Point(x=len(points), y=y, z=z, color=color))
        while pos < len(line) and is_map_char(line[pos]):
            pos += 1
    return points


def parse_map(lines):
    """Parse map lines into rows of points; every line must hold as many values."""
    lines = list(lines)
    if not lines:
        raise MapError("map is empty")
    width = count_points(lines[0])
    for number, line in enumerate(lines):
        if count_points(line) != width:
            raise MapError(f"line {number + 1} has a different number of values")
    if width == 0:
        raise MapError("map holds no values")
    return [parse_row(line, y) for y, line in enumerate(lines)]


def load_map(path):
    """Read and parse a .fdf map file."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as err:
        raise MapError(f"cannot open {path}: {err.strerror or err}") from err
    if not has_fdf_extension(path):
        raise MapError(f"wrong file format: {path}")
    lines = [line + "\n" for line in text.split("\n")]
    if lines and lines[-1] == "\n":
        lines.pop()
    if text and not text.endswith("\n") and lines:
        lines[-1] = lines[-1][:-1]
    return parse_map(lines)