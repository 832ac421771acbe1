"""Reading of XPM pixmaps into images."""

from __future__ import annotations

import re

from wirefdf.image import Image
from wirefdf.xcolors import lookup_color

__all__ = [
    "XpmError",
    "split_words",
    "find_unquoted",
    "strip_comments",
    "text_to_rgb",
    "parse_xpm",
    "xpm_to_image",
    "xpm_file_to_image",
]

# Pixel written where the colour table says "None".
_TRANSPARENT_PIXEL = 0xFF000000
# Longest "name extra" colour text that is looked up.
_MAX_COLOR_TEXT = 63

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_DECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_HEXADECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text):
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_unquoted(text, needle):
    """Return the first index of ``needle`` outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text, start, length):
    end = min(start + length, len(text))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text):
    """Replace C comments outside quotes with spaces, keeping the length.

    A line comment is blanked together with the newline that ends it.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, end - begin + 2 if end != -1 else 3)
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, end - begin + 1 if end != -1 else 2)
    return text


def _atoi(text):
    match = _DECIMAL.match(text)
    return int(match.group(1)) if match else 0


def _hex_to_int(text):
    match = _HEXADECIMAL.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_to_rgb(name, extra):
    """Turn an XPM colour spec into 0xRRGGBB.

    "#RRGGBB" is read as hex. Otherwise ``name`` (joined to ``extra`` with a
    space when given) is looked up among the named colours; "None" gives -1
    and an unknown name gives 0.
    """
    if name.startswith("#"):
        return _hex_to_int(name[1:])
    if extra is not None:
        name = f"{name} {extra}"[:_MAX_COLOR_TEXT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(rows, what):
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _color_definition(spec):
    words = split_words(spec)
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour definition without 'c' key: {spec!r}") from None
    if index >= len(words):
        raise XpmError(f"colour definition without a value: {spec!r}")
    extra = words[index + 1] if index + 1 < len(words) else None
    return text_to_rgb(words[index], extra)


def parse_xpm(lines):
    """Build an Image from the strings of an XPM: header, colours, rows."""
    rows = iter(lines)
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(words[:4])!r}")

    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    replace = cpp <= 2
    colors = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour table")
        value = _color_definition(line[cpp:])
        if replace:
            colors[line[:cpp]] = value
        else:
            colors.setdefault(line[:cpp], value)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "pixel rows")
        for x in range(width):
            color = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT_PIXEL
            image.set_pixel(x, y, color)
    return image


def xpm_to_image(lines):
    """Build an Image from in-memory XPM strings."""
    return parse_xpm(lines)


def _quoted_strings(text):
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def xpm_file_to_image(path):
    """Read an XPM file and build an Image from it."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(_quoted_strings(strip_comments(text)))