"""A printf-style formatter supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys

from wirefdf.conversions import (
    FormatSpec,
    format_signed,
    format_unsigned,
    number_length,
    pad,
    parse_spec,
    zero_precision,
)

__all__ = [
    "format_char",
    "format_string",
    "format_pointer",
    "format_hex",
    "format_conversion",
    "ft_format",
    "ft_printf",
]

_ULONG_MAX = 2**64 - 1
_LONG_LIMIT = 2**63
_UINT_MASK = 0xFFFFFFFF
_CONVERSIONS = frozenset("cdiupsxX%")


def _justify(shown, padding, spec):
    return shown + padding if spec.dash else padding + shown


def format_char(c, spec):
    """Render one character, given as a code or a one-character string."""
    char = c if isinstance(c, str) else chr(c & 0xFF)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _justify(char, pad(spec.width, 1, spec.zero), spec)


def format_string(text, spec):
    """Render a string; None prints as "(null)" unless the precision is below 6."""
    if text is None:
        shown = "" if spec.dot and spec.precision < 6 else "(null)"
    else:
        shown = text
        if spec.dot and spec.precision < len(text):
            shown = text[:spec.precision]
    return _justify(shown, pad(spec.width, len(shown), spec.zero), spec)


def format_pointer(address, spec):
    """Render an address as 0x followed by lower-case hex; zero gives "(nil)"."""
    address &= _ULONG_MAX
    if address == 0:
        shown = "(nil)"
        return _justify(shown, pad(spec.width, len(shown), spec.zero), spec)
    if address == _ULONG_MAX:
        length = 16
    elif address >= _LONG_LIMIT:
        length = number_length(2**64 - address, 16)
    else:
        length = number_length(address, 16)
    shown = f"0x{address:x}"
    return _justify(shown, pad(spec.width, length + 2, spec.zero), spec)


def format_hex(n, spec, lower):
    """Render ``n`` as 32-bit unsigned hex, lower or upper case."""
    n &= _UINT_MASK
    if spec.dot and not spec.precision and n == 0:
        return zero_precision(spec)
    digits = f"{n:x}" if lower else f"{n:X}"
    if not (spec.width or spec.precision or spec.hash):
        return digits
    length = len(digits)
    dash = spec.dash and bool(spec.width)
    total = spec.total_width
    if spec.precision >= spec.width:
        total = 0
    if length > total:
        total = 0
    if spec.precision > length and not dash:
        total -= spec.precision
    if spec.precision < length and not dash:
        total -= length
    prefixed = spec.hash and n > 0
    if prefixed:
        total -= 2
    prefix = ("0x" if lower else "0X") if prefixed else ""
    body = prefix + pad(spec.precision, length, True) + digits
    if dash:
        return body + pad(total, len(body), spec.zero)
    return pad(total, 0, spec.zero) + body


def format_conversion(conversion, arg, spec):
    """Render one argument for a conversion character."""
    if conversion == "c":
        return format_char(arg, spec)
    if conversion in ("d", "i"):
        return format_signed(arg, spec)
    if conversion == "u":
        return format_unsigned(arg, spec)
    if conversion == "p":
        return format_pointer(arg, spec)
    if conversion == "s":
        return format_string(arg, spec)
    if conversion == "x":
        return format_hex(arg, spec, True)
    if conversion == "X":
        return format_hex(arg, spec, False)
    if conversion == "%":
        return "%"
    raise ValueError(f"unknown conversion: %{conversion}")


def ft_format(fmt, *args):
    """Format ``args`` according to ``fmt`` and return the text."""
    pieces = []
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        if fmt[pos] != "%":
            pieces.append(fmt[pos])
            pos += 1
            continue
        spec, pos = parse_spec(fmt, pos + 1)
        if pos >= len(fmt):
            raise ValueError("format ends inside a conversion")
        conversion = fmt[pos]
        if conversion not in _CONVERSIONS:
            raise ValueError(f"unknown conversion: %{conversion}")
        arg = None
        if conversion != "%":
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format") from None
        pieces.append(format_conversion(conversion, arg, spec))
        pos += 1
    return "".join(pieces)


def ft_printf(fmt, *args):
    """Write the formatted text to standard output and return its length."""
    text = ft_format(fmt, *args)
    sys.stdout.write(text)
    return len(text)


_ = FormatSpec