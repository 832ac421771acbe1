"""Conversion specs and integer formatting for the printf-style formatter."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

__all__ = [
    "FormatSpec",
    "parse_spec",
    "number_length",
    "pad",
    "zero_precision",
    "format_signed",
    "format_unsigned",
]

_INT_MAX = 2**31 - 1
_UINT_MASK = 0xFFFFFFFF


@dataclass
class FormatSpec:
    """Flags, width and precision of one conversion."""

    dash: bool = False
    plus: bool = False
    zero: bool = False
    space: bool = False
    hash: bool = False
    width: int = 0
    precision: int = 0
    dot: bool = False
    total_width: int = 0


_FLAG_CHARS = {"-": "dash", "+": "plus", "#": "hash", " ": "space", "0": "zero"}


def _read_number(fmt, pos):
    start = pos
    while pos < len(fmt) and "0" <= fmt[pos] <= "9":
        pos += 1
    if start == pos:
        return 0, pos
    value = int(fmt[start:pos])
    if value > _INT_MAX:
        raise ValueError(f"field width or precision too large: {fmt[start:pos]}")
    return value, pos


def parse_spec(fmt, pos):
    """Read flags, width and precision of ``fmt`` starting at ``pos``.

    ``pos`` is the index just after '%'. Return the spec and the index of
    the conversion character. A width or precision beyond the int range
    raises ValueError.
    """
    flags = {}
    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        flags[_FLAG_CHARS[fmt[pos]]] = True
        pos += 1
    width, pos = _read_number(fmt, pos)
    dot = pos < len(fmt) and fmt[pos] == "."
    if dot:
        pos += 1
    precision, pos = _read_number(fmt, pos)
    spec = FormatSpec(width=width, precision=precision, dot=dot, **flags)
    spec.total_width = spec.width
    if (spec.zero and spec.dash) or spec.precision > 0:
        spec.zero = False
    if spec.plus and spec.space:
        spec.space = False
    return spec, pos


def number_length(n, base):
    """Count the digits of ``n`` in ``base``, without any sign."""
    n = abs(n)
    if n == 0:
        return 1
    count = 0
    while n > 0:
        n //= base
        count += 1
    return count


def pad(width, used, zero):
    """Return the padding that brings ``used`` characters up to ``width``."""
    return ("0" if zero else " ") * max(0, width - used)


def zero_precision(spec):
    """Render a zero value printed with an explicit precision of zero."""
    if spec.width:
        return pad(spec.width, 0, spec.precision)
    return ""


def _sign(n, spec):
    if spec.zero and n < 0:
        return "-", -n
    if spec.space and n >= 0:
        return " ", n
    if spec.plus and n >= 0:
        return "+", n
    if n < 0:
        return "-", -n
    return "", n


def _decimal_with_width(n, spec):
    length = number_length(n, 10)
    total = spec.total_width
    if spec.precision >= spec.width:
        total = 0
    if length > total:
        total = 0
    if spec.precision > length and not spec.dash:
        total -= spec.precision
    if spec.precision < length and not spec.dash:
        total -= length
    if (n < 0 or spec.plus) and not spec.dash and not spec.zero:
        total -= 1
    spec = dataclasses.replace(spec, total_width=total)

    def body(value):
        sign, value = _sign(value, spec)
        return sign + pad(spec.precision, length, True) + str(value), value

    out = ""
    if spec.dash:
        text, n = body(n)
        out += text
    elif spec.zero and n < 0:
        sign, n = _sign(n, spec)
        out += sign
    out += pad(spec.total_width, len(out), spec.zero)
    if not spec.dash:
        text, n = body(n)
        out += text
    return out


def _format_decimal(n, spec):
    if spec.dot and not spec.precision and n == 0:
        return zero_precision(spec)
    if spec.width or spec.precision or spec.plus or spec.space:
        return _decimal_with_width(n, spec)
    return str(n)


def format_signed(n, spec):
    """Render ``n`` as a 32-bit signed decimal ('d' and 'i')."""
    n &= _UINT_MASK
    if n > _INT_MAX:
        n -= 1 << 32
    return _format_decimal(n, spec)


def format_unsigned(n, spec):
    """Render ``n`` as a 32-bit unsigned decimal ('u')."""
    return _format_decimal(n & _UINT_MASK, spec)