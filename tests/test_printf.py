import pytest

from wirefdf.conversions import FormatSpec, parse_spec
from wirefdf.printf import (
    format_char,
    format_conversion,
    format_hex,
    format_pointer,
    format_string,
    ft_format,
    ft_printf,
)


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%05d", -42),
        ("%.3d", 5),
        ("%i", -7),
        ("%x", 255),
        ("%X", 255),
        ("%8x", 255),
        ("%#x", 255),
        ("%-6x|", 255),
        ("%.4x", 10),
        ("%c", 65),
        ("%3c", 65),
        ("%-3c|", 65),
        ("%s", "abc"),
        ("%5s", "abc"),
        ("%-5s|", "abc"),
        ("%.2s", "abc"),
        ("%5.0d", 0),
    ],
)
def test_matches_standard_formatting(fmt, value):
    assert ft_format(fmt, value) == fmt % value


def test_percent_sign():
    assert ft_format("100%%") == "100%"


def test_mixed_format():
    assert ft_format("%s is %d", "x", 3) == "x is 3"


def test_unsigned_wraps_to_32_bits():
    assert ft_format("%u", -1) == str(2**32 - 1)


def test_signed_wraps_to_32_bits():
    assert ft_format("%d", 2**31) == str(-(2**31))


def test_zero_with_zero_precision_is_empty():
    assert ft_format("%.0d", 0) == ""
    assert ft_format("%.0x", 0) == ""


def test_null_string():
    assert ft_format("%s", None) == "(null)"
    assert ft_format("%.3s", None) == ""
    padded = ft_format("%8s", None)
    assert len(padded) == 8 and padded.endswith("(null)")


def test_null_pointer():
    assert format_pointer(0, parse_spec("%p", 1)[0]) == "(nil)"


def test_pointer_hex():
    assert ft_format("%p", 255) == hex(255)
    assert ft_format("%10p", 255) == f"{hex(255):>10}"
    assert ft_format("%-10p|", 255) == f"{hex(255):<10}|"


def test_pointer_max():
    assert ft_format("%p", 2**64 - 1) == "0x" + "f" * 16


def test_format_char_accepts_string():
    assert format_char("z", FormatSpec()) == "z"
    with pytest.raises(ValueError):
        format_char("zz", FormatSpec())


def test_format_string_direct():
    spec, _ = parse_spec("%-4s", 1)
    assert format_string("ab", spec) == "ab  "


def test_format_hex_upper_prefix():
    spec, _ = parse_spec("%#X", 1)
    assert format_hex(255, spec, False) == "%#X" % 255


def test_format_conversion_direct():
    assert format_conversion("x", 255, FormatSpec()) == "ff"
    assert format_conversion("%", None, FormatSpec()) == "%"


def test_unknown_conversion():
    with pytest.raises(ValueError):
        ft_format("%q", 1)
    with pytest.raises(ValueError):
        format_conversion("q", 1, FormatSpec())


def test_trailing_percent():
    with pytest.raises(ValueError):
        ft_format("abc%")


def test_width_overflow():
    with pytest.raises(ValueError):
        ft_format("%99999999999d", 1)


def test_missing_argument():
    with pytest.raises(TypeError):
        ft_format("%d %d", 1)


def test_ft_printf_writes_and_counts(capsys):
    count = ft_printf("%s-%d\n", "ab", 12)
    out = capsys.readouterr().out
    assert out == "ab-12\n"
    assert count == len(out)