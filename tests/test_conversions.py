import pytest

from wirefdf.conversions import (
    FormatSpec,
    format_signed,
    format_unsigned,
    number_length,
    pad,
    parse_spec,
    zero_precision,
)


def spec_of(text):
    return parse_spec(text, 0)[0]


def test_parse_spec_reads_everything():
    spec, pos = parse_spec("-08.3d", 0)
    assert pos == 5
    assert spec.dash is True
    assert spec.zero is False
    assert spec.width == 8
    assert spec.dot is True
    assert spec.precision == 3
    assert spec.total_width == 8


def test_parse_spec_from_middle_of_format():
    fmt = "value: %+5d"
    spec, pos = parse_spec(fmt, fmt.index("%") + 1)
    assert fmt[pos] == "d"
    assert spec.plus is True
    assert spec.width == 5


def test_parse_spec_plus_overrides_space():
    spec = spec_of("+ d")
    assert spec.plus is True
    assert spec.space is False


def test_parse_spec_precision_disables_zero_padding():
    assert spec_of("05.2d").zero is False
    assert spec_of("05d").zero is True


def test_parse_spec_plain_conversion():
    spec, pos = parse_spec("d", 0)
    assert pos == 0
    assert spec == FormatSpec()


def test_parse_spec_rejects_huge_width():
    with pytest.raises(ValueError):
        parse_spec("99999999999d", 0)


@pytest.mark.parametrize("n", [0, 7, -7, 42, -12345, 2**31 - 1])
def test_number_length_decimal(n):
    assert number_length(n, 10) == len(str(abs(n)))


@pytest.mark.parametrize("n", [0, 15, 16, 255, 0xDEADBEEF])
def test_number_length_hex(n):
    assert number_length(n, 16) == len(format(n, "x"))


def test_pad():
    assert pad(5, 2, False) == " " * 3
    assert pad(5, 2, True) == "0" * 3
    assert pad(2, 5, True) == ""


@pytest.mark.parametrize(
    "fmt, n",
    [
        ("5", 42),
        ("-5", 42),
        ("05", -42),
        ("5", -42),
        (".3", 5),
        ("+", 42),
        ("+5", 42),
        ("8.3", -42),
        ("-8", -42),
        ("", -2147483648),
        ("10", 123456),
    ],
)
def test_format_signed_matches_standard_printf(fmt, n):
    assert format_signed(n, spec_of(fmt + "d")) == ("%" + fmt + "d") % n


def test_format_signed_wraps_to_32_bits():
    assert format_signed(2**31, FormatSpec()) == str(-(2**31))


def test_zero_with_zero_precision_prints_nothing():
    assert format_signed(0, spec_of(".0d")) == ""
    assert format_signed(0, spec_of("5.0d")) == " " * 5
    assert zero_precision(spec_of("4.d")) == " " * 4


@pytest.mark.parametrize("fmt, n", [("", 0), ("10", 3000000000), ("-10", 7), (".4", 9)])
def test_format_unsigned_matches_standard_printf(fmt, n):
    assert format_unsigned(n, spec_of(fmt + "u")) == ("%" + fmt + "u") % n


def test_format_unsigned_wraps_negative():
    assert format_unsigned(-1, FormatSpec()) == str(2**32 - 1)


@pytest.mark.parametrize("fmt", ["7", "-7", "07", ".5", "9.4"])
def test_width_is_respected(fmt):
    spec = spec_of(fmt + "d")
    for n in (0, 1, -1, 99, -999):
        assert len(format_signed(n, spec)) >= spec.width