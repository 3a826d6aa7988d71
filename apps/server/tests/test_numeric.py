import math

from toolrelay.tools.numeric import format_number, parse_number


def test_parse_number_follows_js_number_rules():
    assert parse_number("2") == 2.0
    assert parse_number("  -3.5 ") == -3.5
    assert parse_number("1e3") == 1000.0
    assert parse_number(".5") == 0.5
    assert parse_number("0x1A") == 26.0
    assert parse_number("0b101") == 5.0
    assert parse_number("0o17") == 15.0
    assert parse_number("-Infinity") == -math.inf
    assert parse_number("") == 0.0
    assert parse_number("   ") == 0.0


def test_parse_number_gives_nan_for_non_js_literals():
    for raw in ["abc", "1_000", "inf", "nan", "12px", "-0x10", "1e", "Infinityx"]:
        assert math.isnan(parse_number(raw)), raw


def test_format_number_matches_js_string_conversion():
    assert format_number(7.0) == "7"
    assert format_number(50000) == "50000"
    assert format_number(0.5) == "0.5"
    assert format_number(-2.25) == "-2.25"
    assert format_number(-0.0) == "0"
    assert format_number(0.1 + 0.2) == "0.30000000000000004"
    assert format_number(1e20) == "100000000000000000000"
    assert format_number(1e21) == "1e+21"
    assert format_number(1.5e-7) == "1.5e-7"
    assert format_number(0.000001) == "0.000001"
    assert format_number(123.456) == "123.456"


def test_format_number_special_values():
    assert format_number(math.nan) == "NaN"
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "-Infinity"


def test_parse_number_only_accepts_ascii_digits():
    for raw in ["١٢", "０", "１.５", "1e٣"]:
        assert math.isnan(parse_number(raw)), raw


def test_parse_number_trims_javascript_whitespace_only():
    assert parse_number("\ufeff5") == 5.0
    assert parse_number("\u3000 7\u2028") == 7.0
    for raw in ["\x1c5", "5\x1f", "\x855"]:
        assert math.isnan(parse_number(raw)), repr(raw)
