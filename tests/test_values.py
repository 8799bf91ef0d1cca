"""Tests for value parsing and rendering."""

import math

import pytest

from dataknobs_env.values import format_number, format_value, parse_number


class TestParseNumber:
    """Test parsing environment strings as numbers."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("42", 42.0),
            ("-3.5", -3.5),
            ("+7", 7.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2E-2", 0.02),
            ("  12  ", 12.0),
            ("", 0.0),
            ("   ", 0.0),
            ("0x1F", 31.0),
            ("0o17", 15.0),
            ("0b101", 5.0),
        ],
    )
    def test_valid(self, text, expected):
        """Test accepted numeric forms."""
        assert parse_number(text) == expected

    def test_infinity(self):
        """Test JavaScript-style infinity spellings."""
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf

    @pytest.mark.parametrize(
        "text",
        [
            "abc", "12abc", "1,000", "1_000", "inf", "nan", "NaN", "0x", "0xZZ", "-0x10", "1e", "--1",
            "\u0661\u0662", "\uff11\uff12", "1e\u0663", "0x\u0661", "0b\u0661", "0o\uff17",
        ],
    )
    def test_invalid(self, text):
        """Test rejected forms."""
        assert parse_number(text) is None


class TestFormatting:
    """Test rendering of bounds and defaults."""

    def test_format_number(self):
        """Test integral values drop the fraction."""
        assert format_number(10) == "10"
        assert format_number(10.0) == "10"
        assert format_number(2.5) == "2.5"
        assert format_number(math.inf) == "Infinity"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1e21, "1e+21"),
            (1.5e300, "1.5e+300"),
            (10**22, "1e+22"),
            (1e20, "100000000000000000000"),
            (1e-7, "1e-7"),
            (1.25e-10, "1.25e-10"),
            (1e-6, "0.000001"),
            (0.5, "0.5"),
            (-2.5e-8, "-2.5e-8"),
            (-0.0, "0"),
            (123.456, "123.456"),
        ],
    )
    def test_format_number_exponent_ranges(self, value, expected):
        """Test very large and very small magnitudes."""
        assert format_number(value) == expected

    def test_format_value(self):
        """Test defaults render as environment strings."""
        assert format_value(True) == "true"
        assert format_value(False) == "false"
        assert format_value(8080) == "8080"
        assert format_value(1.0) == "1"
        assert format_value("text") == "text"
