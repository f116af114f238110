"""Tests for field-text parsing and fixed-point formatting."""

from __future__ import annotations

import pytest

from rfpower.engine.parsing import format_fixed, format_plain, parse_number


class TestParseNumber:
    @pytest.mark.parametrize("text,expected", [
        ("20", 20.0),
        ("-30", -30.0),
        ("+4", 4.0),
        ("0.5", 0.5),
        (".5", 0.5),
        ("1.", 1.0),
        ("1e-3", 1e-3),
        ("2.5E2", 250.0),
        ("  7  ", 7.0),
        ("-0", 0.0),
    ])
    def test_numbers(self, text: str, expected: float) -> None:
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", [
        "", "   ", "-", "+", ".", "-.", "1e", "1e+", "abc", "12abc",
        "nan", "inf", "-Infinity", "1e999", "1_000", "0x10", "1,5", "--1",
    ])
    def test_not_numbers_yet(self, text: str) -> None:
        assert parse_number(text) is None

    def test_none(self) -> None:
        assert parse_number(None) is None


class TestFormatFixed:
    def test_six_decimals(self) -> None:
        assert format_fixed(0.1, 6) == "0.100000"
        assert format_fixed(30.0, 6) == "30.000000"

    def test_three_decimals(self) -> None:
        assert format_fixed(-1.0, 3) == "-1.000"

    def test_negative_zero(self) -> None:
        assert format_fixed(-0.0, 6) == "0.000000"

    def test_tiny_negative_rounds_to_unsigned_zero(self) -> None:
        assert format_fixed(-4e-16, 6) == "0.000000"

    def test_small_negative_keeps_sign(self) -> None:
        assert format_fixed(-0.0005, 3) == "-0.001"


class TestFormatPlain:
    @pytest.mark.parametrize("value,expected", [
        (20.0, "20"),
        (-30.0, "-30"),
        (-0.0, "0"),
        (0.5, "0.5"),
        (-3.25, "-3.25"),
        (1e-7, "1e-07"),
    ])
    def test_shortest_form(self, value: float, expected: str) -> None:
        assert format_plain(value) == expected
