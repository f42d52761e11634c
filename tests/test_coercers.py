"""Unit tests for the scalar coercers."""

from __future__ import annotations

import pytest

from envcast.core.coercers import parse_auto, parse_boolean, parse_number
from envcast.core.errors import ParseError


class TestParseBoolean:
    """Test suite for parse_boolean."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, True),
            (False, False),
            ("true", True),
            ("false", False),
            ("TrUe", True),
            ("FaLSe", False),
            ("  TrUe    ", True),
            ("    FaLSe ", False),
        ],
    )
    def test_parses(self, value, expected):
        """Test boolean words and native booleans."""
        assert parse_boolean(value) is expected

    @pytest.mark.parametrize("value", ["10_000", "another string", [], {}, 89])
    def test_default_on_error(self, value):
        """Test the default is returned for unparseable values."""
        assert parse_boolean(value, True) is True
        assert parse_boolean(value, False) is False

    @pytest.mark.parametrize("value", ["", "another string", 10_000.35, 89, [], {}, None])
    def test_raises_without_default(self, value):
        """Test a ParseError names the offending value."""
        with pytest.raises(ParseError, match="is not a boolean"):
            parse_boolean(value)

    def test_parse_error_is_value_error(self):
        """Test ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_boolean("nope")


class TestParseNumber:
    """Test suite for parse_number."""

    def test_native_unchanged(self):
        """Test native numbers are returned as is."""
        assert parse_number(10_000.35) == 10_000.35
        assert parse_number(-5) == -5
        assert parse_number(0o77) == 63

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("10_000.35", 10000.35),
            ("  10_000.35  ", 10000.35),
            ("11", 11),
            ("-7", -7),
            ("-8.35", -8.35),
            ("_.5", 0.5),
        ],
    )
    def test_parses_strings(self, value, expected):
        """Test numeric strings, including underscore separators."""
        assert parse_number(value) == expected

    def test_integral_strings_give_int(self):
        """Test integral literals come back as int, decimals as float."""
        assert isinstance(parse_number("8080"), int)
        assert isinstance(parse_number("80.5"), float)

    def test_hex_prefix_reads_as_decimal(self):
        """Test 0x is accepted but the value is read as a decimal prefix."""
        assert parse_number("0x88") == 0

    @pytest.mark.parametrize("value", ["false", "true", "another string", [], {}])
    def test_default_on_error(self, value):
        """Test the default is returned for unparseable values."""
        assert parse_number(value, 11_000.35) == 11_000.35

    def test_default_five(self):
        """Test a non-numeric string falls back to the default."""
        assert parse_number("not a number", 5) == 5

    @pytest.mark.parametrize("value", ["", "not a number", True, False, [], {}, None])
    def test_raises_without_default(self, value):
        """Test a ParseError is raised when there is no default."""
        with pytest.raises(ParseError, match="is not a number"):
            parse_number(value)


class TestParseAuto:
    """Test suite for parse_auto."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (" true ", True),
            (" FalSE ", False),
            (True, True),
            (False, False),
        ],
    )
    def test_booleans(self, value, expected):
        """Test booleans win over everything else."""
        assert parse_auto(value) is expected

    def test_numbers(self):
        """Test numeric strings become numbers."""
        assert parse_auto("10") == 10
        assert isinstance(parse_auto("10"), int)
        assert parse_auto("10_000.35") == 10_000.35
        assert parse_auto(10_000.35) == 10_000.35

    def test_strings(self):
        """Test other text is kept, trimmed."""
        assert parse_auto("hello") == "hello"
        assert parse_auto("  another value ") == "another value"

    def test_defaults(self):
        """Test blank or non-scalar values give the default."""
        assert parse_auto("0", "default value") == 0
        assert parse_auto(" FalSE ", "default value") is False
        assert parse_auto("", "fallback") == "fallback"
        assert parse_auto("   ", "default value") == "default value"
        assert parse_auto(None, "default value") == "default value"
        assert parse_auto(["a"], "default value") == "default value"

    def test_never_raises(self):
        """Test missing defaults give None instead of raising."""
        assert parse_auto("") is None
        assert parse_auto(None) is None
        assert parse_auto({}) is None
