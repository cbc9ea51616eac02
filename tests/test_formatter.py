"""Unit tests for coordinate_search.formatter module."""

import math

import pytest

from coordinate_search import (
    Axis,
    ConversionError,
    DDMCoordinate,
    Direction,
    DMSCoordinate,
    ErrorKind,
    format_ddm,
    format_decimal,
    format_dms,
    parse_coordinate,
    to_ddm,
    to_dms,
)
from coordinate_search.formatter import format_number


class TestFormatDecimal:
    """Tests for format_decimal."""

    @pytest.mark.parametrize(
        "value,precision,expected",
        [
            (59.303965, 6, "59.303965"),
            (18.0812836, 6, "18.081284"),
            (-74.006, 6, "-74.006000"),
            (12.1069444, 2, "12.11"),
            (40, 0, "40"),
        ],
        ids=["six-digits", "rounded", "negative-padded", "two-digits", "integer"],
    )
    def test_fixed_point(self, value: float, precision: int, expected: str) -> None:
        """Test fixed-point rendering with the requested precision."""
        assert format_decimal(value, precision) == expected

    def test_default_precision(self) -> None:
        """Test the default precision is six digits."""
        assert format_decimal(1.5) == "1.500000"

    @pytest.mark.parametrize("value", [math.nan, math.inf, "1.5", None], ids=["nan", "inf", "str", "none"])
    def test_rejects_non_numbers(self, value: object) -> None:
        """Test non-finite and non-numeric values are rejected."""
        with pytest.raises(ConversionError):
            format_decimal(value)  # type: ignore[arg-type]


class TestFormatDms:
    """Tests for format_dms."""

    def test_symbolic_reproduces_input(self) -> None:
        """Test formatting a parsed DMS value reproduces the original text."""
        assert format_dms(parse_coordinate("40°42'46\"N")) == "40°42'46\"N"

    def test_plain(self) -> None:
        """Test plain rendering separates fields with spaces."""
        value = DMSCoordinate(degrees=74, minutes=0, seconds=21.5, direction=Direction.W, sign=-1)

        assert format_dms(value, symbolic=False) == "74 0 21.5 W"

    def test_converted_value(self) -> None:
        """Test a converted value renders its rounded seconds."""
        assert format_dms(to_dms(12.1069444, Axis.LONGITUDE)) == "12°6'25\"E"

    def test_tiny_seconds_stay_parseable(self) -> None:
        """Test very small seconds render positionally and parse back."""
        text = format_dms(parse_coordinate("40°42'0.00001\"N"))

        assert text == "40°42'0.00001\"N"
        assert parse_coordinate(text) == parse_coordinate("40°42'0.00001\"N")

    @pytest.mark.parametrize(
        "value",
        [
            DDMCoordinate(degrees=40, minutes=42.767, direction=Direction.N, sign=1),
            parse_coordinate("40.7128"),
            parse_coordinate("garbage"),
            None,
        ],
        ids=["ddm", "dd", "invalid", "none"],
    )
    def test_rejects_other_formats(self, value: object) -> None:
        """Test a value of another format is rejected."""
        with pytest.raises(ConversionError) as exc_info:
            format_dms(value)  # type: ignore[arg-type]

        assert exc_info.value.error.kind is ErrorKind.INVALID_CONVERSION_INPUT


class TestFormatDdm:
    """Tests for format_ddm."""

    def test_symbolic(self) -> None:
        """Test symbolic rendering."""
        assert format_ddm(parse_coordinate("59°18.074'N")) == "59°18.074'N"

    def test_plain(self) -> None:
        """Test plain rendering."""
        assert format_ddm(to_ddm(-74.0058333, Axis.LONGITUDE), symbolic=False) == "74 0.35 W"

    def test_whole_minutes(self) -> None:
        """Test whole minutes render without a fractional part."""
        value = DDMCoordinate(degrees=10, minutes=30.0, direction=Direction.S, sign=-1)

        assert format_ddm(value) == "10°30'S"

    def test_rejects_dms(self) -> None:
        """Test a DMS value is rejected with a message naming its format."""
        value = DMSCoordinate(degrees=40, minutes=42, seconds=46.0, direction=Direction.N, sign=1)

        with pytest.raises(ConversionError, match="expected a DDM coordinate, got DMS"):
            format_ddm(value)  # type: ignore[arg-type]


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        "value,expected",
        [(46.0, "46"), (46, "46"), (46.08, "46.08"), (0.001, "0.001"), (0.0, "0"), (1e-05, "0.00001"), (2.5e-07, "0.00000025")],
        ids=["whole-float", "int", "fraction", "small", "zero", "tiny", "tinier"],
    )
    def test_shortest_text(self, value: float, expected: str) -> None:
        """Test numbers render without a redundant fractional part."""
        assert format_number(value) == expected
