"""Unit tests for coordinate_search.search module."""

import pytest

from coordinate_search import (
    Axis,
    ConversionError,
    CoordinateFormat,
    CoordinatePair,
    DecimalCoordinate,
    DecimalPair,
    Direction,
    DisplayConfig,
    ErrorKind,
    conversions,
    resolve,
)


class TestResolve:
    """Tests for resolve."""

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", None], ids=["empty", "spaces", "tab-newline", "none"])
    def test_nothing_entered(self, text: object) -> None:
        """Test empty input yields no result and no error."""
        assert resolve(text) is None

    def test_decimal_pair(self) -> None:
        """Test a DD pair resolves to a DecimalPair."""
        resolution = resolve("59.303965,18.0812836")

        assert resolution.valid
        assert resolution.is_pair
        assert resolution.error is None
        assert resolution.decimal == DecimalPair(latitude=59.303965, longitude=18.0812836)
        assert resolution.format_label == "DD/DD"

    def test_mixed_pair(self) -> None:
        """Test a DD/DMS pair converts each half."""
        resolution = resolve("57.2411118, 12°6'25\"E")

        assert resolution.valid
        assert resolution.formats == (CoordinateFormat.DD, CoordinateFormat.DMS)
        assert resolution.decimal.latitude == pytest.approx(57.2411118, abs=1e-5)
        assert resolution.decimal.longitude == pytest.approx(12.1069444, abs=1e-5)

    @pytest.mark.parametrize(
        "text,latitude,longitude",
        [
            ("57°51'56\"N, 19°3'11\"E", 57.8655556, 19.0530556),
            ("59°18.074'N, 18°40.743'E", 59.3012333, 18.67905),
            ("40 42 46 N;  74 0 21 W", 40.7127778, -74.0058333),
        ],
        ids=["dms-pair", "ddm-pair", "spaced-dms-pair"],
    )
    def test_pairs(self, text: str, latitude: float, longitude: float) -> None:
        """Test pairs in each notation."""
        resolution = resolve(text)

        assert resolution.valid
        assert resolution.decimal.latitude == pytest.approx(latitude, abs=1e-6)
        assert resolution.decimal.longitude == pytest.approx(longitude, abs=1e-6)

    def test_single_dms(self) -> None:
        """Test a lone DMS value resolves to a single decimal."""
        resolution = resolve("18°3'46\"E")

        assert resolution.valid
        assert not resolution.is_pair
        assert isinstance(resolution.decimal, DecimalCoordinate)
        assert resolution.decimal.value == pytest.approx(18.0627778, abs=1e-6)
        assert resolution.parsed.direction.value == "E"
        assert resolution.format_label == "DMS"

    def test_single_dd(self) -> None:
        """Test a lone DD value."""
        resolution = resolve(" 57.2411118 ")

        assert resolution.text == "57.2411118"
        assert resolution.decimal == DecimalCoordinate(value=57.2411118)

    def test_single_error_reported_for_non_pair(self) -> None:
        """Test a non-pair reports the single-value error, not a count error."""
        resolution = resolve("40°60'0\"N")

        assert not resolution.valid
        assert resolution.decimal is None
        assert resolution.error.kind is ErrorKind.OUT_OF_RANGE_COMPONENT
        assert resolution.format_label == "DMS"

    def test_unknown_format(self) -> None:
        """Test garbage input reports an unknown format."""
        resolution = resolve("hello world")

        assert not resolution.valid
        assert resolution.error.message == "unknown coordinate format"
        assert resolution.formats == (CoordinateFormat.UNKNOWN,)

    def test_pair_error_reported_for_pair(self) -> None:
        """Test a two-part input with a bad half reports the pair's error."""
        resolution = resolve("57.2411118, 12°75'25\"E")

        assert not resolution.valid
        assert isinstance(resolution.parsed, CoordinatePair)
        assert resolution.error.kind is ErrorKind.OUT_OF_RANGE_COMPONENT
        assert resolution.format_label == "DD/DMS"

    def test_too_many_components(self) -> None:
        """Test three components fall back to the single-value error."""
        resolution = resolve("1, 2, 3")

        assert not resolution.valid
        assert resolution.error.kind is ErrorKind.UNKNOWN_FORMAT

    def test_idempotent(self) -> None:
        """Test re-resolving the same text yields an equal result."""
        assert resolve("57.2411118, 12°6'25\"E") == resolve("57.2411118, 12°6'25\"E")

    @pytest.mark.parametrize(
        "text",
        ["1" * 5000 + "°5'N", "1" * 5000 + " 0 0 N", "40.7, " + "9" * 5000 + " 0 0 E"],
        ids=["ddm", "dms", "pair-half"],
    )
    def test_oversized_digits_do_not_raise(self, text: str) -> None:
        """Test thousands of digits yield an out-of-range result."""
        resolution = resolve(text)

        assert not resolution.valid
        assert resolution.error.kind is ErrorKind.OUT_OF_RANGE_COMPONENT


class TestConversions:
    """Tests for conversions."""

    def test_pair(self) -> None:
        """Test a pair is rendered in all three notations."""
        result = conversions(resolve("59.303965,18.0812836"))

        assert [c.format for c in result] == [
            CoordinateFormat.DD,
            CoordinateFormat.DMS,
            CoordinateFormat.DDM,
        ]
        assert result[0].value == "59.303965, 18.081284"
        assert result[1].value == "59°18'14.274\"N, 18°4'52.621\"E"
        assert result[2].value == "59°18.238'N, 18°4.877'E"

    def test_single_skips_input_format(self) -> None:
        """Test a single DMS value is not re-rendered as DMS."""
        result = conversions(resolve("18°3'46\"E"))

        assert [c.format for c in result] == [CoordinateFormat.DD, CoordinateFormat.DDM]
        assert result[0].value == "18.062778"
        assert result[1].value == "18°3.767'E"

    def test_single_dd_lists_everything(self) -> None:
        """Test a single DD value lists DD, DMS and DDM."""
        result = conversions(resolve("-33.8688"))

        assert [c.value for c in result] == ["-33.868800", "33°52'7.68\"S", "33°52.128'S"]

    def test_config(self) -> None:
        """Test precision and symbol settings are applied."""
        config = DisplayConfig(precision=2, symbolic=False)

        result = conversions(resolve("40.7128, -74.0060"), config)

        assert result[0].value == "40.71, -74.01"
        assert result[1].value == "40 42 46.08 N, 74 0 21.6 W"
        assert result[2].value == "40 42.768 N, 74 0.36 W"

    @pytest.mark.parametrize("text", ["hello", "40°60'0\"N"], ids=["unknown", "out-of-range"])
    def test_invalid(self, text: str) -> None:
        """Test invalid resolutions have no conversions."""
        assert conversions(resolve(text)) == []

    def test_none(self) -> None:
        """Test empty input has no conversions."""
        assert conversions(resolve("")) == []

    def test_axis_override(self) -> None:
        """Test an explicit axis replaces the letter guessed from the magnitude."""
        result = conversions(resolve("-74.0058333"), axis=Axis.LONGITUDE)

        assert [c.value for c in result] == ["-74.005833", "74°0'21\"W", "74°0.35'W"]

    def test_unknown_axis(self) -> None:
        """Test an unknown axis name is rejected."""
        with pytest.raises(ConversionError):
            conversions(resolve("-74.0058333"), axis="altitude")

    def test_negative_zero_keeps_its_direction(self) -> None:
        """Test "-0" is rendered South in every notation."""
        resolution = resolve("-0")

        assert resolution.parsed.direction is Direction.S
        assert [c.value for c in conversions(resolution)] == ["-0.000000", "0°0'0\"S", "0°0'S"]
