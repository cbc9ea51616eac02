"""
Conversion between parsed coordinates and decimal degrees.

Forward conversion (any notation to decimal degrees):
    DD  = degrees
    DMS = sign * (D + M/60 + S/3600)
    DDM = sign * (D + M/60)

Inverse conversion splits the absolute value with floor(), works at full
precision and rounds the last component (seconds for DMS, minutes for DDM)
to three decimals exactly once. A component that rounds up to 60 carries
into the next larger unit so the returned value still satisfies the range
invariants of its dataclass.

Conversion functions raise ConversionError when handed an invalid value;
they are meant to be called on results that already passed parsing.
"""

import math

from coordinate_search.errors import ConversionError
from coordinate_search.formats import Axis, CoordinateFormat
from coordinate_search.models import (
    MAX_DEGREES,
    MINUTES_PER_DEGREE,
    SECONDS_PER_MINUTE,
    CoordinatePair,
    DDCoordinate,
    DDMCoordinate,
    DecimalPair,
    DMSCoordinate,
    ParsedCoordinate,
)
from coordinate_search.types import ArcMinutes, ArcSeconds, Degrees, Sign, WholeDegrees

ROUNDING_DECIMALS = 3


def to_decimal_degrees(parsed: ParsedCoordinate) -> Degrees:
    """
    Convert a parsed coordinate to signed decimal degrees.

    Args:
        parsed: Result of parse_coordinate().

    Returns:
        Decimal degrees, negative for South/West.

    Raises:
        ConversionError: If the value is invalid or of unknown format.
    """
    if parsed is None or not parsed.valid:
        fmt = getattr(parsed, "format", None)
        raise ConversionError.invalid_input("coordinate is not valid", fmt)

    if isinstance(parsed, DDCoordinate):
        return parsed.degrees

    if isinstance(parsed, DMSCoordinate):
        magnitude = parsed.degrees + parsed.minutes / 60 + parsed.seconds / 3600
        return Degrees(parsed.sign * magnitude)

    if isinstance(parsed, DDMCoordinate):
        return Degrees(parsed.sign * (parsed.degrees + parsed.minutes / 60))

    raise ConversionError.invalid_input(f"unsupported value {type(parsed).__name__}")


def _split(decimal: float) -> tuple[Sign, float, int]:
    if not isinstance(decimal, (int, float)) or isinstance(decimal, bool):
        raise ConversionError.invalid_input(f"expected a number, got {type(decimal).__name__}")
    if not math.isfinite(decimal):
        raise ConversionError.invalid_input(f"decimal degrees must be finite, got {decimal}")

    absolute = abs(decimal)
    if absolute > MAX_DEGREES:
        raise ConversionError.invalid_input(f"decimal degrees out of range: {decimal}")

    sign = Sign(-1 if _negative(decimal) else 1)
    return sign, absolute, math.floor(absolute)


def _negative(decimal: float) -> bool:
    """True for values below zero and for -0.0, which a "-0" token parses to."""
    return math.copysign(1.0, decimal) < 0


def _axis(axis: Axis | str) -> Axis:
    try:
        return Axis(axis)
    except ValueError as e:
        raise ConversionError.invalid_input(f"unknown axis {axis!r}") from e


def to_dms(decimal: float, axis: Axis | str = Axis.LATITUDE) -> DMSCoordinate:
    """
    Convert decimal degrees to a DMS value.

    Args:
        decimal: Signed decimal degrees.
        axis: Latitude selects N/S, longitude selects E/W.

    Returns:
        DMSCoordinate with seconds rounded to three decimals.

    Raises:
        ConversionError: If decimal is not a finite number or axis is unknown.
    """
    axis = _axis(axis)
    sign, absolute, degrees = _split(decimal)

    minutes_float = (absolute - degrees) * 60
    minutes = math.floor(minutes_float)
    seconds = round((minutes_float - minutes) * 60, ROUNDING_DECIMALS)

    if seconds >= SECONDS_PER_MINUTE:
        seconds = 0.0
        minutes += 1
    if minutes >= MINUTES_PER_DEGREE:
        minutes = 0
        degrees += 1

    return DMSCoordinate(
        degrees=WholeDegrees(degrees),
        minutes=minutes,
        seconds=ArcSeconds(seconds),
        direction=axis.direction(sign < 0),
        sign=sign,
    )


def to_ddm(decimal: float, axis: Axis | str = Axis.LATITUDE) -> DDMCoordinate:
    """
    Convert decimal degrees to a DDM value.

    Args:
        decimal: Signed decimal degrees.
        axis: Latitude selects N/S, longitude selects E/W.

    Returns:
        DDMCoordinate with minutes rounded to three decimals.

    Raises:
        ConversionError: If decimal is not a finite number or axis is unknown.
    """
    axis = _axis(axis)
    sign, absolute, degrees = _split(decimal)

    minutes = round((absolute - degrees) * 60, ROUNDING_DECIMALS)
    if minutes >= MINUTES_PER_DEGREE:
        minutes = 0.0
        degrees += 1

    return DDMCoordinate(
        degrees=WholeDegrees(degrees),
        minutes=ArcMinutes(minutes),
        direction=axis.direction(sign < 0),
        sign=sign,
    )


def pair_to_decimal(pair: CoordinatePair) -> DecimalPair:
    """
    Convert both halves of a parsed pair to decimal degrees.

    Raises:
        ConversionError: If the pair or either half is invalid.
    """
    if pair is None or not pair.valid or pair.latitude is None or pair.longitude is None:
        raise ConversionError.invalid_input("coordinate pair is not valid")

    return DecimalPair(
        latitude=to_decimal_degrees(pair.latitude),
        longitude=to_decimal_degrees(pair.longitude),
    )


def convert(parsed: ParsedCoordinate, target: CoordinateFormat, axis: Axis | str | None = None):
    """
    Re-express a parsed coordinate in another notation.

    Args:
        parsed: Valid parse result.
        target: Notation to convert to.
        axis: Axis for the direction letter; defaults to the axis of the
            value's own direction letter.

    Returns:
        DDCoordinate, DMSCoordinate or DDMCoordinate.

    Raises:
        ConversionError: If parsed is invalid or target is UNKNOWN.
    """
    decimal = to_decimal_degrees(parsed)
    if axis is None:
        axis = parsed.direction.axis

    if target is CoordinateFormat.DD:
        return DDCoordinate(degrees=decimal, direction=_axis(axis).direction(_negative(decimal)))
    if target is CoordinateFormat.DMS:
        return to_dms(decimal, axis)
    if target is CoordinateFormat.DDM:
        return to_ddm(decimal, axis)
    raise ConversionError.invalid_input(f"cannot convert to {target.value}", target)
