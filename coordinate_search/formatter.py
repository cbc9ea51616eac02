"""Rendering of coordinate values as display strings."""

import math
from decimal import Decimal

from coordinate_search.errors import ConversionError
from coordinate_search.formats import CoordinateFormat
from coordinate_search.models import DDMCoordinate, DMSCoordinate

DEFAULT_PRECISION = 6


def format_number(value: float) -> str:
    """Shortest positional text for a number: ``46`` not ``46.0``, ``0.00001`` not ``1e-05``."""
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def format_decimal(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Render decimal degrees in fixed-point notation.

    Args:
        value: Decimal degrees.
        precision: Digits after the decimal point.

    Raises:
        ConversionError: If value is not a finite number or precision is negative.
    """
    if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
        raise ConversionError.invalid_input(f"cannot format {value!r} as decimal degrees")
    if precision < 0:
        raise ConversionError.invalid_input(f"precision must be non-negative, got {precision}")
    return f"{value:.{precision}f}"


def format_dms(value: DMSCoordinate, symbolic: bool = True) -> str:
    """
    Render a DMS value, e.g. ``40°42'46"N`` or ``40 42 46 N``.

    Raises:
        ConversionError: If value is not a DMS coordinate.
    """
    if not isinstance(value, DMSCoordinate):
        raise ConversionError.invalid_input(
            f"expected a DMS coordinate, got {_describe(value)}", CoordinateFormat.DMS
        )

    degrees, minutes, seconds = value.degrees, value.minutes, format_number(value.seconds)
    direction = value.direction.value
    if symbolic:
        return f"{degrees}°{minutes}'{seconds}\"{direction}"
    return f"{degrees} {minutes} {seconds} {direction}"


def format_ddm(value: DDMCoordinate, symbolic: bool = True) -> str:
    """
    Render a DDM value, e.g. ``40°42.767'N`` or ``40 42.767 N``.

    Raises:
        ConversionError: If value is not a DDM coordinate.
    """
    if not isinstance(value, DDMCoordinate):
        raise ConversionError.invalid_input(
            f"expected a DDM coordinate, got {_describe(value)}", CoordinateFormat.DDM
        )

    degrees, minutes = value.degrees, format_number(value.minutes)
    direction = value.direction.value
    if symbolic:
        return f"{degrees}°{minutes}'{direction}"
    return f"{degrees} {minutes} {direction}"


def _describe(value: object) -> str:
    fmt = getattr(value, "format", None)
    if isinstance(fmt, CoordinateFormat):
        return fmt.value
    return type(value).__name__
