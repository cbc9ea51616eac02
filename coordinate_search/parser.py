"""
Single-coordinate parsing.

parse_coordinate() detects the notation of a string, extracts its components
and validates their ranges, returning one of the ParsedCoordinate variants.
It never raises: every failure comes back as an InvalidCoordinate carrying a
structured CoordinateError.

Direction inference:
    When no direction letter is given and the caller does not say which axis
    the value belongs to, the letter is guessed from the magnitude: up to 90
    is taken as a latitude (N/S), anything larger as a longitude (E/W). This
    is an approximation; longitudes of 90 degrees or less are labelled N/S.
    Pair parsing passes the axis explicitly and avoids the guess.

Sign (DMS/DDM):
    Negative when the degree token carries a minus sign or the direction
    letter is S/W. A minus sign combined with N/E flips the letter to its
    opposite so ``sign`` and ``direction`` always agree.
"""

import logging
import math
import re
from typing import Callable

from coordinate_search.detector import detect_format, match_format
from coordinate_search.errors import CoordinateError, ErrorKind
from coordinate_search.formats import Axis, CoordinateFormat, Direction
from coordinate_search.models import (
    MAX_DEGREES,
    MINUTES_PER_DEGREE,
    SECONDS_PER_MINUTE,
    DDCoordinate,
    DDMCoordinate,
    DMSCoordinate,
    InvalidCoordinate,
    ParsedCoordinate,
)
from coordinate_search.types import ArcMinutes, ArcSeconds, Degrees, Sign, WholeDegrees

logger = logging.getLogger(__name__)

LATITUDE_LIMIT = 90.0


def infer_direction(negative: bool, magnitude: float, axis: Axis | None = None) -> Direction:
    """
    Pick a direction letter for a value written without one.

    Args:
        negative: Whether the value carried a minus sign.
        magnitude: Absolute degree value.
        axis: Known axis of the value; when None the magnitude decides.

    Returns:
        Direction letter matching the value's polarity.
    """
    if axis is None:
        axis = Axis.LATITUDE if magnitude <= LATITUDE_LIMIT else Axis.LONGITUDE
    return axis.direction(negative)


def _resolve_direction(
    letter: str, negative_token: bool, magnitude: float, axis: Axis | None
) -> tuple[Direction, Sign]:
    """Combine the degree token's sign with the optional direction letter."""
    if not letter:
        direction = infer_direction(negative_token, magnitude, axis)
    else:
        direction = Direction(letter)
        if negative_token and not direction.is_negative:
            direction = direction.opposite
    return direction, Sign(-1 if direction.is_negative else 1)


def _whole(token: str) -> int | float:
    """Absolute integer value of a digit token; inf when too long to represent."""
    value = abs(float(token))
    return int(value) if math.isfinite(value) else value


def _out_of_range(fmt: CoordinateFormat, component: str, value: float, bound: float) -> InvalidCoordinate:
    return InvalidCoordinate(
        format=fmt,
        error=CoordinateError(
            ErrorKind.OUT_OF_RANGE_COMPONENT,
            format=fmt,
            component=component,
            value=value,
            bound=bound,
        ),
    )


def _extract_dd(match: re.Match, axis: Axis | None) -> ParsedCoordinate:
    token, letter = match.group(1), match.group(2)
    value = float(token)
    magnitude = abs(value)
    if magnitude > MAX_DEGREES:
        return _out_of_range(CoordinateFormat.DD, "degrees", magnitude, MAX_DEGREES)

    direction, sign = _resolve_direction(letter, token.startswith("-"), magnitude, axis)
    return DDCoordinate(degrees=Degrees(sign * magnitude), direction=direction)


def _extract_dms(match: re.Match, axis: Axis | None) -> ParsedCoordinate:
    token = match.group(1)
    degrees = _whole(token)
    minutes = _whole(match.group(2))
    seconds = float(match.group(3))

    fmt = CoordinateFormat.DMS
    if degrees > MAX_DEGREES:
        return _out_of_range(fmt, "degrees", degrees, MAX_DEGREES)
    if minutes >= MINUTES_PER_DEGREE:
        return _out_of_range(fmt, "minutes", minutes, MINUTES_PER_DEGREE)
    if seconds >= SECONDS_PER_MINUTE:
        return _out_of_range(fmt, "seconds", seconds, SECONDS_PER_MINUTE)

    direction, sign = _resolve_direction(match.group(4), token.startswith("-"), degrees, axis)
    return DMSCoordinate(
        degrees=WholeDegrees(degrees),
        minutes=minutes,
        seconds=ArcSeconds(seconds),
        direction=direction,
        sign=sign,
    )


def _extract_ddm(match: re.Match, axis: Axis | None) -> ParsedCoordinate:
    token = match.group(1)
    degrees = _whole(token)
    minutes = float(match.group(2))

    fmt = CoordinateFormat.DDM
    if degrees > MAX_DEGREES:
        return _out_of_range(fmt, "degrees", degrees, MAX_DEGREES)
    if minutes >= MINUTES_PER_DEGREE:
        return _out_of_range(fmt, "minutes", minutes, MINUTES_PER_DEGREE)

    direction, sign = _resolve_direction(match.group(3), token.startswith("-"), degrees, axis)
    return DDMCoordinate(
        degrees=WholeDegrees(degrees),
        minutes=ArcMinutes(minutes),
        direction=direction,
        sign=sign,
    )


_EXTRACTORS: dict[CoordinateFormat, Callable[[re.Match, Axis | None], ParsedCoordinate]] = {
    CoordinateFormat.DD: _extract_dd,
    CoordinateFormat.DMS: _extract_dms,
    CoordinateFormat.DDM: _extract_ddm,
}


def parse_coordinate(text: object, axis: Axis | str | None = None) -> ParsedCoordinate:
    """
    Parse a single coordinate string.

    Args:
        text: Raw coordinate string, e.g. ``"40°42'46\\"N"`` or ``"-74.006"``.
        axis: Axis the value belongs to, if known. Only used to pick the
            direction letter when the input has none.

    Returns:
        DDCoordinate, DMSCoordinate or DDMCoordinate on success, otherwise an
        InvalidCoordinate describing the failure.

    Example:
        >>> parse_coordinate("18°3'46\\"E").direction
        <Direction.E: 'E'>
    """
    if axis is not None:
        axis = Axis(axis)

    fmt = detect_format(text)
    if fmt is CoordinateFormat.UNKNOWN:
        return InvalidCoordinate(
            format=CoordinateFormat.UNKNOWN,
            error=CoordinateError(ErrorKind.UNKNOWN_FORMAT),
        )

    match = match_format(text, fmt)
    if match is None:
        logger.warning(f"{fmt.value} detected but its pattern did not match: {text!r}")
        return InvalidCoordinate(
            format=fmt,
            error=CoordinateError(ErrorKind.MALFORMED_COMPONENT, format=fmt),
        )

    result = _EXTRACTORS[fmt](match, axis)
    if not result.valid:
        logger.debug(f"Rejected {text!r}: {result.error}")
    return result
