"""
Entry point for interactive callers.

resolve() is what an input box calls on every change of its text buffer.
It tries the input as a latitude/longitude pair first and as a single
coordinate second, and always returns a terminating result:

    - None for empty or whitespace-only input ("nothing entered")
    - a valid Resolution carrying a DecimalPair or DecimalCoordinate
    - an invalid Resolution carrying a CoordinateError and the detected
      format tags, so a caller can still show "format detected" feedback

conversions() renders the DD/DMS/DDM equivalents of a valid resolution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from coordinate_search.config import DisplayConfig, get_default_config
from coordinate_search.converter import pair_to_decimal, to_ddm, to_decimal_degrees, to_dms
from coordinate_search.errors import CoordinateError, ErrorKind
from coordinate_search.formats import Axis, CoordinateFormat
from coordinate_search.formatter import format_ddm, format_decimal, format_dms
from coordinate_search.models import (
    CoordinatePair,
    DecimalCoordinate,
    DecimalPair,
    DecimalResult,
    ParsedCoordinate,
)
from coordinate_search.pair import parse_pair
from coordinate_search.parser import parse_coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one input string.

    Attributes:
        text: Trimmed input.
        parsed: CoordinatePair for pair input, ParsedCoordinate otherwise.
        decimal: Canonical decimal result, None on failure.
        error: Failure description, None on success.
    """

    text: str
    parsed: ParsedCoordinate | CoordinatePair
    decimal: DecimalResult | None = None
    error: CoordinateError | None = None

    @property
    def valid(self) -> bool:
        return self.error is None and self.decimal is not None

    @property
    def is_pair(self) -> bool:
        return isinstance(self.parsed, CoordinatePair)

    @property
    def formats(self) -> tuple[CoordinateFormat, ...]:
        """Detected format of each component."""
        if isinstance(self.parsed, CoordinatePair):
            return self.parsed.formats
        return (self.parsed.format,)

    @property
    def format_label(self) -> str:
        """Formats joined for display, e.g. ``"DD/DMS"``."""
        return "/".join(fmt.value for fmt in self.formats)


@dataclass(frozen=True)
class Conversion:
    """One rendering of a resolved coordinate in a given notation."""

    format: CoordinateFormat
    value: str


def resolve(text: object) -> Resolution | None:
    """
    Parse and convert free-text coordinate input.

    Args:
        text: Raw input buffer.

    Returns:
        None for empty input, otherwise a Resolution (valid or not).

    Example:
        >>> resolve("57.2411118, 12°6'25\\"E").format_label
        'DD/DMS'
    """
    if not isinstance(text, str) or not text.strip():
        return None

    trimmed = text.strip()

    pair = parse_pair(trimmed)
    if pair.valid:
        return Resolution(text=trimmed, parsed=pair, decimal=pair_to_decimal(pair))

    single = parse_coordinate(trimmed)
    if single.valid:
        decimal = DecimalCoordinate(value=to_decimal_degrees(single))
        return Resolution(text=trimmed, parsed=single, decimal=decimal)

    # A count mismatch only means the input was not a pair; the single-value
    # error is the informative one then.
    if pair.error is not None and pair.error.kind is ErrorKind.WRONG_COMPONENT_COUNT:
        resolution = Resolution(text=trimmed, parsed=single, error=single.error)
    else:
        resolution = Resolution(text=trimmed, parsed=pair, error=pair.error)

    logger.debug(f"Could not resolve {trimmed!r}: {resolution.error}")
    return resolution


def conversions(
    resolution: Resolution, config: DisplayConfig | None = None, axis: Axis | str | None = None
) -> list[Conversion]:
    """
    Render a valid resolution in all supported notations.

    Pairs are rendered in DD, DMS and DDM. Single values skip the notation
    they were entered in (except DD, which is always listed) and use the
    axis of their own direction letter unless one is given.

    Args:
        resolution: Result of resolve().
        config: Display settings; defaults to get_default_config().
        axis: Axis of a single value. Pairs always render latitude first
            and longitude second, so it is ignored for them.

    Returns:
        Conversions in DD, DMS, DDM order; empty for an invalid resolution.
    """
    if resolution is None or not resolution.valid:
        return []
    config = config or get_default_config()

    decimal = resolution.decimal
    if isinstance(decimal, DecimalPair):
        lat, lng = decimal.latitude, decimal.longitude
        return [
            Conversion(
                CoordinateFormat.DD,
                f"{format_decimal(lat, config.precision)}, {format_decimal(lng, config.precision)}",
            ),
            Conversion(
                CoordinateFormat.DMS,
                f"{format_dms(to_dms(lat, Axis.LATITUDE), config.symbolic)}, "
                f"{format_dms(to_dms(lng, Axis.LONGITUDE), config.symbolic)}",
            ),
            Conversion(
                CoordinateFormat.DDM,
                f"{format_ddm(to_ddm(lat, Axis.LATITUDE), config.symbolic)}, "
                f"{format_ddm(to_ddm(lng, Axis.LONGITUDE), config.symbolic)}",
            ),
        ]

    parsed = resolution.parsed
    if axis is None:
        axis = parsed.direction.axis
    value = decimal.value
    result = [Conversion(CoordinateFormat.DD, format_decimal(value, config.precision))]
    if parsed.format is not CoordinateFormat.DMS:
        result.append(Conversion(CoordinateFormat.DMS, format_dms(to_dms(value, axis), config.symbolic)))
    if parsed.format is not CoordinateFormat.DDM:
        result.append(Conversion(CoordinateFormat.DDM, format_ddm(to_ddm(value, axis), config.symbolic)))
    return result
