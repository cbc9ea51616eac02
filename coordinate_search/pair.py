"""Splitting and parsing of combined "latitude, longitude" strings."""

import logging
import re

from coordinate_search.errors import CoordinateError, ErrorKind
from coordinate_search.formats import Axis
from coordinate_search.models import CoordinatePair
from coordinate_search.parser import parse_coordinate

logger = logging.getLogger(__name__)

# A comma or semicolon (absorbing surrounding blanks) or a run of 2+ spaces.
PAIR_SEPARATOR = re.compile(r"\s*[,;]\s*|\s{2,}")


def split_pair(text: object) -> list[str]:
    """
    Split a combined coordinate string into trimmed segments.

    Args:
        text: Raw input such as ``"40.7128, -74.0060"``.

    Returns:
        Trimmed segments; empty list for empty or non-string input.
    """
    if not isinstance(text, str) or not text.strip():
        return []
    return [part.strip() for part in PAIR_SEPARATOR.split(text.strip())]


def parse_pair(text: object) -> CoordinatePair:
    """
    Parse a latitude/longitude pair.

    Each half is parsed independently and may use a different notation,
    e.g. ``"57.2411118, 12°6'25\\"E"``.

    Args:
        text: Raw input string.

    Returns:
        CoordinatePair whose error is the first failing half's error, or a
        WRONG_COMPONENT_COUNT error when the input does not split into
        exactly two non-empty segments.
    """
    parts = split_pair(text)
    if len(parts) != 2 or not all(parts):
        count = len(parts) if len(parts) != 2 else len([part for part in parts if part])
        logger.debug(f"Pair split of {text!r} gave {count} usable segment(s)")
        return CoordinatePair(
            latitude=None,
            longitude=None,
            error=CoordinateError(ErrorKind.WRONG_COMPONENT_COUNT, value=count),
        )

    latitude = parse_coordinate(parts[0], axis=Axis.LATITUDE)
    longitude = parse_coordinate(parts[1], axis=Axis.LONGITUDE)

    error = latitude.error if not latitude.valid else longitude.error
    return CoordinatePair(latitude=latitude, longitude=longitude, error=error)
