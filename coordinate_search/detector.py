"""
Coordinate format detection.

Classification runs an ordered list of rules against the trimmed input and
returns the format of the first rule that matches. The order is part of the
contract: DMS is tried before DDM and DDM before DD, because the looser
patterns would otherwise absorb the extra component of a more specific
notation (``"40 42 46 N"`` also looks like a malformed DDM value).

Recognised symbols:
    - degrees: ``°``
    - minutes: ``'``, ``’`` (U+2019), ``′`` (U+2032)
    - seconds: ``"``, ``”`` (U+201D), ``″`` (U+2033)
    - directions: ``N``, ``S``, ``E``, ``W`` in either case
    - separators: any Unicode whitespace, normalised to a plain space
"""

import logging
import re
from dataclasses import dataclass

from coordinate_search.formats import CoordinateFormat

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.ASCII

_MINUTE_MARK = "['’′]"
_SECOND_MARK = "[\"”″]"
_DIRECTION = r"([NSEW]?)"

DMS_SYMBOLIC = re.compile(
    rf"^(-?\d+)°\s*(\d+){_MINUTE_MARK}\s*(\d+(?:\.\d+)?){_SECOND_MARK}\s*{_DIRECTION}$", _FLAGS
)
DMS_SPACED = re.compile(rf"^(-?\d+)\s+(\d+)\s+(\d+(?:\.\d+)?)\s*{_DIRECTION}$", _FLAGS)
DDM_SYMBOLIC = re.compile(rf"^(-?\d+)°\s*(\d+(?:\.\d+)?){_MINUTE_MARK}\s*{_DIRECTION}$", _FLAGS)
DDM_SPACED = re.compile(rf"^(-?\d+)\s+(\d+(?:\.\d+)?)\s*{_DIRECTION}$", _FLAGS)
DD_PLAIN = re.compile(rf"^(-?\d+\.?\d*)°?\s*{_DIRECTION}$", _FLAGS)

# Any Unicode blank, e.g. U+00A0 in pasted text; patterns only see ASCII spaces.
_UNICODE_SPACE = re.compile(r"\s")


@dataclass(frozen=True)
class FormatRule:
    """A detection rule: the format a pattern identifies.

    Attributes:
        format: Format reported when the pattern matches.
        pattern: Anchored regular expression applied to trimmed input.
        name: Short label used in log records.
    """

    format: CoordinateFormat
    pattern: re.Pattern
    name: str


# Most specific first; reordering changes how ambiguous input is classified.
FORMAT_RULES: tuple[FormatRule, ...] = (
    FormatRule(CoordinateFormat.DMS, DMS_SYMBOLIC, "dms-symbolic"),
    FormatRule(CoordinateFormat.DMS, DMS_SPACED, "dms-spaced"),
    FormatRule(CoordinateFormat.DDM, DDM_SYMBOLIC, "ddm-symbolic"),
    FormatRule(CoordinateFormat.DDM, DDM_SPACED, "ddm-spaced"),
    FormatRule(CoordinateFormat.DD, DD_PLAIN, "dd"),
)


def _normalize(text: object) -> str:
    if not isinstance(text, str):
        return ""
    return _UNICODE_SPACE.sub(" ", text.strip())


def detect_format(text: object) -> CoordinateFormat:
    """
    Classify a coordinate string as DD, DMS, DDM or UNKNOWN.

    Args:
        text: Raw coordinate string. Non-string input is treated as empty.

    Returns:
        Format of the first matching rule, or CoordinateFormat.UNKNOWN.
    """
    trimmed = _normalize(text)
    if not trimmed:
        return CoordinateFormat.UNKNOWN

    for rule in FORMAT_RULES:
        if rule.pattern.match(trimmed):
            logger.debug(f"Detected {rule.format.value} ({rule.name}) for {trimmed!r}")
            return rule.format

    return CoordinateFormat.UNKNOWN


def match_format(text: object, fmt: CoordinateFormat) -> re.Match | None:
    """
    Match trimmed input against the patterns of one format, in rule order.

    Args:
        text: Raw coordinate string.
        fmt: Format whose patterns should be tried.

    Returns:
        The first successful match, or None.
    """
    trimmed = _normalize(text)
    for rule in FORMAT_RULES:
        if rule.format is not fmt:
            continue
        match = rule.pattern.match(trimmed)
        if match:
            return match
    return None
