"""
Immutable value types produced by parsing and conversion.

A parsed coordinate is one of four frozen dataclasses, discriminated by
their ``format`` tag:

    - DDCoordinate: signed decimal degrees
    - DMSCoordinate: unsigned degrees/minutes/seconds plus sign
    - DDMCoordinate: unsigned degrees/decimal minutes plus sign
    - InvalidCoordinate: failed parse carrying a CoordinateError

Every variant exposes ``format``, ``valid`` and ``error`` so consumers can
branch on ``valid`` before touching format-specific fields. Range invariants
(minutes and seconds below 60, degrees within 180) and the agreement of
``sign`` with ``direction`` are checked at construction; a violating value is
never clamped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from coordinate_search.errors import CoordinateError, ErrorKind
from coordinate_search.formats import CoordinateFormat, Direction
from coordinate_search.types import ArcMinutes, ArcSeconds, Degrees, Sign, WholeDegrees

MAX_DEGREES = 180
MINUTES_PER_DEGREE = 60
SECONDS_PER_MINUTE = 60


def _check_sign(sign: int, direction: Direction) -> None:
    if sign not in (1, -1):
        raise ValueError(f"sign must be +1 or -1, got {sign}")
    if (sign == -1) != direction.is_negative:
        raise ValueError(f"sign {sign:+d} disagrees with direction {direction.value}")


def _check_range(name: str, value: float, upper: float, inclusive: bool = False) -> None:
    too_big = value > upper if inclusive else value >= upper
    if value < 0 or too_big:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class DDCoordinate:
    """Decimal degrees value.

    Attributes:
        degrees: Signed decimal degrees (negative for South/West).
        direction: Cardinal letter, explicit or inferred.
    """

    format: ClassVar[CoordinateFormat] = CoordinateFormat.DD
    valid: ClassVar[bool] = True
    error: ClassVar[None] = None

    degrees: Degrees
    direction: Direction


@dataclass(frozen=True)
class DMSCoordinate:
    """Degrees-minutes-seconds value.

    Attributes:
        degrees: Unsigned whole degrees (0..180).
        minutes: Whole arc-minutes (0..59).
        seconds: Arc-seconds (0 <= seconds < 60).
        direction: Cardinal letter, explicit or inferred.
        sign: -1 for South/West, +1 otherwise.
    """

    format: ClassVar[CoordinateFormat] = CoordinateFormat.DMS
    valid: ClassVar[bool] = True
    error: ClassVar[None] = None

    degrees: WholeDegrees
    minutes: int
    seconds: ArcSeconds
    direction: Direction
    sign: Sign

    def __post_init__(self):
        _check_range("degrees", self.degrees, MAX_DEGREES, inclusive=True)
        _check_range("minutes", self.minutes, MINUTES_PER_DEGREE)
        _check_range("seconds", self.seconds, SECONDS_PER_MINUTE)
        _check_sign(self.sign, self.direction)


@dataclass(frozen=True)
class DDMCoordinate:
    """Degrees-decimal-minutes value.

    Attributes:
        degrees: Unsigned whole degrees (0..180).
        minutes: Decimal arc-minutes (0 <= minutes < 60).
        direction: Cardinal letter, explicit or inferred.
        sign: -1 for South/West, +1 otherwise.
    """

    format: ClassVar[CoordinateFormat] = CoordinateFormat.DDM
    valid: ClassVar[bool] = True
    error: ClassVar[None] = None

    degrees: WholeDegrees
    minutes: ArcMinutes
    direction: Direction
    sign: Sign

    def __post_init__(self):
        _check_range("degrees", self.degrees, MAX_DEGREES, inclusive=True)
        _check_range("minutes", self.minutes, MINUTES_PER_DEGREE)
        _check_sign(self.sign, self.direction)


@dataclass(frozen=True)
class InvalidCoordinate:
    """Failed parse.

    Attributes:
        format: Format detected before the failure (UNKNOWN if none).
        error: What went wrong.
    """

    valid: ClassVar[bool] = False

    format: CoordinateFormat
    error: CoordinateError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


ParsedCoordinate = Union[DDCoordinate, DMSCoordinate, DDMCoordinate, InvalidCoordinate]


@dataclass(frozen=True)
class CoordinatePair:
    """Result of parsing a combined "latitude, longitude" string.

    Attributes:
        latitude: Parse result of the first component (None if splitting failed).
        longitude: Parse result of the second component (None if splitting failed).
        error: First failure encountered, None when both halves are valid.
    """

    latitude: ParsedCoordinate | None
    longitude: ParsedCoordinate | None
    error: CoordinateError | None = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def formats(self) -> tuple[CoordinateFormat, ...]:
        """Formats of the parsed halves, empty if splitting failed."""
        return tuple(half.format for half in (self.latitude, self.longitude) if half is not None)


@dataclass(frozen=True)
class DecimalCoordinate:
    """Canonical decimal-degrees value of a single coordinate."""

    valid: ClassVar[bool] = True

    value: Degrees


@dataclass(frozen=True)
class DecimalPair:
    """Canonical decimal-degrees value of a latitude/longitude pair."""

    valid: ClassVar[bool] = True

    latitude: Degrees
    longitude: Degrees


DecimalResult = Union[DecimalCoordinate, DecimalPair]
