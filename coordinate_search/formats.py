"""
Enumerations shared by the parser, converter and formatter.

    - CoordinateFormat: notation a coordinate string was written in
    - Axis: whether a value is a latitude or a longitude
    - Direction: cardinal letter attached to a value
"""

from __future__ import annotations

from enum import Enum


class CoordinateFormat(Enum):
    """Notation of a coordinate value."""

    DD = "DD"
    """Decimal Degrees, e.g. ``40.7128``."""

    DMS = "DMS"
    """Degrees-Minutes-Seconds, e.g. ``40°42'46"N``."""

    DDM = "DDM"
    """Degrees-Decimal-Minutes, e.g. ``40°42.767'N``."""

    UNKNOWN = "UNKNOWN"
    """Input matched none of the supported notations."""


class Axis(str, Enum):
    """Which of latitude/longitude a value represents."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"

    @classmethod
    def _missing_(cls, value: object) -> Axis | None:
        if isinstance(value, str):
            key = value.strip().lower()
            if key in ("lat", "latitude"):
                return cls.LATITUDE
            if key in ("lng", "lon", "long", "longitude"):
                return cls.LONGITUDE
        return None

    def direction(self, negative: bool) -> Direction:
        """Cardinal letter for a value on this axis with the given polarity."""
        if self is Axis.LATITUDE:
            return Direction.S if negative else Direction.N
        return Direction.W if negative else Direction.E


class Direction(str, Enum):
    """Cardinal direction letter."""

    N = "N"
    S = "S"
    E = "E"
    W = "W"

    @classmethod
    def _missing_(cls, value: object) -> Direction | None:
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        return None

    @property
    def is_negative(self) -> bool:
        """True for South and West."""
        return self in (Direction.S, Direction.W)

    @property
    def axis(self) -> Axis:
        return Axis.LATITUDE if self in (Direction.N, Direction.S) else Axis.LONGITUDE

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
}
