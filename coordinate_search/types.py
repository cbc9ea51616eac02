"""
Unit type annotations for angular components.

This module defines NewType aliases for the angular units handled by the
coordinate_search package. They document which part of a coordinate a number
represents (whole degrees, arc-minutes, arc-seconds) and let static type
checkers catch a minutes value passed where seconds are expected, while
remaining transparent at runtime.

Usage Example:
    >>> from coordinate_search.types import ArcMinutes, Degrees
    >>>
    >>> def minutes_fraction(minutes: ArcMinutes) -> Degrees:
    ...     return Degrees(minutes / 60)
"""

from typing import NewType

Degrees = NewType('Degrees', float)
"""Angle in decimal degrees (e.g., a signed latitude or longitude)"""

WholeDegrees = NewType('WholeDegrees', int)
"""Unsigned integral degrees of a DMS or DDM value"""

ArcMinutes = NewType('ArcMinutes', float)
"""Arc-minutes, 1/60 of a degree (integral for DMS, fractional for DDM)"""

ArcSeconds = NewType('ArcSeconds', float)
"""Arc-seconds, 1/3600 of a degree"""

Sign = NewType('Sign', int)
"""Polarity multiplier, +1 or -1, applied to an unsigned magnitude"""
