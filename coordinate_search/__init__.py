"""
Geographic coordinate parsing and conversion.

This package turns free-text coordinates typed by a person into structured
values and converts them among three notations:

    - DD  (Decimal Degrees):          40.7128, -74.0060
    - DMS (Degrees Minutes Seconds):  40°42'46"N, 74°0'21"W
    - DDM (Degrees Decimal Minutes):  40°42.767'N, 74°0.35'W

Pipeline:
    raw string -> detect_format -> parse_coordinate / parse_pair
    -> to_decimal_degrees -> to_dms / to_ddm -> format_dms / format_ddm

Example Usage:
    >>> from coordinate_search import parse_coordinate, to_decimal_degrees
    >>> parsed = parse_coordinate("18°3'46\\"E")
    >>> round(to_decimal_degrees(parsed), 7)
    18.0627778
    >>>
    >>> from coordinate_search import resolve
    >>> resolve("57.2411118, 12°6'25\\"E").format_label
    'DD/DMS'

Parsing never raises; failures come back as InvalidCoordinate or an invalid
CoordinatePair carrying a CoordinateError. Converters and formatters raise
ConversionError when handed a value they cannot process.
"""

from coordinate_search.config import DisplayConfig, get_default_config, load_config
from coordinate_search.converter import (
    convert,
    pair_to_decimal,
    to_ddm,
    to_decimal_degrees,
    to_dms,
)
from coordinate_search.detector import FORMAT_RULES, detect_format
from coordinate_search.errors import ConversionError, CoordinateError, ErrorKind
from coordinate_search.formats import Axis, CoordinateFormat, Direction
from coordinate_search.formatter import format_ddm, format_decimal, format_dms
from coordinate_search.models import (
    CoordinatePair,
    DDCoordinate,
    DDMCoordinate,
    DecimalCoordinate,
    DecimalPair,
    DecimalResult,
    DMSCoordinate,
    InvalidCoordinate,
    ParsedCoordinate,
)
from coordinate_search.pair import parse_pair, split_pair
from coordinate_search.parser import infer_direction, parse_coordinate
from coordinate_search.search import Conversion, Resolution, conversions, resolve

__all__ = [
    # Enumerations
    'Axis',
    'CoordinateFormat',
    'Direction',
    'ErrorKind',

    # Values
    'CoordinatePair',
    'DDCoordinate',
    'DDMCoordinate',
    'DMSCoordinate',
    'DecimalCoordinate',
    'DecimalPair',
    'DecimalResult',
    'InvalidCoordinate',
    'ParsedCoordinate',

    # Errors
    'ConversionError',
    'CoordinateError',

    # Detection and parsing
    'FORMAT_RULES',
    'detect_format',
    'infer_direction',
    'parse_coordinate',
    'parse_pair',
    'split_pair',

    # Conversion and formatting
    'convert',
    'format_ddm',
    'format_decimal',
    'format_dms',
    'pair_to_decimal',
    'to_ddm',
    'to_decimal_degrees',
    'to_dms',

    # Interactive boundary and configuration
    'Conversion',
    'DisplayConfig',
    'Resolution',
    'conversions',
    'get_default_config',
    'load_config',
    'resolve',
]

__version__ = '0.1.0'
__description__ = 'Parsing and conversion of DD, DMS and DDM geographic coordinates'
