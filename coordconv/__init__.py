"""
Coordinate notation converter.

Converts geographic coordinates between three textual notations:
    - Decimal degrees: "34.03,-118.81"
    - DMS:             "34° 01′ 59.740″ N"
    - Compact DMS:     "354555N"

Example Usage:
    >>> from coordconv import Axis, Coordinate, Notation, detect_notation, parse_compact_dms
    >>>
    >>> detect_notation("354555N")
    <Notation.COMPACT: 'compact'>
    >>> lat = parse_compact_dms("354555N")
    >>> Coordinate(lat=lat, lon=-118.81).format(Notation.DMS)
    '35° 45′ 55.000″ N, 118° 48′ 36.000″ W'

Available Classes:
    - Coordinate: Immutable latitude/longitude pair
    - Axis, Notation: Vocabularies shared by parsers and formatters
    - FormatError: Raised for input in no supported notation
    - ConversionSession: Interactive line-oriented session
    - SessionConfig: Session configuration (flow variant, language)
"""

from coordconv.coordinate import Coordinate
from coordconv.coordinates import (
    FormatError,
    parse_compact_dms,
    parse_decimal_pair,
    parse_dms,
)
from coordconv.detector import detect_notation
from coordconv.formatting import to_compact_dms, to_decimal_string, to_dms
from coordconv.session import ConversionSession, OutputChoice, SessionState
from coordconv.session_config import FlowMode, SessionConfig, get_default_config
from coordconv.types import Axis, Degrees, Notation

__all__ = [
    # Data model
    'Axis',
    'Coordinate',
    'Degrees',
    'Notation',
    'FormatError',

    # Detection, parsing and formatting
    'detect_notation',
    'parse_decimal_pair',
    'parse_dms',
    'parse_compact_dms',
    'to_dms',
    'to_compact_dms',
    'to_decimal_string',

    # Session
    'ConversionSession',
    'OutputChoice',
    'SessionState',
    'SessionConfig',
    'FlowMode',
    'get_default_config',
]

__version__ = '0.1.0'
__description__ = 'Convert coordinates between decimal, DMS and compact DMS notations'
