"""
Coordinate text parsing utilities.

This module turns the three supported textual notations into signed decimal
degrees:

- decimal pair: "34.03,-118.81"
- DMS:          "34° 01′ 59.740″ N" (also "39°38'25.72\"N")
- compact DMS:  "354555N"
"""

import logging
import math
import re
from typing import Optional

from coordconv.types import Axis, Degrees, Notation

logger = logging.getLogger(__name__)

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"

# Degrees may be fractional; whitespace and the seconds symbol are optional
DMS_PATTERN = re.compile(
    rf"({_NUMBER})\s*°\s*({_NUMBER})\s*[′']\s*({_NUMBER})\s*[″\"]?\s*([NSEW])",
    re.IGNORECASE,
)

COMPACT_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})([NSEW])")


class FormatError(ValueError):
    """Raised when text cannot be read as a coordinate in any supported notation.

    Attributes:
        text: The offending raw input.
        notation: Notation that was being parsed, or None if no notation matched.
    """

    def __init__(self, text: str, notation: Optional[Notation] = None, reason: Optional[str] = None):
        self.text = text
        self.notation = notation
        if reason is None:
            if notation is None:
                reason = "Unrecognized coordinate format"
            else:
                reason = f"Invalid {notation.label} input"
        super().__init__(f"{reason}: {text!r}")


def apply_hemisphere(magnitude: float, hemisphere: str) -> Degrees:
    """
    Sign a degree magnitude according to its hemisphere letter.

    Args:
        magnitude: Non-negative angle in decimal degrees
        hemisphere: One of N, S, E, W (case-insensitive)

    Returns:
        Decimal degrees, negative for S/W
    """
    if hemisphere.upper() in ("S", "W"):
        return Degrees(-magnitude)
    return Degrees(magnitude)


def dms_to_degrees(degrees: float, minutes: float, seconds: float) -> float:
    return degrees + minutes / 60 + seconds / 3600


def _parse_float(text: str, notation: Notation) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        raise FormatError(text, notation, "Not a decimal number") from None
    if not math.isfinite(value):
        raise FormatError(text, notation, "Not a finite decimal number")
    return value


def parse_decimal_pair(text: str) -> tuple[Degrees, Degrees]:
    """
    Parse a "lat,lon" pair of signed decimal degrees.

    The sign is taken literally from the text; no hemisphere letters are read.

    Args:
        text: Comma separated pair, e.g. "34.03,-118.81"

    Returns:
        (latitude, longitude) in decimal degrees

    Raises:
        FormatError: If there are not exactly two parts or either is not a number
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise FormatError(text, Notation.DECIMAL, "Expected exactly two comma separated values")

    try:
        lat, lon = (_parse_float(part, Notation.DECIMAL) for part in parts)
    except FormatError as e:
        raise FormatError(text, Notation.DECIMAL, "Invalid decimal pair") from e
    return Degrees(lat), Degrees(lon)


def parse_decimal(text: str) -> Degrees:
    """Parse a single signed decimal degree value."""
    return Degrees(_parse_float(text, Notation.DECIMAL))


def parse_dms(text: str, axis: Optional[Axis] = None) -> Degrees:
    """
    Convert a DMS (degrees, minutes, seconds) string to decimal degrees.

    Supports formats like:
    - "34° 01′ 59.740″ N"
    - "39°38'25.72\"N"
    - "12.5° 0' 0 W"

    Args:
        text: DMS coordinate string
        axis: Axis the value is expected to belong to, only used to warn
            about a hemisphere letter from the other axis

    Returns:
        Decimal degrees (negative for S/W)

    Raises:
        FormatError: If the DMS format is invalid
    """
    match = DMS_PATTERN.fullmatch(text.strip())
    if not match:
        raise FormatError(text, Notation.DMS)

    degrees = float(match.group(1))
    minutes = float(match.group(2))
    seconds = float(match.group(3))
    hemisphere = match.group(4).upper()

    _check_axis(text, hemisphere, axis)
    return apply_hemisphere(dms_to_degrees(degrees, minutes, seconds), hemisphere)


def parse_compact_dms(text: str, axis: Optional[Axis] = None) -> Degrees:
    """
    Convert a compact "DDMMSSH" string to decimal degrees.

    The shape is fixed: two digits each for degrees, minutes and seconds,
    then one hemisphere letter, with nothing before or after.

    Raises:
        FormatError: On any deviation from the 7 character shape
    """
    match = COMPACT_PATTERN.fullmatch(text.strip())
    if not match:
        raise FormatError(text, Notation.COMPACT)

    degrees, minutes, seconds = (int(match.group(i)) for i in (1, 2, 3))
    hemisphere = match.group(4)

    _check_axis(text, hemisphere, axis)
    return apply_hemisphere(dms_to_degrees(degrees, minutes, seconds), hemisphere)


def parse_single(text: str, notation: Notation, axis: Optional[Axis] = None) -> Degrees:
    """
    Parse one axis value whose notation is already known.

    Args:
        text: Raw single-axis input
        notation: Notation to parse with
        axis: Expected axis, forwarded to the DMS parsers

    Returns:
        Decimal degrees

    Raises:
        FormatError: If text is not valid in the given notation
    """
    if notation is Notation.DECIMAL:
        return parse_decimal(text)
    if notation is Notation.DMS:
        return parse_dms(text, axis)
    return parse_compact_dms(text, axis)


def _check_axis(text: str, hemisphere: str, axis: Optional[Axis]) -> None:
    if axis is not None and hemisphere not in axis.letters:
        logger.warning(
            "Hemisphere %s in %r belongs to %s, expected one of %s",
            hemisphere, text, Axis.for_letter(hemisphere).name.lower(), "/".join(axis.letters),
        )
