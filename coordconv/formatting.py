"""
Rendering of decimal degrees in the supported textual notations.

Seconds are rounded on the total-seconds magnitude before the value is split
into degrees, minutes and seconds, so a rounded 60 seconds carries into the
minutes field and 60 minutes carry into degrees. "34° 01′ 59.740″ N" therefore
renders in compact notation as "340200N", never "340160N".
"""

import math

from coordconv.types import Axis, Notation

DMS_SECONDS_PLACES = 3
DECIMAL_PLACES = 6


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def decompose(value: float, second_places: int = 0) -> tuple[int, int, int]:
    """
    Split the magnitude of a decimal degree value into degree/minute/second fields.

    Args:
        value: Signed decimal degrees (only the magnitude is used)
        second_places: Decimal places kept for seconds

    Returns:
        Tuple of (degrees, minutes, scaled_seconds) where scaled_seconds is the
        rounded seconds multiplied by 10**second_places
    """
    scale = 10 ** second_places
    total = _round_half_up(abs(value) * 3600 * scale)
    degrees, remainder = divmod(total, 3600 * scale)
    minutes, seconds = divmod(remainder, 60 * scale)
    return degrees, minutes, seconds


def to_dms(value: float, axis: Axis) -> str:
    """
    Format decimal degrees as "<deg>° <min>′ <sec>″ <hemisphere>".

    Seconds keep exactly three decimals; degrees and minutes are not padded.

    Example:
        >>> to_dms(-118.81, Axis.LONGITUDE)
        '118° 48′ 36.000″ W'
    """
    scale = 10 ** DMS_SECONDS_PLACES
    degrees, minutes, seconds = decompose(value, DMS_SECONDS_PLACES)
    whole, fraction = divmod(seconds, scale)
    return f"{degrees}° {minutes}′ {whole}.{fraction:0{DMS_SECONDS_PLACES}d}″ {axis.hemisphere(value)}"


def to_compact_dms(value: float, axis: Axis) -> str:
    """
    Format decimal degrees as compact "DDMMSSH".

    Seconds are rounded to the nearest integer and every field is zero-padded
    to two digits. Longitudes of 100° and more keep their third degree digit.
    """
    degrees, minutes, seconds = decompose(value)
    return f"{degrees:02d}{minutes:02d}{seconds:02d}{axis.hemisphere(value)}"


def to_decimal_string(value: float) -> str:
    """Fixed six decimal places with the sign preserved and no hemisphere letter."""
    return f"{value:.{DECIMAL_PLACES}f}"


def format_value(value: float, axis: Axis, notation: Notation) -> str:
    """Format one axis value in the requested notation."""
    if notation is Notation.DECIMAL:
        return to_decimal_string(value)
    if notation is Notation.DMS:
        return to_dms(value, axis)
    return to_compact_dms(value, axis)
