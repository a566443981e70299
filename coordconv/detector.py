"""Notation detection for raw coordinate input."""

import logging
import re

from coordconv.coordinates import FormatError
from coordconv.types import Notation

logger = logging.getLogger(__name__)

DMS_SYMBOLS = frozenset("°′'″\"")
_COMPACT_SHAPE = re.compile(r"\d{6}[NSEW]")
_SINGLE_DECIMAL = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+)")


def detect_notation(text: str) -> Notation:
    """
    Classify a trimmed line of input by notation.

    Rules are tried in order and the first match wins:
        1. comma and decimal point present -> decimal pair
        2. any degree/minute/second symbol -> DMS
        3. exactly six digits and a hemisphere letter -> compact DMS

    Args:
        text: Raw input line

    Returns:
        Detected Notation

    Raises:
        FormatError: If no rule matches
    """
    text = text.strip()

    if "," in text and "." in text:
        notation = Notation.DECIMAL
    elif any(symbol in text for symbol in DMS_SYMBOLS):
        notation = Notation.DMS
    elif _COMPACT_SHAPE.fullmatch(text):
        notation = Notation.COMPACT
    else:
        logger.debug("No notation matches %r", text)
        raise FormatError(text)

    logger.debug("Detected %s notation for %r", notation.value, text)
    return notation


def is_single_decimal(text: str) -> bool:
    """True if text is one signed number with a decimal point, e.g. "-118.81"."""
    return _SINGLE_DECIMAL.fullmatch(text.strip()) is not None
