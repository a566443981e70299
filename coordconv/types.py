"""
Type annotations and enumerations shared across the coordconv package.

Angular values travel through the converter as plain floats. The ``Degrees``
NewType documents the unit in function signatures without any runtime cost,
while ``Axis`` and ``Notation`` name the two small vocabularies every parser
and formatter needs.

Usage Example:
    >>> from coordconv.types import Axis, Degrees, Notation
    >>>
    >>> Axis.LATITUDE.hemisphere(Degrees(-33.9))
    'S'
    >>> Notation("compact")
    <Notation.COMPACT: 'compact'>
"""

from enum import Enum
from typing import NewType

# Angular units
Degrees = NewType('Degrees', float)
"""Signed angle in decimal degrees (positive = North for latitude, East for longitude)"""


class Axis(str, Enum):
    """Role a value plays in a coordinate pair, selecting its hemisphere alphabet."""

    LATITUDE = "lat"
    LONGITUDE = "lon"

    @property
    def positive(self) -> str:
        return "N" if self is Axis.LATITUDE else "E"

    @property
    def negative(self) -> str:
        return "S" if self is Axis.LATITUDE else "W"

    @property
    def letters(self) -> tuple[str, str]:
        """Hemisphere letters of this axis as (positive, negative)."""
        return (self.positive, self.negative)

    def hemisphere(self, value: float) -> str:
        """Hemisphere letter for a signed value.

        Negative zero takes the positive branch since the test is ``value < 0``.
        """
        return self.negative if value < 0 else self.positive

    @classmethod
    def for_letter(cls, letter: str) -> "Axis":
        """Axis whose alphabet contains the hemisphere letter."""
        return cls.LATITUDE if letter.upper() in ("N", "S") else cls.LONGITUDE


class Notation(str, Enum):
    """Textual notations understood by the converter."""

    DECIMAL = "decimal"
    DMS = "dms"
    COMPACT = "compact"

    @property
    def label(self) -> str:
        """Label used in front of result lines."""
        return _LABELS[self]


_LABELS = {
    Notation.DECIMAL: "Decimal",
    Notation.DMS: "DMS",
    Notation.COMPACT: "Compact",
}
