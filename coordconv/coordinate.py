"""Latitude/longitude pair and its textual renderings."""

from dataclasses import dataclass
from typing import Iterable, Optional

from coordconv.coordinates import FormatError, parse_decimal_pair
from coordconv.detector import detect_notation
from coordconv.formatting import format_value
from coordconv.types import Axis, Degrees, Notation


@dataclass(frozen=True)
class Coordinate:
    """Unprojected geographic coordinate in signed decimal degrees.

    No range is enforced; |lat| > 90 is carried through unchanged.

    Attributes:
        lat: Latitude in degrees, positive = North.
        lon: Longitude in degrees, positive = East.
    """

    lat: Degrees
    lon: Degrees

    @classmethod
    def from_text(cls, text: str) -> "Coordinate":
        """Create a Coordinate from a one-line decimal pair such as "34.03,-118.81".

        Raises:
            FormatError: If the line is not a decimal pair.
        """
        notation = detect_notation(text)
        if notation is not Notation.DECIMAL:
            raise FormatError(text, notation, "Expected a latitude,longitude decimal pair")
        lat, lon = parse_decimal_pair(text)
        return cls(lat=lat, lon=lon)

    def format(self, notation: Notation) -> str:
        """Render as "<lat>, <lon>" in one notation."""
        lat = format_value(self.lat, Axis.LATITUDE, notation)
        lon = format_value(self.lon, Axis.LONGITUDE, notation)
        return f"{lat}, {lon}"

    def render_lines(self, notations: Optional[Iterable[Notation]] = None) -> list[str]:
        """Labelled result lines, one per notation (all three when omitted).

        Example:
            >>> Coordinate(Degrees(34.03), Degrees(-118.81)).render_lines([Notation.DECIMAL])
            ['Decimal: 34.030000, -118.810000']
        """
        if notations is None:
            notations = list(Notation)
        return [f"{notation.label}: {self.format(notation)}" for notation in notations]
