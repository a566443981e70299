"""User-facing prompt and message catalogs for the interactive session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Messages:
    """Text shown by the interactive session in one language.

    Templates use str.format fields: ``echo_decimal`` takes ``lat`` and ``lon``,
    ``error`` takes ``message``.
    """

    coordinate_prompt: str
    latitude_prompt: str
    longitude_prompt: str
    longitude_dms_prompt: str
    longitude_compact_prompt: str
    format_prompt: str
    echo_decimal: str
    invalid_choice: str
    error: str
    help_header: str
    prompt_marker: str = "> "

    def help_block(self) -> str:
        """Format-help block listing one example per accepted notation."""
        return "\n".join([self.help_header, *FORMAT_EXAMPLES])


FORMAT_EXAMPLES = (
    "  decimal pair  34.03,-118.81",
    "  DMS           34° 01′ 59.740″ N",
    "  Compact DMS   354555N",
)

ENGLISH = Messages(
    coordinate_prompt="Enter a coordinate (e.g. 34° 01′ 59.740″ N, 354555N or 34.03,-118.81):",
    latitude_prompt="Enter the latitude (e.g. 34° 01′ 59.740″ N, 354555N or 34.03):",
    longitude_prompt="Enter the longitude:",
    longitude_dms_prompt="Enter the longitude in DMS notation as well:",
    longitude_compact_prompt="Enter the longitude in compact notation as well (e.g. 221530E):",
    format_prompt="Which notation should it be converted to? (decimal/dms/compact/all):",
    echo_decimal="Input coordinate (decimal): {lat}, {lon}",
    invalid_choice="Invalid choice",
    error="Error: {message}",
    help_header="Valid formats:",
)

JAPANESE = Messages(
    coordinate_prompt="座標を入力してください（例：34° 01′ 59.740″ N、または 354555N、または 34.03,-118.81）:",
    latitude_prompt="緯度を入力してください（例：34° 01′ 59.740″ N、または 354555N、または 34.03）:",
    longitude_prompt="経度を入力してください:",
    longitude_dms_prompt="経度も同様にDMS形式で入力してください:",
    longitude_compact_prompt="経度も同様にCompact形式で入力してください（例：221530E）:",
    format_prompt="どの形式に変換しますか？（decimal/dms/compact/all）:",
    echo_decimal="入力された座標（10進）: {lat}, {lon}",
    invalid_choice="無効な選択です",
    error="エラー: {message}",
    help_header="有効な形式:",
)

CATALOGS = {
    "en": ENGLISH,
    "ja": JAPANESE,
}
