"""One-shot conversion CLI command."""

import typer

from coordconv.cli.main import app
from coordconv.coordinate import Coordinate
from coordconv.coordinates import FormatError, parse_decimal, parse_single
from coordconv.detector import detect_notation, is_single_decimal
from coordconv.formatting import format_value
from coordconv.messages import ENGLISH
from coordconv.session import OutputChoice
from coordconv.types import Axis, Degrees, Notation


def _parse_axis_value(text: str, axis: Axis) -> Degrees:
    if is_single_decimal(text):
        return parse_decimal(text)
    notation = detect_notation(text)
    if notation is Notation.DECIMAL:
        raise FormatError(text, notation, f"Expected a single {axis.name.lower()} value")
    return parse_single(text, notation, axis)


def infer_axis(text: str) -> Axis:
    """Axis named by the trailing hemisphere letter, latitude for a plain number."""
    letter = text.strip()[-1:].upper()
    if letter and letter in "NSEW":
        return Axis.for_letter(letter)
    return Axis.LATITUDE


def convert_lines(values: list[str], choice: OutputChoice, axis: Axis | None = None) -> list[str]:
    """
    Convert command-line values to labelled result lines.

    Args:
        values: One decimal pair or single-axis value, or a latitude and a longitude
        choice: Output notation(s)
        axis: Axis of a lone single-axis value, inferred from its hemisphere
            letter when None

    Returns:
        Result lines, e.g. ["Compact: 340148N, 1184836W"]

    Raises:
        FormatError: If a value cannot be parsed
        ValueError: If more than two values are given
    """
    if len(values) == 2:
        lat = _parse_axis_value(values[0], Axis.LATITUDE)
        lon = _parse_axis_value(values[1], Axis.LONGITUDE)
        return Coordinate(lat=lat, lon=lon).render_lines(choice.notations)
    if len(values) != 1:
        raise ValueError(f"Expected one or two values, got {len(values)}")

    text = values[0]
    if not is_single_decimal(text) and detect_notation(text) is Notation.DECIMAL:
        return Coordinate.from_text(text).render_lines(choice.notations)

    if axis is None:
        axis = infer_axis(text)
    value = _parse_axis_value(text, axis)
    return [f"{notation.label}: {format_value(value, axis, notation)}" for notation in choice.notations]


@app.command("convert")
def convert_command(
    values: list[str] = typer.Argument(
        ..., help="A decimal pair, a single DMS/compact value, or latitude and longitude"
    ),
    to: OutputChoice = typer.Option(OutputChoice.ALL, "--to", "-t", help="Output notation"),
    axis: Axis | None = typer.Option(
        None, help="Axis of a single value (default: from its hemisphere letter, else latitude)"
    ),
) -> None:
    """
    Convert one coordinate given on the command line.

    Example:
        coordconv convert 34.03,-118.81
        coordconv convert "34° 01′ 59.740″ N" --to compact
        coordconv convert --to dms -- 34.03 -118.81
    """
    try:
        lines = convert_lines(values, to, axis)
    except FormatError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(ENGLISH.help_block(), err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for line in lines:
        typer.echo(line)
