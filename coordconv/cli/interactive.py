"""Interactive conversion CLI command."""

import sys
from pathlib import Path

import typer

from coordconv.cli.main import app, load_session_config
from coordconv.session import ConversionSession
from coordconv.session_config import CONFIG_ENV_VAR, FlowMode, Language


def read_stdin_line(prompt: str) -> str | None:
    """Show prompt and read one line from stdin, None at end of input."""
    typer.echo(prompt, nl=False)
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


@app.command("interactive")
def interactive_command(
    flow: FlowMode | None = typer.Option(
        None, help="Prompt sequencing: one combined prompt or separate latitude/longitude prompts"
    ),
    language: Language | None = typer.Option(None, help="Language of prompts and messages"),
    config: Path | None = typer.Option(
        None, help=f"Path to YAML configuration file (default: ${CONFIG_ENV_VAR})"
    ),
) -> None:
    """
    Convert one coordinate interactively.

    Asks for the coordinate, detects its notation, then asks which notation
    to print it in (decimal, dms, compact or all). Invalid input is reported
    together with the accepted formats and asked again. Type "exit" at any
    prompt to quit.

    Example:
        coordconv interactive
        coordconv interactive --flow split --language ja
    """
    session_config = load_session_config(config, flow=flow, language=language)
    session = ConversionSession(read_line=read_stdin_line, write=typer.echo, config=session_config)
    session.run()
