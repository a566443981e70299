"""Main Typer CLI application for coordinate conversion."""

import logging
from pathlib import Path

import typer

from coordconv.session_config import FlowMode, Language, SessionConfig, load_config

app = typer.Typer(
    help="Convert latitude/longitude between decimal, DMS and compact DMS notations",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr"),
) -> None:
    """Coordinate notation converter."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s - %(message)s',
    )


def load_session_config(
    config_path: Path | None,
    flow: FlowMode | None = None,
    language: Language | None = None,
) -> SessionConfig:
    """
    Resolve session configuration for a command.

    Options given on the command line override the configuration file, which
    overrides the defaults. Exits with status 1 if the file cannot be loaded.
    """
    try:
        config = load_config(str(config_path) if config_path else None)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: Failed to load configuration: {e}", err=True)
        raise typer.Exit(1)
    return config.with_overrides(flow=flow, language=language)


def _register_commands() -> None:
    """
    Import command modules to register commands with the app.

    Commands use the @app.command() decorator and register themselves when
    the module is imported.
    """
    from coordconv.cli import convert, interactive

    _ = convert
    _ = interactive


_register_commands()


if __name__ == "__main__":
    app()
