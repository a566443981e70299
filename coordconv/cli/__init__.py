"""CLI module for coordinate conversion.

Provides the `coordconv` command-line interface with an interactive session
and a one-shot conversion command.
"""

from coordconv.cli.main import app

__all__ = ["app"]
