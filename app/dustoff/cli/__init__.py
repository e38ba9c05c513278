"""CLI package for dustoff.

This package contains the Typer application and all subcommands.
"""

from dustoff.cli.main import app

__all__ = ["app"]
