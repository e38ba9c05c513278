"""CLI commands for dustoff.

This package contains all subcommand implementations.
"""

from dustoff.cli.commands import config, files, scan, sort

__all__ = ["config", "files", "scan", "sort"]
