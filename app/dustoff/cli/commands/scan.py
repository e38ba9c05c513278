"""Scan command implementation.

Scans a directory tree and lists the files found, largest first by default.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from dustoff.core.errors import DustoffError
from dustoff.core.settings import get_settings
from dustoff.scanner.models import ScanResult
from dustoff.scanner.scanner import DirectoryScanner
from dustoff.scanner.sorting import sort_by_largest
from dustoff.utils.formatting import (
    console,
    create_file_table,
    format_file_row,
    format_size,
    print_error,
    print_info,
    print_warning,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


class SortOrder(str, Enum):
    """File ordering options."""

    LARGEST = "largest"
    NONE = "none"


def scan(
    ctx: typer.Context,
    path: Annotated[
        str,
        typer.Argument(help="Directory to scan."),
    ],
    sort: Annotated[
        SortOrder,
        typer.Option(
            "--sort",
            "-s",
            help="File ordering (largest first, or discovery order).",
            case_sensitive=False,
        ),
    ] = SortOrder.LARGEST,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            min=1,
            help="Limit number of rows shown in the table.",
        ),
    ] = None,
    max_files: Annotated[
        int | None,
        typer.Option(
            "--max-files",
            "-m",
            min=1,
            help="Stop collecting after this many files (default from settings).",
        ),
    ] = None,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export the full result to a JSON file.",
        ),
    ] = None,
) -> None:
    """Scan a directory tree for files and their sizes."""
    cap = max_files if max_files is not None else get_settings().scan.max_files
    scanner = DirectoryScanner(max_files=cap)

    try:
        result = scanner.scan(path)
    except DustoffError as e:
        if output_format == OutputFormat.JSON:
            console.print_json(json.dumps(e.to_dict()))
        else:
            print_error(e.message)
        raise typer.Exit(code=1) from e

    if sort == SortOrder.LARGEST:
        sort_by_largest(result)

    if export_path is not None:
        export_result(result, export_path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(result.to_dict()))
        return

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    _print_table(result, limit)

    if not quiet:
        console.print(
            f"\n[dim]Found {result.total_files} files "
            f"({format_size(result.total_size)} total) in {escape(result.scan_path)}[/dim]"
        )
        if limit and limit < result.total_files:
            console.print(f"[dim](showing {limit} of {result.total_files})[/dim]")

    if result.limited:
        print_warning(
            f"Scan stopped after {result.max_files} files; "
            "results are partial (raise --max-files to see more)."
        )


def export_result(result: ScanResult, export_path: Path) -> None:
    """Write a scan result to a JSON file.

    Args:
        result: Scan result to export.
        export_path: Destination file.

    Raises:
        typer.Exit: If the export path is a directory or cannot be written.
    """
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(result.to_dict(), indent=2))
        print_info(f"Results exported to {export_path}")
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e


def _print_table(result: ScanResult, limit: int | None) -> None:
    """Display scanned files as a Rich table."""
    if not result.files:
        print_info(f"No files found in {escape(result.scan_path)}")
        return

    table = create_file_table(title=f"Files in {escape(result.scan_path)}")
    shown = result.files[:limit] if limit else result.files
    for entry in shown:
        table.add_row(*format_file_row(entry))

    console.print(table)
