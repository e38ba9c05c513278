"""Sort command implementation.

Reorders a previously exported scan result so the largest files come first.
"""

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from dustoff.cli.commands.scan import export_result
from dustoff.scanner.models import ScanResult
from dustoff.scanner.sorting import sort_by_largest
from dustoff.utils.formatting import console, print_error


def sort(
    result_path: Annotated[
        Path,
        typer.Argument(help="Scan result JSON written by 'dustoff scan --export'."),
    ],
    output_path: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the sorted result to this file instead of stdout.",
        ),
    ] = None,
) -> None:
    """Sort an exported scan result by file size, largest first."""
    result = _load_result(result_path)
    sort_by_largest(result)

    if output_path is not None:
        export_result(result, output_path)
        return

    console.print_json(json.dumps(result.to_dict()))


def _load_result(path: Path) -> ScanResult:
    """Load a ScanResult from a JSON file.

    Raises:
        typer.Exit: If the file cannot be read or is not a scan result.
    """
    try:
        data: Any = json.loads(path.read_text())
    except OSError as e:
        print_error(f"Failed to read {path}: {e}")
        raise typer.Exit(code=1) from e
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON in {path}: {e}")
        raise typer.Exit(code=1) from e

    try:
        return ScanResult.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        print_error(f"Not a scan result: {path} ({e})")
        raise typer.Exit(code=1) from e
