"""File cleanup commands.

Provides commands to permanently delete files, move them into the
trash directory, and move or rename them.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from dustoff.core.settings import get_settings
from dustoff.files.operator import FileActionResult, FileOperator
from dustoff.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def delete(
    paths: Annotated[
        list[str],
        typer.Argument(help="Files to delete permanently."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Permanently delete files."""
    _confirm(f"Permanently delete {len(paths)} file(s)?", dry_run=dry_run, yes=yes)

    operator = FileOperator(dry_run=dry_run)
    results = operator.delete(paths)

    _print_results(results, title="Deletion Results", done_label="deleted")

    if any(r.failed for r in results):
        raise typer.Exit(code=1)


def trash(
    paths: Annotated[
        list[str],
        typer.Argument(help="Files to move to the trash."),
    ],
    trash_dir: Annotated[
        Path | None,
        typer.Option(
            "--trash-dir",
            help="Trash directory (default from settings).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be trashed."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Move files to the dustoff trash directory."""
    target_dir = trash_dir if trash_dir is not None else get_settings().trash_dir

    _confirm(f"Move {len(paths)} file(s) to {target_dir}?", dry_run=dry_run, yes=yes)

    operator = FileOperator(dry_run=dry_run, trash_dir=target_dir)
    results = operator.trash(paths)

    _print_results(results, title="Trash Results", done_label="trashed")

    if any(r.failed for r in results):
        raise typer.Exit(code=1)


def move(
    source: Annotated[
        str,
        typer.Argument(help="File to move."),
    ],
    destination: Annotated[
        str,
        typer.Argument(help="New path for the file. Missing parent directories are created."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be moved."),
    ] = False,
) -> None:
    """Move or rename a file."""
    operator = FileOperator(dry_run=dry_run)
    result = operator.move(source, destination)

    if result.failed:
        print_error(result.error or "Unknown error")
        raise typer.Exit(code=1)

    if result.dry_run:
        print_info(f"Dry-run: would move {source} -> {destination}")
    else:
        print_success(f"Moved {source} -> {destination}")


# === Private helper functions ===


def _confirm(question: str, *, dry_run: bool, yes: bool) -> None:
    """Ask for confirmation unless --yes or --dry-run was given."""
    if dry_run or yes:
        return
    if not typer.confirm(question, default=False):
        print_info("Aborted.")
        raise typer.Exit(code=0)


def _print_results(results: list[FileActionResult], title: str, done_label: str) -> None:
    """Display operation results."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold", overflow="fold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim", overflow="fold")

    for r in results:
        if r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would be " + done_label
        elif r.success:
            status = f"[success]{done_label}[/]"
            detail = escape(r.destination or "")
        else:
            status = "[error]failed[/]"
            detail = escape(r.error or "Unknown error")
        table.add_row(escape(r.path), status, detail)

    console.print(table)

    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if r.failed)
    dry_count = sum(1 for r in results if r.dry_run)

    if fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    elif dry_count:
        print_info(f"Dry-run: {dry_count} file(s) would be {done_label}.")
    else:
        print_success(f"All {success_count} file(s) {done_label}.")
