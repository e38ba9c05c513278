"""Settings commands.

Provides commands to show the effective settings and to write a
default settings file.
"""

from typing import Annotated

import typer
from rich.table import Table

from dustoff.core.paths import get_settings_path
from dustoff.core.settings import (
    Settings,
    SettingsError,
    SettingsNotFoundError,
    load_settings,
    save_settings,
)
from dustoff.utils.formatting import console, print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Show or initialize dustoff settings.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings."""
    path = get_settings_path()
    try:
        settings = load_settings(path)
        source = str(path)
    except SettingsNotFoundError:
        settings = Settings()
        source = "defaults (no settings file)"
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("scan.max_files", str(settings.scan.max_files))
    table.add_row("trash.directory", str(settings.trash_dir))
    for name, value in settings.colors.model_dump().items():
        table.add_row(f"colors.{name}", f"[{value}]{value}[/]")

    console.print(table)
    print_info(f"Source: {source}")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    path = get_settings_path()
    if path.exists() and not force:
        print_warning(f"Settings file already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(Settings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
