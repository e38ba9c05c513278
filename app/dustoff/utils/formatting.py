"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dustoff.core.theme import ThemeColors, get_rich_theme
from dustoff.scanner.models import FileEntry

# Size thresholds for row styling
_LARGE_FILE_BYTES = 1024**3
_MEDIUM_FILE_BYTES = 100 * 1024**2


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances; default colors until apply_settings_theme runs
console = Console(theme=get_rich_theme(ThemeColors()), color_system=_detect_color_system())
err_console = Console(
    theme=get_rich_theme(ThemeColors()),
    stderr=True,
    color_system=_detect_color_system(),
)

_settings_theme_applied = False


def apply_settings_theme() -> None:
    """Apply the [colors] overrides from the settings file to both consoles.

    Reads the settings file, so call it after logging is configured.
    Calling it again replaces the previously applied theme.
    """
    global _settings_theme_applied
    theme = get_rich_theme()
    for target in (console, err_console):
        if _settings_theme_applied:
            target.pop_theme()
        target.push_theme(theme)
    _settings_theme_applied = True


def format_size(size_bytes: int | None) -> str:
    """Format a byte count as a human-readable string.

    Args:
        size_bytes: Number of bytes.

    Returns:
        String such as "512 B", "1.5 KB" or "2.0 GB".
    """
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def format_timestamp(timestamp: int) -> str:
    """Format Unix seconds as a local date and time."""
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M")


def size_style(size_bytes: int) -> str:
    """Get the theme style for a file size."""
    if size_bytes >= _LARGE_FILE_BYTES:
        return "size_large"
    if size_bytes >= _MEDIUM_FILE_BYTES:
        return "size_medium"
    return "size_small"


def create_file_table(title: str = "Files") -> Table:
    """Create a pre-configured table for displaying scanned files.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for file display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("Size", justify="right", no_wrap=True)
    table.add_column("Modified", style="muted", no_wrap=True)
    table.add_column("Ext", style="info", width=6)
    table.add_column("Path", style="text", overflow="fold")
    return table


def format_file_row(entry: FileEntry) -> tuple[str, str, str, str]:
    """Format a file entry as a table row with proper styling.

    Args:
        entry: The file entry to format.

    Returns:
        Tuple of (size, modified, extension, path) with Rich markup.
    """
    style = size_style(entry.size)
    size = f"[{style}]{format_size(entry.size)}[/]"
    return (size, format_timestamp(entry.modified), entry.extension or "-", escape(entry.path))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
