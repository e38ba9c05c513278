"""Utility modules for dustoff.

This module exports commonly used utility functions.
"""

from dustoff.utils.formatting import (
    apply_settings_theme,
    console,
    create_file_table,
    err_console,
    format_file_row,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "apply_settings_theme",
    "console",
    "create_file_table",
    "err_console",
    "format_file_row",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
