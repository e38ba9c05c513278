"""File mutation module.

This module provides permanent delete, move and move-to-trash for
single files, plus a batch operator with dry-run support.
"""

from dustoff.files.operations import delete_file, move_file, move_to_trash, trash_destination
from dustoff.files.operator import FileActionResult, FileOperator

__all__ = [
    "FileActionResult",
    "FileOperator",
    "delete_file",
    "move_file",
    "move_to_trash",
    "trash_destination",
]
