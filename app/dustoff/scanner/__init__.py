"""Directory scanning module.

This module provides bounded recursive scanning of a directory tree
into a flat list of file entries with a total size, plus ordering
helpers for the result.
"""

from dustoff.scanner.inspector import inspect_path
from dustoff.scanner.models import FileEntry, ScanResult
from dustoff.scanner.scanner import DirectoryScanner, scan_directory
from dustoff.scanner.sorting import sort_by_largest, sort_entries_by_largest
from dustoff.scanner.walker import DEFAULT_MAX_FILES, TreeWalker, WalkOutcome, walk_tree

__all__ = [
    "DEFAULT_MAX_FILES",
    "DirectoryScanner",
    "FileEntry",
    "ScanResult",
    "TreeWalker",
    "WalkOutcome",
    "inspect_path",
    "scan_directory",
    "sort_by_largest",
    "sort_entries_by_largest",
    "walk_tree",
]
