"""Bounded depth-first directory walker.

Walks a directory tree with an explicit stack of directory iterators,
collecting file entries into one flat list with a running total size.
The walk stops once the entry cap is reached, and entries that cannot
be read are skipped rather than failing the walk.
"""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from dustoff.core.errors import InspectionError, IoFailureError
from dustoff.scanner.inspector import inspect_path
from dustoff.scanner.models import FileEntry

logger = logging.getLogger(__name__)

# Default cap on collected file entries per scan
DEFAULT_MAX_FILES: int = 50_000


@dataclass(frozen=True, slots=True)
class WalkOutcome:
    """Result of a single walk.

    Attributes:
        entries: File entries in discovery order.
        total_size: Sum of entry sizes in bytes.
        limited: True if the walk stopped at the entry cap.
    """

    entries: list[FileEntry] = field(default_factory=lambda: [])
    total_size: int = 0
    limited: bool = False


class TreeWalker:
    """Walks a directory tree collecting file entries up to a cap.

    Directories are descended into but never emitted. Entries appear in
    filesystem enumeration order, each directory's contents in place of
    the directory itself, exactly as a recursive walk would produce them.

    Args:
        max_files: Maximum number of file entries to collect.
    """

    def __init__(self, max_files: int = DEFAULT_MAX_FILES) -> None:
        if max_files < 0:
            msg = f"max_files cannot be negative, got {max_files}"
            raise ValueError(msg)
        self._max_files = max_files

    @property
    def max_files(self) -> int:
        """The entry cap applied by this walker."""
        return self._max_files

    def walk(self, root: str | os.PathLike[str]) -> WalkOutcome:
        """Walk a directory tree.

        Failing to enumerate ``root`` itself is an error. Below the root,
        unreadable directories and entries are logged and skipped.

        Args:
            root: Directory to walk.

        Returns:
            WalkOutcome with the collected entries, their total size and
            whether the cap cut the walk short.

        Raises:
            IoFailureError: If the root directory cannot be enumerated.
        """
        try:
            root_iter = os.scandir(root)
        except OSError as e:
            raise IoFailureError(f"Failed to read directory: {e}", detail=str(e)) from e

        entries: list[FileEntry] = []
        total_size = 0
        limited = False
        stack: list[Iterator[os.DirEntry[str]]] = [root_iter]

        try:
            while stack:
                child = self._next_child(stack[-1])
                if child is None:
                    _close(stack.pop())
                    continue

                if len(entries) >= self._max_files:
                    limited = True
                    logger.info(
                        "Entry cap of %d reached, stopping walk of %s", self._max_files, root
                    )
                    break

                try:
                    entry = inspect_path(child)
                except InspectionError as e:
                    logger.debug("Skipping %s: %s", child, e)
                    continue

                if entry.is_directory:
                    sub_iter = self._open_directory(child)
                    if sub_iter is not None:
                        stack.append(sub_iter)
                    continue

                entries.append(entry)
                total_size += entry.size
        finally:
            for remaining in stack:
                _close(remaining)

        return WalkOutcome(entries=entries, total_size=total_size, limited=limited)

    def _next_child(self, directory: Iterator[os.DirEntry[str]]) -> str | None:
        """Get the path of the next child from a directory iterator.

        An OS error while enumerating ends that directory early; the
        iterator cannot be resumed past it.

        Args:
            directory: Open directory iterator.

        Returns:
            Path of the next child, or None when the directory is done.
        """
        try:
            return next(directory).path
        except StopIteration:
            return None
        except OSError as e:
            logger.debug("Stopped enumerating a directory early: %s", e)
            return None

    def _open_directory(self, path: str) -> Iterator[os.DirEntry[str]] | None:
        """Open a nested directory for enumeration.

        Args:
            path: Directory to open.

        Returns:
            Directory iterator, or None if the directory cannot be read.
        """
        try:
            return os.scandir(path)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", path, e)
            return None


def walk_tree(root: str | Path, max_files: int = DEFAULT_MAX_FILES) -> WalkOutcome:
    """Walk a directory tree with the given entry cap.

    Convenience wrapper around ``TreeWalker(max_files).walk(root)``.
    """
    return TreeWalker(max_files).walk(root)


def _close(directory: Iterator[os.DirEntry[str]]) -> None:
    close = getattr(directory, "close", None)
    if close is not None:
        close()
