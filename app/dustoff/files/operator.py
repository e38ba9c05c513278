"""Batch file operator.

Applies delete, trash and move operations with dry-run support,
isolating failures per path so one bad entry never stops a batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from dustoff.core.errors import DustoffError, ErrorKind
from dustoff.files.operations import (
    check_deletable,
    check_movable,
    check_trashable,
    delete_file,
    move_file,
    move_to_trash,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileActionResult:
    """Result of a single file operation.

    Attributes:
        path: Path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        error_kind: Kind of failure, None on success.
        destination: Where the file ended up (move and trash only).
        dry_run: Whether this was a dry-run (no filesystem change).
    """

    path: str
    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
    destination: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the operation failed."""
        return not self.success

    @classmethod
    def from_error(cls, path: str, error: DustoffError) -> FileActionResult:
        """Create a failure result from a raised error."""
        return cls(path=path, success=False, error=error.message, error_kind=error.kind)


class FileOperator:
    """Runs file operations on behalf of the CLI.

    In dry-run mode every precondition is still checked, so a dry-run
    reports the same failures a real run would hit before touching disk.

    Attributes:
        _dry_run: If True, validate and report without modifying the filesystem.
        _trash_dir: Trash directory override, None for the default.
    """

    def __init__(self, dry_run: bool = False, trash_dir: Path | None = None) -> None:
        """Initialize the FileOperator.

        Args:
            dry_run: If True, report what would happen without doing it.
            trash_dir: Trash directory to use instead of the default.
        """
        self._dry_run = dry_run
        self._trash_dir = trash_dir

    @property
    def dry_run(self) -> bool:
        """Whether this operator only simulates operations."""
        return self._dry_run

    def delete(self, paths: list[str]) -> list[FileActionResult]:
        """Permanently delete files.

        Args:
            paths: Files to delete.

        Returns:
            List of FileActionResult, one per input path.
        """
        results: list[FileActionResult] = []
        for path in paths:
            try:
                if self._dry_run:
                    check_deletable(path)
                    logger.info("Dry-run: would delete %s", path)
                else:
                    delete_file(path)
            except DustoffError as e:
                results.append(FileActionResult.from_error(path, e))
                continue
            results.append(FileActionResult(path=path, success=True, dry_run=self._dry_run))
        return results

    def trash(self, paths: list[str]) -> list[FileActionResult]:
        """Move files into the trash directory.

        Args:
            paths: Files to trash.

        Returns:
            List of FileActionResult, one per input path. Successful
            results carry the file's location in the trash, except in
            dry-run mode where no location has been chosen.
        """
        results: list[FileActionResult] = []
        for path in paths:
            destination: str | None = None
            try:
                if self._dry_run:
                    check_trashable(path)
                    logger.info("Dry-run: would trash %s", path)
                else:
                    destination = str(move_to_trash(path, self._trash_dir))
            except DustoffError as e:
                results.append(FileActionResult.from_error(path, e))
                continue
            results.append(
                FileActionResult(
                    path=path,
                    success=True,
                    destination=destination,
                    dry_run=self._dry_run,
                )
            )
        return results

    def move(self, source: str, destination: str) -> FileActionResult:
        """Move a single file.

        Args:
            source: File to move.
            destination: New path for the file.

        Returns:
            FileActionResult for the move.
        """
        try:
            if self._dry_run:
                check_movable(source)
                logger.info("Dry-run: would move %s -> %s", source, destination)
            else:
                move_file(source, destination)
        except DustoffError as e:
            return FileActionResult.from_error(source, e)
        return FileActionResult(
            path=source,
            success=True,
            destination=destination,
            dry_run=self._dry_run,
        )
