"""Directory scan orchestration.

Validates the requested path, runs the bounded tree walk and assembles
the ScanResult returned to callers.
"""

import logging
import os

from dustoff.core.errors import PathNotFoundError, WrongKindError
from dustoff.scanner.models import ScanResult
from dustoff.scanner.walker import DEFAULT_MAX_FILES, TreeWalker

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Scans a directory tree into a ScanResult.

    Args:
        max_files: Maximum number of file entries collected per scan.
    """

    def __init__(self, max_files: int = DEFAULT_MAX_FILES) -> None:
        self._walker = TreeWalker(max_files)

    @property
    def max_files(self) -> int:
        """The entry cap applied to each scan."""
        return self._walker.max_files

    def scan(self, path: str) -> ScanResult:
        """Scan a directory and return its files with their total size.

        Only the top-level path is validated strictly. Unreadable entries
        deeper in the tree are skipped, so the result may be partial.

        Args:
            path: Directory to scan.

        Returns:
            ScanResult for the directory. ``scan_path`` is ``path`` as given.

        Raises:
            PathNotFoundError: If the path does not exist.
            WrongKindError: If the path is not a directory.
            IoFailureError: If the directory cannot be enumerated.
        """
        if not os.path.exists(path):
            raise PathNotFoundError(f"Path does not exist: {path}")
        if not os.path.isdir(path):
            raise WrongKindError(f"Path is not a directory: {path}")

        logger.debug("Scanning %s (max %d files)", path, self.max_files)
        outcome = self._walker.walk(os.path.abspath(path))

        result = ScanResult(
            scan_path=path,
            files=outcome.entries,
            total_size=outcome.total_size,
            limited=outcome.limited,
            max_files=self.max_files,
        )
        logger.debug(
            "Scanned %s: %d files, %d bytes%s",
            path,
            result.total_files,
            result.total_size,
            " (limited)" if result.limited else "",
        )
        return result


def scan_directory(path: str, max_files: int = DEFAULT_MAX_FILES) -> ScanResult:
    """Scan a directory with the given entry cap.

    Args:
        path: Directory to scan.
        max_files: Maximum number of file entries to collect.

    Returns:
        ScanResult for the directory.

    Raises:
        PathNotFoundError: If the path does not exist.
        WrongKindError: If the path is not a directory.
        IoFailureError: If the directory cannot be enumerated.
    """
    return DirectoryScanner(max_files=max_files).scan(path)
