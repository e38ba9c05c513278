"""Scan domain models.

This module defines the records produced by a directory scan: one
FileEntry per file observed, gathered into a ScanResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A single file observed during a scan.

    Directories are walked but never emitted, so ``is_directory`` is
    False for every entry a scan produces.

    Attributes:
        path: Absolute filesystem path as text (undecodable bytes replaced).
        name: Final path component ("Unknown" if it is not valid text).
        size: Size in bytes.
        modified: Last modification time in Unix seconds.
        accessed: Last access time in Unix seconds.
        is_directory: Whether the entry is a directory.
        extension: Suffix after the final '.' of the name, empty if none.
    """

    path: str
    name: str
    size: int
    modified: int
    accessed: int
    is_directory: bool
    extension: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size < 0:
            msg = f"Size cannot be negative, got {self.size}"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "modified": self.modified,
            "accessed": self.accessed,
            "is_directory": self.is_directory,
            "extension": self.extension,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileEntry:
        """Create a FileEntry from its serialized form.

        Args:
            data: Dictionary with the keys produced by ``to_dict``.

        Returns:
            FileEntry instance.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If a value is invalid.
        """
        return cls(
            path=str(data["path"]),
            name=str(data["name"]),
            size=int(data["size"]),
            modified=int(data["modified"]),
            accessed=int(data["accessed"]),
            is_directory=bool(data["is_directory"]),
            extension=str(data.get("extension", "")),
        )


@dataclass(slots=True)
class ScanResult:
    """Outcome of one scan.

    The file list may be reordered in place (see
    ``dustoff.scanner.sorting``); every other field stays as the scan
    produced it.

    Attributes:
        scan_path: The path that was requested, as given.
        files: File entries in discovery order unless re-sorted.
        total_size: Sum of all entry sizes in bytes.
        limited: True if the scan stopped at the entry cap.
        max_files: The entry cap that was applied.
    """

    scan_path: str
    files: list[FileEntry] = field(default_factory=lambda: [])
    total_size: int = 0
    limited: bool = False
    max_files: int = 0

    @property
    def total_files(self) -> int:
        """Number of file entries in the result."""
        return len(self.files)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_files": self.total_files,
            "total_size": self.total_size,
            "files": [entry.to_dict() for entry in self.files],
            "scan_path": self.scan_path,
            "limited": self.limited,
            "max_files": self.max_files,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScanResult:
        """Create a ScanResult from its serialized form.

        ``total_files`` and ``total_size`` are not read back; both are
        always derived from the file list.

        Args:
            data: Dictionary with the keys produced by ``to_dict``.

        Returns:
            ScanResult instance.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If a value is invalid.
        """
        files = [FileEntry.from_dict(item) for item in data["files"]]
        return cls(
            scan_path=str(data["scan_path"]),
            files=files,
            total_size=sum(f.size for f in files),
            limited=bool(data.get("limited", False)),
            max_files=int(data.get("max_files", 0)),
        )
