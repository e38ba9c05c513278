"""Error taxonomy for scan and file operations.

Every failure raised by dustoff belongs to one of a closed set of kinds,
so callers can branch on ``exc.kind`` while the message stays a plain,
human-readable description.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kind of failure reported by a scan or file operation.

    Attributes:
        NOT_FOUND: The target path does not exist.
        WRONG_KIND: A directory was given where a file was required, or the reverse.
        UNSUPPORTED: The operation is rejected outright (e.g., deleting a directory).
        IO_FAILURE: The underlying system call failed.
    """

    NOT_FOUND = "not_found"
    WRONG_KIND = "wrong_kind"
    UNSUPPORTED = "unsupported"
    IO_FAILURE = "io_failure"


class DustoffError(Exception):
    """Base exception for all scan and file operation failures."""

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON output."""
        return {"error": self.message, "kind": self.kind.value}


class PathNotFoundError(DustoffError):
    """Raised when the target path does not exist."""

    kind = ErrorKind.NOT_FOUND


class WrongKindError(DustoffError):
    """Raised when the target is a file where a directory was required, or the reverse."""

    kind = ErrorKind.WRONG_KIND


class UnsupportedOperationError(DustoffError):
    """Raised for operations rejected before touching the filesystem."""

    kind = ErrorKind.UNSUPPORTED


class IoFailureError(DustoffError):
    """Raised when a filesystem call fails.

    Attributes:
        detail: Text of the underlying OS error.
    """

    kind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


class InspectionError(IoFailureError):
    """Raised when a single entry cannot be inspected during a scan."""


class MetadataReadError(InspectionError):
    """Raised when an entry's metadata cannot be read."""


class TimestampReadError(InspectionError):
    """Raised when an entry's modified or accessed time is unavailable."""
