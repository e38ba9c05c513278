"""Per-entry metadata inspection.

Turns a single filesystem path into a FileEntry snapshot, or raises an
InspectionError describing which piece of metadata could not be read.
"""

import math
import os
import stat
from pathlib import Path

from dustoff.core.errors import MetadataReadError, TimestampReadError
from dustoff.scanner.models import FileEntry

UNKNOWN_NAME = "Unknown"


def inspect_path(path: str | os.PathLike[str]) -> FileEntry:
    """Read a metadata snapshot for a path.

    The path is assumed to exist (the caller enumerated it). Metadata is
    read with ``os.stat``, so symlinks are followed and a dangling link
    fails like any other unreadable entry.

    Args:
        path: Filesystem path to inspect.

    Returns:
        FileEntry describing the path.

    Raises:
        MetadataReadError: If the metadata cannot be read.
        TimestampReadError: If the modified or accessed time is unavailable.
    """
    target = Path(path)

    try:
        info = os.stat(target)
    except OSError as e:
        raise MetadataReadError(f"Failed to read metadata: {e}", detail=str(e)) from e

    modified = _to_unix_seconds(info.st_mtime, "modified")
    accessed = _to_unix_seconds(info.st_atime, "accessed")
    name = entry_name(target)

    return FileEntry(
        path=entry_text(target),
        name=name,
        size=info.st_size,
        modified=modified,
        accessed=accessed,
        is_directory=stat.S_ISDIR(info.st_mode),
        extension=entry_extension(name),
    )


def entry_text(path: Path) -> str:
    """Render a path as UTF-8 text.

    Undecodable bytes in the path become U+FFFD so the result can always
    be printed and serialized. The raw path is what gets stat'ed.

    Args:
        path: Path to render.

    Returns:
        The path as text, with invalid bytes replaced.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def entry_name(path: Path) -> str:
    """Get the final path component as text.

    Args:
        path: Path to name.

    Returns:
        The base name, or "Unknown" if it is empty or not valid UTF-8.
    """
    name = path.name
    if not name:
        return UNKNOWN_NAME
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        # Undecodable bytes survive as lone surrogates
        return UNKNOWN_NAME
    return name


def entry_extension(name: str) -> str:
    """Get the suffix after the final '.' of a base name.

    A leading dot marks a hidden file rather than an extension, so
    ".bashrc" has none while "archive.tar.gz" yields "gz".

    Args:
        name: Base name of the entry.

    Returns:
        Extension without the dot, or an empty string.
    """
    stem, dot, suffix = name.rpartition(".")
    if not dot or not stem:
        return ""
    return suffix


def _to_unix_seconds(timestamp: float | None, label: str) -> int:
    """Convert a stat timestamp to whole Unix seconds.

    Args:
        timestamp: Seconds since the epoch as reported by stat.
        label: Which timestamp this is ("modified" or "accessed").

    Returns:
        Whole seconds since the Unix epoch.

    Raises:
        TimestampReadError: If the timestamp is missing, not finite, or
            before the epoch.
    """
    if timestamp is None or not math.isfinite(timestamp):
        raise TimestampReadError(f"Failed to read {label} time: timestamp unavailable")
    if timestamp < 0:
        raise TimestampReadError(f"Failed to read {label} time: {timestamp} is before the epoch")
    return int(timestamp)
