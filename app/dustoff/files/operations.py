"""Single-file mutation operations.

Provides permanent delete, move and move-to-trash for individual files.
Every precondition is checked before the filesystem is touched, so a
rejected operation never leaves a partial change behind.

Trash strategy: files are relocated into an application-owned trash
directory (``~/.local/share/dustoff/trash`` by default) rather than the
desktop's native trash, so they stay visible and restorable by hand.
A name collision in the trash gets a Unix-timestamp suffix on the stem.
"""

import logging
import os
import shutil
import time
from pathlib import Path

from dustoff.core.errors import IoFailureError, PathNotFoundError, UnsupportedOperationError
from dustoff.core.paths import get_trash_dir

logger = logging.getLogger(__name__)


def check_deletable(path: str) -> None:
    """Validate that a path can be deleted.

    Raises:
        PathNotFoundError: If the path does not exist.
        UnsupportedOperationError: If the path is a directory.
    """
    if not os.path.exists(path):
        raise PathNotFoundError(f"File does not exist: {path}")
    if os.path.isdir(path):
        raise UnsupportedOperationError(f"Cannot delete directories: {path}")


def check_movable(source: str) -> None:
    """Validate that a path can be moved.

    Raises:
        PathNotFoundError: If the source does not exist.
        UnsupportedOperationError: If the source is a directory.
    """
    if not os.path.exists(source):
        raise PathNotFoundError(f"Source file does not exist: {source}")
    if os.path.isdir(source):
        raise UnsupportedOperationError(f"Cannot move directories: {source}")


def check_trashable(path: str) -> None:
    """Validate that a path can be moved to the trash.

    Raises:
        PathNotFoundError: If the path does not exist.
        UnsupportedOperationError: If the path is a directory.
    """
    if not os.path.exists(path):
        raise PathNotFoundError(f"File does not exist: {path}")
    if os.path.isdir(path):
        raise UnsupportedOperationError(f"Cannot move directories to trash: {path}")


def delete_file(path: str) -> None:
    """Permanently delete a file.

    Args:
        path: File to delete.

    Raises:
        PathNotFoundError: If the file does not exist.
        UnsupportedOperationError: If the path is a directory.
        IoFailureError: If the file cannot be removed.
    """
    check_deletable(path)

    try:
        os.remove(path)
    except OSError as e:
        raise IoFailureError(f"Failed to delete file: {e}", detail=str(e)) from e

    logger.info("Deleted %s", path)


def move_file(source: str, destination: str) -> None:
    """Move or rename a file.

    Missing parent directories of the destination are created. The move
    is a single rename, so it is atomic where the filesystem supports it
    and fails across volumes.

    Args:
        source: File to move.
        destination: New path for the file.

    Raises:
        PathNotFoundError: If the source does not exist.
        UnsupportedOperationError: If the source is a directory.
        IoFailureError: If the parent cannot be created or the rename fails.
    """
    check_movable(source)

    parent = os.path.dirname(destination)
    if parent:
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as e:
            raise IoFailureError(
                f"Failed to create destination directory: {e}", detail=str(e)
            ) from e

    try:
        os.rename(source, destination)
    except OSError as e:
        raise IoFailureError(f"Failed to move file: {e}", detail=str(e)) from e

    logger.info("Moved %s -> %s", source, destination)


def move_to_trash(path: str, trash_dir: Path | None = None) -> Path:
    """Move a file into the trash directory.

    The trash directory is created if needed. A file whose name is
    already taken in the trash is stored as ``<stem>_<unix-time><ext>``.

    Args:
        path: File to trash.
        trash_dir: Trash directory. Defaults to the XDG data trash directory.

    Returns:
        Path of the file inside the trash.

    Raises:
        PathNotFoundError: If the file does not exist.
        UnsupportedOperationError: If the path is a directory.
        IoFailureError: If the trash cannot be created or the move fails.
    """
    check_trashable(path)

    trash = trash_dir if trash_dir is not None else get_trash_dir()
    try:
        trash.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoFailureError(f"Failed to create trash directory: {e}", detail=str(e)) from e

    try:
        destination = trash_destination(trash, Path(path).name)
    except OSError as e:
        raise IoFailureError(f"Failed to move to trash: {e}", detail=str(e)) from e

    try:
        shutil.move(path, destination)
    except OSError as e:
        _release(destination)
        raise IoFailureError(f"Failed to move to trash: {e}", detail=str(e)) from e

    logger.info("Trashed %s -> %s", path, destination)
    return destination


def trash_destination(trash_dir: Path, name: str) -> Path:
    """Claim a free path for a file name inside the trash directory.

    The returned path is reserved by creating an empty placeholder with
    ``O_EXCL``, so a concurrent trash of the same name can never pick it
    too. The caller moves the real file over the placeholder.

    Args:
        trash_dir: Trash directory.
        name: Base name of the file being trashed.

    Returns:
        ``trash_dir / name`` if free, otherwise a timestamp-suffixed
        variant that keeps the extension. A counter follows the
        timestamp if the same name is trashed twice within a second.

    Raises:
        OSError: If a placeholder cannot be created for a reason other
            than the name being taken.
    """
    if _reserve(trash_dir / name):
        return trash_dir / name

    stem, ext = split_extension(name)
    timestamp = int(time.time())
    candidate = trash_dir / f"{stem}_{timestamp}{ext}"

    counter = 1
    while not _reserve(candidate):
        candidate = trash_dir / f"{stem}_{timestamp}_{counter}{ext}"
        counter += 1

    return candidate


def _reserve(path: Path) -> bool:
    """Create an empty file at path unless something already exists there."""
    try:
        fd = os.open(path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o600)
    except FileExistsError:
        return False
    os.close(fd)
    return True


def split_extension(name: str) -> tuple[str, str]:
    """Split a base name into stem and extension (with its dot).

    Leading-dot names such as ".bashrc" have no extension.

    Args:
        name: Base name to split.

    Returns:
        Tuple of (stem, extension), extension empty if none.
    """
    stem, dot, suffix = name.rpartition(".")
    if not dot or not stem:
        return name, ""
    return stem, f".{suffix}"


def _release(placeholder: Path) -> None:
    """Remove a reserved trash placeholder after a failed move."""
    try:
        placeholder.unlink()
    except OSError as e:
        logger.debug("Could not remove trash placeholder %s: %s", placeholder, e)
