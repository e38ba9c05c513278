"""Ordering helpers for scan results."""

from dustoff.scanner.models import FileEntry, ScanResult


def sort_entries_by_largest(entries: list[FileEntry]) -> None:
    """Sort entries in place, largest first.

    The sort is stable: entries of equal size keep their discovery order,
    so sorting twice gives the same order as sorting once.

    Args:
        entries: Entries to reorder.
    """
    entries.sort(key=lambda e: e.size, reverse=True)


def sort_by_largest(result: ScanResult) -> ScanResult:
    """Reorder a scan result's files largest first.

    Only the order of ``result.files`` changes.

    Args:
        result: Scan result to reorder in place.

    Returns:
        The same ScanResult instance.
    """
    sort_entries_by_largest(result.files)
    return result
