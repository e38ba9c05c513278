"""Tests for the bounded tree walker."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dustoff.core.errors import IoFailureError, MetadataReadError
from dustoff.scanner.inspector import inspect_path
from dustoff.scanner.walker import DEFAULT_MAX_FILES, TreeWalker, walk_tree


def _make_files(directory: Path, count: int, size: int = 1, prefix: str = "f") -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for i in range(count):
        (directory / f"{prefix}{i}.dat").write_bytes(b"x" * size)


class TestWalkCollectsFiles:
    """Tests for collecting entries from a tree."""

    def test_nested_files_flattened(self, sample_tree: Path) -> None:
        """Files from nested directories land in one flat list."""
        outcome = TreeWalker().walk(sample_tree)

        names = sorted(e.name for e in outcome.entries)
        assert names == ["a.txt", "b.txt"]
        assert outcome.total_size == 30
        assert outcome.limited is False

    def test_directories_never_emitted(self, sample_tree: Path) -> None:
        """Directories are walked but not returned as entries."""
        (sample_tree / "empty").mkdir()
        (sample_tree / "sub" / "deeper").mkdir()

        outcome = TreeWalker().walk(sample_tree)

        assert all(not e.is_directory for e in outcome.entries)
        assert {e.path for e in outcome.entries} == {
            str(sample_tree / "a.txt"),
            str(sample_tree / "sub" / "b.txt"),
        }

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory yields no entries."""
        outcome = TreeWalker().walk(tmp_path)

        assert outcome.entries == []
        assert outcome.total_size == 0
        assert outcome.limited is False

    def test_total_matches_entries(self, tmp_path: Path) -> None:
        """The running total equals the sum of entry sizes."""
        _make_files(tmp_path / "a", 3, size=7)
        _make_files(tmp_path / "a" / "b", 2, size=11)
        _make_files(tmp_path, 1, size=100)

        outcome = TreeWalker().walk(tmp_path)

        assert len(outcome.entries) == 6
        assert outcome.total_size == sum(e.size for e in outcome.entries) == 143

    def test_subdirectory_contents_are_contiguous(self, tmp_path: Path) -> None:
        """Depth-first order keeps each directory's files together."""
        _make_files(tmp_path / "one", 4, prefix="one")
        _make_files(tmp_path / "two", 4, prefix="two")

        outcome = TreeWalker().walk(tmp_path)

        prefixes = [e.name[:3] for e in outcome.entries]
        first = prefixes[0]
        switch = prefixes.index("two" if first == "one" else "one")
        assert set(prefixes[:switch]) == {first}
        assert first not in prefixes[switch:]

    def test_follows_directory_symlink(self, tmp_path: Path) -> None:
        """Symlinked directories are walked like real ones."""
        elsewhere = tmp_path / "elsewhere"
        _make_files(elsewhere, 2)
        root = tmp_path / "root"
        root.mkdir()
        (root / "link").symlink_to(elsewhere, target_is_directory=True)

        outcome = TreeWalker().walk(root)

        assert len(outcome.entries) == 2
        assert all(e.path.startswith(str(root / "link")) for e in outcome.entries)

    def test_undecodable_name_collected_as_text(self, undecodable_tree: Path) -> None:
        """Files with non-UTF-8 names are collected with printable paths."""
        outcome = TreeWalker().walk(undecodable_tree)

        assert len(outcome.entries) == 1
        entry = outcome.entries[0]
        entry.path.encode("utf-8")
        assert entry.name == "Unknown"
        assert outcome.total_size == 5

    def test_deep_tree_does_not_exhaust_stack(self, tmp_path: Path) -> None:
        """Nesting deeper than the recursion limit still walks fine."""
        levels = [tmp_path]
        for _ in range(1200):
            levels.append(levels[-1] / "d")
            levels[-1].mkdir()
        bottom = levels[-1] / "bottom.txt"
        bottom.write_bytes(b"abc")

        try:
            outcome = TreeWalker().walk(tmp_path)
        finally:
            # Tear down bottom-up; recursive removal would hit the same limit
            bottom.unlink()
            for level in reversed(levels[1:]):
                level.rmdir()

        assert [e.name for e in outcome.entries] == ["bottom.txt"]
        assert outcome.total_size == 3


class TestEntryCap:
    """Tests for the entry cap."""

    def test_default_cap(self) -> None:
        """The default cap is 50,000 entries."""
        assert DEFAULT_MAX_FILES == 50_000
        assert TreeWalker().max_files == 50_000

    def test_cap_stops_walk(self, tmp_path: Path) -> None:
        """Exceeding the cap stops the walk and flags it as limited."""
        _make_files(tmp_path, 5)

        outcome = TreeWalker(max_files=3).walk(tmp_path)

        assert len(outcome.entries) == 3
        assert outcome.limited is True
        assert outcome.total_size == 3

    def test_cap_applies_across_directories(self, tmp_path: Path) -> None:
        """The cap is shared by the whole tree, not per directory."""
        _make_files(tmp_path / "a", 4)
        _make_files(tmp_path / "b", 4)
        _make_files(tmp_path / "c" / "d", 4)

        outcome = TreeWalker(max_files=6).walk(tmp_path)

        assert len(outcome.entries) == 6
        assert outcome.limited is True

    def test_cap_equal_to_file_count_is_not_limited(self, tmp_path: Path) -> None:
        """Collecting exactly the cap with nothing left over is not limited."""
        _make_files(tmp_path, 4)

        outcome = TreeWalker(max_files=4).walk(tmp_path)

        assert len(outcome.entries) == 4
        assert outcome.limited is False

    def test_under_cap_is_not_limited(self, sample_tree: Path) -> None:
        """A tree smaller than the cap is walked completely."""
        outcome = TreeWalker(max_files=2).walk(sample_tree)

        assert len(outcome.entries) == 2
        assert outcome.limited is False

    def test_zero_cap(self, tmp_path: Path) -> None:
        """A zero cap collects nothing and flags any content as limited."""
        _make_files(tmp_path, 1)

        outcome = TreeWalker(max_files=0).walk(tmp_path)

        assert outcome.entries == []
        assert outcome.limited is True

    def test_negative_cap_rejected(self) -> None:
        """A negative cap is a programming error."""
        with pytest.raises(ValueError, match="cannot be negative"):
            TreeWalker(max_files=-1)

    def test_walk_tree_helper(self, tmp_path: Path) -> None:
        """walk_tree applies the given cap."""
        _make_files(tmp_path, 3)

        outcome = walk_tree(tmp_path, max_files=2)

        assert len(outcome.entries) == 2
        assert outcome.limited is True


class TestWalkFailures:
    """Tests for failure handling during a walk."""

    def test_unreadable_root_raises(self, tmp_path: Path) -> None:
        """Failing to enumerate the root is an error."""
        with pytest.raises(IoFailureError, match="Failed to read directory"):
            TreeWalker().walk(tmp_path / "missing")

    def test_uninspectable_entry_skipped(self, sample_tree: Path) -> None:
        """Entries whose metadata cannot be read are skipped."""

        def flaky_inspect(path: str) -> object:
            if path.endswith("a.txt"):
                raise MetadataReadError("Failed to read metadata: boom")
            return inspect_path(path)

        with patch("dustoff.scanner.walker.inspect_path", side_effect=flaky_inspect):
            outcome = TreeWalker().walk(sample_tree)

        assert [e.name for e in outcome.entries] == ["b.txt"]
        assert outcome.total_size == 20

    def test_dangling_symlink_skipped(self, sample_tree: Path) -> None:
        """Broken symlinks are skipped silently."""
        (sample_tree / "dead").symlink_to(sample_tree / "nowhere")

        outcome = TreeWalker().walk(sample_tree)

        assert sorted(e.name for e in outcome.entries) == ["a.txt", "b.txt"]

    def test_unreadable_subdirectory_skipped(self, sample_tree: Path) -> None:
        """A nested directory that cannot be opened is skipped."""
        locked = sample_tree / "locked"
        _make_files(locked, 3)
        real_scandir = os.scandir

        def guarded_scandir(path: str) -> object:
            if str(path).endswith("locked"):
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        with patch("dustoff.scanner.walker.os.scandir", side_effect=guarded_scandir):
            outcome = TreeWalker().walk(sample_tree)

        assert sorted(e.name for e in outcome.entries) == ["a.txt", "b.txt"]
        assert outcome.limited is False
