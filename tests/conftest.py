"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from dustoff.scanner.models import FileEntry


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and data directories at a throwaway location.

    Keeps tests away from the real ~/.config/dustoff and trash directory.
    """
    base = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(base / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(base / "data"))
    return base


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with a.txt (10 bytes) and sub/b.txt (20 bytes)."""
    root = tmp_path / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / "a.txt").write_bytes(b"x" * 10)
    (sub / "b.txt").write_bytes(b"y" * 20)
    return root


@pytest.fixture
def make_entry() -> Callable[..., FileEntry]:
    """Factory for FileEntry test instances."""

    def _make(name: str = "file.txt", size: int = 100, path: str | None = None) -> FileEntry:
        extension = name.rpartition(".")[2] if "." in name.lstrip(".") else ""
        return FileEntry(
            path=path or f"/data/{name}",
            name=name,
            size=size,
            modified=1_700_000_000,
            accessed=1_700_000_100,
            is_directory=False,
            extension=extension,
        )

    return _make


@pytest.fixture
def undecodable_tree(tmp_path: Path) -> Path:
    """Directory holding one 5-byte file whose name is not valid UTF-8."""
    root = tmp_path / "latin1"
    root.mkdir()
    fd = os.open(os.fsencode(root) + b"/bad\xff.txt", os.O_CREAT | os.O_WRONLY, 0o644)
    try:
        os.write(fd, b"12345")
    finally:
        os.close(fd)
    return root
