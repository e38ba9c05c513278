"""User settings for dustoff.

This module provides the settings model and I/O functions. Settings are
stored in ~/.config/dustoff/settings.toml and cover the scan entry cap,
the trash location and console color overrides.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dustoff.core.paths import get_settings_path, get_trash_dir
from dustoff.core.theme import ThemeColors
from dustoff.scanner.walker import DEFAULT_MAX_FILES

logger = logging.getLogger(__name__)


class ScanSettings(BaseModel):
    """Settings for directory scans.

    Attributes:
        max_files: Maximum number of file entries collected per scan.
    """

    model_config = ConfigDict(extra="forbid")

    max_files: Annotated[
        int,
        Field(ge=1, le=10_000_000, description="Entry cap per scan (1-10,000,000)"),
    ] = DEFAULT_MAX_FILES


class TrashSettings(BaseModel):
    """Settings for the trash directory.

    Attributes:
        directory: Trash location. "~" is expanded. None uses the default.
    """

    model_config = ConfigDict(extra="forbid")

    directory: Annotated[
        str | None,
        Field(description="Trash directory (None = ~/.local/share/dustoff/trash)"),
    ] = None


class Settings(BaseModel):
    """Top-level dustoff settings."""

    model_config = ConfigDict(extra="forbid")

    scan: ScanSettings = Field(default_factory=ScanSettings)
    trash: TrashSettings = Field(default_factory=TrashSettings)
    colors: ThemeColors = Field(default_factory=ThemeColors)

    @property
    def trash_dir(self) -> Path:
        """Get the effective trash directory."""
        if self.trash.directory:
            return Path(self.trash.directory).expanduser()
        return get_trash_dir()


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def get_settings(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults.

    A missing file silently yields defaults; an unreadable or invalid
    file is logged as a warning and also yields defaults.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Settings object.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        return Settings()
    except SettingsError as e:
        logger.warning("Ignoring settings file: %s", e)
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The Settings object to save.
        path: Path to save the settings. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    data = settings.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path
