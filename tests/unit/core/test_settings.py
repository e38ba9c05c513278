"""Unit tests for settings loading and saving."""

import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

from dustoff.core.settings import (
    ScanSettings,
    Settings,
    SettingsError,
    SettingsNotFoundError,
    SettingsParseError,
    get_settings,
    load_settings,
    save_settings,
)


class TestSettingsModel:
    """Tests for the Settings model."""

    def test_defaults(self, isolated_xdg: Path) -> None:
        """Defaults use the standard cap and trash location."""
        settings = Settings()

        assert settings.scan.max_files == 50_000
        assert settings.trash.directory is None
        assert settings.trash_dir == isolated_xdg / "data" / "dustoff" / "trash"

    def test_trash_dir_expands_home(self) -> None:
        """A configured trash directory has ~ expanded."""
        settings = Settings.model_validate({"trash": {"directory": "~/Trash"}})

        assert settings.trash_dir == Path.home() / "Trash"

    @pytest.mark.parametrize("value", [0, -3, 10_000_001])
    def test_max_files_bounds(self, value: int) -> None:
        """The cap must lie between 1 and 10,000,000."""
        with pytest.raises(ValidationError):
            ScanSettings(max_files=value)

    def test_unknown_keys_rejected(self) -> None:
        """Unknown sections are an error."""
        with pytest.raises(ValidationError):
            Settings.model_validate({"scann": {}})


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises SettingsNotFoundError."""
        with pytest.raises(SettingsNotFoundError):
            load_settings(tmp_path / "settings.toml")

    def test_valid_file(self, tmp_path: Path) -> None:
        """A valid file is parsed into Settings."""
        path = tmp_path / "settings.toml"
        path.write_text(
            '[scan]\nmax_files = 1000\n\n[trash]\ndirectory = "/tmp/bin"\n\n'
            '[colors]\nheader = "#123456"\n'
        )

        settings = load_settings(path)

        assert settings.scan.max_files == 1000
        assert settings.trash_dir == Path("/tmp/bin")
        assert settings.colors.header == "#123456"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises SettingsParseError."""
        path = tmp_path / "settings.toml"
        path.write_text("[scan\nmax_files = ")

        with pytest.raises(SettingsParseError, match="Invalid TOML syntax"):
            load_settings(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        """Out-of-range values raise SettingsError."""
        path = tmp_path / "settings.toml"
        path.write_text("[scan]\nmax_files = 0\n")

        with pytest.raises(SettingsError, match="Invalid settings content"):
            load_settings(path)


class TestGetSettings:
    """Tests for get_settings fallbacks."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """No settings file means default settings."""
        assert get_settings(tmp_path / "absent.toml") == Settings()

    def test_invalid_file_gives_defaults_with_warning(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An invalid file is ignored with a warning."""
        path = tmp_path / "settings.toml"
        path.write_text('[colors]\ntext = "red"\n')

        with caplog.at_level("WARNING", logger="dustoff.core.settings"):
            settings = get_settings(path)

        assert settings == Settings()
        assert "Ignoring settings file" in caplog.text

    def test_default_location(self, isolated_xdg: Path) -> None:
        """Without a path the XDG config location is read."""
        config_dir = isolated_xdg / "config" / "dustoff"
        config_dir.mkdir(parents=True)
        (config_dir / "settings.toml").write_text("[scan]\nmax_files = 7\n")

        assert get_settings().scan.max_files == 7


class TestSaveSettings:
    """Tests for save_settings."""

    def test_writes_toml(self, tmp_path: Path) -> None:
        """Saved settings are valid TOML that loads back the same values."""
        path = tmp_path / "nested" / "settings.toml"
        settings = Settings.model_validate({"scan": {"max_files": 123}})

        written = save_settings(settings, path)

        assert written == path
        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["scan"]["max_files"] == 123
        assert "directory" not in data["trash"]
        assert load_settings(path) == settings

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """The atomic write leaves only the settings file behind."""
        save_settings(Settings(), tmp_path / "settings.toml")

        assert [p.name for p in tmp_path.iterdir()] == ["settings.toml"]
