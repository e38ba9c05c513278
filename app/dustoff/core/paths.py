"""XDG-compliant path management for dustoff.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and data storage.

XDG defaults:
- Config: ~/.config/dustoff/
- Data: ~/.local/share/dustoff/
- Trash: ~/.local/share/dustoff/trash/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dustoff"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dustoff/ (or XDG_CONFIG_HOME/dustoff/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_data_dir() -> Path:
    """Get the data directory path.

    Returns:
        Path to ~/.local/share/dustoff/ (or XDG_DATA_HOME/dustoff/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/dustoff/settings.toml.
    """
    return get_config_dir() / "settings.toml"


def get_trash_dir() -> Path:
    """Get the default trash directory path.

    Trashed files are moved here instead of being removed, so they
    can be inspected and restored by hand.

    Returns:
        Path to ~/.local/share/dustoff/trash/.
    """
    return get_data_dir() / "trash"
