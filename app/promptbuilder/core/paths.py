"""XDG-compliant path management for promptbuilder.

This module provides standardized paths following the XDG Base Directory
Specification. promptbuilder keeps both its settings and its collection
state in the configuration directory.

XDG defaults:
- Config: ~/.config/promptbuilder/
- State file: ~/.config/promptbuilder/state.json
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "promptbuilder"

# Environment variable that overrides the state file location
STATE_FILE_ENV = "PROMPTBUILDER_STATE_FILE"


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
        Path to ~/.config/promptbuilder/ (or XDG_CONFIG_HOME/promptbuilder/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/promptbuilder/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/promptbuilder/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_state_path(override: Path | None = None) -> Path:
    """Get the collection state file path.

    Priority:
    1. PROMPTBUILDER_STATE_FILE environment variable
    2. Explicit override (the ``state_file`` setting)
    3. ~/.config/promptbuilder/state.json

    Args:
        override: Optional path taken from the settings file.

    Returns:
        Path to the JSON state file.
    """
    env_path = os.environ.get(STATE_FILE_ENV)
    if env_path:
        return Path(env_path).expanduser()
    if override is not None:
        return override.expanduser()
    return get_config_dir() / "state.json"

