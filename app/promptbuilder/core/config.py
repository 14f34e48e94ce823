"""User settings for promptbuilder.

Settings are stored in ~/.config/promptbuilder/config.toml. A missing
file means defaults; an invalid file is an error the CLI reports before
running any command.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from promptbuilder.core.paths import get_settings_path

# How to treat file content that is not valid UTF-8 when printing
UndecodablePolicy = Literal["skip", "replace"]

DEFAULT_IGNORE_FILES: tuple[str, ...] = (".gitignore", ".ignore")


class Settings(BaseModel):
    """Configuration for collecting and printing files.

    Attributes:
        state_file: Alternative location for the collection state file.
        respect_ignore_files: Honor ignore-rule files found in the directory chain.
        ignore_files: Names of ignore-rule files, lowest precedence first.
        include_hidden: Let wildcards match dot-files and dot-directories.
        undecodable: Skip or lossily decode files that are not valid UTF-8.
    """

    model_config = ConfigDict(extra="forbid")

    state_file: Annotated[
        Path | None,
        Field(description="State file location (None = XDG default)"),
    ] = None
    respect_ignore_files: Annotated[
        bool,
        Field(description="Apply .gitignore-style rule files"),
    ] = True
    ignore_files: Annotated[
        list[str],
        Field(description="Ignore-rule file names, lowest precedence first"),
    ] = Field(default_factory=lambda: list(DEFAULT_IGNORE_FILES))
    include_hidden: Annotated[
        bool,
        Field(description="Match hidden files with wildcards"),
    ] = False
    undecodable: Annotated[
        UndecodablePolicy,
        Field(description="Policy for content that is not valid UTF-8"),
    ] = "skip"

    @field_validator("ignore_files")
    @classmethod
    def validate_ignore_files(cls, v: list[str]) -> list[str]:
        """Ignore-rule files must be plain file names."""
        for name in v:
            if not name or "/" in name or name in (".", ".."):
                msg = f"Invalid ignore file name: {name!r}"
                raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Raised when the settings file cannot be read or is invalid."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default location.

    Returns:
        Validated Settings. Defaults when the file does not exist.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = path or get_settings_path()

    if not config_path.exists():
        return Settings()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically through a temporary file in the same
    directory and os.replace().

    Args:
        settings: Settings to save.
        path: Destination. If None, uses the default location.

    Returns:
        Path where the settings were saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_settings_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write settings: {e}") from e

    return config_path


def _settings_to_dict(settings: Settings) -> dict[str, object]:
    """Convert Settings to a TOML-ready dictionary.

    TOML has no null, so an unset state_file is omitted.
    """
    result: dict[str, object] = {
        "respect_ignore_files": settings.respect_ignore_files,
        "ignore_files": list(settings.ignore_files),
        "include_hidden": settings.include_hidden,
        "undecodable": settings.undecodable,
    }
    if settings.state_file is not None:
        result["state_file"] = str(settings.state_file)
    return result
