"""Console color theme.

Colors come from the bundled ``data/theme.toml``; any subset of keys can be
overridden in ``~/.config/promptbuilder/theme.toml``. A broken user theme
never stops a command: it is logged and the defaults are used instead.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from rich.theme import Theme

from promptbuilder.core.paths import get_theme_path

logger = logging.getLogger(__name__)


def _check_hex(name: str, value: object) -> str:
    """Return value stripped if it is a #RGB or #RRGGBB color."""
    if not isinstance(value, str):
        raise ValueError(f"{name}: color must be a string")
    color = value.strip()
    if not color.startswith("#"):
        raise ValueError(f"{name}: color must start with '#'")
    digits = color[1:]
    if len(digits) not in (3, 6):
        raise ValueError(f"{name}: color must be #RGB or #RRGGBB format")
    try:
        int(digits, 16)
    except ValueError:
        raise ValueError(f"{name}: invalid hex color '{color}'") from None
    return color


class ThemeColors(BaseModel):
    """Hex colors used by the CLI output.

    Attributes:
        added, skipped, ignored: Counts in the ``add`` summary.
        path_relative, path_absolute: Columns of the ``list`` table.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    added: str = "#c1ff62"
    skipped: str = "#0e8ac8"
    ignored: str = "#d44ebc"
    path_relative: str = "#69B9A1"
    path_absolute: str = "#b2bec3"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: ValidationInfo) -> str:
        """Every field must be a hex color."""
        return _check_hex(info.field_name or "color", v)


def get_bundled_theme_path() -> Path:
    """Path of the default theme shipped with the package."""
    return Path(str(resources.files("promptbuilder.data").joinpath("theme.toml")))


def read_theme_file(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are dropped; validation happens in ThemeColors.

    Args:
        path: Theme TOML file.

    Returns:
        Color name to value mapping, or None if the file is missing or unusable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Cannot load theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Theme file %s: [colors] must be a table", path)
        return None
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Merge the user theme over the bundled one.

    Args:
        user_path: User theme file. Defaults to ~/.config/promptbuilder/theme.toml.

    Returns:
        Validated colors; the built-in defaults if the merge is invalid.
    """
    merged = read_theme_file(get_bundled_theme_path()) or {}
    overrides = read_theme_file(user_path or get_theme_path())
    if overrides:
        logger.debug("Applying %d theme override(s)", len(overrides))
        merged.update(overrides)

    try:
        return ThemeColors(**merged)
    except ValueError as e:
        logger.warning("Invalid theme, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for the CLI consoles.

    Args:
        colors: Colors to use. If None, the merged theme is loaded.

    Returns:
        Rich Theme with one style per color plus a few derived styles.
    """
    if colors is None:
        colors = load_theme()
    styles = colors.model_dump()
    styles["error"] = f"bold {colors.error}"
    styles["path.relative"] = f"bold {styles.pop('path_relative')}"
    styles["path.absolute"] = styles.pop("path_absolute")
    styles["bold_header"] = f"bold {colors.header}"
    styles["dim"] = colors.muted
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, loading it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme


def reload_theme() -> Theme:
    """Reload the theme from disk and replace the cached one."""
    global _cached_theme
    _cached_theme = get_rich_theme()
    return _cached_theme
