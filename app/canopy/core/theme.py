"""Theme management for canopy output.

Provides entry colors via a TOML theme file with user override support.
"""

import logging
import sys
import tomllib
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.theme import Theme

from canopy.core.paths import get_theme_path

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Style configuration for canopy.

    All values must be valid Rich style definitions (e.g. ``"bold blue"``,
    ``"#ff8800 on black"``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Tree entries
    directory: str = "bold blue"
    symlink: str = "cyan"
    executable: str = "bold green"

    # Semantic colors
    error: str = "red"
    warning: str = "yellow"

    @field_validator("*", mode="before")
    @classmethod
    def validate_style(cls, v: object, info: Any) -> str:
        """Validate that all values parse as Rich styles."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: style must be a string"
            raise ValueError(msg)
        style = v.strip()
        try:
            Style.parse(style)
        except StyleSyntaxError as e:
            msg = f"{info.field_name}: invalid style '{style}': {e}"
            raise ValueError(msg) from None
        return style


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Load the colors section from a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Dictionary of style name to style definition, or None if loading failed.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        colors_raw: object = data.get("colors", {})
        if not isinstance(colors_raw, dict):
            logger.warning("Invalid 'colors' section in %s", path)
            return None
        result: dict[str, str] = {}
        for key, value in cast(dict[str, object], colors_raw).items():
            if isinstance(value, str):
                result[key] = value
        return result
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse TOML file %s: %s", path, e)
        print(f"Warning: Failed to parse {path}: {e}", file=sys.stderr)
        return None
    except OSError as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return None


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load theme colors with user override support.

    Values from the ``[colors]`` table of the user theme file
    (``~/.config/canopy/theme.toml``) override the built-in defaults.
    An invalid theme falls back to the defaults with a warning.

    Args:
        path: Theme file to read. If None, uses the default theme path.

    Returns:
        ThemeColors instance with merged configuration.
    """
    theme_path = path or get_theme_path()
    user_colors = _load_toml_colors(theme_path)

    if user_colors is None:
        return ThemeColors()

    logger.debug("Loaded user theme overrides from %s", theme_path)
    try:
        return ThemeColors(**user_colors)
    except ValueError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        print(f"Warning: Invalid theme configuration: {e}", file=sys.stderr)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme for console markup.

    Args:
        colors: ThemeColors instance to convert. If None, loads theme automatically.

    Returns:
        Rich Theme instance configured with the color scheme.
    """
    if colors is None:
        colors = load_theme()

    styles: dict[str, str] = {
        "directory": colors.directory,
        "symlink": colors.symlink,
        "executable": colors.executable,
        "error": f"bold {colors.error}",
        "warning": colors.warning,
    }

    return Theme(styles)


# Module-level cached theme instance
_cached_colors: ThemeColors | None = None


def get_theme_colors() -> ThemeColors:
    """Get the theme colors, loading and caching them if necessary.

    Returns:
        Cached ThemeColors instance.
    """
    global _cached_colors
    if _cached_colors is None:
        _cached_colors = load_theme()
    return _cached_colors


def get_theme() -> Theme:
    """Get the Rich theme built from the cached theme colors.

    Returns:
        Rich Theme instance.
    """
    return get_rich_theme(get_theme_colors())
