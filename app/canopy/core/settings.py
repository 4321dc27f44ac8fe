"""User settings for canopy.

This module provides the settings model and loader for the optional
defaults file, stored in ~/.config/canopy/config.toml. Command-line
options always take precedence over these values.

Example::

    all = true
    dirs_first = true
    sort = "mtime"
    color = "never"
    ignore = ["__pycache__", "*.pyc"]
"""

import tomllib
from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from canopy.core.paths import get_settings_path
from canopy.render.models import OutputFormat
from canopy.tree.models import SortKey


class ColorMode(str, Enum):
    """When to colorize text output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class Settings(BaseModel):
    """Default options for canopy.

    Attributes:
        all: List hidden entries by default.
        dirs_first: List directories before files by default.
        ignore_case: Match patterns case-insensitively by default.
        sort: Default sort key.
        color: Default colorization mode.
        format: Default output format.
        time_format: Default strftime format for dates.
        ignore: Exclude patterns applied before any given on the command line.
    """

    model_config = ConfigDict(extra="forbid")

    all: bool = False
    dirs_first: bool = False
    ignore_case: bool = False
    sort: Annotated[
        SortKey,
        Field(description="Sort key: name, size, mtime (or time), none"),
    ] = SortKey.NAME
    color: Annotated[
        ColorMode,
        Field(description="Colorize output: auto, always, never"),
    ] = ColorMode.AUTO
    format: Annotated[
        OutputFormat,
        Field(description="Output format: text, json, toon"),
    ] = OutputFormat.TEXT
    time_format: str | None = None
    ignore: list[str] = Field(default_factory=list)

    @field_validator("sort", mode="before")
    @classmethod
    def parse_sort_key(cls, v: object) -> object:
        """Accept sort key aliases such as ``time``."""
        if isinstance(v, str) and v.strip().lower() == "time":
            return SortKey.TIME
        return v


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when an explicitly requested settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Without an explicit path the default settings file is used, and a
    missing default file simply yields the default settings.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsNotFoundError: If an explicit settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        if path is not None:
            raise SettingsNotFoundError(f"Settings file not found: {settings_path}")
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e
