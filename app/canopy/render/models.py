"""Render configuration models."""

from dataclasses import dataclass, field
from enum import Enum

from canopy.core.theme import ThemeColors


class OutputFormat(str, Enum):
    """Output format options.

    Attributes:
        TEXT: Indented tree with connector glyphs.
        JSON: Structured list-of-objects representation.
        TOON: Compact colon-delimited lines.
    """

    TEXT = "text"
    JSON = "json"
    TOON = "toon"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Presentation choices for a finished tree.

    Attributes:
        output_format: Which renderer to use.
        colorize: Emit ANSI styles (text format only).
        show_permissions: Prefix entries with their permission string.
        show_size: Prefix entries with their size.
        human_readable: Show sizes with units instead of raw bytes.
        si_units: Use powers of 1000 for human-readable sizes.
        show_date: Prefix entries with their modification time.
        time_format: strftime format for dates (None for the default).
        show_type_indicator: Append ``/``, ``@`` or ``*`` to names.
        no_indent: Drop connector glyphs and indentation.
        full_path: Show full paths instead of names (text format only).
        no_report: Omit the directory/file summary.
        theme: Styles used when colorizing.
    """

    output_format: OutputFormat = OutputFormat.TEXT
    colorize: bool = False
    show_permissions: bool = False
    show_size: bool = False
    human_readable: bool = False
    si_units: bool = False
    show_date: bool = False
    time_format: str | None = None
    show_type_indicator: bool = False
    no_indent: bool = False
    full_path: bool = False
    no_report: bool = False
    theme: ThemeColors = field(default_factory=ThemeColors)
