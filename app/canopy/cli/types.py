"""Shared helpers for resolving CLI options.

This module combines command-line flags with the user settings into the
configuration values the walker and renderers consume.
"""

from collections.abc import Iterable

from canopy.core.settings import ColorMode
from canopy.render.models import OutputFormat
from canopy.tree.filtering import PatternFilter
from canopy.tree.models import SortKey


def build_filter(
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    *,
    ignore_case: bool = False,
) -> PatternFilter:
    """Build a pattern filter, compiling every pattern up front.

    Args:
        include: Patterns names must match (``-P``).
        exclude: Patterns that reject names (``-I``).
        ignore_case: Match case-insensitively.

    Returns:
        Configured PatternFilter.

    Raises:
        PatternSyntaxError: If any pattern is malformed.
    """
    pattern_filter = PatternFilter(ignore_case=ignore_case)
    for pattern in include:
        pattern_filter.add_include(pattern)
    for pattern in exclude:
        pattern_filter.add_exclude(pattern)
    return pattern_filter


def resolve_sort_key(
    *,
    unsorted: bool,
    sort_time: bool,
    sort: str | None,
    default: SortKey = SortKey.NAME,
) -> SortKey:
    """Pick the sort key: unsorted, then sort-time, then --sort, then default.

    The --sort text goes through SortKey.parse, so ``time`` selects mtime
    and unknown names fall back to name ordering.
    """
    if unsorted:
        return SortKey.NONE
    if sort_time:
        return SortKey.TIME
    if sort is not None:
        return SortKey.parse(sort)
    return default


def resolve_colorize(
    *,
    color: bool,
    nocolor: bool,
    mode: ColorMode = ColorMode.AUTO,
    is_tty: bool = False,
) -> bool:
    """Decide whether to colorize: --nocolor wins over --color, then settings.

    Args:
        color: ``-C`` was given.
        nocolor: ``-n`` was given.
        mode: Colorization mode from the settings file.
        is_tty: Whether stdout is a terminal (used in AUTO mode).

    Returns:
        True if output should carry ANSI styles.
    """
    if nocolor:
        return False
    if color:
        return True
    if mode == ColorMode.ALWAYS:
        return True
    if mode == ColorMode.NEVER:
        return False
    return is_tty


def resolve_output_format(
    *,
    json_output: bool,
    toon_output: bool,
    default: OutputFormat = OutputFormat.TEXT,
) -> OutputFormat:
    """Pick the output format: --json, then --toon, then default."""
    if json_output:
        return OutputFormat.JSON
    if toon_output:
        return OutputFormat.TOON
    return default
