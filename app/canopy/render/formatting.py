"""Shared size and time formatting for all output formats."""

from datetime import datetime

DEFAULT_TIME_FORMAT = "%b %d %H:%M"

_BINARY_UNITS: tuple[str, ...] = ("B", "K", "M", "G", "T", "P")
_SI_UNITS: tuple[str, ...] = ("B", "kB", "MB", "GB", "TB", "PB")


def format_size(size: int, si: bool = False, padded: bool = False) -> str:
    """Format a byte count in human-readable form.

    Counts below the base (1024, or 1000 with ``si``) are shown as bare
    integers. Larger counts are divided down until below the base or the
    largest unit is reached, then shown with one decimal under 10 and no
    decimals otherwise.

    Args:
        size: Size in bytes.
        si: Use powers of 1000 and ``kB``-style units.
        padded: Right-align for column output (bare bytes to width 4,
            scaled values to width 3 before the unit).

    Returns:
        Formatted size, e.g. ``"512"``, ``"1.0K"``, ``"1.5kB"``, ``"12M"``.
    """
    units = _SI_UNITS if si else _BINARY_UNITS
    base = 1000 if si else 1024

    if size < base:
        text = str(size)
        return text.rjust(4) if padded else text

    value = float(size)
    index = 0
    while value >= base and index < len(units) - 1:
        value /= base
        index += 1

    number = f"{value:.0f}" if value >= 10 else f"{value:.1f}"
    if padded:
        number = number.rjust(3)
    return number + units[index]


def format_time(timestamp: float, fmt: str | None = None) -> str:
    """Format a modification timestamp in local time.

    Args:
        timestamp: POSIX timestamp.
        fmt: strftime format (default ``%b %d %H:%M``).

    Returns:
        Formatted local time.
    """
    return datetime.fromtimestamp(timestamp).strftime(fmt or DEFAULT_TIME_FORMAT)
