"""Compact TOON (Token-Oriented Object Notation) rendering.

One line per node, indented two spaces per level, with fields joined by
colons: ``kind[:permissions][:size][:date]:name``. Symlinks with a known
target get a `` -> target`` suffix.
"""

from canopy.render.formatting import format_size, format_time
from canopy.render.models import RenderConfig
from canopy.tree.models import Entry

TOON_BANNER = "# TOON - Tree Output"


def _toon_line(entry: Entry, depth: int, config: RenderConfig) -> str:
    parts = [entry.kind.letter]

    if config.show_permissions:
        parts.append(entry.permissions)

    if config.show_size:
        if config.human_readable:
            parts.append(format_size(entry.size, config.si_units))
        else:
            parts.append(str(entry.size))

    if config.show_date:
        modified = entry.modified
        if modified is not None:
            parts.append(format_time(modified, config.time_format))

    parts.append(entry.name)

    line = "  " * depth + ":".join(parts)
    if entry.symlink_target is not None:
        line += f" -> {entry.symlink_target}"
    return line


def render_toon(tree: Entry, config: RenderConfig) -> str:
    """Render the tree in the compact TOON format.

    Args:
        tree: Root entry.
        config: Render configuration (metadata fields only).

    Returns:
        TOON text ending with a newline.
    """
    lines = [TOON_BANNER]

    stack: list[tuple[Entry, int]] = [(tree, 0)]
    while stack:
        entry, depth = stack.pop()
        lines.append(_toon_line(entry, depth, config))
        if entry.is_dir:
            stack.extend((child, depth + 1) for child in reversed(entry.children))

    return "\n".join(lines) + "\n"
