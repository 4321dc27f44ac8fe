"""Indented text rendering with tree connector glyphs."""

from rich.color import ColorSystem
from rich.style import Style

from canopy.render.formatting import format_size, format_time
from canopy.render.models import RenderConfig
from canopy.tree.models import Entry, TreeStats

# Tree drawing characters
BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│   "
EMPTY = "    "


def _paint(text: str, style: str, config: RenderConfig) -> str:
    """Wrap text in ANSI escapes for a Rich style when colorizing."""
    if not config.colorize:
        return text
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


def _display_name(entry: Entry, config: RenderConfig, *, is_root: bool = False) -> str:
    """Name (or full path) with color, type indicator and link target."""
    name = entry.display_path if config.full_path and not is_root else entry.name

    theme = config.theme
    if entry.is_dir:
        name = _paint(name, theme.directory, config)
    elif entry.is_symlink:
        name = _paint(name, theme.symlink, config)
    elif entry.is_executable:
        name = _paint(name, theme.executable, config)

    if config.show_type_indicator:
        name += entry.type_indicator

    if entry.is_symlink and entry.symlink_target is not None:
        name += " -> " + _paint(entry.symlink_target, theme.symlink, config)

    return name


def _metadata_fields(entry: Entry, config: RenderConfig) -> str:
    """Optional fields shown before the name: permissions, size, date."""
    parts: list[str] = []

    if config.show_permissions:
        parts.append(entry.permissions)

    if config.show_size:
        if config.human_readable:
            parts.append(format_size(entry.size, config.si_units, padded=True))
        else:
            parts.append(f"{entry.size:>10}")

    if config.show_date:
        modified = entry.modified
        if modified is not None:
            parts.append(format_time(modified, config.time_format))

    return "".join(f"{part} " for part in parts)


def summary_line(stats: TreeStats) -> str:
    """Directory and file counts with singular/plural wording.

    Args:
        stats: Traversal counters.

    Returns:
        Summary such as ``"1 directory, 3 files"``.
    """
    dir_word = "directory" if stats.directories == 1 else "directories"
    file_word = "file" if stats.files == 1 else "files"
    return f"{stats.directories} {dir_word}, {stats.files} {file_word}"


def render_text(tree: Entry, config: RenderConfig, stats: TreeStats) -> str:
    """Render the tree as indented text.

    The root is printed alone on the first line. Every other entry is
    drawn with a branch connector (a corner for the last sibling) below
    a prefix that carries a vertical bar for each ancestor that still
    has siblings to come. Error lines use the prefix the entry's own
    children would have.

    Args:
        tree: Root entry.
        config: Render configuration.
        stats: Counters for the trailing summary.

    Returns:
        Rendered text ending with a newline.
    """
    lines = [_display_name(tree, config, is_root=True)]
    if tree.error is not None:
        lines.append(_paint(tree.error, config.theme.error, config))

    # (entry, prefix, is_last) in pre-order
    stack: list[tuple[Entry, str, bool]] = []
    last_index = len(tree.children) - 1
    for index in range(last_index, -1, -1):
        stack.append((tree.children[index], "", index == last_index))

    while stack:
        entry, prefix, is_last = stack.pop()

        if config.no_indent:
            branch, child_prefix = "", ""
        elif is_last:
            branch, child_prefix = LAST_BRANCH, prefix + EMPTY
        else:
            branch, child_prefix = BRANCH, prefix + VERTICAL

        fields = _metadata_fields(entry, config)
        name = _display_name(entry, config)
        lines.append(f"{prefix}{branch}{fields}{name}")

        if entry.error is not None:
            lines.append(child_prefix + _paint(entry.error, config.theme.error, config))

        last_index = len(entry.children) - 1
        for index in range(last_index, -1, -1):
            stack.append((entry.children[index], child_prefix, index == last_index))

    if not config.no_report:
        lines.append("")
        lines.append(summary_line(stats))

    return "\n".join(lines) + "\n"
