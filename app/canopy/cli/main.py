"""Main CLI application entry point.

Defines the Typer application. The command resolves options and user
settings into a traversal and a render configuration, walks the target
directory, and writes the rendered tree to stdout.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from canopy import __version__
from canopy.cli.types import (
    build_filter,
    resolve_colorize,
    resolve_output_format,
    resolve_sort_key,
)
from canopy.core.settings import SettingsError, load_settings
from canopy.core.theme import get_theme_colors
from canopy.render import RenderConfig, render
from canopy.tree.filtering import PatternSyntaxError
from canopy.tree.models import TraversalConfig, TreeStats
from canopy.tree.walker import walk
from canopy.utils.formatting import configure_logging, print_error, print_warning

logger = logging.getLogger(__name__)

# Create main Typer app
app = typer.Typer(
    name="canopy",
    help="List directory contents as an indented tree.",
    add_completion=False,
    rich_markup_mode="rich",
    # -h selects human-readable sizes, as in tree(1)
    context_settings={"help_option_names": ["--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"canopy version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to list."),
    ] = Path("."),
    # Listing options
    all_files: Annotated[
        bool,
        typer.Option("--all", "-a", help="List hidden entries too.", rich_help_panel="Listing"),
    ] = False,
    dirs_only: Annotated[
        bool,
        typer.Option("--dirs-only", "-d", help="List directories only.", rich_help_panel="Listing"),
    ] = False,
    follow: Annotated[
        bool,
        typer.Option(
            "--follow",
            "-l",
            help="Descend into symlinked directories.",
            rich_help_panel="Listing",
        ),
    ] = False,
    full_path: Annotated[
        bool,
        typer.Option(
            "--full-path",
            "-f",
            help="Print the full path of each entry.",
            rich_help_panel="Listing",
        ),
    ] = False,
    level: Annotated[
        int | None,
        typer.Option(
            "--level",
            "-L",
            min=0,
            help="Descend only LEVEL directories deep.",
            rich_help_panel="Listing",
        ),
    ] = None,
    pattern: Annotated[
        list[str] | None,
        typer.Option(
            "--pattern",
            "-P",
            help="List only entries matching the glob (repeatable).",
            rich_help_panel="Listing",
        ),
    ] = None,
    ignore: Annotated[
        list[str] | None,
        typer.Option(
            "--ignore",
            "-I",
            help="Do not list entries matching the glob (repeatable).",
            rich_help_panel="Listing",
        ),
    ] = None,
    ignore_case: Annotated[
        bool,
        typer.Option(
            "--ignore-case",
            help="Ignore case when matching patterns.",
            rich_help_panel="Listing",
        ),
    ] = False,
    noreport: Annotated[
        bool,
        typer.Option(
            "--noreport",
            help="Omit the directory/file report at the end.",
            rich_help_panel="Listing",
        ),
    ] = False,
    # File options
    perm: Annotated[
        bool,
        typer.Option("--perm", "-p", help="Print permissions.", rich_help_panel="File"),
    ] = False,
    size: Annotated[
        bool,
        typer.Option("--size", "-s", help="Print sizes in bytes.", rich_help_panel="File"),
    ] = False,
    human: Annotated[
        bool,
        typer.Option(
            "--human", "-h", help="Print sizes in human-readable units.", rich_help_panel="File"
        ),
    ] = False,
    si: Annotated[
        bool,
        typer.Option("--si", help="Like --human, but use powers of 1000.", rich_help_panel="File"),
    ] = False,
    date: Annotated[
        bool,
        typer.Option(
            "--date", "-D", help="Print the last modification time.", rich_help_panel="File"
        ),
    ] = False,
    timefmt: Annotated[
        str | None,
        typer.Option(
            "--timefmt", help="strftime format for --date.", rich_help_panel="File"
        ),
    ] = None,
    classify: Annotated[
        bool,
        typer.Option(
            "--classify",
            "-F",
            help="Append / for directories, @ for links, * for executables.",
            rich_help_panel="File",
        ),
    ] = False,
    # Sorting options
    sort_time: Annotated[
        bool,
        typer.Option(
            "--sort-time", "-t", help="Sort by modification time.", rich_help_panel="Sorting"
        ),
    ] = False,
    unsorted: Annotated[
        bool,
        typer.Option("--unsorted", "-U", help="Leave entries unsorted.", rich_help_panel="Sorting"),
    ] = False,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", "-r", help="Reverse the sort order.", rich_help_panel="Sorting"),
    ] = False,
    dirsfirst: Annotated[
        bool,
        typer.Option(
            "--dirsfirst", help="List directories before files.", rich_help_panel="Sorting"
        ),
    ] = False,
    sort: Annotated[
        str | None,
        typer.Option(
            "--sort",
            metavar="KEY",
            help="Sort key: name, size, mtime (or time), none. Unknown keys sort by name.",
            rich_help_panel="Sorting",
        ),
    ] = None,
    # Graphics options
    noindent: Annotated[
        bool,
        typer.Option(
            "--noindent", "-i", help="Don't print indentation lines.", rich_help_panel="Graphics"
        ),
    ] = False,
    nocolor: Annotated[
        bool,
        typer.Option(
            "--nocolor", "-n", help="Turn colorization off always.", rich_help_panel="Graphics"
        ),
    ] = False,
    color: Annotated[
        bool,
        typer.Option(
            "--color", "-C", help="Turn colorization on always.", rich_help_panel="Graphics"
        ),
    ] = False,
    # Output format options
    json_output: Annotated[
        bool,
        typer.Option("--json", "-J", help="Print a JSON representation.", rich_help_panel="Output"),
    ] = False,
    toon_output: Annotated[
        bool,
        typer.Option("--toon", "-T", help="Print a TOON representation.", rich_help_panel="Output"),
    ] = False,
    # Global options
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Settings file to use instead of the default."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log skipped and unreadable entries."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """canopy - List directory contents as an indented tree.

    Entries are annotated with optional permissions, sizes and dates, and
    printed as text, JSON or TOON.
    """
    configure_logging(verbose)

    try:
        settings = load_settings(config_path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Patterns compile here, before any traversal
    try:
        pattern_filter = build_filter(
            include=pattern or [],
            exclude=[*settings.ignore, *(ignore or [])],
            ignore_case=ignore_case or settings.ignore_case,
        )
    except PatternSyntaxError as e:
        print_error(f"Invalid pattern: {e}")
        raise typer.Exit(code=1) from e

    traversal = TraversalConfig(
        show_hidden=all_files or settings.all,
        dirs_only=dirs_only,
        max_depth=level,
        follow_symlinks=follow,
        full_path=full_path,
        pattern_filter=pattern_filter,
        sort_key=resolve_sort_key(
            unsorted=unsorted,
            sort_time=sort_time,
            sort=sort,
            default=settings.sort,
        ),
        reverse=reverse,
        dirs_first=dirsfirst or settings.dirs_first,
    )

    render_config = RenderConfig(
        output_format=resolve_output_format(
            json_output=json_output,
            toon_output=toon_output,
            default=settings.format,
        ),
        colorize=resolve_colorize(
            color=color,
            nocolor=nocolor,
            mode=settings.color,
            is_tty=sys.stdout.isatty(),
        ),
        show_permissions=perm,
        show_size=size or human or si,
        human_readable=human or si,
        si_units=si,
        show_date=date,
        time_format=timefmt or settings.time_format,
        show_type_indicator=classify,
        no_indent=noindent,
        full_path=full_path,
        no_report=noreport,
        theme=get_theme_colors(),
    )

    root = directory.resolve()
    if not root.exists() and not root.is_symlink():
        print_warning(f"Cannot access {root}: no such file or directory")

    logger.debug("Listing %s (%r)", root, traversal.pattern_filter)
    stats = TreeStats()
    tree = walk(root, traversal, stats)
    logger.debug("Visited %d entries under %s", stats.total, root)
    output = render(tree, render_config, stats)

    try:
        typer.echo(output, nl=False, color=render_config.colorize)
    except OSError as e:
        print_error(f"Error writing output: {e}")
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
