"""Tree rendering module.

This module turns a finished entry tree into text in one of three
formats: indented text, structured JSON, or compact TOON lines.
"""

from canopy.render.compact import render_toon
from canopy.render.formatting import format_size, format_time
from canopy.render.models import OutputFormat, RenderConfig
from canopy.render.structured import render_json
from canopy.render.text import render_text, summary_line
from canopy.tree.models import Entry, TreeStats


def render(tree: Entry, config: RenderConfig, stats: TreeStats) -> str:
    """Render a finished tree in the configured output format.

    Args:
        tree: Root entry returned by the walker.
        config: Render configuration.
        stats: Counters collected during the walk.

    Returns:
        Rendered output ending with a newline.
    """
    if config.output_format == OutputFormat.JSON:
        return render_json(tree)
    if config.output_format == OutputFormat.TOON:
        return render_toon(tree, config)
    return render_text(tree, config, stats)


__all__ = [
    "OutputFormat",
    "RenderConfig",
    "format_size",
    "format_time",
    "render",
    "render_json",
    "render_text",
    "render_toon",
    "summary_line",
]
