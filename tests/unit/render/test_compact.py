"""Tests for TOON rendering."""

import os
import stat
from pathlib import Path

from canopy.render import OutputFormat, RenderConfig, render
from canopy.render.compact import TOON_BANNER, render_toon
from canopy.tree.models import Entry, TreeStats


def _file(name: str, size: int = 0) -> Entry:
    metadata = os.stat_result((stat.S_IFREG | 0o644, 1, 1, 1, 0, 0, size, 0, 0, 0))
    return Entry(path=Path("/r") / name, name=name, is_dir=False, metadata=metadata)


class TestRenderToon:
    """Tests for render_toon."""

    def test_structure(self) -> None:
        """Banner, then one line per node indented two spaces per level."""
        sub = Entry(
            path=Path("/r/sub"),
            name="sub",
            is_dir=True,
            children=(Entry(path=Path("/r/sub/deep"), name="deep", is_dir=False),),
        )
        link = Entry(
            path=Path("/r/l"), name="l", is_dir=False, is_symlink=True, symlink_target="sub"
        )
        tree = Entry(path=Path("/r"), name="r", is_dir=True, children=(sub, link))

        output = render_toon(tree, RenderConfig())

        assert output.splitlines() == [
            TOON_BANNER,
            "d:r",
            "  d:sub",
            "    f:deep",
            "  l:l -> sub",
        ]

    def test_metadata_fields(self) -> None:
        """Permissions and raw sizes are joined with colons before the name."""
        tree = Entry(path=Path("/r"), name="r", is_dir=True, children=(_file("a", 1234),))
        config = RenderConfig(show_permissions=True, show_size=True)

        output = render_toon(tree, config)

        assert output.splitlines()[2] == "  f:-rw-r--r--:1234:a"

    def test_human_size_unpadded(self) -> None:
        """Human-readable sizes are not padded."""
        tree = Entry(
            path=Path("/r"),
            name="r",
            is_dir=True,
            children=(_file("a", 5), _file("b", 2048)),
        )
        config = RenderConfig(show_size=True, human_readable=True)

        output = render_toon(tree, config)

        assert output.splitlines()[2:] == ["  f:5:a", "  f:2.0K:b"]

    def test_render_dispatch(self) -> None:
        """render() selects TOON from the output format."""
        tree = Entry(path=Path("/x"), name="x", is_dir=False)

        output = render(tree, RenderConfig(output_format=OutputFormat.TOON), TreeStats())

        assert output == f"{TOON_BANNER}\nf:x\n"
