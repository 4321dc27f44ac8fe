"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user settings never leak in."""
    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Build a directory tree from a nested dict.

    Keys are names; a dict value is a subdirectory, a str value is file
    content. Returns the root directory.
    """

    def _make(layout: dict[str, object], root_name: str = "root") -> Path:
        root = tmp_path / root_name
        root.mkdir()
        _populate(root, layout)
        return root

    return _make


def _populate(directory: Path, layout: dict[str, object]) -> None:
    for name, value in layout.items():
        target = directory / name
        if isinstance(value, dict):
            target.mkdir()
            _populate(target, value)
        else:
            target.write_text(str(value))
