"""Structured (JSON) rendering.

The output is a one-element list holding the root node. Each node has
a ``type`` tag (``directory``, ``link`` or ``file``) and a ``name``;
``contents`` appears only for directories with children and ``target``
only for symlinks whose target could be read. Downstream consumers rely
on these tag and key names.
"""

import json
from typing import Any

from canopy.tree.models import Entry


def entry_to_node(entry: Entry) -> dict[str, Any]:
    """Convert an entry and its descendants to plain JSON-ready dicts.

    Args:
        entry: Entry to convert.

    Returns:
        Node dictionary with keys in ``type``, ``name``, ``contents``,
        ``target`` order.
    """
    node: dict[str, Any] = {"type": entry.kind.value, "name": entry.name}

    if entry.is_dir and entry.children:
        node["contents"] = [entry_to_node(child) for child in entry.children]

    if entry.symlink_target is not None:
        node["target"] = entry.symlink_target

    return node


def render_json(tree: Entry) -> str:
    """Render the tree as pretty-printed JSON.

    Args:
        tree: Root entry.

    Returns:
        JSON text ending with a newline.
    """
    return json.dumps([entry_to_node(tree)], indent=2, ensure_ascii=False) + "\n"
