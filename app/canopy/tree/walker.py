"""Directory walker that builds the in-memory entry tree.

Traversal is depth-first and uses an explicit work stack instead of
recursion, so very deep hierarchies never hit the interpreter recursion
limit. Each directory is enumerated once, in a single scandir call whose
handle is closed before any child is visited; children are fully built
and sorted before being attached to their parent.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from canopy.tree.models import Entry, TraversalConfig, TreeStats
from canopy.tree.sorting import sort_for_config

logger = logging.getLogger(__name__)

RECURSIVE_LINK_ERROR = "recursive, not followed"


@dataclass(slots=True)
class _Frame:
    """A directory whose children are still being built."""

    entry: Entry
    depth: int
    identity: tuple[int, int] | None
    pending: list[Path]
    built: list[Entry] = field(default_factory=list)


def _identity(entry: Entry) -> tuple[int, int] | None:
    """Device/inode pair of a directory, used to detect symlink loops."""
    if entry.metadata is None:
        return None
    return (entry.metadata.st_dev, entry.metadata.st_ino)


def _list_children(path: Path, config: TraversalConfig) -> list[Path]:
    """Enumerate a directory and keep the children that pass the filters.

    Hidden, directories-only and pattern checks all look at the bare
    child name.

    Raises:
        OSError: If the directory cannot be read.
    """
    children: list[Path] = []
    with os.scandir(path) as it:
        for dir_entry in it:
            name = dir_entry.name

            if not config.show_hidden and name.startswith("."):
                continue

            if config.dirs_only:
                try:
                    is_dir = dir_entry.is_dir()
                except OSError:
                    is_dir = False
                if not is_dir:
                    continue

            if not config.pattern_filter.matches(name):
                continue

            children.append(path / name)

    return children


def _open(
    path: Path,
    depth: int,
    config: TraversalConfig,
    ancestors: set[tuple[int, int]],
    *,
    is_root: bool = False,
) -> Entry | _Frame:
    """Inspect a path and decide whether it needs expanding.

    Returns:
        A finished Entry for leaves (files, depth-limited or unreadable
        directories, unfollowed links), or a frame listing the children
        still to build.
    """
    entry = Entry.from_path(path)

    if config.max_depth is not None and depth >= config.max_depth:
        return entry

    if not entry.is_dir:
        return entry

    if entry.is_symlink and not is_root:
        if not config.follow_symlinks:
            return entry
        identity = _identity(entry)
        if identity is not None and identity in ancestors:
            logger.debug("Not following recursive link: %s", path)
            return replace(entry, error=RECURSIVE_LINK_ERROR)

    try:
        pending = _list_children(path, config)
    except OSError as exc:
        logger.debug("Cannot open directory %s: %s", path, exc)
        reason = exc.strerror or str(exc)
        return replace(entry, error=f"error opening dir: {reason}")

    # Pop from the end, so reverse to build children in enumeration order
    pending.reverse()
    return _Frame(entry=entry, depth=depth, identity=_identity(entry), pending=pending)


def walk(
    path: Path,
    config: TraversalConfig,
    stats: TreeStats,
    depth: int = 0,
) -> Entry:
    """Build the entry tree rooted at ``path``.

    Unreadable directories do not abort the walk: the affected entry
    carries an error string and no children, and its siblings are still
    visited. Every child that passes the filters is counted once in
    ``stats`` by its resolved kind; the root is not counted.

    Args:
        path: Root path to walk.
        config: Traversal configuration.
        stats: Counters updated during the walk.
        depth: Depth of ``path`` relative to the listing root.

    Returns:
        The root Entry with sorted children attached.
    """
    ancestors: set[tuple[int, int]] = set()
    opened = _open(path, depth, config, ancestors, is_root=True)
    if isinstance(opened, Entry):
        return opened

    stack: list[_Frame] = [opened]
    if opened.identity is not None:
        ancestors.add(opened.identity)

    while True:
        frame = stack[-1]

        if frame.pending:
            child_path = frame.pending.pop()
            child = _open(child_path, frame.depth + 1, config, ancestors)
            if isinstance(child, Entry):
                stats.record(child)
                frame.built.append(child)
            else:
                stack.append(child)
                if child.identity is not None:
                    ancestors.add(child.identity)
            continue

        # All children built: sort, attach, hand the result to the parent
        stack.pop()
        if frame.identity is not None:
            ancestors.discard(frame.identity)
        sort_for_config(frame.built, config)
        finished = replace(frame.entry, children=tuple(frame.built))

        if not stack:
            return finished

        stats.record(finished)
        stack[-1].built.append(finished)
