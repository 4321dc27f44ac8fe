"""Tree domain models for directory traversal.

This module defines the core data structures produced by the walker:
the immutable Entry node with its derived metadata accessors, the
traversal configuration, and the running directory/file counters.
"""

import logging
import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from canopy.tree.filtering import PatternFilter

logger = logging.getLogger(__name__)

# Placeholder permission string when no metadata is available
NO_PERMISSIONS = "----------"


def lossy_text(value: str) -> str:
    """Make a filesystem string printable, replacing undecodable bytes."""
    return os.fsencode(value).decode("utf-8", "replace")


class EntryKind(str, Enum):
    """Kind tag of a tree entry.

    Directories win over symlinks: a link pointing at a directory
    reports DIRECTORY.

    Attributes:
        DIRECTORY: Directory (possibly reached through a symlink).
        LINK: Symbolic link to a non-directory or to nothing.
        FILE: Anything else.
    """

    DIRECTORY = "directory"
    LINK = "link"
    FILE = "file"

    @property
    def letter(self) -> str:
        """Single-letter code used by the compact format."""
        return {"directory": "d", "link": "l", "file": "f"}[self.value]


class SortKey(str, Enum):
    """Attribute used to order sibling entries."""

    NAME = "name"
    SIZE = "size"
    TIME = "mtime"
    NONE = "none"

    @classmethod
    def parse(cls, value: str) -> "SortKey":
        """Parse a sort key name, falling back to NAME for unknown text.

        Accepts ``time`` as an alias for ``mtime``; matching ignores case.

        Args:
            value: Sort key name.

        Returns:
            The matching SortKey.
        """
        text = value.strip().lower()
        if text == "time":
            return cls.TIME
        try:
            return cls(text)
        except ValueError:
            logger.debug("Unknown sort key %r, sorting by name", value)
            return cls.NAME


@dataclass(frozen=True, slots=True)
class Entry:
    """A single filesystem node in the tree.

    Attributes:
        path: Absolute path of the node.
        name: Display name (basename, or the path itself for roots like ``/``).
        is_dir: Whether the node is a directory, following symlinks.
        is_symlink: Whether the node itself is a symbolic link.
        symlink_target: Link text (None unless a readable symlink).
        metadata: Snapshot from a following stat() call (None if it failed).
        children: Sorted child entries (empty unless an expanded directory).
        error: Reason the node could not be expanded, if any.
    """

    path: Path
    name: str
    is_dir: bool
    is_symlink: bool = False
    symlink_target: str | None = None
    metadata: os.stat_result | None = None
    children: tuple["Entry", ...] = ()
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        if self.children and not self.is_dir:
            msg = f"Non-directory entry cannot have children: {self.path}"
            raise ValueError(msg)

    @classmethod
    def from_path(cls, path: Path) -> "Entry":
        """Build a childless Entry by inspecting ``path``.

        Never raises for filesystem problems: a broken symlink becomes an
        entry with ``is_symlink=True`` and no metadata, and a path that
        vanished becomes a plain entry with no metadata.

        Args:
            path: Filesystem path to inspect.

        Returns:
            Entry describing the node.
        """
        name = lossy_text(path.name or str(path))

        try:
            is_symlink = stat.S_ISLNK(path.lstat().st_mode)
        except OSError:
            is_symlink = False

        try:
            info: os.stat_result | None = path.stat()
        except OSError:
            logger.debug("Cannot stat: %s", path)
            info = None

        is_dir = info is not None and stat.S_ISDIR(info.st_mode)

        target: str | None = None
        if is_symlink:
            try:
                target = lossy_text(os.readlink(path))
            except OSError:
                logger.debug("Cannot read link target: %s", path)

        return cls(
            path=path,
            name=name,
            is_dir=is_dir,
            is_symlink=is_symlink,
            symlink_target=target,
            metadata=info,
        )

    @property
    def display_path(self) -> str:
        """Full path as printable text."""
        return lossy_text(str(self.path))

    @property
    def kind(self) -> EntryKind:
        """Kind tag of this entry."""
        if self.is_dir:
            return EntryKind.DIRECTORY
        if self.is_symlink:
            return EntryKind.LINK
        return EntryKind.FILE

    @property
    def size(self) -> int:
        """Size in bytes, 0 when metadata is missing."""
        return self.metadata.st_size if self.metadata is not None else 0

    @property
    def modified(self) -> float | None:
        """Modification timestamp, None when metadata is missing."""
        return self.metadata.st_mtime if self.metadata is not None else None

    @property
    def permissions(self) -> str:
        """Permission string in ``ls -l`` form (e.g. ``drwxr-xr-x``).

        The type character is ``d`` for directories, ``l`` for other
        symlinks and ``-`` otherwise; missing metadata yields
        ``----------``.
        """
        if self.metadata is None:
            return NO_PERMISSIONS

        if self.is_dir:
            file_type = "d"
        elif self.is_symlink:
            file_type = "l"
        else:
            file_type = "-"

        return file_type + stat.filemode(self.metadata.st_mode)[1:]

    @property
    def is_executable(self) -> bool:
        """Whether any execute bit is set on a non-directory."""
        if self.is_dir or self.metadata is None:
            return False
        return bool(self.metadata.st_mode & 0o111)

    @property
    def type_indicator(self) -> str:
        """Suffix in the style of ``ls -F``: ``/``, ``@``, ``*`` or empty."""
        if self.is_dir:
            return "/"
        if self.is_symlink:
            return "@"
        if self.is_executable:
            return "*"
        return ""


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """Choices affecting which entries appear and in what order.

    Attributes:
        show_hidden: Include names starting with a dot.
        dirs_only: List directories only.
        max_depth: Maximum expansion depth (None for unlimited).
        follow_symlinks: Expand symlinks that point at directories.
        full_path: Display full paths instead of names.
        pattern_filter: Include/exclude glob filter applied to names.
        sort_key: Sibling ordering key.
        reverse: Reverse the key ordering.
        dirs_first: List directories before other entries.
    """

    show_hidden: bool = False
    dirs_only: bool = False
    max_depth: int | None = None
    follow_symlinks: bool = False
    full_path: bool = False
    pattern_filter: PatternFilter = field(default_factory=PatternFilter)
    sort_key: SortKey = SortKey.NAME
    reverse: bool = False
    dirs_first: bool = False

    def __post_init__(self) -> None:
        """Validate traversal settings after initialization."""
        if self.max_depth is not None and self.max_depth < 0:
            msg = f"Max depth cannot be negative, got {self.max_depth}"
            raise ValueError(msg)


@dataclass(slots=True)
class TreeStats:
    """Running counts of listed directories and files (root excluded)."""

    directories: int = 0
    files: int = 0

    def record(self, entry: Entry) -> None:
        """Count one visited entry by its resolved kind."""
        if entry.is_dir:
            self.directories += 1
        else:
            self.files += 1

    @property
    def total(self) -> int:
        """Total number of counted entries."""
        return self.directories + self.files
