"""Directory traversal module.

This module provides the entry model, name filtering, sibling sorting
and the walker that builds the in-memory tree.
"""

from canopy.tree.filtering import PatternFilter, PatternSyntaxError
from canopy.tree.models import Entry, EntryKind, SortKey, TraversalConfig, TreeStats
from canopy.tree.sorting import sort_entries
from canopy.tree.walker import walk

__all__ = [
    "Entry",
    "EntryKind",
    "PatternFilter",
    "PatternSyntaxError",
    "SortKey",
    "TraversalConfig",
    "TreeStats",
    "sort_entries",
    "walk",
]
