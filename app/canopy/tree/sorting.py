"""Ordering of sibling entries."""

from functools import cmp_to_key

from canopy.tree.models import Entry, SortKey, TraversalConfig


def _compare_key(a: Entry, b: Entry, key: SortKey) -> int:
    """Compare two entries by the sort key alone."""
    if key == SortKey.NAME:
        left: object = a.name.lower()
        right: object = b.name.lower()
    elif key == SortKey.SIZE:
        left, right = a.size, b.size
    elif key == SortKey.TIME:
        a_time, b_time = a.modified, b.modified
        # Entries without a timestamp go after entries with one
        if a_time is None or b_time is None:
            return (a_time is None) - (b_time is None)
        left, right = a_time, b_time
    else:
        return 0

    return (left > right) - (left < right)  # type: ignore[operator]


def sort_entries(
    entries: list[Entry],
    key: SortKey,
    *,
    reverse: bool = False,
    dirs_first: bool = False,
) -> None:
    """Sort sibling entries in place.

    With ``dirs_first`` every directory precedes every non-directory, and
    that split is not affected by ``reverse``: only the key comparison is
    inverted. Key NONE without ``dirs_first`` leaves the order untouched.
    The sort is stable, so equal entries keep their enumeration order.

    Args:
        entries: Sibling entries to reorder.
        key: Attribute to order by.
        reverse: Invert the key ordering.
        dirs_first: Place directories before other entries.
    """
    if key == SortKey.NONE and not dirs_first:
        return

    def compare(a: Entry, b: Entry) -> int:
        if dirs_first and a.is_dir != b.is_dir:
            return -1 if a.is_dir else 1
        result = _compare_key(a, b, key)
        return -result if reverse else result

    entries.sort(key=cmp_to_key(compare))


def sort_for_config(entries: list[Entry], config: TraversalConfig) -> None:
    """Sort sibling entries in place using a traversal configuration."""
    sort_entries(
        entries,
        config.sort_key,
        reverse=config.reverse,
        dirs_first=config.dirs_first,
    )
