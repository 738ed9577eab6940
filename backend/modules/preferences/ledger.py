"""
Ordered-set-with-cap rule for preference lists.

A preference list behaves like a set for membership and like a queue for
eviction: new items go to the end, items already present keep their
position, and when the list grows past the cap the oldest entries go
first. List position is the only recency signal.

The same rule runs inside Postgres (merge_preference_items in
migrations/001_initial_schema.sql) so concurrent merges stay atomic per row.
"""

from typing import Iterable

DEFAULT_CAP = 100


def normalize_items(items: Iterable[str]) -> list[str]:
    """Strip whitespace, drop blanks and in-batch duplicates, keep first occurrence."""
    cleaned = (item.strip() for item in items if item is not None)
    return list(dict.fromkeys(item for item in cleaned if item))


def merge_bounded(
    existing: Iterable[str],
    new_items: Iterable[str],
    cap: int = DEFAULT_CAP,
) -> list[str]:
    """
    Union ``new_items`` into ``existing`` and keep the most recent ``cap`` entries.

    Args:
        existing: Current list, oldest first
        new_items: Items to add, in the order they were provided
        cap: Maximum list length

    Returns:
        The merged list, oldest first, without duplicates
    """
    if cap < 0:
        raise ValueError("cap must be non-negative")

    # dict keeps insertion order and gives O(1) membership
    merged: dict[str, None] = dict.fromkeys(existing)
    for item in normalize_items(new_items):
        merged.setdefault(item, None)

    result = list(merged)
    if len(result) > cap:
        result = result[len(result) - cap:]
    return result
