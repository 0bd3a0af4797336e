"""Tag and label filters applied to a loaded timeline before rendering."""

from __future__ import annotations

from collections.abc import Iterable

from timeband.core.contracts.entry import Entry


def matches_tag(entry: Entry, needle: str | None) -> bool:
    """Return True if ``entry`` passes the tag filter.

    Untagged entries always pass; a tagged entry passes when its tag
    contains ``needle``.
    """
    if needle is None or entry.tag is None:
        return True
    return needle in entry.tag


def matches_label(entry: Entry, needle: str | None) -> bool:
    """Return True if ``entry``'s label contains ``needle`` (or no needle is set)."""
    return needle is None or needle in entry.label


def filter_entries(
    entries: Iterable[Entry],
    *,
    tag: str | None = None,
    search: str | None = None,
) -> list[Entry]:
    """Keep entries passing both the tag and the label filter, in input order."""
    return [e for e in entries if matches_tag(e, tag) and matches_label(e, search)]


__all__ = ["filter_entries", "matches_label", "matches_tag"]
