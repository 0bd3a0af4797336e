"""Interval bucketer: partition entries into fixed-width year buckets.

Interval sizing
---------------
Given ``n`` entries spanning ``start`` (earliest start year) to ``end``
(latest year any entry reaches), the bucket width is::

    interval = max(1, (end - start) // (n * 3 // 2))

A year ``y`` falls into bucket ``(y - start) // interval``. Each entry is
assigned to the bucket of its start year, so indices never go negative.

Buckets are sparse: only indices holding at least one entry are present.
Each bucket is a plain ``heapq`` heap keyed by `bucket_key`, so entries that
share a bucket come back ordered by ``(label, tag, date)`` regardless of the
order they arrived in.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from timeband.core.contracts.entry import Entry, bucket_key, chronological_key
from timeband.core.errors import EmptyInputError, ZeroIntervalError
from timeband.core.settings import get_logger

logger = get_logger(__name__)

# (bucket_key, arrival sequence, entry); the sequence keeps exact duplicates
# from ever comparing Entry objects directly.
_HeapItem = tuple[tuple[str, tuple[bool, str], tuple[int, int, int]], int, Entry]


def compute_interval(start: int, end: int, count: int) -> int:
    """Return the bucket width for ``count`` entries spanning ``start..end``.

    Raises
    ------
    ZeroIntervalError
        If ``count * 3 // 2`` is zero or the span collapses to a single
        year. A span narrower than the divisor still gets width 1.
    """
    divisor = count * 3 // 2
    if divisor <= 0 or end <= start:
        raise ZeroIntervalError(start, end, count)
    return max(1, (end - start) // divisor)


def bucket_index(start: int, year: int, interval: int) -> int:
    """Return the index of the bucket holding ``year``."""
    return (year - start) // interval


@dataclass
class Buckets:
    """Sparse mapping from bucket index to the entries starting inside it."""

    start: int
    end: int
    interval: int
    heaps: dict[int, list[_HeapItem]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.heaps)

    def __contains__(self, index: object) -> bool:
        return index in self.heaps

    def indices(self) -> list[int]:
        """Return the occupied bucket indices in ascending order."""
        return sorted(self.heaps)

    def boundaries(self) -> range:
        """Return every bucket boundary year from ``start`` through ``end``."""
        return range(self.start, self.end + 1, self.interval)

    def push(self, entry: Entry) -> int:
        """Place ``entry`` in the bucket of its start year; return that index."""
        index = bucket_index(self.start, entry.start(), self.interval)
        heap = self.heaps.setdefault(index, [])
        heapq.heappush(heap, (bucket_key(entry), len(heap), entry))
        return index

    def ordered(self, index: int) -> list[Entry]:
        """Return a bucket's entries ascending by `bucket_key` (empty if absent)."""
        heap = list(self.heaps.get(index, ()))
        return [heapq.heappop(heap)[2] for _ in range(len(heap))]

    def entries(self) -> Iterator[Entry]:
        """Yield every bucketed entry, bucket by bucket."""
        for index in self.indices():
            yield from self.ordered(index)


def span(entries: Iterable[Entry]) -> tuple[int, int]:
    """Return ``(start, end)``: the earliest start and the latest year reached.

    ``end`` is taken over both ends of every entry, so a backward range whose
    start lies past every end still fits inside the span. For backward ranges
    this widens the span beyond the plain ``max(entry.end())`` and so changes
    the interval; for forward-only entries the two agree.
    """
    items = list(entries)
    if not items:
        raise EmptyInputError()
    start = min(e.start() for e in items)
    end = max(max(e.start(), e.end()) for e in items)
    return start, end


def bucket_entries(entries: Iterable[Entry]) -> Buckets:
    """Sort ``entries`` chronologically and partition them into buckets.

    Raises
    ------
    EmptyInputError
        If ``entries`` is empty.
    ZeroIntervalError
        If every entry sits on the same year.
    """
    ordered = sorted(entries, key=chronological_key)
    start, end = span(ordered)
    interval = compute_interval(start, end, len(ordered))

    buckets = Buckets(start=start, end=end, interval=interval)
    for entry in ordered:
        buckets.push(entry)

    logger.debug(
        "Bucketed %d entries over %d..%d (interval=%d) into %d buckets",
        len(ordered),
        start,
        end,
        interval,
        len(buckets),
    )
    return buckets


__all__ = ["Buckets", "bucket_entries", "bucket_index", "compute_interval", "span"]
