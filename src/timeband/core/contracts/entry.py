"""Entry: a labeled, optionally tagged year point or year range.

Internal vs wire representation
-------------------------------
Internally the date of an entry is a tagged sum type with two named variants,
`Point` and `Range`. On the wire (JSON/YAML) the union is *untagged*: a Point is
a bare integer year and a Range is a ``{start, end}`` mapping, so the shape
alone disambiguates. `_coerce_date` and `_wire_date` are the only bridge
between the two.

Orderings
---------
Entries carry two distinct orderings, each exposed as a named key function:

- `chronological_key`: start year only. Used to sort a timeline into
  chronological order; equal starts are left in input order.
- `bucket_key`: total, lexicographic by ``(label, tag, date)``. Used to order
  the entries that share one bucket. It is NOT a time order.

A `Range` may be backward (``start > end``); nothing here rejects it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from .date import Date


@dataclass(frozen=True)
class Point:
    """A single-year date."""

    date: Date


@dataclass(frozen=True)
class Range:
    """A start/end year span. Not required to be forward."""

    start: Date
    end: Date


def _year(value: Any) -> int:
    """Accept an int year or a `Date`; reject everything else (bools included)."""
    if isinstance(value, Date):
        return value.year
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer year, got {value!r}")
    return value


def _coerce_date(value: Any) -> Point | Range:
    """Convert a wire-shaped date (int or ``{start, end}``) into a variant."""
    if isinstance(value, Point | Range):
        return value
    if isinstance(value, Mapping):
        if set(value) != {"start", "end"}:
            raise ValueError(f"range dates need exactly 'start' and 'end', got {sorted(value)}")
        return Range(start=Date(_year(value["start"])), end=Date(_year(value["end"])))
    return Point(date=Date(_year(value)))


def _wire_date(value: Point | Range) -> int | dict[str, int]:
    """Convert a variant back into its untagged wire shape."""
    if isinstance(value, Range):
        return {"start": value.start.year, "end": value.end.year}
    return value.date.year


EntryDate = Annotated[
    Point | Range,
    PlainValidator(_coerce_date),
    PlainSerializer(_wire_date),
]


class Entry(BaseModel):
    """A single timeline record; immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    label: str
    tag: str | None = Field(default=None)
    date: EntryDate

    # ----- Constructors ------------------------------------------------------
    @classmethod
    def point(cls, label: str, tag: str | None, year: int | Date) -> Entry:
        """Build an entry occupying a single year."""
        return cls(label=label, tag=tag, date=Point(date=Date(_year(year))))

    @classmethod
    def range(cls, label: str, tag: str | None, start: int | Date, end: int | Date) -> Entry:
        """Build an entry spanning ``start`` to ``end``."""
        return cls(
            label=label,
            tag=tag,
            date=Range(start=Date(_year(start)), end=Date(_year(end))),
        )

    @classmethod
    def from_span(cls, label: str, tag: str | None, start: int, end: int) -> Entry:
        """Build a Point when ``start == end``, otherwise a Range."""
        if start == end:
            return cls.point(label, tag, start)
        return cls.range(label, tag, start, end)

    # ----- Accessors ---------------------------------------------------------
    def is_point(self) -> bool:
        return isinstance(self.date, Point)

    def start(self) -> int:
        """Return the point year, or the start year of a range."""
        if isinstance(self.date, Range):
            return self.date.start.year
        return self.date.date.year

    def end(self) -> int:
        """Return the point year, or the end year of a range."""
        if isinstance(self.date, Range):
            return self.date.end.year
        return self.date.date.year

    def __str__(self) -> str:
        prefix = f"({self.tag}) " if self.tag is not None else ""
        if isinstance(self.date, Range):
            return f"{prefix}{self.date.start} - {self.date.end}: {self.label}"
        return f"{prefix}{self.date.date}: {self.label}"


# ----- Orderings -------------------------------------------------------------
def chronological_key(entry: Entry) -> int:
    """Sort key placing entries in chronological order by start year."""
    return entry.start()


def bucket_key(entry: Entry) -> tuple[str, tuple[bool, str], tuple[int, int, int]]:
    """Total order ``(label, tag, date)`` for entries that share a bucket.

    An absent tag sorts before any tag, and a Point before any Range.
    """
    tag = (entry.tag is not None, entry.tag or "")
    if isinstance(entry.date, Range):
        date = (1, entry.date.start.year, entry.date.end.year)
    else:
        date = (0, entry.date.date.year, 0)
    return (entry.label, tag, date)


__all__ = ["Entry", "EntryDate", "Point", "Range", "bucket_key", "chronological_key"]
