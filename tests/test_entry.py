"""Tests for the `Entry` contract: variants, display, wire shape and orderings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from timeband.core.contracts.date import Date
from timeband.core.contracts.entry import (
    Entry,
    Point,
    Range,
    bucket_key,
    chronological_key,
)


def test_point_and_range_constructors() -> None:
    """`point` and `range` build the matching internal variant."""
    p = Entry.point("test", "tag", 0)
    r = Entry.range("test", "tag", 0, 1)
    assert p.date == Point(date=Date(0)) and p.is_point()
    assert r.date == Range(start=Date(0), end=Date(1)) and not r.is_point()
    assert (p.start(), p.end()) == (0, 0)
    assert (r.start(), r.end()) == (0, 1)


def test_from_span_picks_variant() -> None:
    """Equal bounds give a Point; different bounds give a Range."""
    assert Entry.from_span("x", None, 7, 7).is_point()
    assert Entry.from_span("x", None, 7, 8).date == Range(start=Date(7), end=Date(8))


def test_backward_range_is_permitted() -> None:
    """A range whose start is after its end is kept as-is."""
    r = Entry.range("reverse", None, 10, 2)
    assert (r.start(), r.end()) == (10, 2)


def test_display_with_and_without_tag() -> None:
    """Tags are shown in parentheses; ranges show both bounds with eras."""
    assert str(Entry.range("test", "test", 0, 1)) == "(test) 0 CE - 1 CE: test"
    assert str(Entry.range("test", None, 0, 1)) == "0 CE - 1 CE: test"
    assert str(Entry.point("test", "test", 0)) == "(test) 0 CE: test"
    assert str(Entry.point("test", None, 0)) == "0 CE: test"
    assert str(Entry.range("Caesar", None, -100, -44)) == "100 BCE - 44 BCE: Caesar"


def test_wire_shape_disambiguates_variants() -> None:
    """A bare int is a Point and a start/end mapping is a Range."""
    p = Entry.model_validate({"label": "a", "date": -753})
    r = Entry.model_validate({"label": "b", "tag": "t", "date": {"start": 1, "end": 2}})
    assert p == Entry.point("a", None, -753)
    assert r == Entry.range("b", "t", 1, 2)
    assert p.model_dump() == {"label": "a", "tag": None, "date": -753}
    assert r.model_dump() == {"label": "b", "tag": "t", "date": {"start": 1, "end": 2}}


@pytest.mark.parametrize(  # type: ignore[misc]
    "date",
    ["1990", 1.5, True, {"start": 1}, {"start": 1, "end": 2, "extra": 3}, None],
)
def test_invalid_wire_dates_are_rejected(date: object) -> None:
    """Anything that is not an int year or a start/end mapping fails validation."""
    with pytest.raises(ValidationError):
        Entry.model_validate({"label": "bad", "date": date})


def test_entries_are_immutable() -> None:
    """Assigning to a field of a constructed entry raises."""
    e = Entry.point("x", None, 1)
    with pytest.raises(ValidationError):
        e.label = "y"  # type: ignore[misc]


def test_chronological_key_uses_start_only() -> None:
    """Points and ranges both sort by their start year; ties keep input order."""
    late = Entry.point("late", None, 50)
    tie_a = Entry.range("zzz", None, 10, 90)
    tie_b = Entry.point("aaa", None, 10)
    early = Entry.range("early", None, -5, 100)
    ordered = sorted([late, tie_a, tie_b, early], key=chronological_key)
    assert ordered == [early, tie_a, tie_b, late]


def test_bucket_key_orders_by_label_then_tag_then_date() -> None:
    """Bucket order ignores time unless label and tag tie."""
    entries = [
        Entry.range("same", "b", 0, 5),
        Entry.point("same", "b", 9),
        Entry.point("same", None, 100),
        Entry.point("same", "a", 3),
        Entry.point("alpha", "z", 2000),
        Entry.range("same", "b", -1, 5),
    ]
    ordered = sorted(entries, key=bucket_key)
    assert [str(e) for e in ordered] == [
        "(z) 2000 CE: alpha",
        "100 CE: same",
        "(a) 3 CE: same",
        "(b) 9 CE: same",
        "(b) 1 BCE - 5 CE: same",
        "(b) 0 CE - 5 CE: same",
    ]
