"""Unit tests for the `Date` year value and its era presentation."""

from __future__ import annotations

import dataclasses

import pytest

from timeband.core.contracts.date import Date


def test_common_era_boundary() -> None:
    """Year 0 and later are CE; negative years are BCE."""
    assert Date(0).common_era() and Date(0).era_text() == "CE"
    assert Date(2024).era_text() == "CE"
    assert not Date(-1).common_era() and Date(-1).era_text() == "BCE"


def test_display_uses_absolute_year() -> None:
    """BCE dates print their absolute value followed by the era."""
    assert str(Date(-44)) == "44 BCE"
    assert str(Date(1969)) == "1969 CE"
    assert Date(-753).abs_year() == 753


def test_arithmetic_with_offsets_and_dates() -> None:
    """Adding or subtracting ints or Dates yields new Dates."""
    d = Date(10)
    assert d + 5 == Date(15)
    assert 5 + d == Date(15)
    assert d - 20 == Date(-10)
    assert d + Date(-3) == Date(7)
    assert d - Date(4) == Date(6)
    assert d == Date(10), "operands must not be mutated"


def test_in_place_operators_rebind() -> None:
    """`+=` produces a new value instead of mutating the original."""
    original = Date(1)
    d = original
    d += 1
    assert d == Date(2) and original == Date(1)


def test_dates_are_frozen_and_ordered() -> None:
    """Dates are immutable and order by their signed year."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        Date(1).year = 2  # type: ignore[misc]
    assert sorted([Date(3), Date(-5), Date(0)]) == [Date(-5), Date(0), Date(3)]
