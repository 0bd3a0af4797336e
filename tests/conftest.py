"""Shared fixtures for the Timeband test-suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from timeband.core.contracts.entry import Entry
from timeband.core.settings import load_settings

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Rebuild `Settings` around each test so patched env vars take effect."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


@pytest.fixture  # type: ignore[misc]
def rome_timeline() -> Path:
    """Path to a small YAML timeline mixing points, ranges, tags and eras."""
    return FIXTURES / "rome.yml"


@pytest.fixture  # type: ignore[misc]
def abc_points() -> list[Entry]:
    """Three untagged points at years 1, 5 and 9."""
    return [
        Entry.point("A", None, 1),
        Entry.point("B", None, 5),
        Entry.point("C", None, 9),
    ]
