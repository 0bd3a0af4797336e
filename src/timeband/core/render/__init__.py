"""Render entry points for Timeband.

Currently exposed:

- :func:`render_entries`: dispatch on :class:`RenderMode`. Only the text
  band renderer (``text.py``) is implemented; HTML fails explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from timeband.core.contracts.entry import Entry
from timeband.core.errors import UnsupportedRenderModeError

from .text import render_text


class RenderMode(str, Enum):
    """Output formats understood by :func:`render_entries`."""

    TEXT = "text"
    HTML = "html"


def render_entries(entries: Iterable[Entry], mode: RenderMode = RenderMode.TEXT) -> str:
    """Render ``entries`` in the requested ``mode``."""
    if mode is RenderMode.TEXT:
        return render_text(entries)
    raise UnsupportedRenderModeError(mode.value)


__all__ = ["RenderMode", "render_entries", "render_text"]
