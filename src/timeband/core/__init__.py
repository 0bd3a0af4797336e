"""Core package initializer for Timeband.

Downstream code imports from the submodules directly:
    from timeband.core.settings import settings, load_settings, Settings, get_logger
    from timeband.core.contracts.entry import Entry
"""

from __future__ import annotations

__all__ = ["__doc__"]
