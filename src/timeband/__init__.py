"""Timeband package bootstrap.

Records discrete or ranged year-valued events and renders them as an ASCII
timeline banded by adaptive year intervals.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
