"""Error hierarchy for loading, bucketing and rendering timelines.

Every failure is terminal: the CLI reports the condition and exits without
printing partial output. Core code raises; only `timeband.cli` catches.
"""

from __future__ import annotations

from pathlib import Path


class TimelineError(Exception):
    """Base class for all Timeband failures."""


class SourceUnavailableError(TimelineError):
    """Raised when a timeline file cannot be opened."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Could not open timeline file at {path}"
        super().__init__(f"{message}: {reason}" if reason else message)


class MalformedSourceError(TimelineError):
    """Raised when a timeline file does not decode into a list of entries."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Could not convert {path} into timeline entries: {detail}")


class EmptyInputError(TimelineError):
    """Raised when bucketing is attempted on zero entries."""

    def __init__(self) -> None:
        super().__init__("Cannot bucket an empty set of entries")


class ZeroIntervalError(TimelineError):
    """Raised when every entry sits on one year, leaving no span to divide."""

    def __init__(self, start: int, end: int, count: int) -> None:
        self.start = start
        self.end = end
        self.count = count
        super().__init__(
            f"Span {start}..{end} over {count} entries yields a zero-width interval"
        )


class UnsupportedRenderModeError(TimelineError):
    """Raised when a render mode has no implementation (e.g. HTML)."""

    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(f"Render mode {mode!r} is not implemented; use --text")


__all__ = [
    "TimelineError",
    "SourceUnavailableError",
    "MalformedSourceError",
    "EmptyInputError",
    "ZeroIntervalError",
    "UnsupportedRenderModeError",
]
