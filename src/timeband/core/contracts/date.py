"""Date: a signed year with CE/BCE presentation rules.

Non-negative years belong to the common era ("CE"); negative years are
displayed as their absolute value followed by "BCE". There is no year
below year granularity.

Example
-------
>>> str(Date(-44))
'44 BCE'
>>> Date(1990) - 5
Date(year=1985)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EraText = Literal["CE", "BCE"]


@dataclass(frozen=True, order=True)
class Date:
    """Immutable year value ordered by its signed year."""

    year: int

    def common_era(self) -> bool:
        """Return ``True`` if this date is in the common era."""
        return self.year >= 0

    def era_text(self) -> EraText:
        """Return "CE" for a common era date and "BCE" otherwise."""
        return "CE" if self.common_era() else "BCE"

    def abs_year(self) -> int:
        """Return the year without regard to its side of 0 CE."""
        return abs(self.year)

    def __str__(self) -> str:
        return f"{self.abs_year()} {self.era_text()}"

    def __add__(self, other: Date | int) -> Date:
        if isinstance(other, Date):
            return Date(self.year + other.year)
        if isinstance(other, int):
            return Date(self.year + other)
        return NotImplemented

    def __radd__(self, other: int) -> Date:
        if isinstance(other, int):
            return Date(other + self.year)
        return NotImplemented

    def __sub__(self, other: Date | int) -> Date:
        if isinstance(other, Date):
            return Date(self.year - other.year)
        if isinstance(other, int):
            return Date(self.year - other)
        return NotImplemented


__all__ = ["Date", "EraText"]
