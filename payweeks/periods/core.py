"""
Dated period tables: work schedule, holidays and salary rates.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

Number = Union[int, float]


@dataclass(frozen=True, eq=False)
class DatedPeriod:
    """A date range [start, end], inclusive on both ends; end=None is open-ended."""

    start: date
    end: Optional[date] = None

    def __post_init__(self):
        if self.end is not None and self.end < self.start:
            raise ValueError(
                f"Period ends before it starts: {self.start.isoformat()} > {self.end.isoformat()}"
            )

    @property
    def is_open_ended(self) -> bool:
        return self.end is None

    def covers(self, on: date) -> bool:
        """True if the given date falls within the period."""
        if on < self.start:
            return False
        return self.end is None or on <= self.end


@dataclass(frozen=True, eq=False)
class WorkPeriod(DatedPeriod):
    """Weekly work cadence anchored on week_day (0=Sunday .. 6=Saturday)."""

    week_day: int = 0
    hours_per_week: Number = 0

    def __post_init__(self):
        super().__post_init__()
        if not 0 <= self.week_day <= 6:
            raise ValueError(f"week_day must be within 0..6, got {self.week_day!r}")


@dataclass(frozen=True, eq=False)
class HolidayPeriod(DatedPeriod):
    """Dates on which no work happens."""


@dataclass(frozen=True, eq=False)
class SalaryPeriod(DatedPeriod):
    """Hourly pay rate in force over the period."""

    salary_per_hour: Number = 0
