"""
Core data structures produced by the payroll pipeline.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List

from payweeks.periods.core import Number


@dataclass(frozen=True)
class DateWithHours:
    """One weekly sample: a work date and the hours worked that week."""

    date: date
    hours_worked: Number


@dataclass
class MonthAggregate:
    """Hours accumulated over one calendar month."""

    year: int
    month: int
    hours_worked: Number
    concerned_dates: List[date] = field(default_factory=list)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def accepts(self, sample: DateWithHours) -> bool:
        """True if the sample belongs to this aggregate's month."""
        return (sample.date.year, sample.date.month) == (self.year, self.month)

    def add(self, sample: DateWithHours) -> None:
        self.hours_worked += sample.hours_worked
        self.concerned_dates.append(sample.date)


@dataclass(frozen=True)
class SalaryGroup:
    """A month aggregate priced with the applicable hourly rate."""

    year: int
    month: int
    hours_worked: Number
    monthly_charge: Number
