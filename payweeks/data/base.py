"""
Base abstractions for configuration table loading.

Defines the interface for sources of the three period tables.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Protocol, runtime_checkable

from payweeks.periods.core import HolidayPeriod, SalaryPeriod, WorkPeriod


@dataclass
class PeriodTables:
    """The three period tables a report is computed from."""

    work: List[WorkPeriod]
    holidays: List[HolidayPeriod] = field(default_factory=list)
    salaries: List[SalaryPeriod] = field(default_factory=list)


@runtime_checkable
class TableSource(Protocol):
    """
    Protocol for period table sources.

    Any object able to produce the work, holiday and salary tables.
    """

    def load_work_periods(self) -> List[WorkPeriod]:
        """
        Load the work-schedule table.

        Returns:
            Work periods in table order
        """
        ...

    def load_holiday_periods(self) -> List[HolidayPeriod]:
        """
        Load the holiday table.

        Returns:
            Holiday periods in table order
        """
        ...

    def load_salary_periods(self) -> List[SalaryPeriod]:
        """
        Load the salary-rate table.

        Returns:
            Salary periods in table order
        """
        ...


class BaseTableSource(ABC):
    """
    Abstract base class for table sources.

    Provides :meth:`load_tables` on top of the three per-table loaders.
    """

    def load_tables(self) -> PeriodTables:
        """
        Load all three tables at once.

        Returns:
            PeriodTables bundle
        """
        return PeriodTables(
            work=self.load_work_periods(),
            holidays=self.load_holiday_periods(),
            salaries=self.load_salary_periods(),
        )

    @abstractmethod
    def load_work_periods(self) -> List[WorkPeriod]:
        """Load work periods (to be implemented by subclasses)."""
        pass

    @abstractmethod
    def load_holiday_periods(self) -> List[HolidayPeriod]:
        """Load holiday periods (to be implemented by subclasses)."""
        pass

    @abstractmethod
    def load_salary_periods(self) -> List[SalaryPeriod]:
        """Load salary periods (to be implemented by subclasses)."""
        pass
