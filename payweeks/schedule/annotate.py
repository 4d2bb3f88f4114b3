"""Holiday exclusion, hours and salary annotation, month aggregation."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator, Optional, Sequence

from payweeks.periods.core import HolidayPeriod, SalaryPeriod, WorkPeriod
from payweeks.periods.lookup import find_period, require_period

from .core import DateWithHours, MonthAggregate, SalaryGroup


def is_working_day(holiday_periods: Sequence[HolidayPeriod], on: date) -> bool:
    """True unless some holiday period covers ``on``."""
    return find_period(holiday_periods, on) is None


def exclude_holidays(
    holiday_periods: Sequence[HolidayPeriod], dates: Iterable[date]
) -> Iterator[date]:
    return (d for d in dates if is_working_day(holiday_periods, d))


def annotate_hours(work_periods: Sequence[WorkPeriod], on: date) -> DateWithHours:
    """Attach the weekly hours of the work period covering ``on``."""
    period = require_period(work_periods, on, table="work")
    return DateWithHours(date=on, hours_worked=period.hours_per_week)


def aggregate_months(samples: Iterable[DateWithHours]) -> Iterator[MonthAggregate]:
    """Sum hours per calendar month in a single forward pass.

    The input must already be in chronological order; a month that shows up
    in two separate runs produces two aggregates.
    """
    current: Optional[MonthAggregate] = None
    for sample in samples:
        if current is not None and current.accepts(sample):
            current.add(sample)
            continue
        if current is not None:
            yield current
        current = MonthAggregate(
            year=sample.date.year,
            month=sample.date.month,
            hours_worked=sample.hours_worked,
            concerned_dates=[sample.date],
        )
    if current is not None:
        yield current


def price_month(
    salary_periods: Sequence[SalaryPeriod], aggregate: MonthAggregate
) -> SalaryGroup:
    """Price a month with the hourly rate in force on its first day."""
    period = require_period(salary_periods, aggregate.first_day, table="salary")
    return SalaryGroup(
        year=aggregate.year,
        month=aggregate.month,
        hours_worked=aggregate.hours_worked,
        monthly_charge=aggregate.hours_worked * period.salary_per_hour,
    )
