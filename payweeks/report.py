"""Pipeline orchestration and the monthly report formatter."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Iterator, List

from payweeks.data.base import PeriodTables
from payweeks.periods.core import Number
from payweeks.schedule.annotate import (
    aggregate_months,
    annotate_hours,
    exclude_holidays,
    price_month,
)
from payweeks.schedule.core import DateWithHours, SalaryGroup
from payweeks.schedule.walker import derive_start_date, iter_work_dates
from payweeks.utils.date import month_label

logger = logging.getLogger(__name__)

DECIMALS = 2


def compute_work_dates(tables: PeriodTables, today: date) -> List[DateWithHours]:
    """Walked, holiday-filtered work dates with their weekly hours."""
    start = derive_start_date(tables.work)
    dates = exclude_holidays(tables.holidays, iter_work_dates(tables.work, start, today))
    samples = [annotate_hours(tables.work, d) for d in dates]
    logger.debug("%d work dates between %s and %s", len(samples), start, today)
    return samples


def compute_salary_groups(tables: PeriodTables, today: date) -> List[SalaryGroup]:
    """Run the whole pipeline and return one priced group per month."""
    samples = compute_work_dates(tables, today)
    return [price_month(tables.salaries, agg) for agg in aggregate_months(samples)]


def format_number(value: Number) -> str:
    """Render a number rounded to two decimals, without a trailing '.0'."""
    if isinstance(value, float):
        value = round(value, DECIMALS)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_line(group: SalaryGroup) -> str:
    return "\t".join(
        (
            month_label(group.year, group.month),
            format_number(group.hours_worked),
            format_number(group.monthly_charge),
        )
    )


def format_work_date(sample: DateWithHours) -> str:
    return f"{sample.date.isoformat()}\t{format_number(sample.hours_worked)}"


def render_report(groups: Iterable[SalaryGroup]) -> Iterator[str]:
    for group in groups:
        yield format_line(group)
