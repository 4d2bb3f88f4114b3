"""
Weekly work-date generation across work-schedule periods.
"""

import logging
from datetime import date
from typing import Iterator, Sequence

from payweeks.errors import ConfigurationGapError
from payweeks.periods.core import WorkPeriod
from payweeks.periods.lookup import find_period
from payweeks.utils.date import add_week, advance_to_week_day

logger = logging.getLogger(__name__)


def derive_start_date(work_periods: Sequence[WorkPeriod]) -> date:
    """
    Earliest week-day aligned start among all work periods.

    Each period's start is advanced to its own declared week day before the
    minimum is taken.
    """
    if not work_periods:
        raise ValueError("work_periods must contain at least one period")
    aligned = [
        advance_to_week_day(period.start, period.week_day) for period in work_periods
    ]
    start = min(aligned)
    logger.debug("Derived start date %s from %d work periods", start, len(work_periods))
    return start


def iter_work_dates(
    work_periods: Sequence[WorkPeriod], start: date, today: date
) -> Iterator[date]:
    """
    Yield weekly work dates from ``start`` up to and including ``today``.

    Within a period the walk steps by one week. When the next step lands in a
    different period, the walk jumps to that period's start instead, so the
    cadence re-anchors on the new period.

    Raises:
        ConfigurationGapError: if no period covers the date one week ahead.
    """
    current = start
    while current <= today:
        yield current

        current_period = find_period(work_periods, current)
        next_week = add_week(current)
        next_period = find_period(work_periods, next_week)
        if next_period is None:
            raise ConfigurationGapError("work", next_week)

        if next_period is current_period:
            current = next_week
        elif next_period.start > current:
            logger.debug(
                "Re-anchoring from %s to period start %s", current, next_period.start
            )
            current = next_period.start
        else:
            # Overlapping tables: the matching period started earlier
            logger.warning(
                "Period starting %s overlaps %s; keeping weekly cadence",
                next_period.start,
                current,
            )
            current = next_week
