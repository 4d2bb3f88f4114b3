"""Matching-period lookup over hand-authored period tables."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence, TypeVar

from payweeks.errors import ConfigurationGapError

from .core import DatedPeriod

P = TypeVar("P", bound=DatedPeriod)


def find_period(periods: Sequence[P], on: date) -> Optional[P]:
    """Return the first period in table order covering ``on``, or None.

    Table order acts as the priority when ranges overlap.
    """
    for period in periods:
        if period.covers(on):
            return period
    return None


def require_period(periods: Sequence[P], on: date, table: str = "period") -> P:
    """Like :func:`find_period` but raise ConfigurationGapError when nothing matches."""
    period = find_period(periods, on)
    if period is None:
        raise ConfigurationGapError(table, on)
    return period
