from typing import Mapping, Union
from datetime import datetime, date
from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"
MONTH_FMT = "%Y.%m"

DateLike = Union[str, date, datetime, Timestamp, Mapping[str, int]]


def to_date(date_like: DateLike) -> date:
    """
    Convert a date-like value to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' strings and {year, month, day} mappings.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, Mapping):
        return structured_to_date(date_like)
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def structured_to_date(structured: Mapping[str, int]) -> date:
    """
    Build a date from a {year, month, day} mapping as found in the configuration tables.
    """
    try:
        year, month, day = structured["year"], structured["month"], structured["day"]
    except KeyError as exc:
        raise ValueError(f"Structured date is missing {exc.args[0]!r}: {dict(structured)!r}") from exc
    for value in (year, month, day):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Structured date fields must be integers: {dict(structured)!r}")
    return date(year, month, day)


def date_to_structured(dt: date) -> dict:
    return {"year": dt.year, "month": dt.month, "day": dt.day}


def date_value(dt: date) -> int:
    """
    Integer sort key year*10000 + month*100 + day; orders exactly like the dates themselves.
    """
    return dt.year * 10000 + dt.month * 100 + dt.day


def week_day(dt: date) -> int:
    """
    Day of week numbered 0=Sunday .. 6=Saturday, the convention of the work-schedule table.
    """
    return (dt.weekday() + 1) % 7


def add_week(dt: date) -> date:
    return dt + relativedelta(weeks=1)


def advance_to_week_day(dt: date, target: int) -> date:
    """
    First date on or after dt falling on the target week day (0=Sunday .. 6=Saturday).
    """
    if not 0 <= target <= 6:
        raise ValueError(f"Week day must be within 0..6, got {target!r}")
    while week_day(dt) != target:
        dt += relativedelta(days=1)
    return dt


def first_of_month(year: int, month: int) -> date:
    return date(year, month, 1)


def month_label(year: int, month: int) -> str:
    """
    Format a month as 'YYYY.MM'.
    """
    return first_of_month(year, month).strftime(MONTH_FMT)
