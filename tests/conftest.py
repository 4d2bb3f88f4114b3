import json
from datetime import date

import pytest

from payweeks.data.base import PeriodTables
from payweeks.periods.core import HolidayPeriod, SalaryPeriod, WorkPeriod


@pytest.fixture()
def single_period_tables():
    """Mondays from 2024-01-01, 40 hours a week, paid 25 an hour."""
    return PeriodTables(
        work=[WorkPeriod(start=date(2024, 1, 1), week_day=1, hours_per_week=40)],
        holidays=[],
        salaries=[SalaryPeriod(start=date(2024, 1, 1), salary_per_hour=25)],
    )


@pytest.fixture()
def holiday_on_second_week(single_period_tables):
    single_period_tables.holidays.append(
        HolidayPeriod(start=date(2024, 1, 8), end=date(2024, 1, 8))
    )
    return single_period_tables


@pytest.fixture()
def write_tables(tmp_path):
    def _write(template, holidays=None, salaries=None):
        (tmp_path / "template.json").write_text(json.dumps(template))
        if holidays is not None:
            (tmp_path / "holidays.json").write_text(json.dumps(holidays))
        if salaries is not None:
            (tmp_path / "salaries.json").write_text(json.dumps(salaries))
        return tmp_path

    return _write
