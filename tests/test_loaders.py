from datetime import date

import pytest

from payweeks.config import Settings
from payweeks.data import JSONTableSource, PeriodTables, TableSource
from payweeks.errors import MalformedConfigurationError

TEMPLATE = [
    {
        "from": {"year": 2024, "month": 1, "day": 1},
        "to": {"year": 2024, "month": 1, "day": 17},
        "weekDay": 1,
        "hoursPerWeek": 20,
    },
    {"from": {"year": 2024, "month": 1, "day": 18}, "weekDay": 4, "hoursPerWeek": 30},
]
HOLIDAYS = [{"from": {"year": 2024, "month": 1, "day": 8}, "to": {"year": 2024, "month": 1, "day": 8}}]
SALARIES = [{"from": "2024-01-01", "to": None, "salaryPerHour": 25.5}]


def test_source_satisfies_protocol(tmp_path):
    assert isinstance(JSONTableSource(tmp_path), TableSource)


def test_load_tables(write_tables):
    tables = JSONTableSource(write_tables(TEMPLATE, HOLIDAYS, SALARIES)).load_tables()

    assert isinstance(tables, PeriodTables)
    first, second = tables.work
    assert (first.start, first.end, first.week_day, first.hours_per_week) == (
        date(2024, 1, 1),
        date(2024, 1, 17),
        1,
        20,
    )
    assert second.is_open_ended
    assert tables.holidays[0].start == tables.holidays[0].end == date(2024, 1, 8)
    assert tables.salaries[0].start == date(2024, 1, 1)
    assert tables.salaries[0].end is None
    assert tables.salaries[0].salary_per_hour == 25.5


def test_missing_holiday_file_means_no_holidays(write_tables):
    tables = JSONTableSource(write_tables(TEMPLATE, salaries=SALARIES)).load_tables()
    assert tables.holidays == []


def test_missing_salary_file_is_malformed(write_tables):
    source = JSONTableSource(write_tables(TEMPLATE, HOLIDAYS))
    with pytest.raises(MalformedConfigurationError, match="file not found") as excinfo:
        source.load_tables()
    assert excinfo.value.path.name == "salaries.json"


def test_invalid_json_is_malformed(write_tables):
    directory = write_tables(TEMPLATE, HOLIDAYS, SALARIES)
    (directory / "template.json").write_text("[{not json")
    with pytest.raises(MalformedConfigurationError, match="invalid JSON"):
        JSONTableSource(directory).load_work_periods()


def test_table_must_be_an_array(write_tables):
    directory = write_tables({"from": {"year": 2024, "month": 1, "day": 1}})
    with pytest.raises(MalformedConfigurationError, match="array"):
        JSONTableSource(directory).load_work_periods()


def test_empty_work_schedule_is_malformed(write_tables):
    with pytest.raises(MalformedConfigurationError, match="at least one period"):
        JSONTableSource(write_tables([])).load_work_periods()


@pytest.mark.parametrize(
    "entry",
    [
        {"weekDay": 1, "hoursPerWeek": 40},
        {"from": {"year": 2024, "month": 1}, "weekDay": 1, "hoursPerWeek": 40},
        {"from": {"year": 2024, "month": 13, "day": 1}, "weekDay": 1, "hoursPerWeek": 40},
        {"from": {"year": 2024, "month": 1, "day": 1}, "weekDay": 7, "hoursPerWeek": 40},
        {"from": {"year": 2024, "month": 1, "day": 1}, "weekDay": "1", "hoursPerWeek": 40},
        {"from": {"year": 2024, "month": 1, "day": 1}, "weekDay": 1},
        {"from": 20240101, "weekDay": 1, "hoursPerWeek": 40},
        {
            "from": {"year": 2024, "month": 2, "day": 1},
            "to": {"year": 2024, "month": 1, "day": 1},
            "weekDay": 1,
            "hoursPerWeek": 40,
        },
    ],
)
def test_invalid_work_entries_are_malformed(write_tables, entry):
    with pytest.raises(MalformedConfigurationError, match="entry 0"):
        JSONTableSource(write_tables([entry])).load_work_periods()


def test_from_settings_uses_configured_file_names(tmp_path):
    (tmp_path / "rates.json").write_text('[{"from": "2024-01-01", "salaryPerHour": 30}]')
    settings = Settings(data_dir=tmp_path, salaries_file="rates.json")
    salaries = JSONTableSource.from_settings(settings).load_salary_periods()
    assert [s.salary_per_hour for s in salaries] == [30]


def test_non_utf8_file_is_malformed(write_tables):
    directory = write_tables(TEMPLATE, HOLIDAYS, SALARIES)
    (directory / "template.json").write_bytes(b'[{"from": "\xff"}]')
    with pytest.raises(MalformedConfigurationError, match="UTF-8") as excinfo:
        JSONTableSource(directory).load_work_periods()
    assert excinfo.value.path.name == "template.json"


def test_unreadable_table_path_is_malformed(write_tables):
    directory = write_tables(TEMPLATE, salaries=SALARIES)
    (directory / "holidays.json").mkdir()
    with pytest.raises(MalformedConfigurationError, match="cannot read file") as excinfo:
        JSONTableSource(directory).load_holiday_periods()
    assert excinfo.value.path.name == "holidays.json"
