"""
Concrete table source implementations.

Provides the JSON loader reading the three period tables from a directory.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

from payweeks.config import Settings
from payweeks.errors import MalformedConfigurationError
from payweeks.periods.core import HolidayPeriod, Number, SalaryPeriod, WorkPeriod
from payweeks.utils.date import to_date

from .base import BaseTableSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parse_date(value: Any, field_name: str) -> date:
    if not isinstance(value, (dict, str)):
        raise ValueError(f"'{field_name}' must be a {{year, month, day}} object or a date string")
    return to_date(value)


def _parse_number(entry: Dict, field_name: str) -> Number:
    value = entry.get(field_name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{field_name}' must be a number, got {value!r}")
    return value


def _parse_bounds(entry: Dict) -> Dict[str, Optional[date]]:
    if "from" not in entry:
        raise ValueError("missing 'from'")
    end = entry.get("to")
    return {
        "start": _parse_date(entry["from"], "from"),
        "end": None if end is None else _parse_date(end, "to"),
    }


def parse_work_period(entry: Dict) -> WorkPeriod:
    week_day = entry.get("weekDay")
    if isinstance(week_day, bool) or not isinstance(week_day, int):
        raise ValueError(f"'weekDay' must be an integer, got {week_day!r}")
    return WorkPeriod(
        **_parse_bounds(entry),
        week_day=week_day,
        hours_per_week=_parse_number(entry, "hoursPerWeek"),
    )


def parse_holiday_period(entry: Dict) -> HolidayPeriod:
    return HolidayPeriod(**_parse_bounds(entry))


def parse_salary_period(entry: Dict) -> SalaryPeriod:
    return SalaryPeriod(
        **_parse_bounds(entry),
        salary_per_hour=_parse_number(entry, "salaryPerHour"),
    )


class JSONTableSource(BaseTableSource):
    """
    Load period tables from JSON files.

    Each file holds a JSON array of period objects, consulted in file order.
    """

    def __init__(
        self,
        data_directory: Path,
        template_file: str = "template.json",
        holidays_file: str = "holidays.json",
        salaries_file: str = "salaries.json",
    ):
        """
        Initialize JSON table source.

        Args:
            data_directory: Directory containing the JSON tables
            template_file: Work-schedule table file name
            holidays_file: Holiday table file name (optional on disk)
            salaries_file: Salary-rate table file name
        """
        self.data_directory = Path(data_directory)
        self.template_file = template_file
        self.holidays_file = holidays_file
        self.salaries_file = salaries_file

    @classmethod
    def from_settings(cls, settings: Settings) -> "JSONTableSource":
        return cls(
            data_directory=settings.data_dir,
            template_file=settings.template_file,
            holidays_file=settings.holidays_file,
            salaries_file=settings.salaries_file,
        )

    def _load_json_file(self, filepath: Path) -> Any:
        """
        Load and parse JSON file.

        Args:
            filepath: Path to JSON file

        Returns:
            Parsed JSON data
        """
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as exc:
            raise MalformedConfigurationError("file not found", filepath) from exc
        except OSError as exc:
            raise MalformedConfigurationError(f"cannot read file: {exc.strerror}", filepath) from exc
        except UnicodeDecodeError as exc:
            raise MalformedConfigurationError(f"not valid UTF-8: {exc}", filepath) from exc
        except json.JSONDecodeError as exc:
            raise MalformedConfigurationError(f"invalid JSON: {exc}", filepath) from exc

    def _load_table(
        self, filename: str, parse: Callable[[Dict], T], required: bool = True
    ) -> List[T]:
        """
        Load one table and parse each entry.

        Args:
            filename: File name relative to the data directory
            parse: Entry parser
            required: Whether a missing file is an error

        Returns:
            Parsed periods in file order
        """
        filepath = self.data_directory / filename
        if not required and not filepath.exists():
            logger.debug("%s not found, using an empty table", filepath)
            return []

        data = self._load_json_file(filepath)
        if not isinstance(data, list):
            raise MalformedConfigurationError("expected a JSON array of periods", filepath)

        periods = []
        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                raise MalformedConfigurationError(
                    f"entry {index} must be an object", filepath
                )
            try:
                periods.append(parse(entry))
            except (ValueError, TypeError) as exc:
                raise MalformedConfigurationError(f"entry {index}: {exc}", filepath) from exc

        logger.debug("Loaded %d periods from %s", len(periods), filepath)
        return periods

    def load_work_periods(self) -> List[WorkPeriod]:
        periods = self._load_table(self.template_file, parse_work_period)
        if not periods:
            raise MalformedConfigurationError(
                "work schedule must contain at least one period",
                self.data_directory / self.template_file,
            )
        return periods

    def load_holiday_periods(self) -> List[HolidayPeriod]:
        return self._load_table(self.holidays_file, parse_holiday_period, required=False)

    def load_salary_periods(self) -> List[SalaryPeriod]:
        return self._load_table(self.salaries_file, parse_salary_period)
