# Re-export period table components
from .core import DatedPeriod, HolidayPeriod, Number, SalaryPeriod, WorkPeriod
from .lookup import find_period, require_period

__all__ = [
    "DatedPeriod",
    "WorkPeriod",
    "HolidayPeriod",
    "SalaryPeriod",
    "Number",
    "find_period",
    "require_period",
]
