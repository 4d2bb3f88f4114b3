"""
Configuration table loading.

Provides the table source abstraction and the JSON implementation.
"""

from .base import BaseTableSource, PeriodTables, TableSource
from .loaders import (
    JSONTableSource,
    parse_holiday_period,
    parse_salary_period,
    parse_work_period,
)

__all__ = [
    # Base abstractions
    "TableSource",
    "BaseTableSource",
    "PeriodTables",
    # Concrete implementations
    "JSONTableSource",
    # Entry parsers
    "parse_work_period",
    "parse_holiday_period",
    "parse_salary_period",
]
