"""Weekly payroll reporting from period tables.

This package turns three hand-authored period tables (work schedule, holidays,
hourly salary rates) into a month-by-month report of hours worked and salary
due.

Key modules:
- periods: Dated period types and the matching-period lookup
- schedule: Week walker, holiday exclusion, hours and salary annotation
- data: Loading the period tables from JSON files
- report: Pipeline orchestration and report formatting
- cli: Command line entry point
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "periods",
    "schedule",
    "data",
    "report",
    "cli",
]
