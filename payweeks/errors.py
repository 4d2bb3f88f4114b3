"""Error types raised by the payroll pipeline."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional


class PayweeksError(RuntimeError):
    """Base class for all payweeks failures."""


class ConfigurationGapError(PayweeksError):
    """Raised when no period of a table covers a date that must be covered."""

    def __init__(self, table: str, on: date):
        self.table = table
        self.on = on
        super().__init__(f"No {table} period covers {on.isoformat()}")


class MalformedConfigurationError(PayweeksError):
    """Raised when a configuration table is missing or cannot be parsed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
