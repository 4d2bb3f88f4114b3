"""Runtime settings resolved from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

DEFAULT_TEMPLATE_FILE = "template.json"
DEFAULT_HOLIDAYS_FILE = "holidays.json"
DEFAULT_SALARIES_FILE = "salaries.json"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    template_file: str = DEFAULT_TEMPLATE_FILE
    holidays_file: str = DEFAULT_HOLIDAYS_FILE
    salaries_file: str = DEFAULT_SALARIES_FILE
    log_level: str = DEFAULT_LOG_LEVEL

    def with_overrides(
        self, data_dir: Optional[Path] = None, log_level: Optional[str] = None
    ) -> "Settings":
        """Return a copy with command line overrides applied."""
        changes = {}
        if data_dir is not None:
            changes["data_dir"] = Path(data_dir)
        if log_level is not None:
            changes["log_level"] = log_level
        return replace(self, **changes)


def _log_level(name: str) -> str:
    """Validated level name; unknown names fall back to WARNING."""
    level = name.upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def load_settings() -> Settings:
    """Build settings from PAYWEEKS_* environment variables."""
    return Settings(
        data_dir=Path(os.getenv("PAYWEEKS_DATA_DIR", ".")),
        template_file=os.getenv("PAYWEEKS_TEMPLATE_FILE", DEFAULT_TEMPLATE_FILE),
        holidays_file=os.getenv("PAYWEEKS_HOLIDAYS_FILE", DEFAULT_HOLIDAYS_FILE),
        salaries_file=os.getenv("PAYWEEKS_SALARIES_FILE", DEFAULT_SALARIES_FILE),
        log_level=_log_level(os.getenv("PAYWEEKS_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
