"""Command line entry point printing the monthly payroll report."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from payweeks.config import load_settings
from payweeks.data.loaders import JSONTableSource
from payweeks.errors import PayweeksError
from payweeks.report import (
    compute_salary_groups,
    compute_work_dates,
    format_work_date,
    render_report,
)
from payweeks.utils.date import to_date

logger = logging.getLogger(__name__)


def _parse_today(value: str) -> date:
    try:
        return to_date(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payweeks",
        description="Print hours worked and salary due per month from period tables.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding template.json, holidays.json and salaries.json "
        "(default: $PAYWEEKS_DATA_DIR or the current directory)",
    )
    parser.add_argument(
        "--today",
        type=_parse_today,
        default=None,
        help="Report up to this date instead of the current date (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--dates",
        action="store_true",
        help="List every counted work date with its hours instead of the monthly report",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings().with_overrides(
        data_dir=args.data_dir, log_level="DEBUG" if args.verbose else None
    )
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    today = args.today or date.today()

    try:
        tables = JSONTableSource.from_settings(settings).load_tables()
        if args.dates:
            lines = [format_work_date(s) for s in compute_work_dates(tables, today)]
        else:
            lines = list(render_report(compute_salary_groups(tables, today)))
    except PayweeksError as exc:
        logger.error("%s", exc)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
