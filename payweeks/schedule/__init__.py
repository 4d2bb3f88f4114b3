# Re-export schedule components
from .annotate import (
    aggregate_months,
    annotate_hours,
    exclude_holidays,
    is_working_day,
    price_month,
)
from .core import DateWithHours, MonthAggregate, SalaryGroup
from .walker import derive_start_date, iter_work_dates
