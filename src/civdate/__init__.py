"""civdate public API.

Day-granularity date formatting, parsing and calendar arithmetic. Users should
mostly interact with the functions re-exported here.
"""

import logging

from .core.errors import (
    CivdateError,
    InvalidArgumentError,
    InvalidDateError,
    MalformedInputError,
    UnsupportedFormatError,
)
from .core.time import add_days, compare, days_in_month, from_jdn, is_leap_year, to_jdn, weekday
from .core.types import CalendarDate, FormatSpec
from .formatting import is_valid, parse, render
from .providers import CalendarNameProvider, Clock, FixedClock, NameProvider, SystemClock
from .api import (
    DEFAULT_FORMAT,
    FINANCIAL_YEAR_START_MONTH,
    today,
    current_date,
    yesterday,
    tomorrow,
    first_of_month,
    last_of_month,
    numeric_month,
    month_name,
    day_of_week_name,
    quarter_of,
    quarter_bounds,
    current_quarter,
    quarter_start,
    quarter_end,
    financial_year_span,
    financial_year,
    add_days_from_components,
    is_before,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CalendarDate",
    "FormatSpec",
    "CivdateError",
    "UnsupportedFormatError",
    "MalformedInputError",
    "InvalidDateError",
    "InvalidArgumentError",
    "Clock",
    "SystemClock",
    "FixedClock",
    "NameProvider",
    "CalendarNameProvider",
    "add_days",
    "compare",
    "days_in_month",
    "is_leap_year",
    "to_jdn",
    "from_jdn",
    "weekday",
    "render",
    "parse",
    "is_valid",
    "DEFAULT_FORMAT",
    "FINANCIAL_YEAR_START_MONTH",
    "today",
    "current_date",
    "yesterday",
    "tomorrow",
    "first_of_month",
    "last_of_month",
    "numeric_month",
    "month_name",
    "day_of_week_name",
    "quarter_of",
    "quarter_bounds",
    "current_quarter",
    "quarter_start",
    "quarter_end",
    "financial_year_span",
    "financial_year",
    "add_days_from_components",
    "is_before",
]
