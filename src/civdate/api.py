"""
civdate.api
-----------
Calendar queries built on CalendarDate and the format engine: today and its
neighbours, month and quarter bounds, the April-March financial year, and
comparisons of formatted dates.

Anything that depends on "now" reads it from a Clock passed by the caller,
the system clock by default.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .core.time import days_in_month
from .core.types import CalendarDate, FormatLike, FormatSpec
from .formatting import parse, render
from .providers import DEFAULT_NAMES, SYSTEM_CLOCK, Clock, NameProvider

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = FormatSpec.DD_MM_YYYY
FINANCIAL_YEAR_START_MONTH = 4


def today(*, clock: Optional[Clock] = None) -> CalendarDate:
    d = (clock or SYSTEM_CLOCK).today()
    logger.debug("today resolved to %s", d)
    return d

def current_date(fmt: FormatLike = DEFAULT_FORMAT, *, clock: Optional[Clock] = None) -> str:
    return render(today(clock=clock), fmt)

def yesterday(fmt: FormatLike = DEFAULT_FORMAT, *, clock: Optional[Clock] = None) -> str:
    return render(today(clock=clock).add_days(-1), fmt)

def tomorrow(fmt: FormatLike = DEFAULT_FORMAT, *, clock: Optional[Clock] = None) -> str:
    return render(today(clock=clock).add_days(1), fmt)

# ============================================================
# Month
# ============================================================

def first_of_month(fmt: FormatLike = DEFAULT_FORMAT, *, clock: Optional[Clock] = None) -> str:
    t = today(clock=clock)
    return render(CalendarDate(t.year, t.month, 1), fmt)

def last_of_month(fmt: FormatLike = DEFAULT_FORMAT, *, clock: Optional[Clock] = None) -> str:
    t = today(clock=clock)
    return render(CalendarDate(t.year, t.month, days_in_month(t.year, t.month)), fmt)

def numeric_month(*, clock: Optional[Clock] = None) -> int:
    return today(clock=clock).month

def month_name(short: bool = False, *, clock: Optional[Clock] = None, names: Optional[NameProvider] = None) -> str:
    return (names or DEFAULT_NAMES).name(today(clock=clock), "month", "short" if short else "long")

def day_of_week_name(short: bool = False, *, clock: Optional[Clock] = None, names: Optional[NameProvider] = None) -> str:
    return (names or DEFAULT_NAMES).name(today(clock=clock), "weekday", "short" if short else "long")

# ============================================================
# Quarter / financial year
# ============================================================

def quarter_of(d: CalendarDate) -> int:
    return (d.month - 1) // 3 + 1

def quarter_bounds(d: CalendarDate) -> Tuple[CalendarDate, CalendarDate]:
    """First and last day of the calendar quarter containing d."""
    q = quarter_of(d)
    start_month = 3 * (q - 1) + 1
    end_month = 3 * q
    return (
        CalendarDate(d.year, start_month, 1),
        CalendarDate(d.year, end_month, days_in_month(d.year, end_month)),
    )

def current_quarter(*, clock: Optional[Clock] = None) -> int:
    return quarter_of(today(clock=clock))

def quarter_start(fmt: FormatLike = DEFAULT_FORMAT, *, clock: Optional[Clock] = None) -> str:
    return render(quarter_bounds(today(clock=clock))[0], fmt)

def quarter_end(fmt: FormatLike = DEFAULT_FORMAT, *, clock: Optional[Clock] = None) -> str:
    return render(quarter_bounds(today(clock=clock))[1], fmt)

def financial_year_span(d: CalendarDate) -> Tuple[int, int]:
    """(start_year, end_year) of the April-March financial year containing d."""
    if d.month >= FINANCIAL_YEAR_START_MONTH:
        return d.year, d.year + 1
    return d.year - 1, d.year

def financial_year(full_year: bool = False, *, clock: Optional[Clock] = None) -> str:
    """
    "24-25" style label, or "2024-25" when full_year is set. The end year is
    always the two-digit form.
    """
    start, end = financial_year_span(today(clock=clock))
    head = f"{start:04d}" if full_year else f"{start % 100:02d}"
    return f"{head}-{end % 100:02d}"

# ============================================================
# Explicit dates
# ============================================================

def add_days_from_components(day: int, month: int, year: int, n: int, fmt: FormatLike = DEFAULT_FORMAT) -> str:
    return render(CalendarDate.from_components(day, month, year).add_days(n), fmt)

def is_before(start_text: str, end_text: str, fmt: FormatLike = DEFAULT_FORMAT) -> bool:
    """True iff start strictly precedes end; both are parsed under fmt."""
    return parse(start_text, fmt) < parse(end_text, fmt)
