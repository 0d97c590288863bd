from __future__ import annotations
from typing import TYPE_CHECKING

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .types import CalendarDate


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule, defined for every integer year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

def days_in_month(year: int, month: int) -> int:
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidArgumentError(f"month must be an integer in 1..12; got {month!r}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def ymd_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian (year, month, day) to Julian Day Number (JDN)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_ymd(jdn: int) -> tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of ymd_to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: CalendarDate) -> int:
    return d.jdn

def from_jdn(jdn: int) -> CalendarDate:
    from .types import CalendarDate

    return CalendarDate.from_jdn(jdn)


def add_days(d: CalendarDate, n: int) -> CalendarDate:
    """Date n days after d (n may be negative). Rolls over months and years."""
    return d.add_days(n)

def compare(a: CalendarDate, b: CalendarDate) -> int:
    """-1, 0 or 1 by (year, month, day)."""
    ka = (a.year, a.month, a.day)
    kb = (b.year, b.month, b.day)
    return (ka > kb) - (ka < kb)

def weekday(d: CalendarDate) -> int:
    return d.weekday
