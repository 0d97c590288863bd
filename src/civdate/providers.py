"""
civdate.providers
-----------------
Collaborators consulted by the derivation functions: a clock that supplies
"today" and a locale-aware provider of month/weekday names.
"""

from __future__ import annotations

import calendar as pycal
from dataclasses import dataclass
from typing import Literal, Protocol

from .core.errors import InvalidArgumentError
from .core.types import CalendarDate

NameUnit = Literal["month", "weekday"]
NameStyle = Literal["short", "long"]


class Clock(Protocol):
    def today(self) -> CalendarDate: ...


class SystemClock:
    """Reads the local system date on every call."""

    def today(self) -> CalendarDate:
        return CalendarDate.today()

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    date: CalendarDate

    def today(self) -> CalendarDate:
        return self.date


class NameProvider(Protocol):
    def name(self, d: CalendarDate, unit: NameUnit, style: NameStyle) -> str: ...


class CalendarNameProvider:
    """
    Names from the stdlib `calendar` module. These follow the process LC_TIME
    locale, so English unless the application has called locale.setlocale().
    """

    def name(self, d: CalendarDate, unit: NameUnit, style: NameStyle) -> str:
        if style not in ("short", "long"):
            raise InvalidArgumentError(f"style must be 'short' or 'long'; got {style!r}")
        if unit == "month":
            table = pycal.month_abbr if style == "short" else pycal.month_name
            return table[d.month]
        if unit == "weekday":
            table = pycal.day_abbr if style == "short" else pycal.day_name
            return table[d.weekday]
        raise InvalidArgumentError(f"unit must be 'month' or 'weekday'; got {unit!r}")


SYSTEM_CLOCK = SystemClock()
DEFAULT_NAMES = CalendarNameProvider()
