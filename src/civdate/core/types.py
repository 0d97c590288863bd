from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Literal, Tuple, Union

from .errors import InvalidDateError, UnsupportedFormatError
from .time import days_in_month, is_leap_year, jdn_to_ymd, ymd_to_jdn

Token = Literal["day", "month", "year"]
FormatLiteral = Literal["MM-DD-YYYY", "MM-DD-YY", "DD-MM-YYYY", "DD-MM-YY", "YYYY-MM-DD"]


def _is_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Timezone-naive Gregorian date with day granularity.

    Field order gives the (year, month, day) total order used by comparisons.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            v = getattr(self, name)
            if not _is_int(v):
                raise InvalidDateError(f"{name} must be an integer; got {v!r}")
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"month must be in 1..12; got {self.month}")
        last = days_in_month(self.year, self.month)
        if not 1 <= self.day <= last:
            raise InvalidDateError(
                f"day must be in 1..{last} for {self.year:04d}-{self.month:02d}; got {self.day}"
            )

    @classmethod
    def from_components(cls, day: int, month: int, year: int) -> "CalendarDate":
        return cls(year, month, day)

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "CalendarDate":
        return cls(*jdn_to_ymd(jdn))

    @classmethod
    def today(cls) -> "CalendarDate":
        """Current local day, read from the system clock on every call."""
        return cls.from_date(date.today())

    @property
    def jdn(self) -> int:
        return ymd_to_jdn(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        # 0=Mon..6=Sun like datetime.date.weekday(); JDN 0 fell on a Monday.
        return self.jdn % 7

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def add_days(self, n: int) -> "CalendarDate":
        return CalendarDate.from_jdn(self.jdn + n)

    def to_date(self) -> date:
        """Convert to datetime.date (only years 1..9999 are representable)."""
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


class FormatSpec(Enum):
    """The five supported layouts. Values are the public string literals."""
    MM_DD_YYYY = "MM-DD-YYYY"
    MM_DD_YY = "MM-DD-YY"
    DD_MM_YYYY = "DD-MM-YYYY"
    DD_MM_YY = "DD-MM-YY"
    YYYY_MM_DD = "YYYY-MM-DD"

    @property
    def separator(self) -> str:
        return "-"

    @property
    def order(self) -> Tuple[Token, Token, Token]:
        names = {"DD": "day", "MM": "month", "YY": "year", "YYYY": "year"}
        a, b, c = (names[t] for t in self.value.split(self.separator))
        return (a, b, c)

    @property
    def short_year(self) -> bool:
        return "YYYY" not in self.value

    @classmethod
    def coerce(cls, value: Union["FormatSpec", str]) -> "FormatSpec":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for spec in cls:
                if spec.value == value:
                    return spec
        supported = ", ".join(s.value for s in cls)
        raise UnsupportedFormatError(f"Unsupported format {value!r}. Use one of: {supported}")


FormatLike = Union[FormatSpec, FormatLiteral, str]
