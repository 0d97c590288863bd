# tests/test_api.py

from datetime import date
from unittest.mock import patch

import pytest

import civdate
from civdate import (
    CalendarDate,
    CalendarNameProvider,
    FixedClock,
    InvalidArgumentError,
    InvalidDateError,
    MalformedInputError,
    SystemClock,
    UnsupportedFormatError,
)


def clock_at(year, month, day):
    return FixedClock(CalendarDate(year, month, day))

@pytest.fixture
def mock_system_date():
    """Pin datetime.date.today() as seen by the system clock to 2024-03-01."""
    with patch("civdate.core.types.date") as mock:
        mock.today.return_value = date(2024, 3, 1)
        yield mock


def test_system_clock_reads_every_call(mock_system_date):
    clock = SystemClock()
    assert clock.today() == CalendarDate(2024, 3, 1)
    mock_system_date.today.return_value = date(2024, 3, 2)
    assert clock.today() == CalendarDate(2024, 3, 2)

def test_default_clock_is_system_clock(mock_system_date):
    assert civdate.today() == CalendarDate(2024, 3, 1)
    assert civdate.current_date() == "01-03-2024"
    assert civdate.yesterday() == "29-02-2024"

def test_current_date_formats():
    clock = clock_at(2025, 7, 4)
    assert civdate.current_date(clock=clock) == "04-07-2025"
    assert civdate.current_date("MM-DD-YY", clock=clock) == "07-04-25"
    assert civdate.current_date(civdate.FormatSpec.YYYY_MM_DD, clock=clock) == "2025-07-04"

def test_yesterday_tomorrow_cross_year():
    clock = clock_at(2023, 12, 31)
    assert civdate.tomorrow(clock=clock) == "01-01-2024"
    assert civdate.yesterday(clock=clock) == "30-12-2023"
    clock = clock_at(2024, 1, 1)
    assert civdate.yesterday("YYYY-MM-DD", clock=clock) == "2023-12-31"

def test_tomorrow_into_leap_day():
    assert civdate.tomorrow("YYYY-MM-DD", clock=clock_at(2024, 2, 28)) == "2024-02-29"
    assert civdate.tomorrow("YYYY-MM-DD", clock=clock_at(2023, 2, 28)) == "2023-03-01"

def test_month_bounds():
    clock = clock_at(2024, 2, 14)
    assert civdate.first_of_month(clock=clock) == "01-02-2024"
    assert civdate.last_of_month(clock=clock) == "29-02-2024"
    clock = clock_at(2023, 4, 30)
    assert civdate.last_of_month("MM-DD-YYYY", clock=clock) == "04-30-2023"
    assert civdate.first_of_month("YYYY-MM-DD", clock=clock) == "2023-04-01"

def test_numeric_month():
    assert civdate.numeric_month(clock=clock_at(2025, 11, 3)) == 11

def test_month_and_weekday_names():
    # 2025-07-14 is a Monday
    clock = clock_at(2025, 7, 14)
    assert civdate.month_name(clock=clock) == CalendarNameProvider().name(clock.today(), "month", "long")
    assert civdate.month_name(True, clock=clock) == CalendarNameProvider().name(clock.today(), "month", "short")
    assert civdate.day_of_week_name(clock=clock) == CalendarNameProvider().name(clock.today(), "weekday", "long")

def test_default_names_are_english_in_c_locale():
    clock = clock_at(2025, 7, 14)
    names = CalendarNameProvider()
    assert names.name(clock.today(), "month", "long") == "July"
    assert civdate.day_of_week_name(clock=clock) == "Monday"
    assert civdate.day_of_week_name(True, clock=clock) == "Mon"
    assert civdate.month_name(True, clock=clock) == "Jul"

def test_name_provider_is_consulted():
    calls = []

    class Recorder:
        def name(self, d, unit, style):
            calls.append((d, unit, style))
            return f"{unit}:{style}"

    clock = clock_at(2025, 9, 1)
    assert civdate.month_name(clock=clock, names=Recorder()) == "month:long"
    assert civdate.day_of_week_name(True, clock=clock, names=Recorder()) == "weekday:short"
    assert calls == [
        (CalendarDate(2025, 9, 1), "month", "long"),
        (CalendarDate(2025, 9, 1), "weekday", "short"),
    ]

def test_name_provider_rejects_unknown_unit():
    with pytest.raises(InvalidArgumentError):
        CalendarNameProvider().name(CalendarDate(2025, 1, 1), "year", "long")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        CalendarNameProvider().name(CalendarDate(2025, 1, 1), "month", "narrow")  # type: ignore[arg-type]

@pytest.mark.parametrize(
    "month, quarter",
    [(1, 1), (2, 1), (3, 1), (4, 2), (5, 2), (6, 2), (7, 3), (8, 3), (9, 3), (10, 4), (11, 4), (12, 4)],
)
def test_current_quarter(month, quarter):
    assert civdate.current_quarter(clock=clock_at(2025, month, 1)) == quarter

def test_quarter_bounds_q3():
    clock = clock_at(2025, 7, 20)
    assert civdate.quarter_start("YYYY-MM-DD", clock=clock) == "2025-07-01"
    assert civdate.quarter_end("YYYY-MM-DD", clock=clock) == "2025-09-30"
    assert civdate.quarter_start(clock=clock) == "01-07-2025"
    assert civdate.quarter_end("MM-DD-YY", clock=clock) == "09-30-25"

def test_quarter_bounds_each_quarter():
    assert civdate.quarter_bounds(CalendarDate(2024, 2, 10)) == (CalendarDate(2024, 1, 1), CalendarDate(2024, 3, 31))
    assert civdate.quarter_bounds(CalendarDate(2024, 6, 30)) == (CalendarDate(2024, 4, 1), CalendarDate(2024, 6, 30))
    assert civdate.quarter_bounds(CalendarDate(2024, 12, 1)) == (CalendarDate(2024, 10, 1), CalendarDate(2024, 12, 31))

@pytest.mark.parametrize(
    "today, short, full",
    [
        ((2025, 3, 15), "24-25", "2024-25"),
        ((2025, 4, 1), "25-26", "2025-26"),
        ((2025, 3, 31), "24-25", "2024-25"),
        ((2025, 12, 31), "25-26", "2025-26"),
        ((2000, 1, 1), "99-00", "1999-00"),
        ((2099, 6, 1), "99-00", "2099-00"),
    ],
)
def test_financial_year(today, short, full):
    clock = clock_at(*today)
    assert civdate.financial_year(clock=clock) == short
    assert civdate.financial_year(True, clock=clock) == full

def test_financial_year_span():
    assert civdate.financial_year_span(CalendarDate(2025, 3, 15)) == (2024, 2025)
    assert civdate.financial_year_span(CalendarDate(2025, 4, 1)) == (2025, 2026)

def test_add_days_from_components():
    assert civdate.add_days_from_components(28, 2, 2024, 1) == "29-02-2024"
    assert civdate.add_days_from_components(31, 12, 2023, 1, "YYYY-MM-DD") == "2024-01-01"
    assert civdate.add_days_from_components(1, 3, 2024, -1, "MM-DD-YY") == "02-29-24"
    assert civdate.add_days_from_components(15, 6, 2024, 0) == "15-06-2024"

def test_add_days_from_components_rejects_invalid_start():
    with pytest.raises(InvalidDateError):
        civdate.add_days_from_components(31, 4, 2024, 1)
    with pytest.raises(UnsupportedFormatError):
        civdate.add_days_from_components(1, 4, 2024, 1, "D-M-Y")

def test_is_before():
    assert civdate.is_before("01-01-2024", "02-01-2024", "DD-MM-YYYY")
    assert not civdate.is_before("02-01-2024", "01-01-2024", "DD-MM-YYYY")
    assert not civdate.is_before("01-01-2024", "01-01-2024", "DD-MM-YYYY")
    assert civdate.is_before("12-31-23", "01-01-24", "MM-DD-YY")
    assert civdate.is_before("01-01-2024", "02-01-2024")

def test_is_before_propagates_parse_errors():
    with pytest.raises(InvalidDateError):
        civdate.is_before("31-02-2024", "01-03-2024", "DD-MM-YYYY")
    with pytest.raises(MalformedInputError):
        civdate.is_before("2024/01/01", "01-03-2024", "DD-MM-YYYY")
