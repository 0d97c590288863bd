from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, Optional

import civdate
from civdate.core.errors import CivdateError
from civdate.core.types import CalendarDate, FormatSpec
from civdate.providers import Clock, FixedClock

logger = logging.getLogger(__name__)

_FORMATS = [s.value for s in FormatSpec]


def _parse_ymd(s: str) -> CalendarDate:
    try:
        return civdate.parse(s, FormatSpec.YYYY_MM_DD)
    except CivdateError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _bool(v: bool) -> str:
    return "true" if v else "false"


def _add_format(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-f", "--format",
        dest="fmt",
        choices=_FORMATS,
        default=civdate.DEFAULT_FORMAT.value,
        help=f"date layout (default: {civdate.DEFAULT_FORMAT.value})",
    )


def cmd_today(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.current_date(args.fmt, clock=clock))
    return 0

def cmd_yesterday(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.yesterday(args.fmt, clock=clock))
    return 0

def cmd_tomorrow(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.tomorrow(args.fmt, clock=clock))
    return 0

def cmd_first_of_month(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.first_of_month(args.fmt, clock=clock))
    return 0

def cmd_last_of_month(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.last_of_month(args.fmt, clock=clock))
    return 0

def cmd_quarter(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    if args.start:
        print(civdate.quarter_start(args.fmt, clock=clock))
    elif args.end:
        print(civdate.quarter_end(args.fmt, clock=clock))
    else:
        print(civdate.current_quarter(clock=clock))
    return 0

def cmd_month(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    if args.name:
        print(civdate.month_name(args.short, clock=clock))
    else:
        print(civdate.numeric_month(clock=clock))
    return 0

def cmd_weekday(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.day_of_week_name(args.short, clock=clock))
    return 0

def cmd_fy(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.financial_year(args.full, clock=clock))
    return 0

def cmd_days_in_month(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.days_in_month(args.year, args.month))
    return 0

def cmd_leap(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(_bool(civdate.is_leap_year(args.year)))
    return 0

def cmd_add_days(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.add_days_from_components(args.day, args.month, args.year, args.n, args.fmt))
    return 0

def cmd_is_before(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(_bool(civdate.is_before(args.start, args.end, args.fmt)))
    return 0

def cmd_parse(args: argparse.Namespace, clock: Optional[Clock]) -> int:
    print(civdate.parse(args.text, args.fmt).isoformat())
    return 0


Handler = Callable[[argparse.Namespace, Optional[Clock]], int]

_HANDLERS: Dict[str, Handler] = {
    "today": cmd_today,
    "yesterday": cmd_yesterday,
    "tomorrow": cmd_tomorrow,
    "first-of-month": cmd_first_of_month,
    "last-of-month": cmd_last_of_month,
    "quarter": cmd_quarter,
    "month": cmd_month,
    "weekday": cmd_weekday,
    "fy": cmd_fy,
    "days-in-month": cmd_days_in_month,
    "leap": cmd_leap,
    "add-days": cmd_add_days,
    "is-before": cmd_is_before,
    "parse": cmd_parse,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="civdate", description="Date formatting and calendar arithmetic.")
    p.add_argument("--today", type=_parse_ymd, metavar="YYYY-MM-DD", help="pretend today is this date")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    for name, help_ in [
        ("today", "Print today's date"),
        ("yesterday", "Print yesterday's date"),
        ("tomorrow", "Print tomorrow's date"),
        ("first-of-month", "Print the first day of the current month"),
        ("last-of-month", "Print the last day of the current month"),
    ]:
        _add_format(sub.add_parser(name, help=help_))

    p_q = sub.add_parser("quarter", help="Current quarter number, or its first/last day")
    g = p_q.add_mutually_exclusive_group()
    g.add_argument("--start", action="store_true")
    g.add_argument("--end", action="store_true")
    _add_format(p_q)

    p_month = sub.add_parser("month", help="Current month number or name")
    p_month.add_argument("--name", action="store_true")
    p_month.add_argument("--short", action="store_true")

    p_wd = sub.add_parser("weekday", help="Current weekday name")
    p_wd.add_argument("--short", action="store_true")

    p_fy = sub.add_parser("fy", help="Current April-March financial year")
    p_fy.add_argument("--full", action="store_true", help="YYYY-YY instead of YY-YY")

    p_dim = sub.add_parser("days-in-month", help="Number of days in a month")
    p_dim.add_argument("year", type=int)
    p_dim.add_argument("month", type=int)

    p_leap = sub.add_parser("leap", help="Is YEAR a leap year?")
    p_leap.add_argument("year", type=int)

    p_add = sub.add_parser("add-days", help="Add N days to DAY MONTH YEAR")
    p_add.add_argument("day", type=int)
    p_add.add_argument("month", type=int)
    p_add.add_argument("year", type=int)
    p_add.add_argument("n", type=int)
    _add_format(p_add)

    p_before = sub.add_parser("is-before", help="Does START strictly precede END?")
    p_before.add_argument("start")
    p_before.add_argument("end")
    _add_format(p_before)

    p_parse = sub.add_parser("parse", help="Parse TEXT and print it as YYYY-MM-DD")
    p_parse.add_argument("text")
    _add_format(p_parse)

    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    clock = FixedClock(args.today) if args.today is not None else None
    logger.debug("command %s (clock=%r)", args.cmd, clock)
    try:
        return _HANDLERS[args.cmd](args, clock)
    except CivdateError as e:
        print(f"civdate: error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
