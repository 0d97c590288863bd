"""
civdate.formatting
------------------
Render a CalendarDate under a FormatSpec and parse it back.

Two-digit years are expanded by prefixing "20" ("24" -> 2024). This is a fixed
policy, not a pivot: years outside 2000..2099 do not survive a round trip
through the *-YY layouts and need a four-digit layout instead.
"""

from __future__ import annotations

import logging
import re
from typing import Dict

from .core.errors import CivdateError, MalformedInputError
from .core.types import CalendarDate, FormatLike, FormatSpec

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"[0-9]+")
_SHORT_YEAR_RE = re.compile(r"[0-9]{2}")
# Longest accepted text per field; a longer run of digits is malformed.
_MAX_DIGITS = {"day": 2, "month": 2, "year": 9}
_CENTURY_PREFIX = "20"


def render(d: CalendarDate, fmt: FormatLike) -> str:
    spec = FormatSpec.coerce(fmt)
    if spec.short_year:
        year = f"{d.year % 100:02d}"
    else:
        year = f"{d.year:04d}"
    parts = {"day": f"{d.day:02d}", "month": f"{d.month:02d}", "year": year}
    return spec.separator.join(parts[tok] for tok in spec.order)


def parse(text: str, fmt: FormatLike) -> CalendarDate:
    spec = FormatSpec.coerce(fmt)
    if not isinstance(text, str):
        raise MalformedInputError(f"Expected a date string in {spec.value} format; got {text!r}")

    pieces = text.strip().split(spec.separator)
    if len(pieces) != 3:
        logger.debug("parse %r as %s: %d parts", text, spec.value, len(pieces))
        raise MalformedInputError(f"{text!r} does not match {spec.value}: expected 3 parts")

    fields: Dict[str, str] = dict(zip(spec.order, pieces))
    for tok, raw in fields.items():
        if not _DIGITS_RE.fullmatch(raw):
            logger.debug("parse %r as %s: non-numeric %s %r", text, spec.value, tok, raw)
            raise MalformedInputError(f"{text!r} does not match {spec.value}: {tok} {raw!r} is not numeric")
        if len(raw) > _MAX_DIGITS[tok]:
            logger.debug("parse %r as %s: %s has %d digits", text, spec.value, tok, len(raw))
            raise MalformedInputError(
                f"{text!r} does not match {spec.value}: {tok} has more than {_MAX_DIGITS[tok]} digits"
            )

    year_text = fields["year"]
    if spec.short_year:
        if not _SHORT_YEAR_RE.fullmatch(year_text):
            logger.debug("parse %r as %s: short year %r", text, spec.value, year_text)
            raise MalformedInputError(f"{text!r} does not match {spec.value}: year must have 2 digits")
        year_text = _CENTURY_PREFIX + year_text

    return CalendarDate.from_components(int(fields["day"]), int(fields["month"]), int(year_text))


def is_valid(text: str, fmt: FormatLike) -> bool:
    """True iff `text` parses to a real date under `fmt`.

    An unsupported `fmt` still raises UnsupportedFormatError.
    """
    spec = FormatSpec.coerce(fmt)
    try:
        parse(text, spec)
    except CivdateError:
        return False
    return True
