"""Calendar date helpers for semester planning.

Syllabi are written for a forward-looking term but rarely carry a usable year:
"Jan. 28", "2/14", or a full date copied from last year's syllabus. The
helpers here turn those references into concrete calendar dates relative to a
caller-supplied "today", and keep the planning window pointing forward.

Everything works on naive ``datetime.date`` values. The only place a
timezone is involved is ``today_in_timezone``, used once at the edge.
"""
from __future__ import annotations

import calendar
import re
import typing as t
from datetime import date, datetime
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

from semester_planner.errors import (
    END_DATE_FALLBACK,
    END_DATE_ROLLED,
    MalformedEventError,
)
from semester_planner.models import Diagnostic

MIN_YEAR = 1900
MAX_YEAR = 2100
FALLBACK_WINDOW_MONTHS = 4

# Day of week token to number (0 = Sunday)
WEEKDAY_TOKENS: dict[str, int] = {
    "sunday": 0, "sun": 0,
    "monday": 1, "mon": 1,
    "tuesday": 2, "tue": 2, "tues": 2,
    "wednesday": 3, "wed": 3,
    "thursday": 4, "thu": 4, "thur": 4, "thurs": 4,
    "friday": 5, "fri": 5,
    "saturday": 6, "sat": 6,
}

# Two defaults that differ in every field. A component the text does not
# carry comes back different between the two parses.
_DEFAULT_A = datetime(1904, 1, 1)
_DEFAULT_B = datetime(1908, 2, 2)

_ABBREVIATION_DOT = re.compile(r"(?<=[A-Za-z])\.")


class DateParts(t.NamedTuple):
    """Month and day read from syllabus text, with the year when present."""
    year: t.Optional[int]
    month: int
    day: int


def sunday_weekday(day: date) -> int:
    """Weekday number of ``day`` with 0 = Sunday ... 6 = Saturday."""
    return day.isoweekday() % 7


def parse_weekday(token: t.Any) -> int:
    """Resolve a weekday token ("Monday", "tues", 3) to 0 = Sunday numbering.

    :param token: Weekday name, abbreviation, or integer 0-6.
    :return: The weekday number.
    :raises MalformedEventError: If the token does not name a weekday.
    """
    if isinstance(token, bool):
        raise MalformedEventError(f"invalid weekday {token!r}")
    if isinstance(token, int):
        if 0 <= token <= 6:
            return token
        raise MalformedEventError(f"weekday {token} outside 0-6")
    if not isinstance(token, str) or not token.strip():
        raise MalformedEventError("missing weekday")
    key = _ABBREVIATION_DOT.sub("", token.strip().lower())
    if key.isdigit():
        return parse_weekday(int(key))
    if key not in WEEKDAY_TOKENS:
        raise MalformedEventError(f"unknown weekday {token!r}")
    return WEEKDAY_TOKENS[key]


def parse_date_text(text: str) -> DateParts:
    """Read month, day and optional year from a syllabus date string.

    Accepts ISO dates ("2025-02-14"), month names with or without a year
    ("Jan. 28", "January 28, 2025") and numeric forms ("1/28", "1/28/2025").

    :raises MalformedEventError: For non-numeric components, day > 31,
        month outside 1-12, a year outside 1900-2100, or text that lacks a
        month or a day.
    """
    if not isinstance(text, str) or not text.strip():
        raise MalformedEventError("missing date")
    cleaned = _ABBREVIATION_DOT.sub("", text.strip())
    try:
        first = date_parser.parse(cleaned, default=_DEFAULT_A)
        second = date_parser.parse(cleaned, default=_DEFAULT_B)
    except (ValueError, OverflowError) as e:
        raise MalformedEventError(f"unparseable date {text!r}: {e}")

    if first.month != second.month:
        raise MalformedEventError(f"date {text!r} has no month")
    if first.day != second.day:
        raise MalformedEventError(f"date {text!r} has no day")

    if first.year != second.year:
        return DateParts(year=None, month=first.month, day=first.day)
    if not MIN_YEAR <= first.year <= MAX_YEAR:
        raise MalformedEventError(f"year {first.year} outside {MIN_YEAR}-{MAX_YEAR}")
    return DateParts(year=first.year, month=first.month, day=first.day)


def make_date(year: int, month: int, day: int) -> date:
    """Build a real calendar date or raise ``MalformedEventError``."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise MalformedEventError(f"year {year} outside {MIN_YEAR}-{MAX_YEAR}")
    try:
        return date(year, month, day)
    except ValueError as e:
        raise MalformedEventError(f"{year:04d}-{month:02d}-{day:02d} is not a calendar date: {e}")


def normalize_month_day(month: int, day: int, today: date) -> date:
    """Assign a year to a month/day reference.

    Months still ahead (or current) belong to this year; months already
    passed belong to next year. The rule is applied exactly once.
    """
    year = today.year if month >= today.month else today.year + 1
    return make_date(year, month, day)


def normalize_event_date(value: date, today: date) -> date:
    """Correct year drift on a one-time event date.

    Dates after ``today`` are kept. Dates on or before ``today`` are assumed
    to carry a stale year and get the month/day rule of
    ``normalize_month_day``. The result may still be before ``today``; it
    is returned as computed rather than bumped a second time.
    """
    if value > today:
        return value
    return normalize_month_day(value.month, value.day, today)


def resolve_event_date(raw: t.Any, today: date) -> tuple[date, bool]:
    """Turn an upstream date value into a calendar date.

    :param raw: A ``date``/``datetime`` or a date string.
    :param today: Reference date for yearless references.
    :return: ``(date, year_known)``.
    """
    if isinstance(raw, datetime):
        return raw.date(), True
    if isinstance(raw, date):
        return raw, True
    parts = parse_date_text(raw)
    if parts.year is None:
        return normalize_month_day(parts.month, parts.day, today), False
    return make_date(parts.year, parts.month, parts.day), True


def add_months(value: date, months: int) -> date:
    """Add calendar months, clamping the day to the target month's length."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def default_end_date(start_date: date) -> date:
    return add_months(start_date, FALLBACK_WINDOW_MONTHS)


def correct_end_date(
        start_date: date,
        end_date: t.Optional[date],
) -> tuple[date, t.Optional[Diagnostic]]:
    """Make sure the semester end date lies strictly after ``start_date``.

    A stale end date is rolled forward by whole years until it passes
    ``start_date``. When no rollover works (Feb 29 with no leap year in
    reach) the window falls back to ``start_date`` plus four months, as it
    does when no end date is supplied at all.

    :return: The corrected end date and a diagnostic when it changed.
    """
    if end_date is None:
        fallback = default_end_date(start_date)
        return fallback, Diagnostic(
            code=END_DATE_FALLBACK,
            message=f"no semester end date supplied, using {fallback.isoformat()}",
        )

    if end_date > start_date:
        return end_date, None

    for year in range(max(end_date.year + 1, start_date.year), start_date.year + 2):
        try:
            candidate = end_date.replace(year=year)
        except ValueError:
            continue
        if candidate > start_date:
            return candidate, Diagnostic(
                code=END_DATE_ROLLED,
                message=f"semester end {end_date.isoformat()} is not after {start_date.isoformat()}, "
                        f"rolled forward to {candidate.isoformat()}",
            )

    fallback = default_end_date(start_date)
    return fallback, Diagnostic(
        code=END_DATE_FALLBACK,
        message=f"semester end {end_date.isoformat()} could not be rolled forward, "
                f"using {fallback.isoformat()}",
    )


def today_in_timezone(tz_name: str = "UTC") -> date:
    """Resolve the calendar date "today" for a user's timezone.

    :raises zoneinfo.ZoneInfoNotFoundError: If ``tz_name`` is unknown.
    """
    return datetime.now(ZoneInfo(tz_name)).date()
