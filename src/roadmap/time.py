# SPDX-License-Identifier: MIT

import re
from typing import Any, Optional

import pendulum

_ISO_DATE_P = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)
_SLASH_DATE_P = re.compile(r"^\s*(\d+)\s*/\s*(\d+)\s*/\s*(\d+)\s*$", re.ASCII)


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_to_month_label(date: pendulum.Date) -> str:
    """Format a date the way month ticks are labelled, e.g. 'Jan 2025'."""
    return date.format("MMM YYYY")


def days_between(start: pendulum.Date, end: pendulum.Date) -> int:
    """Signed whole-day difference, negative when end is before start."""
    return start.diff(end, False).in_days()


def start_of_month(date: pendulum.Date) -> pendulum.Date:
    return date.start_of("month")


def end_of_month(date: pendulum.Date) -> pendulum.Date:
    return date.end_of("month")


def month_starts_between(
    start: pendulum.Date, end: pendulum.Date
) -> list[pendulum.Date]:
    """Every first-of-month date in [start, end], ascending."""
    months: list[pendulum.Date] = []
    current = start.start_of("month")
    if current < start:
        current = current.add(months=1)
    while current <= end:
        months.append(current)
        current = current.add(months=1)
    return months


def parse_flexible_date(raw: Optional[Any]) -> Optional[pendulum.Date]:
    """
    Parse a date coming from any of the upstream exports.

    Formats are tried in order and the first one that yields a valid calendar
    date wins:

    1. ``YYYY-MM-DD``
    2. three slash-separated numbers, ``YYYY/MM/DD`` when the first number is
       greater than 31, ``DD/MM/YYYY`` otherwise
    3. pendulum's lenient parser

    Slash dates whose day is 12 or less cannot be told apart from
    ``MM/DD/YYYY`` and are always read day-first.

    Args:
        raw: The raw date value, usually a string

    Returns:
        The parsed date, or None if no format matched
    """
    if raw is None:
        return None

    value = str(raw).strip()
    if not value:
        return None

    iso_match = _ISO_DATE_P.match(value)
    if iso_match:
        parsed = _build_date(
            int(iso_match.group(1)), int(iso_match.group(2)), int(iso_match.group(3))
        )
        if parsed is not None:
            return parsed

    slash_match = _SLASH_DATE_P.match(value)
    if slash_match:
        first, second, third = (int(part) for part in slash_match.groups())
        if first > 31:
            parsed = _build_date(first, second, third)
        else:
            parsed = _build_date(third, second, first)
        if parsed is not None:
            return parsed

    return _parse_lenient(value)


def _build_date(year: int, month: int, day: int) -> Optional[pendulum.Date]:
    try:
        return pendulum.date(year, month, day)
    except (ValueError, OverflowError):
        return None


def _parse_lenient(value: str) -> Optional[pendulum.Date]:
    try:
        parsed = pendulum.parse(value, strict=False)
    except (ValueError, OverflowError, TypeError):
        return None

    # pendulum.parse also understands times and ISO durations
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    return None
