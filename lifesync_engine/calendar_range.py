"""Calendar-aligned date ranges anchored to a caller-supplied day."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

CURRENT_WEEK = "current-week"
PREV_WEEK = "prev-week"
MONTH = "month"
YEAR = "year"
RANGE_KINDS = (CURRENT_WEEK, PREV_WEEK, MONTH, YEAR)


def parse_day(value: str | date) -> date:
    """Return ``value`` as a date, parsing ISO ``YYYY-MM-DD`` strings."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"Malformed date '{value}', expected YYYY-MM-DD") from exc


def dates_in_range(start: date, end: date) -> list[str]:
    """ISO dates from ``start`` to ``end`` inclusive; empty when end < start."""

    days = (end - start).days
    return [(start + timedelta(days=offset)).isoformat() for offset in range(days + 1)]


def week_monday(today: str | date) -> date:
    day = parse_day(today)
    return day - timedelta(days=day.weekday())


def range_dates(kind: str, today: str | date) -> list[str]:
    """Return the dates of a named range around ``today``.

    Weeks run Monday to Sunday. Month and year ranges cover the whole
    calendar period, so they may include days after ``today``.
    Unknown kinds yield an empty range.
    """

    day = parse_day(today)
    monday = week_monday(day)

    if kind == CURRENT_WEEK:
        return dates_in_range(monday, monday + timedelta(days=6))
    if kind == PREV_WEEK:
        previous = monday - timedelta(days=7)
        return dates_in_range(previous, previous + timedelta(days=6))
    if kind == MONTH:
        last = calendar.monthrange(day.year, day.month)[1]
        return dates_in_range(day.replace(day=1), day.replace(day=last))
    if kind == YEAR:
        return dates_in_range(date(day.year, 1, 1), date(day.year, 12, 31))
    return []


def trailing_dates(today: str | date, days: int) -> list[str]:
    """The ``days`` dates ending at and including ``today``, newest first."""

    day = parse_day(today)
    return [(day - timedelta(days=offset)).isoformat() for offset in range(max(0, days))]


def valid_dates(date_range: list[str], today: str | date) -> list[str]:
    """Dates of ``date_range`` that are not after ``today``."""

    cutoff = parse_day(today).isoformat()
    return [day for day in date_range if day <= cutoff]
