"""Consecutive-day completion streaks."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Mapping

from lifesync_engine.calendar_range import parse_day
from lifesync_engine.schema import Activity, normalize_logs


def streak(activity: Activity, logs: Mapping[str, Iterable], today: str | date) -> int:
    """Days in a row, ending at ``today``, on which the activity was completed.

    An incomplete ``today`` breaks the streak, so the result is then 0.
    """

    book = normalize_logs(logs)
    day = parse_day(today)
    count = 0
    while activity.id in book.get(day.isoformat(), ()):
        count += 1
        day -= timedelta(days=1)
    return count


def activity_streaks(activities: list[Activity], logs: Mapping[str, Iterable], today: str | date) -> dict[str, int]:
    """Current streak per activity id."""

    book = normalize_logs(logs)
    return {activity.id: streak(activity, book, today) for activity in activities}
