"""Completion-rate metrics over calendar ranges."""

from __future__ import annotations

import math
from datetime import date
from typing import Iterable, Mapping, Optional

import numpy as np

from lifesync_engine.calendar_range import CURRENT_WEEK, MONTH, YEAR, parse_day, range_dates, valid_dates
from lifesync_engine.config import DEFAULT_CONFIG, EngineConfig
from lifesync_engine.schema import Activity, Category, normalize_id, normalize_logs

_MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""

    return int(math.floor(value + 0.5))


def percent(part: float, whole: float) -> int:
    """Integer percentage clamped to [0, 100]; 0 when ``whole`` is 0."""

    if whole <= 0:
        return 0
    return max(0, min(100, round_half_up(part / whole * 100.0)))


def completion_matrix(activities: list[Activity], dates: list[str], logs: Mapping[str, Iterable]) -> np.ndarray:
    """Boolean (activities x dates) grid of logged completions."""

    book = normalize_logs(logs)
    grid = np.zeros((len(activities), len(dates)), dtype=bool)
    for col, day in enumerate(dates):
        done = book.get(day)
        if not done:
            continue
        for row, activity in enumerate(activities):
            grid[row, col] = activity.id in done
    return grid


def category_activities(category_id, activities: list[Activity]) -> list[Activity]:
    wanted = normalize_id(category_id)
    return [activity for activity in activities if activity.category_id == wanted]


def category_completion_rate(
    category: Category,
    activities: list[Activity],
    logs: Mapping[str, Iterable],
    date_range: list[str],
    today: str | date,
) -> int:
    """Share of (activity, day) pairs completed for one category, as a percentage."""

    acts = category_activities(category.id, activities)
    dates = valid_dates(date_range, today)
    grid = completion_matrix(acts, dates, logs)
    return percent(int(grid.sum()), grid.size)


def activity_completion_rate(
    activity: Activity,
    logs: Mapping[str, Iterable],
    date_range: list[str],
    today: str | date,
) -> int:
    """Share of valid days in the range on which the activity was completed."""

    dates = valid_dates(date_range, today)
    grid = completion_matrix([activity], dates, logs)
    return percent(int(grid.sum()), len(dates))


def trend(current_rate: int, previous_rate: int) -> int:
    """Signed change between two rates."""

    return current_rate - previous_rate


def category_performance(
    categories: list[Category],
    activities: list[Activity],
    logs: Mapping[str, Iterable],
    date_range: list[str],
    today: str | date,
) -> list[dict]:
    """One completion-rate row per category, in category order."""

    return [
        {
            "category_id": category.id,
            "name": category.name,
            "color": category.color,
            "rate": category_completion_rate(category, activities, logs, date_range, today),
        }
        for category in categories
    ]


def activity_series(activity: Activity, logs: Mapping[str, Iterable], kind: str, today: str | date) -> list[dict]:
    """Chart points for one activity over a named range.

    Year ranges collapse into twelve monthly rates; other ranges give one
    point per day with ``done`` set to ``None`` for days after ``today``.
    """

    dates = range_dates(kind, today)
    cutoff = parse_day(today).isoformat()
    book = normalize_logs(logs)

    if kind == YEAR:
        totals = np.zeros(12, dtype=int)
        counts = np.zeros(12, dtype=int)
        for day in dates:
            if day > cutoff:
                continue
            month = int(day[5:7]) - 1
            counts[month] += 1
            if activity.id in book.get(day, ()):
                totals[month] += 1
        return [
            {"label": label, "rate": percent(int(totals[i]), int(counts[i]))} for i, label in enumerate(_MONTH_LABELS)
        ]

    points = []
    for day in dates:
        if kind == MONTH:
            label = str(int(day[8:10]))
        else:
            label = _WEEKDAY_LABELS[parse_day(day).weekday()]
        done = None if day > cutoff else activity.id in book.get(day, ())
        points.append({"date": day, "label": label, "done": done})
    return points


def activity_performance(
    activities: list[Activity],
    logs: Mapping[str, Iterable],
    kind: str,
    today: str | date,
    category_id: Optional[str] = None,
) -> list[dict]:
    """Per-activity rates and chart series, best performers first."""

    selected = activities if category_id is None else category_activities(category_id, activities)
    date_range = range_dates(kind, today)
    rows = [
        {
            "activity_id": activity.id,
            "name": activity.name,
            "category_id": activity.category_id,
            "rate": activity_completion_rate(activity, logs, date_range, today),
            "series": activity_series(activity, logs, kind, today),
        }
        for activity in selected
    ]
    return sorted(rows, key=lambda row: row["rate"], reverse=True)


def split_performance(rows: list[dict], config: Optional[EngineConfig] = None) -> dict:
    """Partition performance rows around the performing threshold."""

    threshold = (config or DEFAULT_CONFIG).performing_threshold
    return {
        "performing_well": [row for row in rows if row["rate"] >= threshold],
        "needs_attention": [row for row in rows if row["rate"] < threshold],
    }


def weekly_summary(activities: list[Activity], logs: Mapping[str, Iterable], today: str | date) -> dict:
    """Current-week consistency and average completions per elapsed day."""

    dates = valid_dates(range_dates(CURRENT_WEEK, today), today)
    grid = completion_matrix(activities, dates, logs)
    completed = int(grid.sum())
    return {
        "completion_rate": percent(completed, grid.size),
        "completed": completed,
        "possible": int(grid.size),
        "avg_activities_per_day": round_half_up(completed / (len(dates) or 1)),
    }
