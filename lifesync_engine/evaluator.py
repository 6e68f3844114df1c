"""Current vs previous range evaluator."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping

from lifesync_engine.calendar_range import CURRENT_WEEK, PREV_WEEK, range_dates, valid_dates
from lifesync_engine.metrics import category_completion_rate, completion_matrix, percent, trend
from lifesync_engine.schema import Activity, Category


def _overall_rate(activities: list[Activity], logs: Mapping[str, Iterable], dates: list[str]) -> int:
    grid = completion_matrix(activities, dates, logs)
    return percent(int(grid.sum()), grid.size)


def compare_ranges(
    categories: list[Category],
    activities: list[Activity],
    logs: Mapping[str, Iterable],
    today: str | date,
    current: str = CURRENT_WEEK,
    previous: str = PREV_WEEK,
) -> dict:
    """Compare completion rates between two named ranges, overall and per category."""

    current_dates = range_dates(current, today)
    previous_dates = range_dates(previous, today)

    overall_now = _overall_rate(activities, logs, valid_dates(current_dates, today))
    overall_before = _overall_rate(activities, logs, valid_dates(previous_dates, today))

    rows = []
    for category in categories:
        now = category_completion_rate(category, activities, logs, current_dates, today)
        before = category_completion_rate(category, activities, logs, previous_dates, today)
        rows.append(
            {
                "category_id": category.id,
                "name": category.name,
                "current_rate": now,
                "previous_rate": before,
                "trend": trend(now, before),
            }
        )

    return {
        "current": current,
        "previous": previous,
        "overall": {
            "current_rate": overall_now,
            "previous_rate": overall_before,
            "trend": trend(overall_now, overall_before),
        },
        "categories": rows,
    }
