"""Assemble every analytic into one JSON-ready report."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping, Optional

from lifesync_engine.calendar_range import CURRENT_WEEK, parse_day, range_dates
from lifesync_engine.config import DEFAULT_CONFIG, EngineConfig
from lifesync_engine.energy import energy_balance, remaining_hours
from lifesync_engine.evaluator import compare_ranges
from lifesync_engine.metrics import activity_performance, category_performance, split_performance, weekly_summary
from lifesync_engine.outcomes import DIMENSIONS, dimension_info, project_outcomes, score_level
from lifesync_engine.schema import Activity, Category, normalize_logs
from lifesync_engine.streaks import activity_streaks
from lifesync_engine.time_buckets import group_by_period, sort_by_time

log = logging.getLogger(__name__)


def _period_rows(activities: list[Activity]) -> list[dict]:
    return [
        {
            "id": period.id,
            "label": period.label,
            "activities": [{"id": act.id, "name": act.name, "time": act.scheduled_time} for act in period.activities],
        }
        for period in group_by_period(sort_by_time(activities))
    ]


def build_report(
    categories: list[Category],
    activities: list[Activity],
    logs: Mapping[str, Iterable],
    today: str | date,
    range_kind: str = CURRENT_WEEK,
    config: Optional[EngineConfig] = None,
) -> dict:
    """Run every analytic for ``today`` and return plain, serialisable data."""

    cfg = config or DEFAULT_CONFIG
    day = parse_day(today).isoformat()
    book = normalize_logs(logs)
    dates = range_dates(range_kind, day)
    log.debug(
        "Building report for %s (%s): %d categories, %d activities, %d logged days",
        day,
        range_kind,
        len(categories),
        len(activities),
        len(book),
    )

    performance = activity_performance(activities, book, range_kind, day)
    outcomes = project_outcomes(categories, activities, book, day, cfg)

    return {
        "today": day,
        "range": {"kind": range_kind, "dates": dates},
        "periods": _period_rows(activities),
        "weekly_summary": weekly_summary(activities, book, day),
        "category_performance": category_performance(categories, activities, book, dates, day),
        "activity_performance": split_performance(performance, cfg),
        "comparison": compare_ranges(categories, activities, book, day),
        "energy_balance": energy_balance(activities, categories, book, dates, day).to_dict(),
        "remaining_hours": remaining_hours(activities),
        "streaks": activity_streaks(activities, book, day),
        "outcomes": outcomes.to_dict(),
        "outcome_levels": {
            horizon: {dimension: score_level(score)["label"] for dimension, score in scores.items()}
            for horizon, scores in outcomes.matrix.items()
        },
        "dimensions": {dimension: dimension_info(dimension) for dimension in DIMENSIONS},
    }
