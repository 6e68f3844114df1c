"""Forward-projected outcome scores across dimensions and horizons."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping, Optional

from lifesync_engine.calendar_range import trailing_dates
from lifesync_engine.config import DEFAULT_CONFIG, EngineConfig
from lifesync_engine.metrics import round_half_up
from lifesync_engine.schema import Activity, Category, OutcomeMatrix, normalize_logs

log = logging.getLogger(__name__)

DIMENSIONS = ("career", "happiness", "longevity")

# Keyword -> (career, happiness, longevity) weights out of 100. First match wins.
CATEGORY_WEIGHTS = (
    ("health", (20, 40, 80)),
    ("fitness", (15, 50, 85)),
    ("productivity", (80, 30, 20)),
    ("work", (85, 20, 10)),
    ("mindfulness", (25, 70, 60)),
    ("meditation", (20, 80, 55)),
    ("social", (40, 75, 45)),
    ("family", (20, 85, 50)),
    ("learning", (70, 45, 30)),
    ("education", (75, 40, 25)),
    ("hobby", (15, 80, 35)),
    ("creative", (35, 70, 30)),
    ("sleep", (30, 50, 90)),
    ("rest", (25, 55, 70)),
    ("exercise", (20, 55, 90)),
    ("nutrition", (15, 40, 85)),
    ("finance", (70, 35, 25)),
)
DEFAULT_WEIGHTS = (33, 33, 33)

# horizon -> (compounding, consistency)
HORIZONS = (
    ("1yr", (1.0, 0.3)),
    ("5yr", (1.5, 0.5)),
    ("10yr", (2.2, 0.7)),
)

_LEVELS = (
    (80, "Excellent", "#10b981"),
    (60, "Good", "#3b82f6"),
    (40, "Moderate", "#f59e0b"),
    (20, "Fair", "#f97316"),
)

_DIMENSION_INFO = {
    "career": ("Career & Financial", "Professional growth, skills, wealth building"),
    "happiness": ("Happiness & Well-being", "Mental health, relationships, fulfillment"),
    "longevity": ("Longevity & Health", "Physical health, energy, life quality"),
}


def category_weights(category_name: str) -> dict[str, int]:
    """Dimension weights for a category name by case-insensitive keyword match."""

    lowered = (category_name or "").lower()
    weights = DEFAULT_WEIGHTS
    for keyword, candidate in CATEGORY_WEIGHTS:
        if keyword in lowered:
            weights = candidate
            break
    return dict(zip(DIMENSIONS, weights))


def base_score(dimension_hours: float, config: Optional[EngineConfig] = None) -> float:
    cfg = config or DEFAULT_CONFIG
    return min(dimension_hours / cfg.base_hours * cfg.base_points, cfg.max_base_score)


def compliance_rate(
    activities: list[Activity],
    logs: Mapping[str, Iterable],
    today: str | date,
    days: int = DEFAULT_CONFIG.compliance_window_days,
) -> float:
    """Fraction of expected completions logged over the trailing window."""

    book = normalize_logs(logs)
    known = {activity.id for activity in activities}
    expected = 0
    completed = 0
    for day in trailing_dates(today, days):
        expected += len(activities)
        completed += len(book.get(day, frozenset()) & known)
    return completed / expected if expected else 0.0


def project_outcomes(
    categories: list[Category],
    activities: list[Activity],
    logs: Mapping[str, Iterable],
    today: str | date,
    config: Optional[EngineConfig] = None,
) -> OutcomeMatrix:
    """Score career, happiness and longevity at 1, 5 and 10 year horizons.

    Planned daily hours are spread over the dimensions by category weight
    to get a base score per dimension. Each horizon then compounds the base
    score and blends in the 30-day compliance rate, trusting compliance
    more the longer the horizon.
    """

    cfg = config or DEFAULT_CONFIG
    by_id = {category.id: category for category in categories}

    total_hours = sum(activity.daily_hours for activity in activities)
    dimension_hours = {dimension: 0.0 for dimension in DIMENSIONS}
    for activity in activities:
        category = by_id.get(activity.category_id)
        if category is None:
            log.debug("Skipping activity %s: unknown category %s", activity.id, activity.category_id)
            continue
        weights = category_weights(category.name)
        for dimension in DIMENSIONS:
            dimension_hours[dimension] += activity.daily_hours * weights[dimension] / 100

    base_scores = {dimension: base_score(hours, cfg) for dimension, hours in dimension_hours.items()}
    compliance = compliance_rate(activities, logs, today, cfg.compliance_window_days)

    matrix: dict[str, dict[str, int]] = {}
    for horizon, (compounding, consistency) in HORIZONS:
        effective = compliance * consistency + (1 - consistency)
        matrix[horizon] = {
            dimension: max(0, min(100, round_half_up(base_scores[dimension] * compounding * effective)))
            for dimension in DIMENSIONS
        }

    return OutcomeMatrix(
        matrix=matrix,
        total_hours_tracked=total_hours,
        compliance_rate=round_half_up(compliance * 100),
        dimension_hours=dimension_hours,
        base_scores=base_scores,
    )


def score_level(score: int) -> dict:
    """Display label and colour hint for a score."""

    for floor, label, color in _LEVELS:
        if score >= floor:
            return {"label": label, "color": color}
    return {"label": "Needs Work", "color": "#ef4444"}


def dimension_info(dimension: str) -> dict:
    label, description = _DIMENSION_INFO.get(dimension, (dimension, ""))
    return {"label": label, "description": description}
