"""Energy-type classification and restorative/draining hour balance."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, Mapping

from lifesync_engine.calendar_range import valid_dates
from lifesync_engine.schema import Activity, Category, EnergyBalance, normalize_logs

log = logging.getLogger(__name__)

RESTORATIVE = "restorative"
NEUTRAL = "neutral"
DRAINING = "draining"

# First matching keyword wins.
ENERGY_KEYWORDS = (
    ("health", RESTORATIVE),
    ("fitness", RESTORATIVE),
    ("sleep", RESTORATIVE),
    ("rest", RESTORATIVE),
    ("meditation", RESTORATIVE),
    ("mindfulness", RESTORATIVE),
    ("hobby", RESTORATIVE),
    ("social", NEUTRAL),
    ("family", NEUTRAL),
    ("learning", NEUTRAL),
    ("work", DRAINING),
    ("productivity", DRAINING),
    ("finance", DRAINING),
)

HOURS_PER_DAY = 24.0


def classify_energy(category_name: str) -> str:
    """Energy type of a category by case-insensitive keyword match."""

    lowered = (category_name or "").lower()
    for keyword, energy in ENERGY_KEYWORDS:
        if keyword in lowered:
            return energy
    return NEUTRAL


def energy_balance(
    activities: list[Activity],
    categories: list[Category],
    logs: Mapping[str, Iterable],
    date_range: list[str],
    today: str | date,
    classifier: Callable[[str], str] = classify_energy,
) -> EnergyBalance:
    """Completed hours in the range split by category energy type."""

    by_id = {category.id: category for category in categories}
    dates = valid_dates(date_range, today)
    book = normalize_logs(logs)
    totals = {RESTORATIVE: 0.0, NEUTRAL: 0.0, DRAINING: 0.0}

    for activity in activities:
        category = by_id.get(activity.category_id)
        if category is None:
            log.debug("Skipping activity %s: unknown category %s", activity.id, activity.category_id)
            continue
        done_days = sum(1 for day in dates if activity.id in book.get(day, ()))
        energy = classifier(category.name)
        if energy not in totals:
            energy = NEUTRAL
        totals[energy] += activity.daily_hours * done_days

    return EnergyBalance(
        draining_hours=totals[DRAINING],
        restorative_hours=totals[RESTORATIVE],
        neutral_hours=totals[NEUTRAL],
    )


def remaining_hours(activities: list[Activity]) -> float:
    """Unallocated hours in a day; negative when activities exceed 24h."""

    return HOURS_PER_DAY - sum(activity.daily_hours for activity in activities)
