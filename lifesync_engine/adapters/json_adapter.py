"""JSON adapter for categories, activities and completion logs."""

from __future__ import annotations

import json
from typing import Any

from lifesync_engine.calendar_range import parse_day
from lifesync_engine.schema import ACTIVITY_KINDS, TIME_BOUND, Activity, Category, Dataset, LogBook, normalize_id
from lifesync_engine.time_buckets import parse_clock

_MAX_DAILY_HOURS = 24.0


def _first(item: dict, *keys: str) -> Any:
    for key in keys:
        value = item.get(key)
        if value not in (None, ""):
            return value
    return None


def _parse_category(item: Any, index: int) -> Category:
    if not isinstance(item, dict):
        raise ValueError(f"Category {index}: expected an object")

    missing = [field for field in ("id", "name") if _first(item, field) is None]
    if missing:
        raise ValueError(f"Category {index}: missing required fields {missing}")

    name = str(item["name"]).strip()
    if not name:
        raise ValueError(f"Category {index}: name must not be blank")

    color = _first(item, "color")
    return Category(id=item["id"], name=name, color=str(color) if color else "#6366f1")


def _parse_hours(raw: Any, index: int) -> float:
    if raw is None:
        return 0.0
    try:
        hours = float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Activity {index}: invalid daily_hours") from exc
    if not 0.0 <= hours <= _MAX_DAILY_HOURS:
        raise ValueError(f"Activity {index}: daily_hours must be between 0 and 24")
    return hours


def _parse_activity(item: Any, index: int) -> Activity:
    if not isinstance(item, dict):
        raise ValueError(f"Activity {index}: expected an object")

    fields = {
        "id": _first(item, "id"),
        "category_id": _first(item, "category_id", "categoryId"),
        "name": _first(item, "name"),
    }
    missing = [field for field, value in fields.items() if value is None]
    if missing:
        raise ValueError(f"Activity {index}: missing required fields {missing}")

    kind = str(_first(item, "kind", "type") or "free").strip()
    if kind not in ACTIVITY_KINDS:
        raise ValueError(f"Activity {index}: invalid kind '{kind}'")

    scheduled_time = None
    if kind == TIME_BOUND:
        raw_time = _first(item, "scheduled_time", "scheduledTime", "time")
        if raw_time is None:
            raise ValueError(f"Activity {index}: time-bound activity needs a scheduled time")
        try:
            hour, minute = parse_clock(str(raw_time))
        except ValueError as exc:
            raise ValueError(f"Activity {index}: malformed scheduled time") from exc
        scheduled_time = f"{hour:02d}:{minute:02d}"

    return Activity(
        id=fields["id"],
        category_id=fields["category_id"],
        name=str(fields["name"]).strip(),
        kind=kind,
        scheduled_time=scheduled_time,
        daily_hours=_parse_hours(_first(item, "daily_hours", "dailyHours", "hours"), index),
    )


def _parse_logs(payload: Any) -> LogBook:
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError("Logs must be an object mapping dates to activity ids")

    logs: LogBook = {}
    for day, ids in payload.items():
        try:
            key = parse_day(day).isoformat()
        except ValueError as exc:
            raise ValueError(f"Logs: malformed date '{day}'") from exc
        if ids is None:
            ids = []
        if not isinstance(ids, list):
            raise ValueError(f"Logs {key}: expected a list of activity ids")
        logs[key] = logs.get(key, frozenset()) | frozenset(normalize_id(value) for value in ids)
    return logs


def parse_payload(payload: Any) -> Dataset:
    """Validate a decoded ``{categories, activities, logs}`` object."""

    if not isinstance(payload, dict):
        raise ValueError("JSON payload must be an object")

    categories = [_parse_category(item, i) for i, item in enumerate(payload.get("categories") or [], start=1)]
    activities = [_parse_activity(item, i) for i, item in enumerate(payload.get("activities") or [], start=1)]

    known = {category.id for category in categories}
    for index, activity in enumerate(activities, start=1):
        if activity.category_id not in known:
            raise ValueError(f"Activity {index}: unknown category '{activity.category_id}'")

    return Dataset(categories=categories, activities=activities, logs=_parse_logs(payload.get("logs")))


def parse(file_path: str) -> Dataset:
    """Parse JSON file into a validated dataset."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    return parse_payload(payload)
