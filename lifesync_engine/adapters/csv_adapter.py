"""CSV adapter for completion logs."""

from __future__ import annotations

import csv

from lifesync_engine.calendar_range import parse_day
from lifesync_engine.schema import LogBook, normalize_id

_REQUIRED_FIELDS = ("date", "activity_id")


def _parse_row(row: dict, row_number: int) -> tuple[str, str]:
    missing = [field for field in _REQUIRED_FIELDS if not (row.get(field) or "").strip()]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        day = parse_day(row["date"]).isoformat()
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed date") from exc

    return day, normalize_id(row["activity_id"])


def parse(file_path: str) -> LogBook:
    """Parse a ``date,activity_id`` CSV file into completion logs."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return {}

        completed: dict[str, set[str]] = {}
        for row_number, row in enumerate(reader, start=2):
            day, activity_id = _parse_row(row, row_number)
            completed.setdefault(day, set()).add(activity_id)

    return {day: frozenset(ids) for day, ids in completed.items()}
