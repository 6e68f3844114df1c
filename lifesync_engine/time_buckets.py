"""Time-of-day ordering and grouping on an 8am-to-8am day."""

from __future__ import annotations

from lifesync_engine.schema import TIME_BOUND, Activity, TimePeriod

NO_TIME = 9999
_DAY_START = 8 * 60

# (id, label, lower, upper) in minutes from 8am, upper exclusive.
PERIODS = (
    ("morning", "Morning", 0, 240),
    ("afternoon", "Afternoon", 240, 540),
    ("evening", "Evening", 540, 780),
    ("night", "Night", 780, 960),
    ("late-night", "Late Night", 960, 1440),
    ("anytime", "Anytime", NO_TIME, NO_TIME + 1),
)


def parse_clock(value: str) -> tuple[int, int]:
    parts = value.strip().split(":")
    if len(parts) != 2 or len(parts[1]) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Malformed time '{value}', expected HH:MM")
    hour, minute = int(parts[0]), int(parts[1])
    if hour > 23 or minute > 59:
        raise ValueError(f"Malformed time '{value}', expected HH:MM")
    return hour, minute


def minutes_from_8am(scheduled_time: str | None) -> int:
    """Minutes since 8:00, wrapping 00:00-07:59 to the end of the day.

    Activities without a time map to ``NO_TIME`` so they sort last.
    """

    if not scheduled_time:
        return NO_TIME

    hour, minute = parse_clock(scheduled_time)
    total = hour * 60 + minute
    if total >= _DAY_START:
        return total - _DAY_START
    return total + (24 * 60 - _DAY_START)


def activity_minutes(activity: Activity) -> int:
    """Position of an activity on the 8am day; free activities have no time."""

    if activity.kind != TIME_BOUND:
        return NO_TIME
    return minutes_from_8am(activity.scheduled_time)


def sort_by_time(activities: list[Activity]) -> list[Activity]:
    """Order activities by time of day, then by name."""

    return sorted(activities, key=lambda act: (activity_minutes(act), act.name))


def group_by_period(activities: list[Activity]) -> list[TimePeriod]:
    """Group activities into the fixed periods, dropping empty ones."""

    groups = [TimePeriod(period_id, label, lower, upper) for period_id, label, lower, upper in PERIODS]
    for activity in activities:
        minutes = activity_minutes(activity)
        for group in groups:
            if group.lower <= minutes < group.upper:
                group.activities.append(activity)
                break

    return [group for group in groups if group.activities]
