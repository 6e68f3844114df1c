"""Demo script for lifesync-engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from lifesync_engine.adapters.json_adapter import parse
from lifesync_engine.calendar_range import range_dates
from lifesync_engine.metrics import category_performance
from lifesync_engine.outcomes import project_outcomes

TODAY = "2024-01-10"


def main() -> None:
    dataset = parse(str(Path(__file__).with_name("sample_data.json")))
    week = range_dates("current-week", TODAY)
    print("Week:", week)
    print("Categories:", category_performance(dataset.categories, dataset.activities, dataset.logs, week, TODAY))
    print("Outcomes:", project_outcomes(dataset.categories, dataset.activities, dataset.logs, TODAY).to_dict())


if __name__ == "__main__":
    main()
