"""Run the analytics report for a JSON dataset."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from lifesync_engine.adapters import csv_adapter, json_adapter
from lifesync_engine.calendar_range import RANGE_KINDS
from lifesync_engine.config import DEFAULT_CONFIG, load_config
from lifesync_engine.report import build_report


def main() -> None:
    parser = argparse.ArgumentParser(description="Run lifesync-engine analytics report")
    parser.add_argument("--data", required=True, help="Path to JSON dataset with categories, activities and logs")
    parser.add_argument("--logs", help="Optional CSV of date,activity_id completions merged into the dataset logs")
    parser.add_argument("--today", required=True, help="Reference day, YYYY-MM-DD")
    parser.add_argument("--range", dest="range_kind", default="current-week", choices=RANGE_KINDS)
    parser.add_argument("--config", help="Optional JSON file overriding scoring heuristics")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    dataset = json_adapter.parse(args.data)
    logs = dict(dataset.logs)
    if args.logs:
        for day, ids in csv_adapter.parse(args.logs).items():
            logs[day] = logs.get(day, frozenset()) | ids

    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    report = build_report(dataset.categories, dataset.activities, logs, args.today, args.range_kind, config)

    print(json.dumps(report, indent=2))

    outputs_dir = Path("outputs")
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "report.json"
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved report to {out_path}")


if __name__ == "__main__":
    main()
