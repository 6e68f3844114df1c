import json
from pathlib import Path

from lifesync_engine.adapters.json_adapter import parse
from lifesync_engine.report import build_report

SAMPLE = Path(__file__).resolve().parents[1] / "examples" / "sample_data.json"


def sample_report(range_kind="current-week"):
    dataset = parse(str(SAMPLE))
    return build_report(dataset.categories, dataset.activities, dataset.logs, "2024-01-10", range_kind)


def test_report_is_json_serialisable():
    report = sample_report()
    decoded = json.loads(json.dumps(report))
    assert decoded["today"] == "2024-01-10"
    assert len(decoded["range"]["dates"]) == 7


def test_report_periods_follow_the_8am_day():
    periods = sample_report()["periods"]
    assert [period["id"] for period in periods] == ["morning", "afternoon", "evening", "late-night", "anytime"]
    assert [act["name"] for act in periods[-1]["activities"]] == ["Call parents", "Stretching"]
    assert periods[3]["activities"][0]["name"] == "Morning run"


def test_report_streaks_and_hours():
    report = sample_report()
    assert report["streaks"] == {"1": 3, "2": 0, "3": 3, "4": 0, "5": 1, "6": 0}
    assert report["remaining_hours"] == 15.5
    assert report["weekly_summary"]["completion_rate"] == 61


def test_report_outcomes_and_levels():
    report = sample_report()
    outcomes = report["outcomes"]
    assert set(outcomes["matrix"]) == {"1yr", "5yr", "10yr"}
    assert outcomes["meta"]["total_hours_tracked"] == 8.5
    for horizon, levels in report["outcome_levels"].items():
        assert set(levels) == {"career", "happiness", "longevity"}


def test_report_year_range_uses_monthly_series():
    report = sample_report("year")
    rows = report["activity_performance"]["performing_well"] + report["activity_performance"]["needs_attention"]
    assert len(rows) == 6
    assert all(len(row["series"]) == 12 for row in rows)
