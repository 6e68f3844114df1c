from lifesync_engine.calendar_range import range_dates
from lifesync_engine.metrics import (
    activity_completion_rate,
    activity_performance,
    activity_series,
    category_completion_rate,
    category_performance,
    completion_matrix,
    percent,
    split_performance,
    trend,
    weekly_summary,
)
from lifesync_engine.schema import Activity, Category


def sample_data():
    categories = [Category(1, "Fitness"), Category(2, "Work"), Category(3, "Empty")]
    activities = [
        Activity(1, 1, "Run", daily_hours=1),
        Activity(2, 2, "Deep work", daily_hours=3),
        Activity(3, 2, "Inbox", daily_hours=0.5),
    ]
    logs = {
        "2024-01-08": [1, 2, 3],
        "2024-01-10": [1, 2],
        "2024-01-12": [1],
    }
    return categories, activities, logs


def test_zero_activities_rate_is_zero():
    categories, activities, logs = sample_data()
    week = range_dates("current-week", "2024-01-14")
    assert category_completion_rate(categories[2], activities, logs, week, "2024-01-14") == 0


def test_three_of_seven_days():
    categories, activities, logs = sample_data()
    week = range_dates("current-week", "2024-01-14")
    assert category_completion_rate(categories[0], activities, logs, week, "2024-01-14") == 43


def test_full_completion_with_mixed_id_types():
    categories = [Category(1, "Fitness")]
    activities = [Activity(1, "1", "Run", daily_hours=1)]
    logs = {"2024-01-01": [1], "2024-01-02": ["1"]}
    rate = category_completion_rate(categories[0], activities, logs, ["2024-01-01", "2024-01-02"], "2024-01-02")
    assert rate == 100


def test_future_dates_are_excluded():
    categories, activities, logs = sample_data()
    week = range_dates("current-week", "2024-01-10")
    # Work: 2 activities x 3 elapsed days, 3 completions.
    assert category_completion_rate(categories[1], activities, logs, week, "2024-01-10") == 50


def test_no_valid_dates_rate_is_zero():
    categories, activities, logs = sample_data()
    week = range_dates("current-week", "2024-01-20")
    assert category_completion_rate(categories[0], activities, logs, week, "2024-01-01") == 0


def test_activity_completion_rate():
    _, activities, logs = sample_data()
    week = range_dates("current-week", "2024-01-10")
    assert activity_completion_rate(activities[0], logs, week, "2024-01-10") == 67
    assert activity_completion_rate(activities[2], logs, week, "2024-01-10") == 33
    assert activity_completion_rate(activities[2], {}, week, "2024-01-10") == 0


def test_trend_is_signed():
    assert trend(43, 50) == -7
    assert trend(80, 20) == 60


def test_percent_rounds_half_up_and_guards_zero():
    assert percent(1, 8) == 13
    assert percent(5, 0) == 0
    assert percent(3, 2) == 100


def test_completion_matrix_shape_and_stale_ids():
    _, activities, _ = sample_data()
    grid = completion_matrix(activities, ["2024-01-08", "2024-01-09"], {"2024-01-08": [1, 99]})
    assert grid.shape == (3, 2)
    assert int(grid.sum()) == 1
    assert bool(grid[0, 0])


def test_category_performance_rows():
    categories, activities, logs = sample_data()
    week = range_dates("current-week", "2024-01-14")
    rows = category_performance(categories, activities, logs, week, "2024-01-14")
    assert [row["name"] for row in rows] == ["Fitness", "Work", "Empty"]
    assert [row["rate"] for row in rows] == [43, 21, 0]


def test_weekly_series_marks_future_days():
    _, activities, logs = sample_data()
    series = activity_series(activities[0], logs, "current-week", "2024-01-10")
    assert [point["label"] for point in series] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert [point["done"] for point in series] == [True, False, True, None, None, None, None]


def test_month_series_labels_are_day_numbers():
    _, activities, logs = sample_data()
    series = activity_series(activities[0], logs, "month", "2024-01-10")
    assert len(series) == 31
    assert series[0]["label"] == "1"
    assert series[7]["done"] is True


def test_year_series_is_monthly():
    _, activities, logs = sample_data()
    series = activity_series(activities[0], logs, "year", "2024-01-12")
    assert len(series) == 12
    assert series[0] == {"label": "Jan", "rate": 25}
    assert all(point["rate"] == 0 for point in series[1:])


def test_activity_performance_sorted_and_filtered():
    _, activities, logs = sample_data()
    rows = activity_performance(activities, logs, "current-week", "2024-01-10")
    assert [row["rate"] for row in rows] == [67, 67, 33]
    assert [row["name"] for row in rows] == ["Run", "Deep work", "Inbox"]

    work_rows = activity_performance(activities, logs, "current-week", "2024-01-10", category_id=2)
    assert {row["activity_id"] for row in work_rows} == {"2", "3"}


def test_split_performance_threshold():
    rows = [{"rate": 90}, {"rate": 70}, {"rate": 69}, {"rate": 0}]
    split = split_performance(rows)
    assert [row["rate"] for row in split["performing_well"]] == [90, 70]
    assert [row["rate"] for row in split["needs_attention"]] == [69, 0]


def test_weekly_summary_ignores_stale_ids():
    activities = [Activity(1, 1, "Run"), Activity(2, 1, "Swim")]
    logs = {"2024-01-08": [1, 2], "2024-01-09": [1, 99]}
    summary = weekly_summary(activities, logs, "2024-01-10")
    assert summary == {"completion_rate": 50, "completed": 3, "possible": 6, "avg_activities_per_day": 1}


def test_weekly_summary_empty():
    summary = weekly_summary([], {}, "2024-01-10")
    assert summary["completion_rate"] == 0
    assert summary["avg_activities_per_day"] == 0


def test_integral_float_ids_match_integer_log_entries():
    category = Category(1.0, "Fitness")
    activities = [Activity(1.0, 1, "Run")]
    assert activities[0].id == "1"
    rate = category_completion_rate(category, activities, {"2024-01-01": [1]}, ["2024-01-01"], "2024-01-01")
    assert rate == 100
