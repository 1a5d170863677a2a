from datetime import date

from conftest import make_entry

from app.services.statistics import compute_statistics, progress_percentage

ENTRIES = [
    make_entry("2025-09-01", 1, 1, status=True),
    make_entry("2025-09-01", 2, 2, status=False),
    make_entry("2025-09-02", 1, 1, status=True),
]


def test_worked_example():
    stats = compute_statistics(ENTRIES, "2025-09-01", "2025-09-02", date(2025, 9, 3))

    assert stats.total_weekdays == 2
    assert stats.completed_weekdays == 1
    assert stats.remaining_weekdays == 1
    assert stats.total_classes == 3
    assert stats.completed_classes == 2
    assert stats.remaining_classes == 1
    assert stats.class_stats[1].total == 2
    assert stats.class_stats[1].completed == 2
    assert stats.class_stats[2].total == 1
    assert stats.class_stats[2].completed == 0


def test_today_is_not_completed_yet():
    stats = compute_statistics(ENTRIES, "2025-09-01", "2025-09-02", date(2025, 9, 2))
    # 09-02 is all done but not strictly before today
    assert stats.completed_weekdays == 0


def test_range_filter():
    stats = compute_statistics(ENTRIES, "2025-09-02", "2025-09-30", date(2025, 10, 1))
    assert stats.total_weekdays == 1
    assert stats.total_classes == 1
    assert set(stats.class_stats) == {1}


def test_holiday_dates_are_left_out():
    stats = compute_statistics(
        ENTRIES, "2025-09-01", "2025-09-02", date(2025, 9, 3), holidays=["2025-09-01"]
    )
    assert stats.total_weekdays == 1
    assert stats.completed_weekdays == 1
    assert stats.total_classes == 1


def test_free_periods_count_toward_days_not_classes():
    entries = ENTRIES + [make_entry("2025-09-03", None, 4)]
    stats = compute_statistics(entries, "2025-09-01", "2025-09-03", date(2025, 9, 10))
    assert stats.total_weekdays == 3
    assert stats.total_classes == 3
    assert None not in stats.class_stats


def test_empty_input():
    stats = compute_statistics([], "2025-09-01", "2025-09-30", date(2025, 9, 3))
    assert stats.total_weekdays == 0
    assert stats.class_stats == {}


def test_progress_percentage():
    assert progress_percentage(0, 1) == 0
    assert progress_percentage(0, 0) == 0
    assert progress_percentage(2, 2) == 100
    assert progress_percentage(1, 3) == 33
    assert progress_percentage(1, 8) == 13  # 12.5 rounds up
