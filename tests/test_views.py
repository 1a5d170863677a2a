from datetime import date

from conftest import make_entry

from app.models import Holiday, SemesterRange
from app.services.views import (
    build_day_views,
    classes_for_date,
    comments_for_date,
    status_for_date,
)

ENTRIES = [
    make_entry("2025-09-01", 1, 1, status=True, notes="intro"),
    make_entry("2025-09-01", 2, 3),
    make_entry("2025-09-01", None, 5),
    make_entry("2025-09-02", 1, 2, notes="quiz"),
]
for entry_id, entry in enumerate(ENTRIES, start=1):
    entry.id = entry_id


def test_status_for_date():
    assert status_for_date(ENTRIES, date(2025, 9, 1)) == {
        "1-1": True,
        "2-3": False,
        "None-5": False,
    }


def test_comments_for_date():
    assert comments_for_date(ENTRIES, "2025-09-02") == {"1-2": "quiz"}


def test_classes_for_date_skips_free_periods():
    assert classes_for_date(ENTRIES, date(2025, 9, 1)) == {1, 2}
    assert classes_for_date(ENTRIES, date(2025, 9, 3)) == set()


def test_day_views_hide_classes_on_holidays():
    holidays = [Holiday(date=date(2025, 9, 2), name="Sports day")]
    semester = SemesterRange(name="Fall", start_date=date(2025, 9, 1), end_date=date(2025, 12, 31))

    views = build_day_views(ENTRIES, date(2025, 8, 31), date(2025, 9, 2), holidays, semester)

    assert [v.date for v in views] == [date(2025, 8, 31), date(2025, 9, 1), date(2025, 9, 2)]
    before, monday, holiday = views

    assert not before.within_semester
    assert not before.has_class

    assert monday.has_class
    assert monday.classes == [1, 2]
    assert monday.status["1-1"] is True
    assert monday.comments["1-1"] == "intro"

    assert holiday.is_holiday
    assert holiday.holiday_name == "Sports day"
    assert not holiday.has_class
    # entries are kept, only hidden
    assert holiday.comments == {"1-2": "quiz"}
