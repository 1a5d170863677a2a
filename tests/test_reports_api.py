from io import BytesIO

from openpyxl import load_workbook


def seed(client, class_types):
    c1, c2 = class_types[0].id, class_types[1].id
    rows = [
        ("2025-09-01", c1, 1, True),
        ("2025-09-01", c2, 2, False),
        ("2025-09-02", c1, 1, True),
        ("2025-10-06", c1, 1, True),
    ]
    for day, class_type_id, period, status in rows:
        client.post(
            "/api/v1/class-entries",
            json={"date": day, "class_type_id": class_type_id, "period": period, "status": status},
        )


def test_statistics_for_range(client, db, class_types, chuseok):
    seed(client, class_types)

    response = client.get(
        "/api/v1/statistics", params={"start_date": "2025-09-01", "end_date": "2025-10-31"}
    )
    assert response.status_code == 200
    stats = response.json()

    assert stats["today"] == "2025-09-03"
    assert stats["total_weekdays"] == 2
    assert stats["completed_weekdays"] == 1
    assert stats["remaining_weekdays"] == 1
    assert stats["total_classes"] == 3
    assert stats["completed_classes"] == 2
    assert stats["remaining_classes"] == 1
    assert stats["completion_percentage"] == 67

    first, second = stats["class_stats"]
    assert first["name"] == "Class 1"
    assert (first["total"], first["completed"], first["percentage"]) == (2, 2, 100)
    assert second["color"] == "#4ECDC4"
    assert (second["total"], second["completed"], second["remaining"]) == (1, 0, 1)


def test_statistics_default_to_current_semester(client, db, class_types, semester, chuseok):
    seed(client, class_types)

    stats = client.get("/api/v1/statistics").json()
    assert stats["start_date"] == "2025-09-01"
    assert stats["end_date"] == "2025-12-31"
    assert stats["total_classes"] == 3


def test_statistics_need_a_semester_or_range(client, db):
    response = client.get("/api/v1/statistics")
    assert response.status_code == 404


def test_statistics_empty_range(client, db):
    stats = client.get(
        "/api/v1/statistics", params={"start_date": "2025-09-01", "end_date": "2025-09-30"}
    ).json()
    assert stats["total_classes"] == 0
    assert stats["completion_percentage"] == 0
    assert stats["class_stats"] == []


def test_calendar_hides_classes_on_holidays(client, db, class_types, semester, chuseok):
    seed(client, class_types)
    client.post(
        "/api/v1/class-entries",
        json={"date": "2025-10-07", "class_type_id": class_types[2].id, "period": 4},
    )

    response = client.get(
        "/api/v1/calendar", params={"start_date": "2025-10-05", "end_date": "2025-10-07"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["semester"]["name"] == "Fall"

    sunday, holiday, tuesday = body["days"]
    assert sunday["day_name"] == "sunday"
    assert sunday["is_weekday"] is False
    assert holiday["is_holiday"] is True
    assert holiday["holiday_name"] == "추석"
    assert holiday["has_class"] is False
    assert tuesday["has_class"] is True
    assert tuesday["classes"] == [class_types[2].id]
    assert tuesday["status"] == {f"{class_types[2].id}-4": False}


def test_calendar_single_day(client, db, class_types, semester):
    seed(client, class_types)

    day = client.get("/api/v1/calendar/2025-09-01").json()
    assert day["date"] == "2025-09-01"
    assert sorted(day["classes"]) == [class_types[0].id, class_types[1].id]
    assert day["status"][f"{class_types[0].id}-1"] is True
    assert len(day["entries"]) == 2


def test_calendar_range_limit(client, db):
    response = client.get(
        "/api/v1/calendar", params={"start_date": "2025-01-01", "end_date": "2026-01-01"}
    )
    assert response.status_code == 422


def test_export_workbook(client, db, class_types, chuseok):
    seed(client, class_types)

    response = client.get(
        "/api/v1/statistics/export",
        params={"start_date": "2025-09-01", "end_date": "2025-10-31"},
    )
    assert response.status_code == 200
    assert "class_schedule_2025-09-01_2025-10-31.xlsx" in response.headers["content-disposition"]

    wb = load_workbook(BytesIO(response.content))
    assert wb.sheetnames == ["Entries", "Statistics"]

    rows = list(wb["Entries"].iter_rows(values_only=True))
    assert rows[0] == ("Date", "Day", "Period", "Class", "Completed", "Holiday", "Notes")
    assert len(rows) == 5
    assert rows[1][:5] == ("2025-09-01", "Monday", 1, "Class 1", "Y")
    holiday_row = rows[4]
    assert holiday_row[0] == "2025-10-06"
    assert holiday_row[5] == "Y"

    stats = wb["Statistics"]
    assert stats["A1"].value == "Range"
    assert stats["B5"].value == 3  # total classes
