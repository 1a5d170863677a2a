from conftest import fetch_entries
from sqlalchemy.exc import SQLAlchemyError

from app.services.class_entry import ClassEntryService

API = "/api/v1/schedule"


def week_template(class_types):
    c1, c2, c3 = (ct.id for ct in class_types)
    return {
        "monday": {"1": c1, "3": c2},
        "wednesday": {"2": c3},
    }


def materialize(client, class_types, start, end, policy=None):
    payload = {
        "start_date": start,
        "end_date": end,
        "weekly_schedule": week_template(class_types),
    }
    if policy:
        payload["policy"] = policy
    return client.post(f"{API}/materialize", json=payload)


def test_default_template(client):
    response = client.get(f"{API}/default-template")
    assert response.status_code == 200
    template = response.json()
    assert set(template) == {
        "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
    }
    assert template["monday"]["3"] == 4
    assert template["monday"]["1"] is None
    assert all(v is None for v in template["saturday"].values())


def test_materialize_creates_one_entry_per_slot(client, db, class_types, semester):
    response = materialize(client, class_types, "2025-09-01", "2025-09-07")
    assert response.status_code == 200
    body = response.json()
    assert body["created"] == 3
    assert body["deleted"] == 0
    assert body["policy"] == "preserve-existing"

    entries = fetch_entries(db)
    assert [(e.date.isoformat(), e.period) for e in entries] == [
        ("2025-09-01", 1),
        ("2025-09-01", 3),
        ("2025-09-03", 2),
    ]
    assert all(e.semester_range_id == semester.id for e in entries)
    assert all(e.status is False and e.notes == "" for e in entries)


def test_rematerialize_preserves_progress(client, db, class_types, semester):
    materialize(client, class_types, "2025-09-01", "2025-09-05")
    client.put(
        "/api/v1/class-entries/notes",
        json={"date": "2025-09-03", "class_type_id": class_types[2].id, "period": 2, "notes": "ch. 3"},
    )
    client.post(
        "/api/v1/class-entries/toggle",
        json={"date": "2025-09-01", "class_type_id": class_types[0].id, "period": 1},
    )

    body = materialize(client, class_types, "2025-09-03", "2025-09-12").json()
    assert body["deleted"] == 1
    assert body["created"] == 4
    assert body["preserved"] == 1

    by_slot = {(e.date.isoformat(), e.period): e for e in fetch_entries(db)}
    assert by_slot[("2025-09-03", 2)].notes == "ch. 3"
    # outside the re-materialized range
    assert by_slot[("2025-09-01", 1)].status is True
    assert len(by_slot) == 6


def test_rematerialize_replace_all_resets(client, db, class_types, semester):
    materialize(client, class_types, "2025-09-01", "2025-09-05")
    client.post(
        "/api/v1/class-entries/toggle",
        json={"date": "2025-09-01", "class_type_id": class_types[0].id, "period": 1},
    )

    body = materialize(client, class_types, "2025-09-01", "2025-09-05", policy="replace-all").json()
    assert body["deleted"] == 3
    assert body["created"] == 3
    assert body["preserved"] == 0
    assert all(e.status is False for e in fetch_entries(db))


def test_materialize_drops_slots_removed_from_template(client, db, class_types, semester):
    materialize(client, class_types, "2025-09-01", "2025-09-05")

    response = client.post(
        f"{API}/materialize",
        json={
            "start_date": "2025-09-01",
            "end_date": "2025-09-05",
            "weekly_schedule": {"friday": {"7": class_types[0].id}},
        },
    )
    assert response.json()["created"] == 1
    assert [(e.date.isoformat(), e.period) for e in fetch_entries(db)] == [("2025-09-05", 7)]


def test_range_over_limit_writes_nothing(client, db, class_types, semester):
    materialize(client, class_types, "2025-09-01", "2025-09-05")

    response = materialize(client, class_types, "2025-01-01", "2026-01-01")
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert len(fetch_entries(db)) == 3


def test_inverted_range_is_rejected(client, db, class_types):
    response = materialize(client, class_types, "2025-09-10", "2025-09-01")
    assert response.status_code == 422
    assert fetch_entries(db) == []


def test_invalid_period_in_template(client, db, class_types):
    response = client.post(
        f"{API}/materialize",
        json={
            "start_date": "2025-09-01",
            "end_date": "2025-09-05",
            "weekly_schedule": {"monday": {"9": class_types[0].id}},
        },
    )
    assert response.status_code == 422


def test_unknown_semester(client, db, class_types):
    payload = {
        "start_date": "2025-09-01",
        "end_date": "2025-09-05",
        "weekly_schedule": week_template(class_types),
        "semester_range_id": 404,
    }
    response = client.post(f"{API}/materialize", json=payload)
    assert response.status_code == 404
    assert fetch_entries(db) == []


def test_unknown_class_type_in_template(client, db, class_types, semester):
    materialize(client, class_types, "2025-09-01", "2025-09-05")

    response = client.post(
        f"{API}/materialize",
        json={
            "start_date": "2025-09-01",
            "end_date": "2025-09-05",
            "weekly_schedule": {"monday": {"1": 999, "2": class_types[0].id}},
        },
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
    assert response.json()["error"]["details"]["identifier"] == "999"
    assert len(fetch_entries(db)) == 3


def test_store_failure_leaves_range_untouched(client, db, class_types, semester, monkeypatch):
    materialize(client, class_types, "2025-09-01", "2025-09-05")
    client.post(
        "/api/v1/class-entries/toggle",
        json={"date": "2025-09-01", "class_type_id": class_types[0].id, "period": 1},
    )

    def fail_insert(self, entries):
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(ClassEntryService, "bulk_insert", fail_insert)

    response = materialize(client, class_types, "2025-09-01", "2025-09-12", policy="replace-all")
    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"

    entries = fetch_entries(db)
    assert [(e.date.isoformat(), e.period) for e in entries] == [
        ("2025-09-01", 1),
        ("2025-09-01", 3),
        ("2025-09-03", 2),
    ]
    assert entries[0].status is True
