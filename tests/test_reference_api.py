def test_class_type_crud(client, db):
    created = client.post("/api/v1/class-types", json={"name": "Science", "color": "#00AA88"})
    assert created.status_code == 201
    type_id = created.json()["id"]

    duplicate = client.post("/api/v1/class-types", json={"name": "Science"})
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "CONFLICT"

    updated = client.patch(f"/api/v1/class-types/{type_id}", json={"color": "#112233"})
    assert updated.json()["color"] == "#112233"
    assert updated.json()["name"] == "Science"

    assert client.get("/api/v1/class-types").json()[0]["name"] == "Science"
    assert client.delete(f"/api/v1/class-types/{type_id}").status_code == 200
    assert client.get(f"/api/v1/class-types/{type_id}").status_code == 404


def test_class_type_color_must_be_hex(client, db):
    response = client.post("/api/v1/class-types", json={"name": "Art", "color": "red"})
    assert response.status_code == 422


def test_current_semester(client, db):
    assert client.get("/api/v1/semesters/current").status_code == 404

    created = client.post(
        "/api/v1/semesters",
        json={"name": "Spring", "start_date": "2026-03-02", "end_date": "2026-07-17"},
    )
    assert created.status_code == 201

    current = client.get("/api/v1/semesters/current").json()
    assert current["name"] == "Spring"
    assert current["start_date"] == "2026-03-02"


def test_replace_current_semester(client, db, semester):
    response = client.put(
        "/api/v1/semesters/current",
        json={"start_date": "2025-08-25", "end_date": "2026-02-13"},
    )
    assert response.status_code == 200
    assert response.json()["id"] == semester.id
    assert response.json()["name"] == "Fall"
    assert response.json()["end_date"] == "2026-02-13"


def test_replace_current_semester_creates_when_missing(client, db):
    response = client.put(
        "/api/v1/semesters/current",
        json={"start_date": "2025-08-01", "end_date": "2026-05-31"},
    )
    assert response.status_code == 200
    assert len(client.get("/api/v1/semesters").json()) == 1


def test_semester_dates_must_be_ordered(client, db):
    response = client.post(
        "/api/v1/semesters",
        json={"start_date": "2026-05-31", "end_date": "2025-08-01"},
    )
    assert response.status_code == 422


def test_holidays(client, db):
    created = client.post("/api/v1/holidays", json={"date": "2025-10-03", "name": "개천절"})
    assert created.status_code == 201
    client.post("/api/v1/holidays", json={"date": "2026-01-01"})

    duplicate = client.post("/api/v1/holidays", json={"date": "2025-10-03"})
    assert duplicate.status_code == 409

    listed = client.get("/api/v1/holidays", params={"year": 2025}).json()
    assert [h["date"] for h in listed] == ["2025-10-03"]
    assert listed[0]["name"] == "개천절"

    assert client.delete("/api/v1/holidays/2025-10-03").status_code == 200
    assert client.delete("/api/v1/holidays/2025-10-03").status_code == 404

    cleared = client.delete("/api/v1/holidays")
    assert cleared.json()["count"] == 1
    assert client.get("/api/v1/holidays").json() == []


def test_adding_holiday_keeps_entries(client, db, class_types):
    client.post(
        "/api/v1/class-entries",
        json={"date": "2025-10-09", "class_type_id": class_types[0].id, "period": 1},
    )
    client.post("/api/v1/holidays", json={"date": "2025-10-09", "name": "한글날"})

    entries = client.get(
        "/api/v1/class-entries",
        params={"start_date": "2025-10-09", "end_date": "2025-10-09"},
    ).json()
    assert len(entries) == 1
