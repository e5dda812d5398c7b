"""Events, todos and notes within a family."""

import pytest


@pytest.fixture
def household(client, register, make_family, join):
    a_headers, a_user = register("alice")
    b_headers, b_user = register("bob")
    family = make_family(a_headers)
    join(b_headers, family["inviteCode"])
    return {
        "a": a_headers,
        "b": b_headers,
        "a_user": a_user,
        "b_user": b_user,
        "fid": family["id"],
    }


# --- Calendar ---

def test_events_listed_by_start_time(client, household):
    fid, a = household["fid"], household["a"]
    for title, start in [("Late", "2026-12-01T10:00:00"), ("Early", "2026-10-01T10:00:00"), ("Middle", "2026-11-01T10:00:00")]:
        r = client.post("/api/calendar", json={"familyId": fid, "title": title, "startDate": start}, headers=a)
        assert r.status_code == 201

    events = client.get(f"/api/calendar/{fid}", headers=household["b"]).json()
    assert [e["title"] for e in events] == ["Early", "Middle", "Late"]
    assert events[0]["createdByName"] == "alice"
    assert events[0]["createdByFullName"] == "Alice"
    assert events[0]["color"] == "#3B82F6"
    assert events[0]["allDay"] is False


def test_event_timezone_offsets_are_normalized_to_utc(client, household):
    fid, a = household["fid"], household["a"]
    r = client.post("/api/calendar", json={
        "familyId": fid, "title": "Call", "startDate": "2026-11-01T10:00:00+02:00",
    }, headers=a)
    assert r.status_code == 201
    assert r.json()["startDate"] == "2026-11-01T08:00:00+00:00"


@pytest.mark.parametrize("start, expected", [
    ("2026-11-01T18:00:00", "2026-11-01T18:00:00+00:00"),
    ("2026-11-01T18:00:00Z", "2026-11-01T18:00:00+00:00"),
    ("2026-11-01T13:00:00-05:00", "2026-11-01T18:00:00+00:00"),
])
def test_dated_event_is_stored_and_listed_in_utc(client, household, start, expected):
    fid, a = household["fid"], household["a"]
    r = client.post("/api/calendar", json={"familyId": fid, "title": "Dinner", "startDate": start}, headers=a)
    assert r.status_code == 201, r.text
    assert r.json()["startDate"] == expected

    events = client.get(f"/api/calendar/{fid}", headers=a).json()
    assert [e["startDate"] for e in events] == [expected]


def test_event_range_mixing_offsets_is_compared_in_utc(client, household):
    fid, a = household["fid"], household["a"]
    # 10:00+02:00 is 08:00 UTC, one hour before the naive 09:00 end
    r = client.post("/api/calendar", json={
        "familyId": fid, "title": "Call",
        "startDate": "2026-11-01T10:00:00+02:00", "endDate": "2026-11-01T09:00:00",
    }, headers=a)
    assert r.status_code == 201, r.text
    assert r.json()["endDate"] == "2026-11-01T09:00:00+00:00"


def test_update_event_replaces_fields(client, household):
    fid, a, b = household["fid"], household["a"], household["b"]
    event = client.post("/api/calendar", json={
        "familyId": fid,
        "title": "Picnic",
        "description": "Bring blankets",
        "startDate": "2026-06-01T12:00:00",
        "color": "#EF4444",
    }, headers=a).json()

    r = client.put(f"/api/calendar/{event['id']}", json={
        "title": "Picnic (moved)",
        "startDate": "2026-06-02T12:00:00",
        "endDate": "2026-06-02T15:00:00",
        "allDay": True,
    }, headers=b)
    assert r.status_code == 200
    updated = r.json()
    assert updated["title"] == "Picnic (moved)"
    assert updated["description"] is None
    assert updated["endDate"] == "2026-06-02T15:00:00+00:00"
    assert updated["allDay"] is True
    assert updated["color"] == "#3B82F6"
    assert updated["createdBy"] == household["a_user"]["id"]


def test_event_validation(client, household):
    fid, a = household["fid"], household["a"]
    r = client.post("/api/calendar", json={"familyId": fid, "title": "x", "startDate": "tomorrow"}, headers=a)
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "startDate"

    r = client.post("/api/calendar", json={
        "familyId": fid, "title": "x",
        "startDate": "2026-06-02T12:00:00", "endDate": "2026-06-01T12:00:00",
    }, headers=a)
    assert r.status_code == 400
    assert r.json() == {"error": "End date must not be before start date"}


def test_delete_event(client, household):
    fid, a = household["fid"], household["a"]
    event = client.post("/api/calendar", json={"familyId": fid, "title": "x", "startDate": "2026-06-01T00:00:00"}, headers=a).json()

    r = client.delete(f"/api/calendar/{event['id']}", headers=household["b"])
    assert r.status_code == 200
    assert r.json() == {"message": "Event deleted successfully"}
    assert client.get(f"/api/calendar/{fid}", headers=a).json() == []


# --- Todos ---

def test_todos_sorted_open_first_then_due_date(client, household):
    fid, a = household["fid"], household["a"]

    def create(title, **extra):
        r = client.post("/api/todos", json={"familyId": fid, "title": title, **extra}, headers=a)
        assert r.status_code == 201
        return r.json()

    done = create("Done", dueDate="2026-01-01T00:00:00")
    create("Later", dueDate="2026-03-01T00:00:00")
    create("Sooner", dueDate="2026-02-01T00:00:00")
    create("Someday")
    client.patch(f"/api/todos/{done['id']}/toggle", headers=a)

    todos = client.get(f"/api/todos/{fid}", headers=a).json()
    assert [t["title"] for t in todos] == ["Sooner", "Later", "Someday", "Done"]
    assert todos[0]["dueDate"] == "2026-02-01T00:00:00+00:00"


def test_todo_due_date_survives_update(client, household):
    fid, a = household["fid"], household["a"]
    r = client.post("/api/todos", json={"familyId": fid, "title": "Taxes", "dueDate": "2026-11-01T18:00:00"}, headers=a)
    assert r.status_code == 201, r.text
    todo = r.json()
    assert todo["dueDate"] == "2026-11-01T18:00:00+00:00"

    r = client.put(f"/api/todos/{todo['id']}", json={"title": "Taxes", "dueDate": "2026-11-02T09:30:00+01:00"}, headers=a)
    assert r.status_code == 200, r.text
    assert r.json()["dueDate"] == "2026-11-02T08:30:00+00:00"


def test_toggle_twice_restores_state(client, household):
    fid, a = household["fid"], household["a"]
    todo = client.post("/api/todos", json={"familyId": fid, "title": "Laundry"}, headers=a).json()
    assert todo["completed"] is False

    first = client.patch(f"/api/todos/{todo['id']}/toggle", headers=household["b"]).json()
    second = client.patch(f"/api/todos/{todo['id']}/toggle", headers=a).json()
    assert first["completed"] is True
    assert second["completed"] is False


def test_todo_assignment(client, household, register):
    fid, a = household["fid"], household["a"]
    bob = household["b_user"]

    r = client.post("/api/todos", json={
        "familyId": fid, "title": "Mow lawn", "assignedTo": bob["id"], "priority": "low",
    }, headers=a)
    assert r.status_code == 201
    todo = r.json()
    assert todo["assignedTo"] == bob["id"]
    assert todo["assignedToName"] == "bob"
    assert todo["assignedToFullName"] == "Bob"
    assert todo["priority"] == "low"

    _, stranger = register("stranger")
    r = client.post("/api/todos", json={"familyId": fid, "title": "x", "assignedTo": stranger["id"]}, headers=a)
    assert r.status_code == 400
    assert r.json() == {"error": "Assignee is not a member of this family"}


def test_update_todo_replaces_fields(client, household):
    fid, a = household["fid"], household["a"]
    todo = client.post("/api/todos", json={
        "familyId": fid, "title": "Paint", "assignedTo": household["b_user"]["id"], "dueDate": "2026-05-01T00:00:00",
    }, headers=a).json()

    r = client.put(f"/api/todos/{todo['id']}", json={"title": "Paint fence", "completed": True, "priority": "high"}, headers=a)
    assert r.status_code == 200
    updated = r.json()
    assert updated["title"] == "Paint fence"
    assert updated["completed"] is True
    assert updated["priority"] == "high"
    assert updated["assignedTo"] is None
    assert updated["dueDate"] is None


def test_todo_priority_is_validated(client, household):
    r = client.post("/api/todos", json={"familyId": household["fid"], "title": "x", "priority": "urgent"}, headers=household["a"])
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "priority"


def test_delete_todo(client, household):
    fid, a = household["fid"], household["a"]
    todo = client.post("/api/todos", json={"familyId": fid, "title": "x"}, headers=a).json()
    assert client.delete(f"/api/todos/{todo['id']}", headers=a).status_code == 200
    assert client.get(f"/api/todos/{fid}", headers=a).json() == []


# --- Notes ---

def test_notes_listed_by_last_update(client, household):
    fid, a = household["fid"], household["a"]
    first = client.post("/api/notes", json={"familyId": fid, "title": "First", "content": "a"}, headers=a).json()
    client.post("/api/notes", json={"familyId": fid, "title": "Second"}, headers=a)

    notes = client.get(f"/api/notes/{fid}", headers=a).json()
    assert [n["title"] for n in notes] == ["Second", "First"]
    assert notes[0]["content"] == ""

    r = client.put(f"/api/notes/{first['id']}", json={"title": "First (edited)", "content": "b"}, headers=household["b"])
    assert r.status_code == 200
    assert r.json()["updatedAt"] > first["updatedAt"]

    notes = client.get(f"/api/notes/{fid}", headers=a).json()
    assert [n["title"] for n in notes] == ["First (edited)", "Second"]
    assert notes[0]["createdByName"] == "alice"


def test_note_requires_title(client, household):
    r = client.post("/api/notes", json={"familyId": household["fid"], "title": ""}, headers=household["a"])
    assert r.status_code == 400
