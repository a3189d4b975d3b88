"""PUT /event/{event_id} - edit an existing event."""

from datetime import date

import pytest

from helpers import access_cookie, login

HALLOWEEN = "Halloween Party"
LIBERATION = "Liberation Day"
LISTENING = "Listening Session"


def _put(client, event_id, body, token):
    return client.put(f"/event/{event_id}", json=body, headers=access_cookie(token))


def _assert_unchanged_listening_session(event):
    assert event.date == date(2021, 8, 26)
    assert event.name == LISTENING
    assert event.detail == "Bring your favourite record."
    assert event.category == "Listening Club"
    assert event.editor == "testuser2"


def test_edit_year(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = client.get("/2021-10").json()["eventList"][0]["id"]

    response = _put(client, event_id, {"year": 2022}, token)
    assert response.status_code == 200

    event = event_repository.get(event_id)
    assert event.date == date(2022, 10, 31)
    assert event.name == HALLOWEEN
    assert event.detail is None
    assert event.category == "Party"
    assert event.editor == "testuser1"


def test_edit_month_keeps_year_and_day(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]
    events = client.get("/2021-8").json()["eventList"]
    event_id = next(e["id"] for e in events if e["name"] == LISTENING)

    response = _put(client, event_id, {"month": 10}, token)
    assert response.status_code == 200

    event = event_repository.get(event_id)
    assert event.date == date(2021, 10, 26)
    assert event.name == LISTENING
    assert event.detail == "Bring your favourite record."
    assert event.category == "Listening Club"
    assert event.editor == "testuser1"


def test_edit_date(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LISTENING]

    response = _put(client, event_id, {"date": 11}, token)
    assert response.status_code == 200

    event = event_repository.get(event_id)
    assert event.date == date(2021, 8, 11)
    assert event.editor == "testuser1"


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", "Liberation Day: Concert"),
        ("detail", "Meet at the main hall."),
        ("category", "Holiday"),
    ],
)
def test_edit_single_text_field(client, event_ids, event_repository, field, value):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LIBERATION]
    before = event_repository.get(event_id)

    response = _put(client, event_id, {field: value}, token)
    assert response.status_code == 200

    after = event_repository.get(event_id)
    assert getattr(after, field) == value
    for other in {"name", "detail", "category"} - {field}:
        assert getattr(after, other) == getattr(before, other)
    assert after.date == date(2021, 8, 15)
    assert after.created_at == before.created_at
    assert after.editor == "testuser1"


def test_edit_numerous_properties(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LISTENING]

    response = _put(client, event_id, {"month": 11, "date": 1, "name": "Listening Session #1"}, token)
    assert response.status_code == 200
    event = event_repository.get(event_id)
    assert event.date == date(2021, 11, 1)
    assert event.name == "Listening Session #1"
    assert event.detail == "Bring your favourite record."
    assert event.category == "Listening Club"

    response = _put(
        client,
        event_id,
        {
            "month": 10,
            "date": 11,
            "name": "First Listening Session",
            "detail": "Records provided",
            "category": "Club",
        },
        token,
    )
    assert response.status_code == 200
    event = event_repository.get(event_id)
    assert event.date == date(2021, 10, 11)
    assert event.name == "First Listening Session"
    assert event.detail == "Records provided"
    assert event.category == "Club"
    assert event.editor == "testuser1"


def test_leap_day_accepted(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LISTENING]

    response = _put(client, event_id, {"year": 2024, "month": 2, "date": 29}, token)
    assert response.status_code == 200
    assert event_repository.get(event_id).date == date(2024, 2, 29)


def test_response_carries_updated_event(client, event_ids):
    token = login(client)["X-ACCESS-TOKEN"]
    response = _put(client, event_ids[HALLOWEEN], {"date": 30}, token)
    assert response.status_code == 200
    body = response.json()
    assert body["date"] == "2021-10-30"
    assert body["editor"] == "testuser1"
    assert "createdAt" in body


def test_empty_body_only_stamps_editor(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LISTENING]

    response = _put(client, event_id, {}, token)
    assert response.status_code == 200
    event = event_repository.get(event_id)
    assert event.date == date(2021, 8, 26)
    assert event.editor == "testuser1"


def test_null_value_leaves_field_unchanged(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LISTENING]

    response = _put(client, event_id, {"detail": None, "name": "Renamed"}, token)
    assert response.status_code == 200
    event = event_repository.get(event_id)
    assert event.detail == "Bring your favourite record."
    assert event.name == "Renamed"


def test_fail_year_below_floor(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LISTENING]

    response = _put(
        client,
        event_id,
        {"year": 2020, "month": 10, "date": 11, "name": "First Listening Session"},
        token,
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Bad Request"}
    _assert_unchanged_listening_session(event_repository.get(event_id))


def test_fail_additional_field(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LISTENING]

    response = _put(
        client,
        event_id,
        {"month": 10, "date": 11, "name": "First Listening Session", "contact": "admin@example.com"},
        token,
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Bad Request"}
    _assert_unchanged_listening_session(event_repository.get(event_id))


@pytest.mark.parametrize(
    "body",
    [
        {"month": 13},
        {"date": 0},
        {"year": "next"},
        {"name": ""},
        {"month": True},
        {"year": "2022"},
        {"year": 10**20},
        {"year": 10000},
    ],
)
def test_fail_malformed_field(client, event_ids, event_repository, body):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LISTENING]

    response = _put(client, event_id, body, token)
    assert response.status_code == 400
    assert response.json() == {"error": "Bad Request"}
    _assert_unchanged_listening_session(event_repository.get(event_id))


@pytest.mark.parametrize("headers", [{}, {"Cookie": "X-ACCESS-TOKEN="}, {"Cookie": "X-ACCESS-TOKEN=garbage"}])
def test_fail_unauthorized(client, event_ids, event_repository, headers):
    login(client)
    event_id = event_ids[LISTENING]

    response = client.put(f"/event/{event_id}", json={"month": 10, "date": 11}, headers=headers)
    assert response.status_code == 401
    assert response.json() == {"error": "Authentication information is missing/invalid"}
    _assert_unchanged_listening_session(event_repository.get(event_id))


def test_fail_unauthorized_precedes_body_validation(client, event_ids, event_repository):
    event_id = event_ids[LISTENING]

    response = client.put(f"/event/{event_id}", json={"contact": "x"})
    assert response.status_code == 401

    response = client.put(
        f"/event/{event_id}",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 401
    assert response.json() == {"error": "Authentication information is missing/invalid"}
    _assert_unchanged_listening_session(event_repository.get(event_id))


@pytest.mark.parametrize("content", [b"{not json", b"", b"[1, 2]"])
def test_fail_unreadable_body(client, event_ids, event_repository, content):
    token = login(client)["X-ACCESS-TOKEN"]
    event_id = event_ids[LISTENING]

    response = client.put(
        f"/event/{event_id}",
        content=content,
        headers={**access_cookie(token), "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Bad Request"}
    _assert_unchanged_listening_session(event_repository.get(event_id))



def test_fail_invalid_calendar_date(client, event_ids, event_repository):
    token = login(client)["X-ACCESS-TOKEN"]

    # 2021-10-31 -> 2021-09-31 does not exist.
    event_id = event_ids[HALLOWEEN]
    response = _put(client, event_id, {"month": 9}, token)
    assert response.status_code == 400
    assert response.json() == {"error": "Bad Request"}
    event = event_repository.get(event_id)
    assert event.date == date(2021, 10, 31)
    assert event.editor == "testuser1"

    # 2021 is not a leap year.
    event_id = event_ids[LISTENING]
    response = _put(client, event_id, {"year": 2021, "month": 2, "date": 29}, token)
    assert response.status_code == 400
    assert response.json() == {"error": "Bad Request"}
    _assert_unchanged_listening_session(event_repository.get(event_id))


def test_fail_event_not_found(client, event_ids):
    token = login(client)["X-ACCESS-TOKEN"]

    response = _put(client, "100", {"name": "New Event", "year": 2022, "month": 11, "date": 1}, token)
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
