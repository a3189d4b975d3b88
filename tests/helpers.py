"""Fixture data and request helpers shared by the API tests."""

from datetime import date, datetime, timezone

from event_rsvp_api.app.core.security import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE

ADMINS = {
    "testuser1": ("Password13!", "Test User One", datetime(2021, 3, 10, 0, 50, 43, tzinfo=timezone.utc)),
    "testuser2": ("Password12!", "Test User Two", datetime(2021, 3, 7, 1, 15, 42, tzinfo=timezone.utc)),
}

# name -> (date, editor, detail, category)
EVENTS = {
    "Halloween Party": (date(2021, 10, 31), "testuser1", None, "Party"),
    "Liberation Day": (date(2021, 8, 15), "testuser2", None, None),
    "Listening Session": (
        date(2021, 8, 26),
        "testuser2",
        "Bring your favourite record.",
        "Listening Club",
    ),
    "Year-End Concert": (
        date(2021, 12, 31),
        "testuser1",
        "The house band plays the songs voted for by members.",
        None,
    ),
}

# (event name, participant name, email, phone number, comment, created at)
PARTICIPATIONS = [
    ("Halloween Party", "Younghee Kim", "yhkim@gmail.com", None, None, datetime(2021, 8, 17, tzinfo=timezone.utc)),
    (
        "Listening Session",
        "Younghee Kim",
        "yhkim@gmail.com",
        "01012345678",
        "Hello, this is yhkim.",
        datetime(2021, 8, 20, tzinfo=timezone.utc),
    ),
    (
        "Listening Session",
        "Minsu Kim",
        "mskim@gmail.com",
        None,
        "Hello, this is mskim.",
        datetime(2021, 8, 21, tzinfo=timezone.utc),
    ),
    ("Year-End Concert", "Minsu Kim", "mskim@gmail.com", "01045671234", None, datetime(2021, 8, 21, tzinfo=timezone.utc)),
]


def login(client, admin_id="testuser1", password=None):
    """Log in and return the issued cookies by name.

    The client's cookie jar is cleared afterwards so that each request
    in a test states its credentials explicitly.
    """
    password = password or ADMINS[admin_id][0]
    response = client.post("/auth/login", json={"id": admin_id, "password": password})
    assert response.status_code == 200
    cookies = {}
    for header in response.headers.get_list("set-cookie"):
        name, _, rest = header.partition("=")
        cookies[name] = rest.split(";", 1)[0]
    client.cookies.clear()
    return cookies


def access_cookie(token):
    return {"Cookie": f"{ACCESS_TOKEN_COOKIE}={token}"}


def refresh_cookie(token):
    return {"Cookie": f"{REFRESH_TOKEN_COOKIE}={token}"}
