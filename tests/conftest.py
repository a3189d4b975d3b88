"""Shared fixtures: a seeded SQLite database and a TestClient per test."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from event_rsvp_api.app.core.config import Settings
from event_rsvp_api.app.core.db import init_db
from event_rsvp_api.app.core.security import hash_password
from event_rsvp_api.app.main import create_app
from event_rsvp_api.app.repositories.sqlite import (
    SQLiteAdminRepository,
    SQLiteEventRepository,
    SQLiteParticipationRepository,
)
from event_rsvp_api.app.schemas.admin import AdminAccount
from event_rsvp_api.app.schemas.event import Event
from event_rsvp_api.app.schemas.participation import Participation

from helpers import ADMINS, EVENTS, PARTICIPATIONS


@pytest.fixture(scope="session")
def password_hashes():
    """Argon2 is slow on purpose; hash the fixture passwords once."""
    return {admin_id: hash_password(password) for admin_id, (password, _, _) in ADMINS.items()}


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=str(tmp_path / "test.db"),
        access_token_secret="test-access-secret",
        refresh_token_secret="test-refresh-secret",
        cookie_secure=False,
        event_year_floor=2021,
    )


@pytest.fixture
def event_ids(settings, password_hashes):
    """Create and seed the database; return the event ids by name."""
    init_db(settings.database_url)

    admins = SQLiteAdminRepository(settings.database_url)
    for admin_id, (_, name, member_since) in ADMINS.items():
        admins.create(
            AdminAccount(
                id=admin_id,
                password_hash=password_hashes[admin_id],
                name=name,
                member_since=member_since,
            )
        )

    events = SQLiteEventRepository(settings.database_url)
    ids = {}
    created_at = datetime.now(timezone.utc)
    for index, (name, (event_date, editor, detail, category)) in enumerate(EVENTS.items()):
        event = Event(
            id=f"event{index + 1}",
            date=event_date,
            created_at=created_at + timedelta(seconds=index),
            name=name,
            editor=editor,
            detail=detail,
            category=category,
        )
        events.create(event)
        ids[name] = event.id

    participations = SQLiteParticipationRepository(settings.database_url)
    for index, (event_name, participant, email, phone, comment, created) in enumerate(PARTICIPATIONS):
        participations.create(
            Participation(
                id=f"participation{index + 1}",
                event_id=ids[event_name],
                participant_name=participant,
                email=email,
                phone_number=phone,
                comment=comment,
                created_at=created,
            )
        )
    return ids


@pytest.fixture
def client(settings, event_ids):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def event_repository(settings, event_ids):
    return SQLiteEventRepository(settings.database_url)

