"""
Main entrypoint for the Event RSVP API.

This module assembles the FastAPI application: it sets up logging,
builds the repositories and services from the given ``Settings``,
registers the JSON error handlers and includes the routers.  Run it
with uvicorn's factory mode, e.g.::

    uvicorn event_rsvp_api.app.main:create_app --factory

or through ``run.py`` at the repository root.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings
from .core.db import init_db
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .core.security import TokenService
from .repositories.base import AdminRepository, EventRepository, ParticipationRepository
from .repositories.sqlite import (
    SQLiteAdminRepository,
    SQLiteEventRepository,
    SQLiteParticipationRepository,
)
from .services.auth_service import AuthService
from .services.event_service import EventService
from .services.participation_service import ParticipationService


def create_app(
    settings: Optional[Settings] = None,
    *,
    admins: Optional[AdminRepository] = None,
    events: Optional[EventRepository] = None,
    participations: Optional[ParticipationRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration value.  Read from the environment when omitted.
    admins, events, participations : optional repositories
        Storage to use instead of the SQLite database named by
        ``settings.database_url``.  When all three are given, no
        database is touched.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings)

    uses_sqlite = admins is None or events is None or participations is None
    admins = admins or SQLiteAdminRepository(settings.database_url)
    events = events or SQLiteEventRepository(settings.database_url)
    participations = participations or SQLiteParticipationRepository(settings.database_url)

    token_service = TokenService(settings, admins)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.token_service = token_service
    app.state.auth_service = AuthService(settings, admins, token_service)
    app.state.event_service = EventService(settings, events)
    app.state.participation_service = ParticipationService(events, participations)

    register_exception_handlers(app)
    app.include_router(router)

    if uses_sqlite:
        # Apply migrations at startup.  This creates the database file
        # if it does not exist and brings all tables up to date.
        @app.on_event("startup")
        async def startup_event() -> None:
            init_db(settings.database_url)

    return app
