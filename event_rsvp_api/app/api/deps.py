"""FastAPI dependencies returning the services built by ``create_app``."""

from fastapi import Request

from ..core.config import Settings
from ..services.auth_service import AuthService
from ..services.event_service import EventService
from ..services.participation_service import ParticipationService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_event_service(request: Request) -> EventService:
    return request.app.state.event_service


def get_participation_service(request: Request) -> ParticipationService:
    return request.app.state.participation_service
