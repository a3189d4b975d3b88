"""
Authentication endpoints.

Tokens are delivered as HttpOnly cookies: ``X-ACCESS-TOKEN`` is sent
with every request, ``X-REFRESH-TOKEN`` only to ``/auth`` routes.
"""

from fastapi import APIRouter, Depends, Response

from event_rsvp_api.app.api.deps import get_auth_service, get_settings
from event_rsvp_api.app.core.config import Settings
from event_rsvp_api.app.core.security import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    require_refresh_token,
)
from event_rsvp_api.app.schemas.admin import AuthToken, LoginRequest
from event_rsvp_api.app.services.auth_service import AuthService, IssuedTokens

router = APIRouter()

ACCESS_COOKIE_PATH = "/"
REFRESH_COOKIE_PATH = "/auth"


def _set_token_cookies(response: Response, settings: Settings, tokens: IssuedTokens) -> None:
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        tokens.access_token,
        max_age=settings.access_token_expire_minutes * 60,
        path=ACCESS_COOKIE_PATH,
        domain=settings.cookie_domain,
        secure=settings.cookie_secure,
        httponly=True,
        samesite="strict",
    )
    if tokens.refresh_token is not None:
        response.set_cookie(
            REFRESH_TOKEN_COOKIE,
            tokens.refresh_token,
            max_age=settings.refresh_token_expire_minutes * 60,
            path=REFRESH_COOKIE_PATH,
            domain=settings.cookie_domain,
            secure=settings.cookie_secure,
            httponly=True,
            samesite="strict",
        )


@router.post("/login")
async def login(
    credentials: LoginRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
    service: AuthService = Depends(get_auth_service),
) -> dict:
    """Log in with an admin id and password.

    Responds 401 ``{"error": "Unauthorized"}`` when the id is unknown
    or the password does not match.
    """
    tokens = await service.login(credentials.id, credentials.password)
    _set_token_cookies(response, settings, tokens)
    return {}


@router.get("/refresh")
async def refresh(
    response: Response,
    identity: AuthToken = Depends(require_refresh_token),
    settings: Settings = Depends(get_settings),
    service: AuthService = Depends(get_auth_service),
) -> dict:
    """Issue a new access token from the refresh token cookie."""
    tokens = await service.refresh(identity)
    _set_token_cookies(response, settings, tokens)
    return {}


@router.delete("/logout")
async def logout(
    response: Response,
    identity: AuthToken = Depends(require_refresh_token),
    settings: Settings = Depends(get_settings),
    service: AuthService = Depends(get_auth_service),
) -> dict:
    """End the session and drop both token cookies."""
    await service.logout(identity)
    response.delete_cookie(ACCESS_TOKEN_COOKIE, path=ACCESS_COOKIE_PATH, domain=settings.cookie_domain)
    response.delete_cookie(REFRESH_TOKEN_COOKIE, path=REFRESH_COOKIE_PATH, domain=settings.cookie_domain)
    return {}
