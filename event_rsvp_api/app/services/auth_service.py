"""
Business logic for administrator sessions.

Login checks the password, issues an access and a refresh token and
records the refresh token as the account's only active session.
Refresh hands out a new access token and rotates the refresh token
once it is close to expiring.  Logout clears the session, which makes
any outstanding refresh token unusable.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional

from ..core.config import Settings
from ..core.exceptions import AuthError
from ..core.security import TokenService, verify_password
from ..repositories.base import AdminRepository
from ..schemas.admin import AuthToken, SessionInfo

logger = logging.getLogger(__name__)


class IssuedTokens(NamedTuple):
    access_token: str
    # ``None`` when the current refresh token is kept.
    refresh_token: Optional[str]


class AuthService:
    """Administrator login sessions."""

    def __init__(self, settings: Settings, admins: AdminRepository, tokens: TokenService) -> None:
        self.settings = settings
        self.admins = admins
        self.tokens = tokens

    def _start_session(self, admin_id: str, now: datetime) -> str:
        refresh_token = self.tokens.issue(admin_id, "refresh", now=now)
        self.admins.set_session(
            admin_id,
            SessionInfo(refresh_token=refresh_token, expires_at=now + self.tokens.lifetime("refresh")),
        )
        return refresh_token

    async def login(self, admin_id: str, password: str) -> IssuedTokens:
        """Authenticate an admin and open a new session.

        A previous session of the same account is replaced, so only the
        most recent login can refresh its tokens.
        """
        account = self.admins.get(admin_id)
        if account is None or not verify_password(password, account.password_hash):
            logger.warning("Failed login attempt for %s", admin_id)
            raise AuthError("Unauthorized")

        now = datetime.now(timezone.utc)
        access_token = self.tokens.issue(admin_id, "access", now=now)
        refresh_token = self._start_session(admin_id, now)
        logger.info("Admin %s logged in", admin_id)
        return IssuedTokens(access_token, refresh_token)

    async def refresh(self, identity: AuthToken) -> IssuedTokens:
        """Issue a new access token for a verified refresh token.

        The refresh token itself is replaced when less than
        ``refresh_renew_threshold_minutes`` of its lifetime remain.
        """
        now = datetime.now(timezone.utc)
        access_token = self.tokens.issue(identity.id, "access", now=now)

        account = self.admins.get(identity.id)
        if account is None or account.session is None:
            raise AuthError()
        threshold = timedelta(minutes=self.settings.refresh_renew_threshold_minutes)
        refresh_token = None
        if account.session.expires_at - now < threshold:
            refresh_token = self._start_session(identity.id, now)
            logger.info("Rotated refresh token of %s", identity.id)
        return IssuedTokens(access_token, refresh_token)

    async def logout(self, identity: AuthToken) -> None:
        self.admins.set_session(identity.id, None)
        logger.info("Admin %s logged out", identity.id)
