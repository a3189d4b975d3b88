"""
Security helpers: password hashing, token issuing and the session guard.

Passwords are hashed with Argon2id (``argon2-cffi``).  Authentication
tokens are HS256 JSON Web Tokens (``PyJWT``) carrying the owner's
account id and the token ``type`` (``access`` or ``refresh``).  Access
and refresh tokens are signed with different keys taken from
``Settings``.

Access tokens are stateless: a valid signature and an unexpired
``exp`` claim are enough.  A refresh token is only accepted while it
is the one recorded in the owner's ``SessionInfo``; a new login
replaces it and a logout clears it, which revokes any copy still held
by a client.

``require_access_token`` and ``require_refresh_token`` are FastAPI
dependencies that read the token from its cookie and reject the
request with 401 before the route handler runs.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from fastapi import Depends, Request

from ..repositories.base import AdminRepository
from ..schemas.admin import AuthToken, TokenType
from .config import Settings
from .exceptions import AuthError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "X-ACCESS-TOKEN"
REFRESH_TOKEN_COOKIE = "X-REFRESH-TOKEN"

_JWT_ALG = "HS256"

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password with Argon2id and a random salt (PHC string format)."""
    if not password:
        raise ValueError("password must not be empty")
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against an Argon2id hash."""
    if not password or not password_hash:
        return False
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


class TokenService:
    """Issue and verify access/refresh tokens."""

    def __init__(self, settings: Settings, admins: AdminRepository) -> None:
        self.settings = settings
        self.admins = admins

    def _secret(self, token_type: TokenType) -> str:
        if token_type == "access":
            return self.settings.access_token_secret
        return self.settings.refresh_token_secret

    def lifetime(self, token_type: TokenType) -> timedelta:
        if token_type == "access":
            return timedelta(minutes=self.settings.access_token_expire_minutes)
        return timedelta(minutes=self.settings.refresh_token_expire_minutes)

    def issue(self, account_id: str, token_type: TokenType, now: Optional[datetime] = None) -> str:
        """Create a signed token for ``account_id``.

        ``now`` fixes the issue time so that callers persisting the
        expiry (the refresh session) agree with the ``exp`` claim.
        """
        now = now or datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "id": account_id,
            "type": token_type,
            "iat": int(now.timestamp()),
            "exp": int((now + self.lifetime(token_type)).timestamp()),
            # Two logins within the same second must still yield distinct tokens.
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret(token_type), algorithm=_JWT_ALG)

    def verify(self, token: Optional[str], token_type: TokenType = "access") -> AuthToken:
        """Verify ``token`` and return the identity it carries.

        Raises
        ------
        AuthError
            If the token is missing, malformed, signed with another key,
            expired, of a different type or, for refresh tokens, not the
            one stored in the owner's session.
        """
        if not token:
            raise AuthError()
        try:
            payload = jwt.decode(
                token,
                self._secret(token_type),
                algorithms=[_JWT_ALG],
                options={"require": ["exp", "iat"]},
            )
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected %s token: %s", token_type, e)
            raise AuthError() from e

        account_id = payload.get("id")
        if not isinstance(account_id, str) or payload.get("type") != token_type:
            raise AuthError()

        if token_type == "refresh":
            account = self.admins.get(account_id)
            session = account.session if account else None
            if session is None or session.refresh_token != token:
                logger.warning("Refresh token for %s does not match the active session", account_id)
                raise AuthError()
            if session.expires_at <= datetime.now(timezone.utc):
                raise AuthError()

        return AuthToken(id=account_id, type=token_type)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def require_access_token(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> AuthToken:
    """Dependency guarding admin-only routes."""
    return tokens.verify(request.cookies.get(ACCESS_TOKEN_COOKIE), "access")


def require_refresh_token(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> AuthToken:
    """Dependency for the session endpoints (logout, refresh)."""
    return tokens.verify(request.cookies.get(REFRESH_TOKEN_COOKIE), "refresh")
