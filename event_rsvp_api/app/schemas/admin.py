"""
Pydantic models for administrator accounts and authentication.

``AdminAccount`` is the stored record; it never leaves the service
layer because it carries the password hash and the active session.
``AuthToken`` is the identity extracted from a verified access or
refresh token and is what route handlers receive from the session
dependencies.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, RequestModel

TokenType = Literal["access", "refresh"]


class SessionInfo(CamelModel):
    """The single active session of an admin account."""

    refresh_token: str
    expires_at: datetime


class AdminAccount(CamelModel):
    id: str
    password_hash: str
    name: str
    member_since: datetime
    session: Optional[SessionInfo] = None


class AuthToken(CamelModel):
    """Identity carried by a verified token."""

    id: str
    type: TokenType


class LoginRequest(RequestModel):
    id: str = Field(..., min_length=1, examples=["testuser1"])
    password: str = Field(..., min_length=1, examples=["Password13!"])
