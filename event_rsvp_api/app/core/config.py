"""
Application configuration.

The ``Settings`` dataclass holds every tunable value of the service:
token signing keys and lifetimes, cookie attributes, the location of
the SQLite database and the lowest year an event may be scheduled in.
Values are read from environment variables by ``Settings.from_env``
and the resulting object is handed to ``create_app``; components read
it from ``request.app.state.settings`` instead of importing a global.
"""

import os
from dataclasses import dataclass
from datetime import date
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    project_name: str = "Event RSVP API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the current working directory by ``core.db``.
    database_url: str = "event_rsvp.db"

    access_token_secret: str = "change_me_access"
    refresh_token_secret: str = "change_me_refresh"
    access_token_expire_minutes: int = 15
    refresh_token_expire_minutes: int = 120
    # A refresh token with less lifetime left than this is replaced by
    # a new one when it is used at /auth/refresh.
    refresh_renew_threshold_minutes: int = 20

    cookie_domain: Optional[str] = None
    cookie_secure: bool = True

    # Lowest year accepted for an event date.  ``None`` means the
    # current calendar year.
    event_year_floor: Optional[int] = None

    @property
    def year_floor(self) -> int:
        if self.event_year_floor is not None:
            return self.event_year_floor
        return date.today().year

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        return cls(
            project_name=os.getenv("PROJECT_NAME", cls.project_name),
            api_version=os.getenv("API_VERSION", cls.api_version),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            log_file=os.getenv("LOG_FILE") or None,
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            access_token_secret=os.getenv("ACCESS_TOKEN_SECRET", cls.access_token_secret),
            refresh_token_secret=os.getenv("REFRESH_TOKEN_SECRET", cls.refresh_token_secret),
            access_token_expire_minutes=int(
                os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(cls.access_token_expire_minutes))
            ),
            refresh_token_expire_minutes=int(
                os.getenv("REFRESH_TOKEN_EXPIRE_MINUTES", str(cls.refresh_token_expire_minutes))
            ),
            refresh_renew_threshold_minutes=int(
                os.getenv("REFRESH_RENEW_THRESHOLD_MINUTES", str(cls.refresh_renew_threshold_minutes))
            ),
            cookie_domain=os.getenv("COOKIE_DOMAIN") or None,
            cookie_secure=_env_bool("COOKIE_SECURE", "true"),
            event_year_floor=_env_optional_int("EVENT_YEAR_FLOOR"),
        )
