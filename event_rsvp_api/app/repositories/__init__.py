"""Storage abstractions and their SQLite and in-memory implementations."""

from .base import AdminRepository, EventRepository, ParticipationRepository  # noqa: F401
