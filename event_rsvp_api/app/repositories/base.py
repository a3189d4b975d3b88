"""Repository abstract base classes.

Services depend on these interfaces only, so the storage engine can be
replaced without touching business logic.  ``sqlite`` holds the
persistent implementations and ``memory`` the in-process ones used by
unit tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..schemas.admin import AdminAccount, SessionInfo
from ..schemas.event import Event
from ..schemas.participation import Participation


class AdminRepository(ABC):
    """Credential store for administrator accounts."""

    @abstractmethod
    def create(self, account: AdminAccount) -> AdminAccount:
        """Store a new account. Raises ``ConflictError`` if the id is taken."""
        ...

    @abstractmethod
    def get(self, admin_id: str) -> AdminAccount | None:
        ...

    @abstractmethod
    def set_session(self, admin_id: str, session: SessionInfo | None) -> None:
        """Replace (or clear, with ``None``) the active session of an account."""
        ...


class EventRepository(ABC):

    @abstractmethod
    def create(self, event: Event) -> Event:
        ...

    @abstractmethod
    def get(self, event_id: str) -> Event | None:
        ...

    @abstractmethod
    def replace(self, event: Event) -> Event:
        """Overwrite the stored record with ``event`` (last write wins)."""
        ...

    @abstractmethod
    def delete(self, event_id: str) -> bool:
        """Delete an event and its participations. Returns whether it existed."""
        ...

    @abstractmethod
    def list_by_month(self, year: int, month: int) -> list[Event]:
        """Events dated within the given month, ordered by date then creation time."""
        ...


class ParticipationRepository(ABC):

    @abstractmethod
    def create(self, participation: Participation) -> Participation:
        """Store a participation.

        Raises ``ConflictError`` if (event_id, participant_name, email)
        is already present.
        """
        ...

    @abstractmethod
    def get(self, event_id: str, participation_id: str) -> Participation | None:
        ...

    @abstractmethod
    def list_by_event(self, event_id: str) -> list[Participation]:
        """Participations of an event ordered by creation time."""
        ...

    @abstractmethod
    def delete(self, event_id: str, participation_id: str) -> bool:
        ...
