"""In-memory repository implementations for tests."""

from __future__ import annotations

from ..core.exceptions import ConflictError
from ..schemas.admin import AdminAccount, SessionInfo
from ..schemas.event import Event
from ..schemas.participation import Participation
from .base import AdminRepository, EventRepository, ParticipationRepository


class InMemoryAdminRepository(AdminRepository):

    def __init__(self) -> None:
        self._accounts: dict[str, AdminAccount] = {}

    def create(self, account: AdminAccount) -> AdminAccount:
        if account.id in self._accounts:
            raise ConflictError()
        self._accounts[account.id] = account.model_copy(deep=True)
        return account

    def get(self, admin_id: str) -> AdminAccount | None:
        account = self._accounts.get(admin_id)
        return account.model_copy(deep=True) if account else None

    def set_session(self, admin_id: str, session: SessionInfo | None) -> None:
        account = self._accounts.get(admin_id)
        if account is not None:
            account.session = session.model_copy() if session else None


class InMemoryParticipationRepository(ParticipationRepository):

    def __init__(self) -> None:
        self._items: dict[str, Participation] = {}

    def create(self, participation: Participation) -> Participation:
        key = (participation.event_id, participation.participant_name, participation.email)
        for item in self._items.values():
            if (item.event_id, item.participant_name, item.email) == key:
                raise ConflictError()
        self._items[participation.id] = participation.model_copy()
        return participation

    def get(self, event_id: str, participation_id: str) -> Participation | None:
        item = self._items.get(participation_id)
        if item is None or item.event_id != event_id:
            return None
        return item.model_copy()

    def list_by_event(self, event_id: str) -> list[Participation]:
        items = [p.model_copy() for p in self._items.values() if p.event_id == event_id]
        return sorted(items, key=lambda p: p.created_at)

    def delete(self, event_id: str, participation_id: str) -> bool:
        if self.get(event_id, participation_id) is None:
            return False
        del self._items[participation_id]
        return True

    def delete_by_event(self, event_id: str) -> None:
        for participation_id in [p.id for p in self._items.values() if p.event_id == event_id]:
            del self._items[participation_id]


class InMemoryEventRepository(EventRepository):
    """Events kept in a dict; deleting an event also clears its participations."""

    def __init__(self, participations: InMemoryParticipationRepository) -> None:
        self._events: dict[str, Event] = {}
        self._participations = participations

    def create(self, event: Event) -> Event:
        self._events[event.id] = event.model_copy()
        return event

    def get(self, event_id: str) -> Event | None:
        event = self._events.get(event_id)
        return event.model_copy() if event else None

    def replace(self, event: Event) -> Event:
        self._events[event.id] = event.model_copy()
        return event

    def delete(self, event_id: str) -> bool:
        if self._events.pop(event_id, None) is None:
            return False
        self._participations.delete_by_event(event_id)
        return True

    def list_by_month(self, year: int, month: int) -> list[Event]:
        events = [
            e.model_copy()
            for e in self._events.values()
            if e.date.year == year and e.date.month == month
        ]
        return sorted(events, key=lambda e: (e.date, e.created_at))
