"""
Business logic for events.

Event dates travel as separate ``year``/``month``/``date`` components.
On update, the components present in the request replace the
corresponding parts of the stored date and the merged result must be
a real calendar date (no 31st of September, 29th of February only in
leap years).  A supplied year must not lie below the configured year
floor.  Every check runs before anything is written, so a rejected
request leaves the stored event untouched.
"""

import logging
import uuid
from datetime import date, datetime, timezone
from typing import List

from ..core.config import Settings
from ..core.exceptions import NotFoundError, ValidationError
from ..repositories.base import EventRepository
from ..schemas.event import Event, EventCreate, EventUpdate

logger = logging.getLogger(__name__)


class EventService:
    """Event listing and editing."""

    def __init__(self, settings: Settings, events: EventRepository) -> None:
        self.settings = settings
        self.events = events

    def _check_year(self, year: int) -> None:
        if year < self.settings.year_floor:
            raise ValidationError()

    @staticmethod
    def _calendar_date(year: int, month: int, day: int) -> date:
        try:
            return date(year, month, day)
        except (ValueError, OverflowError) as e:
            raise ValidationError() from e

    async def list_month(self, year: int, month: int) -> List[Event]:
        """Return the events dated within ``year``-``month``."""
        if not 1 <= month <= 12 or not 1 <= year <= 9999:
            raise ValidationError()
        return self.events.list_by_month(year, month)

    async def get_event(self, event_id: str) -> Event:
        event = self.events.get(event_id)
        if event is None:
            raise NotFoundError()
        return event

    async def create_event(self, data: EventCreate, editor: str) -> Event:
        self._check_year(data.year)
        event = Event(
            id=uuid.uuid4().hex,
            date=self._calendar_date(data.year, data.month, data.date),
            created_at=datetime.now(timezone.utc),
            name=data.name,
            editor=editor,
            detail=data.detail,
            category=data.category,
        )
        self.events.create(event)
        logger.info("Admin %s created event %s (%s)", editor, event.id, event.date)
        return event

    async def update_event(self, event_id: str, updates: EventUpdate, editor: str) -> Event:
        """Apply a partial update to an event.

        Fields absent from ``updates`` keep their stored values.  The
        ``editor`` is always replaced by the caller.

        Raises
        ------
        NotFoundError
            If the event does not exist.
        ValidationError
            If the merged date is not a calendar date or the supplied
            year is below the floor.
        """
        event = await self.get_event(event_id)
        changes = updates.supplied()

        candidate = self._calendar_date(
            changes.get("year", event.date.year),
            changes.get("month", event.date.month),
            changes.get("date", event.date.day),
        )
        if "year" in changes:
            self._check_year(changes["year"])

        updated = event.model_copy(
            update={
                "date": candidate,
                "editor": editor,
                **{key: changes[key] for key in ("name", "detail", "category") if key in changes},
            }
        )
        self.events.replace(updated)
        logger.info("Admin %s updated event %s: %s", editor, event_id, sorted(changes))
        return updated

    async def delete_event(self, event_id: str, editor: str) -> None:
        """Delete an event together with its participations."""
        if not self.events.delete(event_id):
            raise NotFoundError()
        logger.info("Admin %s deleted event %s", editor, event_id)
