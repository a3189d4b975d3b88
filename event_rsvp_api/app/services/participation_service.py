"""
Business logic for participations.

Anyone may sign up for an existing event; listing and removing
sign-ups is reserved for administrators.  The repository enforces the
one-sign-up per (event, participant name, e-mail) rule and raises
``ConflictError`` on a duplicate.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List

from ..core.exceptions import NotFoundError
from ..repositories.base import EventRepository, ParticipationRepository
from ..schemas.participation import Participation, ParticipationCreate

logger = logging.getLogger(__name__)


class ParticipationService:

    def __init__(self, events: EventRepository, participations: ParticipationRepository) -> None:
        self.events = events
        self.participations = participations

    def _require_event(self, event_id: str) -> None:
        if self.events.get(event_id) is None:
            raise NotFoundError()

    async def create_participation(self, event_id: str, data: ParticipationCreate) -> Participation:
        self._require_event(event_id)
        participation = Participation(
            id=uuid.uuid4().hex,
            event_id=event_id,
            participant_name=data.participant_name,
            email=data.email,
            phone_number=data.phone_number,
            comment=data.comment,
            created_at=datetime.now(timezone.utc),
        )
        self.participations.create(participation)
        logger.info("New participation %s for event %s", participation.id, event_id)
        return participation

    async def list_participations(self, event_id: str) -> List[Participation]:
        self._require_event(event_id)
        return self.participations.list_by_event(event_id)

    async def delete_participation(self, event_id: str, participation_id: str, editor: str) -> None:
        if not self.participations.delete(event_id, participation_id):
            raise NotFoundError()
        logger.info("Admin %s deleted participation %s of event %s", editor, participation_id, event_id)
