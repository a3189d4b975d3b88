"""
Participation endpoints.

Signing up is public; the participant list and removal of entries
are admin-only.
"""

from fastapi import APIRouter, Depends, status

from event_rsvp_api.app.api.deps import get_participation_service
from event_rsvp_api.app.core.security import require_access_token
from event_rsvp_api.app.schemas.admin import AuthToken
from event_rsvp_api.app.schemas.participation import (
    Participation,
    ParticipationCreate,
    ParticipationList,
)
from event_rsvp_api.app.services.participation_service import ParticipationService

router = APIRouter()


@router.post(
    "/event/{event_id}/participation",
    response_model=Participation,
    status_code=status.HTTP_201_CREATED,
)
async def create_participation(
    event_id: str,
    participation: ParticipationCreate,
    service: ParticipationService = Depends(get_participation_service),
) -> Participation:
    """Sign up for an event.

    Returns 404 if the event does not exist and 409 if the same
    participant name and e-mail already signed up for it.
    """
    return await service.create_participation(event_id, participation)


@router.get("/event/{event_id}/participation", response_model=ParticipationList)
async def list_participations(
    event_id: str,
    identity: AuthToken = Depends(require_access_token),
    service: ParticipationService = Depends(get_participation_service),
) -> ParticipationList:
    return ParticipationList(participation_list=await service.list_participations(event_id))


@router.delete(
    "/event/{event_id}/participation/{participation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_participation(
    event_id: str,
    participation_id: str,
    identity: AuthToken = Depends(require_access_token),
    service: ParticipationService = Depends(get_participation_service),
) -> None:
    await service.delete_participation(event_id, participation_id, identity.id)
