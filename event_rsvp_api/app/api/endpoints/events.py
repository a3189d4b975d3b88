"""
Event endpoints.

Reading events is public.  Creating, editing and deleting requires a
valid ``X-ACCESS-TOKEN`` cookie; the authenticated admin is recorded
as the event's ``editor``.
"""

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError as SchemaError

from event_rsvp_api.app.api.deps import get_event_service
from event_rsvp_api.app.core.exceptions import ValidationError
from event_rsvp_api.app.core.security import require_access_token
from event_rsvp_api.app.schemas.admin import AuthToken
from event_rsvp_api.app.schemas.event import Event, EventCreate, EventList, EventUpdate
from event_rsvp_api.app.services.event_service import EventService

router = APIRouter()


@router.get("/{year:int}-{month:int}", response_model=EventList)
async def list_month_events(
    year: int,
    month: int,
    service: EventService = Depends(get_event_service),
) -> EventList:
    """List the events of a month, e.g. ``GET /2021-8``."""
    return EventList(event_list=await service.list_month(year, month))


@router.post("/event", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    identity: AuthToken = Depends(require_access_token),
    service: EventService = Depends(get_event_service),
) -> Event:
    return await service.create_event(event, identity.id)


@router.get("/event/{event_id}", response_model=Event)
async def get_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> Event:
    return await service.get_event(event_id)


async def read_event_update(
    request: Request,
    identity: AuthToken = Depends(require_access_token),
) -> EventUpdate:
    """Parse the PUT body; the body is not read until the session cookie is accepted."""
    try:
        return EventUpdate.model_validate_json(await request.body())
    except SchemaError as e:
        raise ValidationError() from e


@router.put(
    "/event/{event_id}",
    response_model=Event,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": EventUpdate.model_json_schema(by_alias=True)}},
        }
    },
)
async def update_event(
    event_id: str,
    identity: AuthToken = Depends(require_access_token),
    updates: EventUpdate = Depends(read_event_update),
    service: EventService = Depends(get_event_service),
) -> Event:
    """Update an existing event.

    Partial updates are supported; any unspecified fields remain
    unchanged.  Fields outside ``year``, ``month``, ``date``, ``name``,
    ``detail`` and ``category`` are rejected with 400.
    """
    return await service.update_event(event_id, updates, identity.id)


@router.delete("/event/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str,
    identity: AuthToken = Depends(require_access_token),
    service: EventService = Depends(get_event_service),
) -> None:
    """Delete an event and every participation registered for it."""
    await service.delete_event(event_id, identity.id)
