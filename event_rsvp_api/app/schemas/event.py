"""
Pydantic models for event data.

``Event`` is both the stored record and the response representation.
``EventCreate`` and ``EventUpdate`` describe request bodies: dates are
sent as separate ``year``/``month``/``date`` components, which lets an
update change a single component while the others keep their stored
values.  Whether the components form a real calendar date is checked
by ``EventService``, not here, because for updates only the merged
result can be judged.
"""

import datetime as dt
from typing import List, Optional

from pydantic import Field

from .base import CamelModel, RequestModel


class Event(CamelModel):
    id: str
    date: dt.date
    created_at: dt.datetime
    name: str
    editor: str
    detail: Optional[str] = None
    category: Optional[str] = None


class EventCreate(RequestModel):
    """Schema for creating an event."""

    year: int = Field(..., ge=1, le=9999, strict=True, examples=[2021])
    month: int = Field(..., ge=1, le=12, strict=True, examples=[10])
    date: int = Field(..., ge=1, le=31, strict=True, examples=[31])
    name: str = Field(..., min_length=1, examples=["Halloween Party"])
    detail: Optional[str] = Field(None, examples=["Costumes welcome"])
    category: Optional[str] = Field(None, examples=["Party"])


class EventUpdate(RequestModel):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    """

    year: Optional[int] = Field(None, ge=1, le=9999, strict=True)
    month: Optional[int] = Field(None, ge=1, le=12, strict=True)
    date: Optional[int] = Field(None, ge=1, le=31, strict=True)
    name: Optional[str] = Field(None, min_length=1)
    detail: Optional[str] = None
    category: Optional[str] = None

    def supplied(self) -> dict:
        """Return the fields present in the request with a non-null value."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class EventList(CamelModel):
    event_list: List[Event]
