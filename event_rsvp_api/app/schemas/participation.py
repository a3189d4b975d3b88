"""
Pydantic models for event participations (sign-ups).

A participation is submitted by the public for a given event.  The
combination of event, participant name and e-mail address identifies
a sign-up; submitting the same combination twice is a conflict.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel, RequestModel


class Participation(CamelModel):
    id: str
    event_id: str
    participant_name: str
    email: str
    phone_number: Optional[str] = None
    comment: Optional[str] = None
    created_at: datetime


class ParticipationCreate(RequestModel):
    """Schema for signing up to an event."""

    participant_name: str = Field(..., min_length=1, examples=["Jane Doe"])
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", examples=["jane@example.com"])
    # Digits only, separators are stripped by clients.
    phone_number: Optional[str] = Field(None, pattern=r"^\d+$", examples=["01012345678"])
    comment: Optional[str] = None


class ParticipationList(CamelModel):
    participation_list: List[Participation]
