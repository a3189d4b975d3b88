"""
Top-level router.

Paths are mounted at the root: ``/auth/...`` for sessions, ``/{year}-{month}``
and ``/event/...`` for events and their participations.
"""

from fastapi import APIRouter

from .endpoints import auth, events, participation

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(events.router, tags=["events"])
router.include_router(participation.router, tags=["participation"])
