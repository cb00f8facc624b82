"""
Health check route.
"""
from fastapi import APIRouter, Depends

from zanile.models import HealthCheck
from zanile.notes import NoteService
from zanile.routes.deps import get_note_service

router = APIRouter()


@router.get("/api/healthz", response_model=HealthCheck)
def health_check(notes: NoteService = Depends(get_note_service)) -> HealthCheck:
    """
    Health check endpoint.
    Returns 200 with ok=true if the note store answers a ping.
    """
    return HealthCheck(ok=notes.is_healthy())
