"""
Request-scoped dependencies shared by the route modules.
"""
from fastapi import Request

from zanile.notes import NoteService


def get_note_service(request: Request) -> NoteService:
    """The NoteService built by create_app for this application."""
    return request.app.state.notes


def request_origin(request: Request) -> str:
    """Scheme and host the client used, e.g. ``https://clip.example``."""
    return f"{request.url.scheme}://{request.url.netloc}"
