"""
Note routes.
Handles create (API), raw fetch (plain text) and view (HTML) operations.
"""
import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, PlainTextResponse

from zanile.exceptions import MalformedRequest, NotFound
from zanile.models import ErrorResponse, NoteCreate, NoteCreated
from zanile.notes import NoteService
from zanile.pages import render_view_page
from zanile.routes.deps import get_note_service, request_origin

router = APIRouter()
logger = logging.getLogger(__name__)


def _require_utf8(payload) -> None:
    """Reject text or id holding lone surrogates, which JSON escapes allow but UTF-8 cannot encode."""
    if not isinstance(payload, dict):
        return
    for field in ("text", "id"):
        value = payload.get(field)
        if isinstance(value, str):
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as e:
                logger.warning(f"Create body with unencodable {field}: {e}")
                raise MalformedRequest() from e


@router.post(
    "/api/create",
    response_model=NoteCreated,
    status_code=201,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_note(
    request: Request,
    notes: NoteService = Depends(get_note_service),
) -> NoteCreated:
    """
    Create a new note.

    The body is decoded by hand rather than through a pydantic body parameter
    so that a malformed body answers 400 "Bad Request" instead of 422.

    Args:
        request: HTTP request carrying ``{"text": ..., "id"?: ...}``
        notes: Note service

    Returns:
        Note id and shareable URL

    Raises:
        MalformedRequest: If the body is not valid JSON, or its strings are not valid UTF-8
        ClipboardError: Any create failure (see NoteService.create)
    """
    try:
        payload = json.loads(await request.body())
    except ValueError as e:
        logger.warning(f"Malformed create body: {e}")
        raise MalformedRequest() from e

    _require_utf8(payload)
    note = NoteCreate.from_payload(payload)
    return await run_in_threadpool(notes.create, note.text, note.id, origin=request_origin(request))


@router.get("/raw/{note_id}", response_class=PlainTextResponse)
def raw_note(note_id: str, notes: NoteService = Depends(get_note_service)) -> PlainTextResponse:
    """Return a note's text as text/plain, or 404."""
    text = notes.read_raw(note_id)
    if text is None:
        raise NotFound()
    return PlainTextResponse(text)


@router.get("/{note_id}", response_class=HTMLResponse)
def view_note(
    note_id: str,
    request: Request,
    notes: NoteService = Depends(get_note_service),
) -> HTMLResponse:
    """
    View a note as HTML.

    Args:
        note_id: Exact note id, not normalized
        request: HTTP request context, used for the share URL
        notes: Note service

    Returns:
        HTML page with the escaped note

    Raises:
        NotFound: If the note expired or never existed
    """
    text = notes.read(note_id)
    if text is None:
        raise NotFound()
    return HTMLResponse(render_view_page(note_id, text, notes.base_url(request_origin(request))))
