"""
Static page routes: editor and about.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from zanile.notes import NoteService
from zanile.pages import render_about_page, render_home_page
from zanile.routes.deps import get_note_service

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/index.html", response_class=HTMLResponse, include_in_schema=False)
async def home(notes: NoteService = Depends(get_note_service)) -> str:
    """Serve the editor page."""
    return render_home_page(notes.settings.max_bytes)


@router.get("/about", response_class=HTMLResponse)
async def about() -> str:
    return render_about_page()
