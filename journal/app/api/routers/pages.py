"""Full-page and utility routes."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ...presentation import render_form, render_shell

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
def journal_index() -> HTMLResponse:
    """Return the full page with an empty entry form."""

    return HTMLResponse(render_shell(render_form()))


@router.get("/empty", response_class=HTMLResponse)
def empty() -> HTMLResponse:
    """Swap target for self-clearing flash notices."""

    return HTMLResponse("")
