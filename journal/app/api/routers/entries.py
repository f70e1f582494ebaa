"""Entry submission endpoint returning the htmx form fragment."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse

from ...config import Settings
from ...domain.entrystore import EntryService, EntryStoreError
from ...presentation import render_flash_error, render_flash_success, render_form
from ..dependencies import get_entry_service, get_settings

router = APIRouter(tags=["entries"])

GENERIC_STORAGE_ERROR = "Could not save entry."


@router.post("/entry", response_class=HTMLResponse)
def create_entry(
    body: str = Form(default=""),
    entry_service: EntryService = Depends(get_entry_service),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    """Store the submitted entry; the outcome is reported in the flash region."""

    delay = settings.ui.flash_clear_delay_seconds
    try:
        character_count = entry_service.create_entry(body)
    except EntryStoreError as exc:
        message = (
            exc.message
            if settings.ui.expose_storage_errors
            else GENERIC_STORAGE_ERROR
        )
        flash = render_flash_error(message, clear_delay_seconds=delay)
    else:
        flash = render_flash_success(character_count, clear_delay_seconds=delay)
    return HTMLResponse(render_form(flash))
