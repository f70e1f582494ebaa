"""Diagnostic routes; output format is not stable."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..dependencies import AppState, get_app_state

router = APIRouter(prefix="/dev", tags=["dev"])


@router.get("/state", response_class=PlainTextResponse)
def dev_state(state: AppState = Depends(get_app_state)) -> PlainTextResponse:
    """Dump the process state as text."""

    gateway = state.entry_service.gateway
    lines = [
        "AppState {",
        f"    settings: {state.settings!r},",
        f"    database_url: {state.engine.url!s},",
        f"    pool: {state.engine.pool.status()},",
        f"    gateway: {type(gateway).__name__},",
        f"    entries: {gateway.count_entries()},",
        "}",
    ]
    return PlainTextResponse("\n".join(lines))
