"""Shared API dependencies."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from ..config import Settings
from ..domain.entrystore import EntryService

__all__ = [
    "AppState",
    "get_app_state",
    "get_entry_service",
    "get_settings",
]


@dataclass
class AppState:
    """Process-wide handles shared by every request.

    The engine's connection pool is thread-safe, so requests use it directly
    without an application-level lock.
    """

    settings: Settings
    engine: Engine
    entry_service: EntryService


def get_app_state(request: Request) -> AppState:
    """Return the state installed on the application by `create_app`."""

    return request.app.state.journal


def get_settings(state: AppState = Depends(get_app_state)) -> Settings:
    return state.settings


def get_entry_service(state: AppState = Depends(get_app_state)) -> EntryService:
    """Return the entry service bound to the shared engine."""

    return state.entry_service
