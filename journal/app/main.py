"""FastAPI entrypoint for the journal app."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from .. import __version__
from .api.dependencies import AppState
from .api.middleware import install_middleware
from .api.routers import dev, entries, pages
from .config import Settings, load_settings
from .domain.entrystore import EntryService, build_entry_store_gateway
from .infra.db import migrate, open_engine


def create_app(
    settings: Optional[Settings] = None, *, engine: Optional[Engine] = None
) -> FastAPI:
    """Instantiate the FastAPI app and register routers.

    Without an `engine` the database is opened and migrated here, which lets
    `uvicorn --factory journal.app.main:create_app` work on its own.
    """

    settings = settings or load_settings()
    if engine is None:
        engine = open_engine(settings.database_path)
        migrate(engine)

    application = FastAPI(
        title="Journal",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.state.journal = AppState(
        settings=settings,
        engine=engine,
        entry_service=EntryService(build_entry_store_gateway(engine)),
    )
    install_middleware(application)
    for router in (pages.router, entries.router, dev.router):
        application.include_router(router)
    return application
