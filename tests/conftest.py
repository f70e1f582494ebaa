"""Shared fixtures for journal tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from journal.app.config import Settings
from journal.app.domain.entrystore import SqliteEntryStoreGateway
from journal.app.infra.db import migrate, open_engine
from journal.app.main import create_app


@pytest.fixture
def database_path(tmp_path):
    return tmp_path / "data" / "journal.db"


@pytest.fixture
def settings(database_path) -> Settings:
    return Settings(database_path=database_path, port=9999)


@pytest.fixture
def engine(database_path):
    engine = open_engine(database_path)
    migrate(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_gateway(engine) -> SqliteEntryStoreGateway:
    return SqliteEntryStoreGateway(engine)


@pytest.fixture
def app(settings, engine):
    return create_app(settings, engine=engine)


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client
