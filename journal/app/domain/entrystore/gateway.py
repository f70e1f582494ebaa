"""Entry store gateway implementations."""

from __future__ import annotations

from datetime import datetime, timezone
from threading import RLock
from typing import Dict, Protocol

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
    insert,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError

from .models import Entry
from .types import EntryStoreError

__all__ = [
    "ENTRIES",
    "BLANK_BODY_MESSAGE",
    "EntryStoreGateway",
    "InMemoryEntryStoreGateway",
    "SqliteEntryStoreGateway",
    "build_entry_store_gateway",
]

BLANK_BODY_MESSAGE = "CHECK constraint failed: entries_body_not_blank"

_metadata = MetaData()
# Timestamps are SQLite text with millisecond precision; parsed in Entry.from_row.
ENTRIES = Table(
    "entries",
    _metadata,
    Column("id", Integer, primary_key=True),
    Column("body", Text, nullable=False),
    Column("inserted_at", String, nullable=False),
    Column("updated_at", String, nullable=False),
)


class EntryStoreGateway(Protocol):  # pragma: no cover
    """Persistence abstraction the entry service writes through."""

    def create_entry(self, body: str) -> int: ...

    def get_entry(self, entry_id: int) -> Entry: ...

    def count_entries(self) -> int: ...


class InMemoryEntryStoreGateway(EntryStoreGateway):
    """Dictionary-backed gateway mirroring the SQLite constraints."""

    def __init__(self) -> None:
        self._entries: Dict[int, Entry] = {}
        self._next_id = 1
        self._lock = RLock()

    def create_entry(self, body: str) -> int:
        if not body.strip(" "):
            raise EntryStoreError(BLANK_BODY_MESSAGE)
        timestamp = datetime.now(timezone.utc).replace(tzinfo=None)
        with self._lock:
            entry = Entry(
                id=self._next_id,
                body=body,
                inserted_at=timestamp,
                updated_at=timestamp,
            )
            self._entries[entry.id] = entry
            self._next_id += 1
        return len(entry.body)

    def get_entry(self, entry_id: int) -> Entry:
        try:
            return self._entries[entry_id]
        except KeyError as exc:
            raise KeyError(f"Entry {entry_id} not found") from exc

    def count_entries(self) -> int:
        return len(self._entries)


class SqliteEntryStoreGateway(EntryStoreGateway):
    """SQLAlchemy-backed adapter that persists entries to SQLite."""

    def __init__(self, engine: Engine, *, table: Table = ENTRIES) -> None:
        self._engine = engine
        self._entries = table

    def create_entry(self, body: str) -> int:
        """Insert `body` and return its stored length in the same round trip."""

        # SQLite length() stops at NUL, so count the returned text in Python.
        stmt = insert(self._entries).values(body=body).returning(self._entries.c.body)
        # Acquisition failures propagate; only statement errors are storage errors.
        with self._engine.connect() as conn:
            try:
                with conn.begin():
                    stored_body = conn.execute(stmt).scalar_one()
            except DBAPIError as exc:
                raise EntryStoreError(str(exc.orig)) from exc
        return len(stored_body)

    def get_entry(self, entry_id: int) -> Entry:
        stmt = select(self._entries).where(self._entries.c.id == entry_id)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            raise KeyError(f"Entry {entry_id} not found")
        return Entry.from_row(row)

    def count_entries(self) -> int:
        stmt = select(func.count()).select_from(self._entries)
        with self._engine.connect() as conn:
            return int(conn.execute(stmt).scalar_one())


def build_entry_store_gateway(engine: Engine) -> EntryStoreGateway:
    """Factory that returns the SQLite gateway bound to `engine`."""

    return SqliteEntryStoreGateway(engine)
