"""Journal entry store: model, gateways and the creation service."""

from .gateway import (
    EntryStoreGateway,
    InMemoryEntryStoreGateway,
    SqliteEntryStoreGateway,
    build_entry_store_gateway,
)
from .models import Entry
from .service import EntryService
from .types import EntryStoreError

__all__ = [
    "Entry",
    "EntryService",
    "EntryStoreError",
    "EntryStoreGateway",
    "InMemoryEntryStoreGateway",
    "SqliteEntryStoreGateway",
    "build_entry_store_gateway",
]
