"""Shared types for the entry store."""

from __future__ import annotations

__all__ = ["EntryStoreError"]


class EntryStoreError(RuntimeError):
    """Raised when the storage engine rejects an entry write."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
