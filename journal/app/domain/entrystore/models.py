"""Entry data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

__all__ = ["Entry", "parse_timestamp"]


def parse_timestamp(value: Any) -> datetime:
    """Parse SQLite `YYYY-MM-DD HH:MM:SS.fff` text into a datetime."""

    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


@dataclass(frozen=True)
class Entry:
    """One stored journal entry."""

    id: int
    body: str
    inserted_at: datetime
    updated_at: datetime

    @property
    def character_count(self) -> int:
        return len(self.body)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Entry":
        return cls(
            id=int(row["id"]),
            body=row["body"],
            inserted_at=parse_timestamp(row["inserted_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
