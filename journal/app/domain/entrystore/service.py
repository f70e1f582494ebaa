"""Entry creation service."""

from __future__ import annotations

from ...infra.logging import get_logger
from .gateway import EntryStoreGateway
from .types import EntryStoreError

__all__ = ["EntryService", "WHITE_SPACE"]

logger = get_logger(__name__)

# Unicode White_Space; str.strip() would also drop the \x1c-\x1f separators.
WHITE_SPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class EntryService:
    """Trim and persist journal entries through an `EntryStoreGateway`."""

    def __init__(self, gateway: EntryStoreGateway) -> None:
        self._gateway = gateway

    @property
    def gateway(self) -> EntryStoreGateway:
        return self._gateway

    def create_entry(self, raw_body: str) -> int:
        """Store the trimmed body and return its character count.

        Blank bodies are left for the storage constraint to reject; the
        resulting :class:`EntryStoreError` propagates with its message intact.
        """

        body = (raw_body or "").strip(WHITE_SPACE)
        try:
            character_count = self._gateway.create_entry(body)
        except EntryStoreError as exc:
            logger.warning(
                "entry_create_failed",
                extra={"error": exc.message, "raw_length": len(raw_body or "")},
            )
            raise
        logger.info("entry_created", extra={"character_count": character_count})
        return character_count
