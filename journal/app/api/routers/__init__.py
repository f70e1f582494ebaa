"""Router exports for FastAPI composition."""

from . import dev, entries, pages

__all__ = ["dev", "entries", "pages"]
