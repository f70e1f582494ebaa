"""Infrastructure helpers (database, logging)."""
