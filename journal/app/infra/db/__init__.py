"""Database connection helpers for the SQLite entry store."""

from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from ..logging import get_logger

__all__ = ["BUSY_TIMEOUT_SECONDS", "MIGRATIONS_DIR", "open_engine", "migrate"]

logger = get_logger(__name__)

BUSY_TIMEOUT_SECONDS = 5
JOURNAL_MODE = "DELETE"
MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "migrations"


def open_engine(path: str | Path, *, echo: bool = False) -> Engine:
    """Create the SQLite engine (connection pool) for the database at `path`.

    The parent directory is created when missing, and one connection is opened
    so SQLite creates the database file before the engine is returned.
    """

    database_path = Path(path).expanduser()
    database_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{database_path}",
        echo=echo,
        connect_args={"timeout": BUSY_TIMEOUT_SECONDS, "check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _configure_connection(dbapi_connection, connection_record):
        # Hand transaction control to SQLAlchemy so DDL runs inside BEGIN.
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute(f"PRAGMA busy_timeout = {BUSY_TIMEOUT_SECONDS * 1000}")
            cursor.execute(f"PRAGMA journal_mode = {JOURNAL_MODE}")
            cursor.execute("PRAGMA foreign_keys = ON")
        finally:
            cursor.close()

    @event.listens_for(engine, "begin")
    def _begin_transaction(connection):
        connection.exec_driver_sql("BEGIN")

    with engine.connect():
        pass

    logger.info("database_engine_opened", extra={"database_path": str(database_path)})
    return engine


def _alembic_config(connection) -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.attributes["connection"] = connection
    return config


def migrate(engine: Engine) -> None:
    """Upgrade the schema to the latest revision inside one transaction."""

    with engine.begin() as connection:
        command.upgrade(_alembic_config(connection), "head")
    logger.info("database_migrated", extra={"url": str(engine.url)})
