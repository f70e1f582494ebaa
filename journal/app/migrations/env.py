"""Alembic environment for the journal entry store."""

from __future__ import annotations

from logging.config import fileConfig

from alembic import context

from journal.app.config import load_settings
from journal.app.infra.db import open_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = None


def run_migrations_offline() -> None:
    """Emit migration SQL without a live connection."""

    settings = load_settings()
    context.configure(
        url=f"sqlite:///{settings.database_path}",
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations on the shared connection, or open one from settings."""

    connection = config.attributes.get("connection")
    if connection is not None:
        _run_on_connection(connection)
        return

    engine = open_engine(load_settings().database_path)
    try:
        with engine.begin() as connection:
            _run_on_connection(connection)
    finally:
        engine.dispose()


def _run_on_connection(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        transactional_ddl=True,
    )

    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
