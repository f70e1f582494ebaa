"""Command-line bootstrap: configure, migrate, then serve."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

import uvicorn

from .config import load_settings
from .config.loader import DATABASE_PATH_ENV, PORT_ENV
from .infra.db import migrate, open_engine
from .infra.logging import configure_logging, get_logger
from .main import create_app

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="journal", description=__doc__)
    parser.add_argument(
        "--database-path",
        default=None,
        help=(
            f"SQLite file location (env {DATABASE_PATH_ENV}; "
            "defaults to the user data dir)."
        ),
    )
    parser.add_argument(
        "--port",
        default=None,
        help=f"Listen port (env {PORT_ENV}; default 9999).",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Listen address (default 0.0.0.0).",
    )
    parser.add_argument(
        "--profile",
        default=None,
        help="Config profile name under config/profiles.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # Default logging first so a bad filter is still reported as startup_failed.
    configure_logging()

    try:
        settings = load_settings(args.profile).with_overrides(
            database_path=args.database_path,
            port=args.port,
            host=args.host,
        )
        configure_logging(settings.log_filter)
        engine = open_engine(settings.database_path)
        migrate(engine)
    except Exception:
        logger.exception("startup_failed")
        return 1

    logger.info(
        "journal_starting",
        extra={
            "database_path": str(settings.database_path),
            "host": settings.host,
            "port": settings.port,
        },
    )
    application = create_app(settings, engine=engine)
    try:
        uvicorn.run(
            application, host=settings.host, port=settings.port, log_config=None
        )
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
