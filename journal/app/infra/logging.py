"""Structured logging helpers shared across the journal app."""

from __future__ import annotations

import logging
import sys
from typing import Dict, Tuple

__all__ = ["configure_logging", "get_logger", "parse_filter", "KeyValueFormatter"]

ROOT_LOGGER_NAME = "journal"
DEFAULT_FILTER = "info"
_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 10,
}
# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class KeyValueFormatter(logging.Formatter):
    """Render `extra` fields as trailing key=value pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        fields = [
            f"{key}={value!r}"
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        ]
        if not fields:
            return base
        return f"{base} {' '.join(fields)}"


def parse_filter(expression: str | None) -> Tuple[int, Dict[str, int]]:
    """Parse `info,journal.app.api=debug` into a default level and overrides."""

    default_level = _LEVELS[DEFAULT_FILTER]
    overrides: Dict[str, int] = {}
    for directive in (expression or "").split(","):
        directive = directive.strip()
        if not directive:
            continue
        target, sep, level_name = directive.partition("=")
        if not sep:
            level_name, target = target, ""
        level = _LEVELS.get(level_name.strip().lower())
        if level is None:
            raise ValueError(f"Unknown log level in filter directive '{directive}'")
        if target.strip():
            overrides[target.strip()] = level
        else:
            default_level = level
    return default_level, overrides


def configure_logging(filter_expression: str | None = None) -> None:
    """Install the key=value handler on the root logger and apply the filter."""

    default_level, overrides = parse_filter(filter_expression)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(KeyValueFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(default_level)

    for name, level in overrides.items():
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; names outside the package are nested under it."""

    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
