"""Tests for the structured logging helpers."""

from __future__ import annotations

import logging

import pytest

from journal.app.infra.logging import KeyValueFormatter, get_logger, parse_filter

pytestmark = [pytest.mark.infra]


def test_parse_filter_defaults_to_info():
    assert parse_filter(None) == (logging.INFO, {})
    assert parse_filter("") == (logging.INFO, {})


def test_parse_filter_reads_default_and_targets():
    default_level, overrides = parse_filter(
        "warn, journal.app.api=debug,sqlalchemy=error"
    )

    assert default_level == logging.WARNING
    assert overrides == {
        "journal.app.api": logging.DEBUG,
        "sqlalchemy": logging.ERROR,
    }


def test_parse_filter_rejects_unknown_level():
    with pytest.raises(ValueError):
        parse_filter("journal=loud")


def test_formatter_appends_extra_fields():
    record = logging.LogRecord(
        "journal.test", logging.INFO, __file__, 1, "entry_created", None, None
    )
    record.character_count = 11

    line = KeyValueFormatter().format(record)

    assert "entry_created" in line
    assert line.endswith("character_count=11")


def test_get_logger_nests_foreign_names_under_package():
    assert get_logger("journal.app.cli").name == "journal.app.cli"
    assert get_logger("scripts.seed").name == "journal.scripts.seed"
