"""Tests for the entry store gateways."""

from __future__ import annotations

import pytest

from journal.app.domain.entrystore import (
    EntryStoreError,
    InMemoryEntryStoreGateway,
)

pytestmark = [pytest.mark.entries]


@pytest.fixture(params=["sqlite", "memory"])
def gateway(request):
    if request.param == "sqlite":
        return request.getfixturevalue("sqlite_gateway")
    return InMemoryEntryStoreGateway()


def test_create_entry_returns_stored_length(gateway):
    assert gateway.create_entry("Hello world") == 11
    assert gateway.count_entries() == 1


def test_create_entry_counts_characters_not_bytes(gateway):
    assert gateway.create_entry("héllo ✓") == 7


def test_blank_body_raises_store_error_without_persisting(gateway):
    gateway.create_entry("first")

    with pytest.raises(EntryStoreError) as excinfo:
        gateway.create_entry("")

    assert "CHECK constraint failed" in excinfo.value.message
    assert gateway.count_entries() == 1


def test_get_entry_returns_stored_row(gateway):
    gateway.create_entry("remember this")

    entry = gateway.get_entry(1)

    assert entry.id == 1
    assert entry.body == "remember this"
    assert entry.character_count == len("remember this")


def test_fresh_entry_has_matching_timestamps(gateway):
    gateway.create_entry("timestamps")

    first_read = gateway.get_entry(1)
    second_read = gateway.get_entry(1)

    assert first_read.inserted_at == first_read.updated_at
    assert second_read.inserted_at == first_read.inserted_at
    assert second_read.updated_at == first_read.updated_at


def test_get_entry_missing_raises_key_error(gateway):
    with pytest.raises(KeyError):
        gateway.get_entry(42)


def test_sqlite_ids_increase_monotonically(sqlite_gateway):
    sqlite_gateway.create_entry("one")
    sqlite_gateway.create_entry("two")

    assert sqlite_gateway.get_entry(1).body == "one"
    assert sqlite_gateway.get_entry(2).body == "two"


def test_sqlite_timestamps_have_sub_second_precision(sqlite_gateway, engine):
    sqlite_gateway.create_entry("precise")

    with engine.connect() as conn:
        raw = conn.exec_driver_sql("SELECT inserted_at FROM entries").scalar_one()

    assert len(raw.split(".")[-1]) == 3
    assert sqlite_gateway.get_entry(1).inserted_at.year >= 2024


@pytest.mark.parametrize(
    "body, expected",
    [("a\x00b", 3), ("\x00", 1), ("line\x00", 5)],
)
def test_nul_characters_are_stored_and_counted(gateway, body, expected):
    assert gateway.create_entry(body) == expected
    assert gateway.get_entry(1).body == body
