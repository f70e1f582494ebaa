"""Tests for the command-line bootstrap."""

from __future__ import annotations

import pytest

from journal.app import cli
from journal.app.infra.logging import parse_filter

pytestmark = [pytest.mark.infra]


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    for name in ("PORT", "JOURNAL_DB_PATH", "JOURNAL_LOG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("JOURNAL_CONFIG_DIR", str(tmp_path / "no-profiles"))
    monkeypatch.setattr(cli, "configure_logging", lambda *_: None)


def test_main_migrates_then_serves(monkeypatch, tmp_path):
    calls = {}

    def _fake_run(application, **kwargs):
        calls["app"] = application
        calls.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", _fake_run)
    database_path = tmp_path / "deep" / "journal.db"

    exit_code = cli.main(["--database-path", str(database_path), "--port", "8123"])

    assert exit_code == 0
    assert database_path.exists()
    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 8123
    assert calls["app"].state.journal.settings.database_path == database_path


def test_main_fails_fast_when_database_dir_is_unusable(monkeypatch, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    def _unexpected_run(*args, **kwargs):
        raise AssertionError("server must not start")

    monkeypatch.setattr(cli.uvicorn, "run", _unexpected_run)

    exit_code = cli.main(["--database-path", str(blocker / "journal.db")])

    assert exit_code == 1


def test_main_rejects_invalid_port(monkeypatch, tmp_path):
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **k: None)

    exit_code = cli.main(
        ["--database-path", str(tmp_path / "journal.db"), "--port", "nope"]
    )

    assert exit_code == 1


def test_main_reports_bad_log_filter_as_startup_failure(monkeypatch, tmp_path):
    monkeypatch.setenv("JOURNAL_LOG", "info,journal=loud")
    monkeypatch.setattr(
        cli, "configure_logging", lambda expression=None: parse_filter(expression)
    )
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **k: None)

    exit_code = cli.main(["--database-path", str(tmp_path / "journal.db")])

    assert exit_code == 1
    assert not (tmp_path / "journal.db").exists()
