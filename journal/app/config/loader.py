"""Configuration loader with YAML profile support and env/CLI overrides."""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_data_dir

APP_NAME = "journal"
DEFAULT_ENVIRONMENT = "dev"
DEFAULT_DATABASE_FILENAME = "journal.db"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 9999
DEFAULT_LOG_FILTER = "info"
DEFAULT_FLASH_CLEAR_DELAY_SECONDS = 5
DEFAULT_PROFILE_DICT: dict[str, Any] = {
    "environment": DEFAULT_ENVIRONMENT,
    "database": {"path": None},
    "server": {"host": DEFAULT_HOST, "port": DEFAULT_PORT},
    "logging": {"filter": DEFAULT_LOG_FILTER},
    "ui": {
        "expose_storage_errors": True,
        "flash_clear_delay_seconds": DEFAULT_FLASH_CLEAR_DELAY_SECONDS,
    },
}
CONFIG_PROFILE_ENV = "JOURNAL_CONFIG_PROFILE"
CONFIG_DIR_ENV = "JOURNAL_CONFIG_DIR"
DATABASE_PATH_ENV = "JOURNAL_DB_PATH"
PORT_ENV = "PORT"
LOG_FILTER_ENV = "JOURNAL_LOG"
DEFAULT_PROFILE = "dev"
DEFAULT_CONFIG_ROOT = Path(__file__).resolve().parents[3] / "config" / "profiles"
CONFIG_EXTENSIONS = (".yaml", ".yml")


def default_database_path() -> Path:
    """Per-user data directory plus the fixed database filename."""

    return Path(user_data_dir(APP_NAME, appauthor=False)) / DEFAULT_DATABASE_FILENAME


@dataclass(frozen=True)
class UiConfig:
    expose_storage_errors: bool = True
    flash_clear_delay_seconds: int = DEFAULT_FLASH_CLEAR_DELAY_SECONDS


@dataclass(frozen=True)
class Settings:
    environment: str = DEFAULT_ENVIRONMENT
    database_path: Path = field(default_factory=default_database_path)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_filter: str = DEFAULT_LOG_FILTER
    ui: UiConfig = field(default_factory=UiConfig)
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def with_overrides(
        self,
        *,
        database_path: str | Path | None = None,
        port: int | str | None = None,
        host: str | None = None,
    ) -> "Settings":
        """Return a copy with CLI-provided values applied on top."""

        changes: dict[str, Any] = {}
        if database_path is not None:
            changes["database_path"] = Path(database_path).expanduser()
        if port is not None:
            changes["port"] = _coerce_port(port)
        if host:
            changes["host"] = host
        return replace(self, **changes) if changes else self


def load_settings(
    profile: str | None = None, config_dir: str | Path | None = None
) -> Settings:
    """Load settings from the requested profile or fall back to defaults."""

    profile_name = profile or os.getenv(CONFIG_PROFILE_ENV, DEFAULT_PROFILE)
    config_root = Path(
        config_dir or os.getenv(CONFIG_DIR_ENV, DEFAULT_CONFIG_ROOT)
    ).expanduser()
    config_data = _load_profile_dict(profile_name, config_root)
    if not config_data:
        config_data = copy.deepcopy(DEFAULT_PROFILE_DICT)

    database_cfg = config_data.get("database") or {}
    database_path = os.getenv(DATABASE_PATH_ENV) or database_cfg.get("path")

    server_cfg = config_data.get("server") or {}
    port = os.getenv(PORT_ENV) or server_cfg.get("port", DEFAULT_PORT)

    logging_cfg = config_data.get("logging") or {}
    log_filter = os.getenv(LOG_FILTER_ENV) or str(
        logging_cfg.get("filter", DEFAULT_LOG_FILTER)
    )

    return Settings(
        environment=str(config_data.get("environment", DEFAULT_ENVIRONMENT)),
        database_path=(
            Path(database_path).expanduser()
            if database_path
            else default_database_path()
        ),
        host=str(server_cfg.get("host", DEFAULT_HOST)),
        port=_coerce_port(port),
        log_filter=log_filter,
        ui=_build_ui_config(config_data.get("ui")),
        raw=config_data,
    )


def _load_profile_dict(profile_name: str, config_root: Path) -> dict[str, Any]:
    """Load the YAML profile if available, otherwise return an empty dict."""

    if not config_root.exists():
        return {}

    for extension in CONFIG_EXTENSIONS:
        candidate = config_root / f"{profile_name}{extension}"
        if not candidate.exists():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as handle:
                loaded = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise RuntimeError(
                f"Failed to parse config profile {candidate}: {exc}"
            ) from exc
        if not isinstance(loaded, dict):
            raise RuntimeError(
                f"Config profile {candidate} must be a mapping at the root"
            )
        return loaded

    return {}


def _build_ui_config(ui_cfg: dict[str, Any] | None) -> UiConfig:
    ui_cfg = ui_cfg or {}
    return UiConfig(
        expose_storage_errors=bool(ui_cfg.get("expose_storage_errors", True)),
        flash_clear_delay_seconds=int(
            ui_cfg.get("flash_clear_delay_seconds", DEFAULT_FLASH_CLEAR_DELAY_SECONDS)
        ),
    )


def _coerce_port(value: int | str) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid port value {value!r}") from exc
    if not 0 <= port <= 65535:
        raise ValueError(f"Port {port} is outside the range 0-65535")
    return port
