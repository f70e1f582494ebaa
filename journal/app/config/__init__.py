"""Config package exporting loader helpers."""

from .loader import Settings, UiConfig, default_database_path, load_settings

__all__ = ["Settings", "UiConfig", "load_settings", "default_database_path"]
