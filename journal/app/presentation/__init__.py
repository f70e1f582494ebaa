"""HTML rendering for the journal page and its htmx fragments."""

from .rendering import (
    render_flash_error,
    render_flash_success,
    render_form,
    render_shell,
)

__all__ = [
    "render_shell",
    "render_form",
    "render_flash_success",
    "render_flash_error",
]
