"""Pure rendering functions backed by Jinja2 templates.

Flash notices carry their own htmx self-removal directive: after the delay
they fetch `/empty` and swap themselves out, so no flash state is kept on
the server between requests.
"""

from __future__ import annotations

from typing import Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from ..config.loader import DEFAULT_FLASH_CLEAR_DELAY_SECONDS

__all__ = [
    "PAGE_TITLE",
    "render_shell",
    "render_form",
    "render_flash_success",
    "render_flash_error",
]

PAGE_TITLE = "journal"
HTMX_SRC = "https://cdn.jsdelivr.net/npm/htmx.org@2.0.6/dist/htmx.min.js"
HTMX_INTEGRITY = (
    "sha384-Akqfrbj/HpNVo8k11SXBb6TlBWmXXlYQrCSqEWmyKJe+hDm3Z/B2WVG4smwBkRVm"
)
STYLESHEET_HREF = "https://cdn.jsdelivr.net/npm/bulma@1.0.4/css/bulma.min.css"

_environment = Environment(
    loader=PackageLoader("journal.app.presentation", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _render(template_name: str, **context: object) -> Markup:
    return Markup(_environment.get_template(template_name).render(**context))


def render_shell(content: Markup | str) -> Markup:
    """Wrap `content` in the full HTML document."""

    return _render(
        "shell.html",
        title=PAGE_TITLE,
        htmx_src=HTMX_SRC,
        htmx_integrity=HTMX_INTEGRITY,
        stylesheet_href=STYLESHEET_HREF,
        content=content,
    )


def render_form(flash: Optional[Markup] = None) -> Markup:
    """Entry form fragment; `flash` sits between the textarea and the button."""

    return _render("form.html", flash=flash)


def render_flash_success(
    character_count: int,
    *,
    clear_delay_seconds: int = DEFAULT_FLASH_CLEAR_DELAY_SECONDS,
) -> Markup:
    return _render(
        "flash.html",
        level_class="is-success",
        message=f"Created. Length: {character_count} chars.",
        clear_delay_seconds=clear_delay_seconds,
    )


def render_flash_error(
    message: str,
    *,
    clear_delay_seconds: int = DEFAULT_FLASH_CLEAR_DELAY_SECONDS,
) -> Markup:
    return _render(
        "flash.html",
        level_class="is-danger",
        message=message,
        clear_delay_seconds=clear_delay_seconds,
    )
