"""Utilities for rendering Jinja templates with the Bootstrap helpers installed."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from .components import HELPERS, sidebar
from .config import get_settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def request_fullpath(request: Request) -> str:
    """Return the request path including its query string."""

    path = request.url.path
    query = request.url.query
    return f"{path}?{query}" if query else path


@pass_context
def sidebar_link(context: Context, label: Any, href: str = "#", /, **options: Any) -> Markup:
    """Template flavour of ``sidebar_link`` reading the current path from ``request``."""

    if "current_path" not in options:
        request = context.get("request")
        if request is not None:
            options["current_path"] = request_fullpath(request)
    return sidebar.sidebar_link(label, href, **options)


def install(env: Environment) -> Environment:
    """Register every helper as a global of ``env``, also under ``bootstrap``."""

    helpers: dict[str, Any] = dict(HELPERS)
    helpers["sidebar_link"] = sidebar_link
    env.globals.update(helpers)
    env.globals["bootstrap"] = helpers
    logger.info("Installed %d bootstrap helpers into %r", len(helpers), env)
    return env


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
install(templates.env)


def render_template(request: Request, template_name: str, context: dict[str, Any] | None = None):
    """Return a TemplateResponse with the shared UI context."""

    base_context: dict[str, Any] = {
        "app_name": get_settings().app_name,
        "page_title": "",
    }
    if context:
        base_context.update(context)

    return templates.TemplateResponse(request, template_name, base_context)


__all__ = ["install", "render_template", "request_fullpath", "sidebar_link", "templates", "TEMPLATES_DIR"]
