"""Reusable button components for the UI."""
from __future__ import annotations

from typing import Any

from markupsafe import Markup

from ..tags import content_tag, join, merge_attrs
from .icons import icon as render_icon


def button(label: Any, /, *, icon: str | None = None, **attrs: Any) -> Markup:
    """Return a ``<button>``; class defaults to ``btn`` and type to ``submit``."""

    options = merge_attrs({"class": "btn", "type": "submit"}, attrs)
    return content_tag("button", join(render_icon(icon), label), **options)


__all__ = ["button"]
