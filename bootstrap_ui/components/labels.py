"""Badges and labels: small inline ``<span>`` counters and tags."""
from __future__ import annotations

from typing import Any

from markupsafe import Markup

from ..tags import content_tag, normalize_attrs


def _prefixed_span(prefix: str, content: Any, attrs: dict[str, Any]) -> Markup:
    options = normalize_attrs(attrs)
    extra = options.pop("class", None)
    options["class"] = f"{prefix} {extra if extra is not None else ''}"
    return content_tag("span", content, **options)


def badge(content: Any, /, **attrs: Any) -> Markup:
    """Badge containing ``content``; any given class is appended to ``badge``."""

    return _prefixed_span("badge", content, attrs)


def label(content: Any, /, **attrs: Any) -> Markup:
    """Label containing ``content``; any given class is appended to ``label``."""

    return _prefixed_span("label", content, attrs)


__all__ = ["badge", "label"]
