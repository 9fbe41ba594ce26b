"""Low-level tag builders the Bootstrap helpers compose."""
from __future__ import annotations

from typing import Any, Mapping

from markupsafe import Markup, escape


def attr_name(key: str) -> str:
    """Map a Python keyword to its HTML attribute name.

    ``class_`` becomes ``class`` and ``data_toggle`` becomes ``data-toggle``.
    Names that are already hyphenated are returned as-is.
    """

    return key.rstrip("_").replace("_", "-")


def normalize_attrs(attrs: Mapping[str, Any] | None) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in (attrs or {}).items():
        if key == "data" and isinstance(value, Mapping):
            for data_key, data_value in value.items():
                normalized[f"data-{attr_name(str(data_key))}"] = data_value
            continue
        normalized[attr_name(key)] = value
    return normalized


def merge_attrs(defaults: Mapping[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge two attribute mappings; keys present in ``overrides`` always win."""

    merged = normalize_attrs(defaults)
    merged.update(normalize_attrs(overrides))
    return merged


def render_attrs(attrs: Mapping[str, Any] | None) -> Markup:
    parts: list[str] = []
    for name, value in normalize_attrs(attrs).items():
        if value is None or value is False:
            continue
        if value is True:
            value = name
        elif isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value if item)
        parts.append(f' {name}="{escape(value)}"')
    return Markup("".join(parts))


def content_tag(name: str, content: Any = "", /, **attrs: Any) -> Markup:
    """Return ``<name attrs>content</name>``, escaping content unless it is Markup."""

    body = escape("" if content is None else content)
    return Markup(f"<{name}{render_attrs(attrs)}>{body}</{name}>")


def link_to(label: Any, href: str | None = "#", /, **attrs: Any) -> Markup:
    return content_tag("a", label, **merge_attrs({"href": href}, attrs))


def join(*fragments: Any) -> Markup:
    """Concatenate fragments, escaping any plain strings and skipping ``None``."""

    return Markup("").join(fragment for fragment in fragments if fragment is not None)


__all__ = ["attr_name", "content_tag", "join", "link_to", "merge_attrs", "normalize_attrs", "render_attrs"]
