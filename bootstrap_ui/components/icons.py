"""Icon elements (Glyphicons, also works with Font Awesome classes)."""
from __future__ import annotations

from markupsafe import Markup

from ..tags import content_tag


def icon(icon_class: str | None, /, *, class_: str | None = "", color: str | None = None) -> Markup:
    """Return an ``<i>`` tag for ``icon_class``, or empty markup when there is no icon."""

    if not icon_class:
        return Markup("")

    classes = " ".join(part for part in (icon_class, class_) if part)
    style = f"color: {color}" if color else None
    return content_tag("i", "", class_=classes, style=style)


__all__ = ["icon"]
