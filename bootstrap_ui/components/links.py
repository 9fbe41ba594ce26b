"""Anchor helpers, including the trigger link for modals."""
from __future__ import annotations

from typing import Any

from markupsafe import Markup

from ..tags import join, link_to, merge_attrs
from .icons import icon as render_icon


def link(label: Any, href: str | None = "#", /, *, icon: str | None = None, **attrs: Any) -> Markup:
    """Wrap ``link_to``, optionally prefixing an icon to the label.

    ``icon`` is consumed here and never rendered as an anchor attribute; every
    other keyword is passed through to the anchor.
    """

    return link_to(join(render_icon(icon), label), href, **attrs)


def modal_button(label: Any, modal_id: str, /, **attrs: Any) -> Markup:
    """Return a link that opens the modal with id ``modal_id``.

    ``data-toggle`` defaults to ``modal``; all other options go to :func:`link`.
    """

    options = merge_attrs({"data-toggle": "modal"}, attrs)
    return link(label, f"#{modal_id}", **options)


__all__ = ["link", "modal_button"]
