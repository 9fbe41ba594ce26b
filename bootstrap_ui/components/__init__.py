"""Expose the Bootstrap markup helpers."""
from __future__ import annotations

from . import buttons, icons, labels, links, modals, sidebar
from .buttons import button
from .icons import icon
from .labels import badge, label
from .links import link, modal_button
from .modals import modal
from .sidebar import sidebar_link

HELPERS = {
    "icon": icon,
    "link": link,
    "button": button,
    "badge": badge,
    "label": label,
    "sidebar_link": sidebar_link,
    "modal_button": modal_button,
    "modal": modal,
}

__all__ = [
    "HELPERS",
    "badge",
    "button",
    "buttons",
    "icon",
    "icons",
    "label",
    "labels",
    "link",
    "links",
    "modal",
    "modal_button",
    "modals",
    "sidebar",
    "sidebar_link",
]
