"""HTML helpers producing Twitter Bootstrap markup."""
from __future__ import annotations

from .components import badge, button, icon, label, link, modal, modal_button, sidebar_link
from .errors import HelperOptionsError
from .schemas import ModalOptions

__all__ = [
    "HelperOptionsError",
    "ModalOptions",
    "badge",
    "button",
    "icon",
    "label",
    "link",
    "modal",
    "modal_button",
    "sidebar_link",
]
