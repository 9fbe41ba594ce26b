"""Navigation list items formatted for a Bootstrap sidebar (``nav-list``)."""
from __future__ import annotations

from typing import Any

from markupsafe import Markup

from ..tags import content_tag, join, link_to
from .icons import icon as render_icon
from .labels import badge as render_badge

ACTIVE_CLASS = "active"
ACTIVE_ICON_CLASS = "icon-white"


def sidebar_link(
    label: Any,
    href: str = "#",
    /,
    *,
    current_path: str | None = None,
    icon: str | None = None,
    badge: int | None = 0,
    badge_class: str | None = None,
    active: bool | None = None,
    **attrs: Any,
) -> Markup:
    """Return an ``<li>`` wrapping a sidebar link.

    ``active`` defaults to whether ``current_path`` equals ``href``. An active
    item gets the ``active`` class and its icon turns white. ``badge`` is only
    shown when greater than zero, pulled to the right and styled with the
    optional ``badge_class``. Remaining keywords go to the anchor. Without
    ``icon`` no ``<i>`` is emitted, not even an empty ``icon-white`` one.
    """

    if active is None:
        active = current_path is not None and current_path == href

    li_classes: list[str] = []
    icon_classes: list[str] = []
    if active:
        li_classes.append(ACTIVE_CLASS)
        icon_classes.append(ACTIVE_ICON_CLASS)

    icon_tag = render_icon(icon, class_=" ".join(icon_classes))
    badge_tag = Markup("")
    if badge is not None and badge > 0:
        badge_tag = Markup(" ") + render_badge(badge, class_=f"pull-right {badge_class or ''}".rstrip())

    anchor = link_to(join(icon_tag, label, badge_tag), href, **attrs)
    return content_tag("li", anchor, class_=" ".join(li_classes) or None)


__all__ = ["sidebar_link", "ACTIVE_CLASS", "ACTIVE_ICON_CLASS"]
