"""Bootstrap modal dialogs."""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from markupsafe import Markup
from pydantic import ValidationError

from ..errors import HelperOptionsError
from ..schemas import ModalOptions
from ..tags import content_tag, join, link_to

logger = logging.getLogger(__name__)

DISMISS = {"data-dismiss": "modal"}


def _resolve_options(options: ModalOptions | Mapping[str, Any] | None, overrides: Mapping[str, Any]) -> ModalOptions:
    if isinstance(options, ModalOptions):
        # Read attributes directly; dumping would turn Markup back into str.
        merged = {name: getattr(options, name) for name in options.model_fields_set if name in ModalOptions.model_fields}
        merged.update(options.extra_attrs)
    else:
        merged = dict(options or {})
    merged.update(overrides)
    try:
        return ModalOptions.model_validate(merged)
    except ValidationError as exc:
        logger.warning("Rejected modal options %s: %s", sorted(merged), exc.error_count())
        raise HelperOptionsError("modal", str(exc)) from exc


def _materialize(content: Any, caller: Callable[[], Any] | None) -> Any:
    producer = caller if caller is not None else content
    if not callable(producer):
        return content
    logger.debug("Rendering deferred modal body via %r", producer)
    # Deferred bodies are rendered markup, not text.
    return Markup(producer())


def modal(
    modal_id: str,
    content: Any = None,
    options: ModalOptions | Mapping[str, Any] | None = None,
    *,
    caller: Callable[[], Any] | None = None,
    **overrides: Any,
) -> Markup:
    """Return a Bootstrap modal with the id ``modal_id``.

    ``content`` is the body: text (escaped), markup, or a zero-argument
    callable producing markup. Inside a Jinja ``{% call %}`` block the block
    itself is used through ``caller``.

    Options, from ``options`` then keyword overrides:

    * ``title`` - heading of the modal. Default: ``Alert``
    * ``fade`` - whether the modal animates in. Default: ``True``
    * ``cancel_label`` / ``cancel_class`` - cancel link. Default: ``Cancel`` / ``btn``
    * ``ok_id`` - id of the OK link, for script hooks
    * ``ok_label`` / ``ok_class`` / ``ok_link`` - OK link. Default: ``OK`` / ``btn btn-primary`` / ``#``
    * ``remote`` - URL the modal loads its content from

    Any other key becomes an attribute of the modal container.
    """

    opts = _resolve_options(options, overrides)
    body = _materialize(content, caller)

    header = content_tag(
        "div",
        join(
            content_tag("button", Markup("&times;"), class_="close", **DISMISS),
            content_tag("h3", opts.title),
        ),
        class_="modal-header",
    )
    footer = content_tag(
        "div",
        join(
            link_to(opts.cancel_label, "#", class_=opts.cancel_class, **DISMISS),
            link_to(opts.ok_label, opts.ok_link, class_=opts.ok_class, id=opts.ok_id),
        ),
        class_="modal-footer",
    )

    container: dict[str, Any] = {
        "id": modal_id,
        "class": "modal hide fade" if opts.fade else "modal hide",
        "data-remote": opts.remote,
    }
    container.update(opts.extra_attrs)
    return content_tag("div", join(header, content_tag("div", body, class_="modal-body"), footer), **container)


__all__ = ["modal"]
