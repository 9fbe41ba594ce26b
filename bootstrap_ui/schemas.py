"""Option models for the compound helpers."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .config import get_settings


def _settings_default(field: str):
    return lambda: getattr(get_settings(), field)


class ModalOptions(BaseModel):
    """Named options of :func:`bootstrap_ui.components.modals.modal`.

    Visible strings and attribute values are untyped so Markup and numbers
    reach the tag builders as given. Unknown keys are kept and end up as
    attributes of the modal container.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    title: Any = Field(default_factory=_settings_default("modal_title"))
    fade: bool | None = True
    cancel_label: Any = Field(default_factory=_settings_default("modal_cancel_label"))
    cancel_class: Any = "btn"
    ok_id: Any = None
    ok_label: Any = Field(default_factory=_settings_default("modal_ok_label"))
    ok_class: Any = "btn btn-primary"
    ok_link: Any = "#"
    remote: Any = None

    @property
    def extra_attrs(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


__all__ = ["ModalOptions"]
