"""Preview page rendering every helper, handy when restyling."""
from __future__ import annotations

from fastapi import APIRouter, Request

from .template_helpers import render_template

router = APIRouter(prefix="/preview", include_in_schema=False)

SIDEBAR_ITEMS = (
    ("Components", "/preview", "icon-th-large", 0),
    ("Modals", "/preview/modals", "icon-comment", 2),
)


@router.get("")
async def components_page(request: Request):
    return render_template(request, "preview.html", {"page_title": "Components", "sidebar_items": SIDEBAR_ITEMS})


@router.get("/modals")
async def modals_page(request: Request):
    return render_template(request, "preview.html", {"page_title": "Modals", "sidebar_items": SIDEBAR_ITEMS})


__all__ = ["router"]
