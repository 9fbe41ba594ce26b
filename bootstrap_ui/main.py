"""Application entry point serving the component preview."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from .config import get_settings
from .preview import router as preview_router

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(title=settings.app_name, version=settings.api_version)

if settings.preview_enabled:
    app.include_router(preview_router)
else:
    logger.info("Component preview disabled")


@app.get("/health", include_in_schema=False)
async def health() -> dict[str, str]:
    return {"status": "ok"}
