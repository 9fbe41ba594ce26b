"""
Runtime configuration for the Bootstrap helpers.

Loads defaults from the .env file located in the project root; variables
already present in the environment take precedence.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the project root
BASE_DIR = Path(__file__).resolve().parents[1]

ENV_PATH = BASE_DIR / ".env"

load_dotenv(dotenv_path=ENV_PATH, override=False)


class Settings(BaseSettings):
    app_name: str = Field(default="Bootstrap UI", alias="APP_NAME")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")

    # Visible strings used when a modal is rendered without them
    modal_title: str = Field(default="Alert", alias="MODAL_TITLE")
    modal_cancel_label: str = Field(default="Cancel", alias="MODAL_CANCEL_LABEL")
    modal_ok_label: str = Field(default="OK", alias="MODAL_OK_LABEL")

    preview_enabled: bool = Field(default=True, alias="PREVIEW_ENABLED")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
