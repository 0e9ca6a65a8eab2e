"""Settings loader.

Tip: every field reads the environment variable named by its alias.
Unset variables fall back to the defaults below.
"""
from __future__ import annotations

import os
from functools import lru_cache
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Service settings. The flagging engine itself takes no configuration."""

    app_name: str = Field(alias="APP_NAME", default="Content Flagging API")
    app_version: str = Field(alias="APP_VERSION", default="1.0.0")
    port: int = Field(alias="PORT", default=3000)
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")
    batch_max_size: int = Field(alias="BATCH_MAX_SIZE", default=100, ge=1)
    # Comma separated, e.g. "https://a.example,https://b.example".
    cors_origins: str = Field(alias="CORS_ORIGINS", default="*")

    model_config = {"populate_by_name": True}

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build Settings from the environment once and reuse it."""

    data = {}
    for name, field in Settings.model_fields.items():
        alias = field.alias or name
        if alias in os.environ:
            data[name] = os.environ[alias]
    return Settings.model_validate(data)


settings = get_settings()

__all__ = ["Settings", "get_settings", "settings"]
