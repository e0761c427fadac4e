"""
Application settings.

Values come from ``BUTTERFLY_GALLERY_*`` environment variables or a
``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BUTTERFLY_GALLERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "butterfly-gallery"
    app_env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    gallery_urls: list[str] = Field(
        default_factory=list,
        description="Gallery pages to scrape, as a JSON list in the environment",
    )
    data_dir: Path = Path("data")
    cache_hours: int = Field(default=6, ge=0, description="How long fetched sightings stay fresh")
    api_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached; call ``cache_clear()`` in tests)."""
    return Settings()
