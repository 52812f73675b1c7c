"""Pydantic models for findata configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://financialbreakfast-production.up.railway.app"
DEMO_API_KEY = "demo-key-12345"


class ApiConfig(BaseModel):
    """Remote financial-data API connection settings.

    ``base_url`` and ``api_key`` stay ``None`` until the loader resolves
    them from the environment or the built-in defaults.
    """

    base_url: str | None = None
    api_key: str | None = None
    base_url_env: str = "API_BASE_URL"
    api_key_env: str = "API_KEY"


class DisplayConfig(BaseModel):
    """Text rendering settings for tool responses."""

    locale: str = "pt_BR"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""


class FindataConfig(BaseModel):
    """Top-level configuration for findata."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
