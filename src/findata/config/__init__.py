"""Configuration loading and validation."""

from findata.config.loader import load_config
from findata.config.schema import (
    DEFAULT_BASE_URL,
    DEMO_API_KEY,
    ApiConfig,
    DisplayConfig,
    FindataConfig,
    LoggingConfig,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEMO_API_KEY",
    "ApiConfig",
    "DisplayConfig",
    "FindataConfig",
    "LoggingConfig",
    "load_config",
]
