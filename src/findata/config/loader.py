"""Configuration loading for the findata server.

Sources, lowest priority first:
    1. Built-in defaults (Pydantic model defaults)
    2. One TOML file: the explicit ``path`` argument, else ``$FINDATA_CONFIG``
    3. Environment variables for the remote API, named by
       ``api.base_url_env`` and ``api.api_key_env``
       (``API_BASE_URL`` and ``API_KEY`` by default)
    4. Programmatic overrides (passed to ``load_config``)

A base URL or key still unset after all sources falls back to the public
production host and the demo key.  Empty env vars count as unset.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from findata.core.errors import ConfigError

from .schema import DEFAULT_BASE_URL, DEMO_API_KEY, ApiConfig, FindataConfig

# (value field, env-name field, fallback)
_API_SETTINGS = (
    ("base_url", "base_url_env", DEFAULT_BASE_URL),
    ("api_key", "api_key_env", DEMO_API_KEY),
)


def _config_file(path: str | Path | None) -> Path | None:
    """Return the config file to read, if any."""
    if path is not None:
        p = Path(path)
        if not p.is_file():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        return p

    env_path = os.environ.get("FINDATA_CONFIG")
    if env_path:
        p = Path(env_path)
        if not p.is_file():
            msg = f"FINDATA_CONFIG points to non-existent file: {env_path}"
            raise ConfigError(msg)
        return p

    return None


def _read_toml(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file."""
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigError(msg) from e


def _merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay *override* onto *base* one section table at a time."""
    merged = base.copy()
    for section, values in override.items():
        current = merged.get(section)
        if isinstance(current, dict) and isinstance(values, dict):
            merged[section] = {**current, **values}
        else:
            merged[section] = values
    return merged


def _resolve_api_settings(api: ApiConfig, pinned: dict[str, Any]) -> None:
    """Apply env vars and fallbacks to *api* in place.

    Keys in *pinned* came from programmatic overrides and are left alone.
    """
    for field, env_field, fallback in _API_SETTINGS:
        if pinned.get(field):
            continue
        env_value = os.environ.get(getattr(api, env_field))
        if env_value:
            setattr(api, field, env_value)
        elif not getattr(api, field):
            setattr(api, field, fallback)


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> FindataConfig:
    """Load and validate configuration.

    Args:
        path: Explicit config file path (replaces ``$FINDATA_CONFIG``).
        overrides: Section tables applied last (highest overall priority).

    Returns:
        Validated FindataConfig instance with API settings resolved.

    Raises:
        ConfigError: On invalid TOML, missing files, or validation failure.
    """
    config_file = _config_file(path)
    data = _read_toml(config_file) if config_file is not None else {}
    if overrides:
        data = _merge_sections(data, overrides)

    try:
        config = FindataConfig.model_validate(data)
    except Exception as e:
        msg = f"Configuration validation failed: {e}"
        raise ConfigError(msg) from e

    pinned = (overrides or {}).get("api")
    _resolve_api_settings(config.api, pinned if isinstance(pinned, dict) else {})

    return config
