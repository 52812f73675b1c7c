"""Tests for configuration loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from findata.config.loader import _merge_sections, load_config
from findata.config.schema import (
    DEFAULT_BASE_URL,
    DEMO_API_KEY,
    ApiConfig,
    DisplayConfig,
    FindataConfig,
    LoggingConfig,
)
from findata.core.errors import ConfigError


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """No config files, no API env vars."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FINDATA_CONFIG", raising=False)
    monkeypatch.delenv("API_BASE_URL", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    return tmp_path


# ─── Schema Defaults ──────────────────────────────────────────


class TestSchemaDefaults:
    def test_findata_config_all_defaults(self):
        cfg = FindataConfig()
        assert cfg.api.base_url is None
        assert cfg.api.api_key is None
        assert cfg.display.locale == "pt_BR"
        assert cfg.logging.level == "INFO"

    def test_api_config_env_names(self):
        cfg = ApiConfig()
        assert cfg.base_url_env == "API_BASE_URL"
        assert cfg.api_key_env == "API_KEY"

    def test_logging_config_defaults(self):
        cfg = LoggingConfig()
        assert cfg.level == "INFO"
        assert cfg.file == ""

    def test_display_config_defaults(self):
        assert DisplayConfig().locale == "pt_BR"

    def test_invalid_type_raises(self):
        with pytest.raises(ValidationError):
            FindataConfig.model_validate({"api": {"base_url": ["not", "a", "string"]}})

    def test_extra_fields_ignored_by_default(self):
        cfg = FindataConfig.model_validate({"unknown_section": {"foo": "bar"}})
        assert cfg.display.locale == "pt_BR"


# ─── Section Merge ────────────────────────────────────────────


class TestMergeSections:
    def test_section_keys_overlay(self):
        base = {"api": {"base_url": "a", "api_key": "k"}}
        result = _merge_sections(base, {"api": {"base_url": "b"}})
        assert result == {"api": {"base_url": "b", "api_key": "k"}}

    def test_new_section_added(self):
        result = _merge_sections({"api": {"api_key": "k"}}, {"display": {"locale": "en_US"}})
        assert result == {"api": {"api_key": "k"}, "display": {"locale": "en_US"}}

    def test_base_unchanged(self):
        base = {"api": {"api_key": "k"}}
        _merge_sections(base, {"api": {"api_key": "other"}})
        assert base == {"api": {"api_key": "k"}}


# ─── Loading ──────────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_when_no_files(self, clean_env):
        cfg = load_config()
        assert cfg.api.base_url == DEFAULT_BASE_URL
        assert cfg.api.api_key == DEMO_API_KEY

    def test_load_from_explicit_path(self, clean_env):
        toml_file = clean_env / "test.toml"
        toml_file.write_text('[api]\nbase_url = "http://localhost:8000"\n\n[display]\nlocale = "en_US"\n')
        cfg = load_config(path=toml_file)
        assert cfg.api.base_url == "http://localhost:8000"
        assert cfg.display.locale == "en_US"
        assert cfg.api.api_key == DEMO_API_KEY

    def test_explicit_path_not_found_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(path=tmp_path / "nonexistent.toml")

    def test_invalid_toml_raises(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[invalid\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path=bad)

    def test_validation_failure_raises_config_error(self, clean_env):
        with pytest.raises(ConfigError, match="validation failed"):
            load_config(overrides={"logging": {"level": {"nested": True}}})

    def test_overrides_beat_file(self, clean_env):
        toml_file = clean_env / "test.toml"
        toml_file.write_text('[api]\napi_key = "from-file"\n')
        cfg = load_config(path=toml_file, overrides={"api": {"api_key": "override"}})
        assert cfg.api.api_key == "override"


# ─── Environment Variables ────────────────────────────────────


class TestEnvVarOverrides:
    def test_env_vars_replace_defaults(self, clean_env, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "http://staging.local")
        monkeypatch.setenv("API_KEY", "secret")
        cfg = load_config()
        assert cfg.api.base_url == "http://staging.local"
        assert cfg.api.api_key == "secret"

    def test_env_overrides_file_value(self, clean_env, monkeypatch):
        toml_file = clean_env / "test.toml"
        toml_file.write_text('[api]\nbase_url = "http://from-file"\napi_key = "from-file"\n')
        monkeypatch.setenv("API_KEY", "from-env")
        cfg = load_config(path=toml_file)
        assert cfg.api.api_key == "from-env"
        assert cfg.api.base_url == "http://from-file"

    def test_overrides_beat_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "http://from-env")
        monkeypatch.setenv("API_KEY", "from-env")
        cfg = load_config(overrides={"api": {"api_key": "override"}})
        assert cfg.api.api_key == "override"
        assert cfg.api.base_url == "http://from-env"

    def test_custom_env_var_name(self, clean_env, monkeypatch):
        toml_file = clean_env / "test.toml"
        toml_file.write_text('[api]\napi_key_env = "FINBREAKFAST_KEY"\n')
        monkeypatch.setenv("FINBREAKFAST_KEY", "custom")
        cfg = load_config(path=toml_file)
        assert cfg.api.api_key == "custom"

    def test_empty_env_var_falls_back_to_default(self, clean_env, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "")
        cfg = load_config()
        assert cfg.api.base_url == DEFAULT_BASE_URL

    def test_findata_config_env_path(self, clean_env, monkeypatch):
        toml_file = clean_env / "env.toml"
        toml_file.write_text('[logging]\nlevel = "DEBUG"\n')
        monkeypatch.setenv("FINDATA_CONFIG", str(toml_file))
        cfg = load_config()
        assert cfg.logging.level == "DEBUG"

    def test_findata_config_env_missing_file_raises(self, clean_env, monkeypatch):
        monkeypatch.setenv("FINDATA_CONFIG", str(clean_env / "nope.toml"))
        with pytest.raises(ConfigError, match="non-existent"):
            load_config()

    def test_explicit_path_replaces_findata_config(self, clean_env, monkeypatch):
        env_file = clean_env / "env.toml"
        env_file.write_text('[display]\nlocale = "en_US"\n')
        explicit = clean_env / "explicit.toml"
        explicit.write_text('[logging]\nlevel = "DEBUG"\n')
        monkeypatch.setenv("FINDATA_CONFIG", str(env_file))
        cfg = load_config(path=explicit)
        assert cfg.logging.level == "DEBUG"
        assert cfg.display.locale == "pt_BR"

    def test_project_file_not_discovered(self, clean_env):
        (clean_env / "findata.toml").write_text('[display]\nlocale = "en_US"\n')
        cfg = load_config()
        assert cfg.display.locale == "pt_BR"
