"""
Tests for tsformats.config.

Tests settings loading from defaults, YAML files and environment variables.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tsformats.config import (
    LoggingSettings,
    Settings,
    get_settings,
    load_yaml_config,
    reload_settings,
)
from tsformats.core.exceptions import ConfigurationError


class TestDefaults:
    """Settings without any configuration source."""

    def test_default_sections(self):
        settings = Settings()
        assert settings.logging.level == "INFO"
        assert settings.logging.json_format is False
        assert settings.logging.file is None
        assert settings.overlap.extra_probes == []
        assert settings.overlap.include_examples is True
        assert settings.output.format == "table"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_reload_settings_returns_new_instance(self):
        first = get_settings()
        assert reload_settings() is not first


class TestLoggingSettings:
    """Tests for log level validation."""

    def test_level_uppercased(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="CHATTY")


class TestYamlConfig:
    """Tests for YAML configuration loading."""

    def test_no_file(self):
        assert load_yaml_config() == {}

    def test_missing_explicit_path(self, tmp_path):
        assert load_yaml_config(tmp_path / "missing.yaml") == {}

    def test_loads_candidate_from_cwd(self):
        Path("tsformats.yaml").write_text(
            "logging:\n"
            "  level: warning\n"
            "overlap:\n"
            "  extra_probes:\n"
            "    - '2025-05-19T14:30:15Z'\n"
            "output:\n"
            "  format: json\n"
        )

        settings = get_settings()

        assert settings.logging.level == "WARNING"
        assert settings.overlap.extra_probes == ["2025-05-19T14:30:15Z"]
        assert settings.output.format == "json"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml_config(path) == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("logging: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_yaml_config(path)

        assert exc_info.value.config_path == str(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_yaml_config(path)

    def test_invalid_output_format(self):
        with pytest.raises(ValidationError):
            Settings(**{"output": {"format": "xml"}})


class TestEnvironmentOverrides:
    """Environment variables take precedence over YAML."""

    def test_env_nested_value(self, monkeypatch):
        monkeypatch.setenv("TSFORMATS_LOGGING__LEVEL", "DEBUG")
        assert get_settings().logging.level == "DEBUG"

    def test_env_overrides_yaml(self, monkeypatch):
        Path("tsformats.yaml").write_text("output:\n  format: csv\n")
        monkeypatch.setenv("TSFORMATS_OUTPUT__FORMAT", "json")

        assert get_settings().output.format == "json"

    def test_yaml_used_when_env_unset(self):
        Path("tsformats.yaml").write_text("output:\n  format: csv\n")
        assert get_settings().output.format == "csv"
