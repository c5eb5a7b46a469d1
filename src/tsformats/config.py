"""
Configuration management for tsformats.

Configuration is loaded from:
1. Environment variables (highest priority), e.g. TSFORMATS_LOGGING__LEVEL=DEBUG
2. tsformats.yaml file
3. Default values (lowest priority)
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from tsformats.core.exceptions import ConfigurationError

CONFIG_CANDIDATES = (
    Path("tsformats.yaml"),
    Path("config/tsformats.yaml"),
    Path("/etc/tsformats/config.yaml"),
)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = "INFO"
    json_format: bool = False
    file: str | None = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


class OverlapSettings(BaseSettings):
    """Overlap report configuration."""

    # Probed in addition to the built-in probe strings
    extra_probes: list[str] = Field(default_factory=list)
    include_examples: bool = True


class OutputSettings(BaseSettings):
    """CLI output configuration."""

    format: Literal["table", "json", "csv"] = "table"


class Settings(BaseSettings):
    """Main settings class that combines all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="TSFORMATS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    overlap: OverlapSettings = Field(default_factory=OverlapSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; the environment overrides them
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def load_yaml_config(path: Path | None = None) -> dict:
    """Load configuration from YAML file.

    Raises:
        ConfigurationError: The file cannot be read or is not a mapping.
    """
    if path is None:
        for candidate in CONFIG_CANDIDATES:
            if candidate.exists():
                path = candidate
                break

    if path is None or not path.exists():
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Failed to load config file: {e}", config_path=str(path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a mapping", config_path=str(path)
        )
    return data


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings(**load_yaml_config())


def reload_settings() -> Settings:
    """Force reload of settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
