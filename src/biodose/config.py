from __future__ import annotations

"""Configuration utilities for biodose.

This module defines a hierarchical configuration schema using Pydantic models.
The :class:`Settings` container groups the window, timestamp, dose and logging
sub-sections.  Instances can be populated from environment variables or from
YAML/JSON files with matching nested keys.
"""

import json
import logging
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import EnvSettingsSource

from .utils.logging import DEFAULT_FORMAT

import yaml


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class WindowSettings(SectionModel):
    """Size of the recent-sample window."""

    size: int = Field(default=24, ge=1)


class TimestampSettings(SectionModel):
    """Controls for turning timestamps into local clock readings."""

    timezone: str | None = None

    @field_validator("timezone")
    @classmethod
    def _check_zone(cls, value: str | None) -> str | None:
        if value in (None, "", "local"):
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone: {value}") from exc
        return value


class DoseSettings(SectionModel):
    """Defaults for dose computation."""

    model: str = "constant"
    base_dose: float = Field(default=3.0, ge=0.0)
    target_time: str | None = None


class LoggingSettings(SectionModel):
    """Log level and format used by the command line."""

    level: str = "WARNING"
    format: str = DEFAULT_FORMAT

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value}")
        return value


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    window: WindowSettings = Field(default_factory=WindowSettings)
    timestamp: TimestampSettings = Field(default_factory=TimestampSettings)
    dose: DoseSettings = Field(default_factory=DoseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="BIODOSE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``BIODOSE_*`` environment variables only."""

        return cls()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        class LegacyEnvSettingsSource(EnvSettingsSource):
            def decode_complex_value(self, field_name, target_field, value):  # type: ignore[override]
                try:
                    return super().decode_complex_value(field_name, target_field, value)
                except json.JSONDecodeError:
                    return value

        env_settings.__class__ = LegacyEnvSettingsSource
        return init_settings, env_settings, dotenv_settings, file_secret_settings


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
