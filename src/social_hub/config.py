"""Hub configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .constants import (
    DISTRIBUTION_STANDIN_DELAY_SECONDS,
    EXTRACTION_STANDIN_DELAY_SECONDS,
    SUBMISSION_RESET_DELAY_SECONDS,
)
from .platforms import DEFAULT_SELECTED_PLATFORMS, Platform

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "hub.yaml"


class HubConfig(BaseSettings):
    """Composer settings.

    SOCIAL_HUB_* environment variables win over values from config/hub.yaml
    (passed as init kwargs), which win over the defaults below.
    """

    model_config = SettingsConfigDict(env_prefix="SOCIAL_HUB_", extra="ignore")

    default_platforms: list[Platform] = Field(
        default_factory=lambda: list(DEFAULT_SELECTED_PLATFORMS)
    )
    reset_delay_seconds: float = Field(default=SUBMISSION_RESET_DELAY_SECONDS, ge=0)
    character_limits: dict[Platform, int] = Field(default_factory=dict)
    extraction_delay_seconds: float = Field(default=EXTRACTION_STANDIN_DELAY_SECONDS, ge=0)
    distribution_delay_seconds: float = Field(default=DISTRIBUTION_STANDIN_DELAY_SECONDS, ge=0)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Init kwargs carry the YAML file, so they rank below the environment
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @field_validator("default_platforms", mode="before")
    @classmethod
    def _normalize_platforms(cls, value):
        if isinstance(value, str):
            value = [part for part in value.split(",") if part.strip()]
        if isinstance(value, list):
            return [item.strip().lower() if isinstance(item, str) else item for item in value]
        return value

    @field_validator("character_limits")
    @classmethod
    def _positive_limits(cls, value: dict[Platform, int]) -> dict[Platform, int]:
        for platform, limit in value.items():
            if limit <= 0:
                raise ValueError(f"character limit for {platform.value} must be positive")
        return value


def load_hub_config(config_path: Path | None = None) -> HubConfig:
    """Load hub configuration from a YAML file.

    Falls back to environment variables and defaults when the file is missing.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return HubConfig()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return HubConfig(**data)
