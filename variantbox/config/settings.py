"""Tool settings loaded from the environment."""

import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PREFIX = "VARIANTBOX_"

DEFAULT_CONFIG_FILE = "variants.yaml"


class VariantboxSettings(BaseSettings):
    """Settings for the variantbox tool itself.

    Precedence order (highest to lowest):
    1. Environment variables (``VARIANTBOX_*``)
    2. Constructor arguments
    3. .env file
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override constructor arguments."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    config_path: Path = Field(
        default=Path(DEFAULT_CONFIG_FILE),
        description="YAML file holding the base configuration and variants",
    )
    log_level: str = Field(default="WARNING", description="Default log level")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Console log rendering"
    )
    icon_mode: Literal["emoji", "text"] = Field(
        default="emoji", description="Icon display mode for CLI output"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    @field_validator("config_path", mode="before")
    @classmethod
    def expand_config_path(cls, v: Any) -> Any:
        if isinstance(v, str | Path):
            return Path(v).expanduser()
        return v

    def get_log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        return int(getattr(logging, self.log_level, logging.WARNING))


def create_settings(**overrides: Any) -> VariantboxSettings:
    """Create settings, ignoring overrides that were not provided."""
    return VariantboxSettings(**{k: v for k, v in overrides.items() if v is not None})
