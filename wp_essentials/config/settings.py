import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..context import Capabilities
from .core import (
    FeatureSettings,
    IntegrationSettings,
    LoggingSettings,
    MediaSettings,
    ServerSettings,
    SvgSettings,
)


__all__ = ["Settings", "ConfigurationError", "get_settings"]


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class Settings(BaseSettings):
    """
    Configuration settings for wp-essentials.

    Settings are loaded from environment variables prefixed with WP_ESSENTIALS_,
    a .env file, and optionally a TOML configuration file.
    Environment variables take precedence over .env file values, and values passed
    to the constructor (including a TOML file read by ``from_config``) take
    precedence over both.
    """

    model_config = SettingsConfigDict(
        env_prefix="WP_ESSENTIALS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    content_dir: str = Field(
        default="/var/www/html/wp-content",
        description="Content storage root of the host",
    )

    fields_dir_name: str = Field(
        default="fields",
        description="Subdirectory of content_dir holding ACF JSON files",
    )

    features: FeatureSettings = Field(
        default_factory=FeatureSettings,
        description="Feature toggles",
    )

    integrations: IntegrationSettings = Field(
        default_factory=IntegrationSettings,
        description="Active third-party plugins",
    )

    svg: SvgSettings = Field(
        default_factory=SvgSettings,
        description="SVG sanitization settings",
    )

    media: MediaSettings = Field(
        default_factory=MediaSettings,
        description="Attachment preview settings",
    )

    server: ServerSettings = Field(
        default_factory=ServerSettings,
        description="ASGI adapter settings",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Centralized logging configuration",
    )

    @property
    def fields_dir(self) -> str:
        """Directory ACF reads and writes field group JSON in."""
        return f"{self.content_dir.rstrip('/')}/{self.fields_dir_name}"

    @property
    def capabilities(self) -> Capabilities:
        return Capabilities(
            acf_active=self.integrations.acf_active,
            gravity_forms_active=self.integrations.gravity_forms_active,
            gravity_forms_html5=self.integrations.gravity_forms_html5,
        )

    @classmethod
    def load_toml_config(cls, toml_path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file."""
        try:
            with toml_path.open("rb") as f:
                return tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TOML config file {toml_path}: {e}"
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {toml_path}: {e}") from e

    @classmethod
    def from_config(cls, config_path: Path | str | None = None, **overrides: Any) -> "Settings":
        """Create settings from an optional TOML file plus explicit overrides."""
        config_data: dict[str, Any] = {}
        if config_path is not None:
            config_data = cls.load_toml_config(Path(config_path))
        config_data.update(overrides)

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings.from_config()
