"""Configuration module for wp-essentials."""

from .settings import ConfigurationError, Settings, get_settings


__all__ = ["ConfigurationError", "Settings", "get_settings"]
