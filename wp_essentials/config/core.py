"""Core configuration settings - features, integrations, uploads, server, and logging."""

from pydantic import BaseModel, Field, field_validator


# === Feature Toggles ===


class FeatureSettings(BaseModel):
    """Switches for each group of callbacks registered at startup."""

    hide_generator: bool = Field(
        default=True,
        description="Blank the generator meta tag and drop the default wp_head emitter",
    )

    disable_xmlrpc: bool = Field(
        default=True,
        description="Report the XML-RPC endpoint as disabled",
    )

    disable_rest_api: bool = Field(
        default=True,
        description="Report the REST API and its JSONP variant as disabled",
    )

    block_user_enumeration: bool = Field(
        default=True,
        description="Terminate requests probing author ids via query string or canonical redirect",
    )

    svg_uploads: bool = Field(
        default=True,
        description="Allow SVG uploads, sanitize them, and synthesize preview sizes",
    )

    acf_json_paths: bool = Field(
        default=True,
        description="Store Advanced Custom Fields JSON under the content directory",
    )

    gravity_forms_autocomplete: bool = Field(
        default=True,
        description="Disable browser autocomplete on Gravity Forms markup",
    )


# === Third-party Integrations ===


class IntegrationSettings(BaseModel):
    """Third-party plugins the host reports as active."""

    acf_active: bool = Field(
        default=False,
        description="Advanced Custom Fields is loaded",
    )

    gravity_forms_active: bool = Field(
        default=False,
        description="Gravity Forms is loaded",
    )

    gravity_forms_html5: bool = Field(
        default=False,
        description="Gravity Forms HTML5 output is enabled",
    )


# === Upload Configuration ===


class SvgSettings(BaseModel):
    """SVG sanitization settings."""

    minify: bool = Field(
        default=True,
        description="Drop whitespace-only text nodes from sanitized output",
    )

    remove_remote_references: bool = Field(
        default=True,
        description="Strip href values that point outside the document",
    )

    error_message: str = Field(
        default="Sorry, this file couldn't be sanitized so for security reasons wasn't uploaded",
        description="Message attached to an upload that failed sanitization",
    )


class MediaSettings(BaseModel):
    """Attachment preview settings."""

    default_size: int = Field(
        default=2000,
        ge=1,
        description="Height and width used when no size option is stored",
    )

    options: dict[str, int] = Field(
        default_factory=dict,
        description="Stored image size options, e.g. {'medium_size_w': 300}",
    )


# === Server Configuration ===


class ServerSettings(BaseModel):
    """ASGI adapter settings."""

    admin_path_prefix: str = Field(
        default="/wp-admin",
        description="Request paths under this prefix are treated as administrative",
    )

    terminate_status_code: int = Field(
        default=200,
        ge=100,
        le=599,
        description="Status sent with the empty body of a terminated request",
    )

    @field_validator("admin_path_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Ensure the prefix is an absolute path without a trailing slash."""
        v = "/" + v.strip("/")
        return v


# === Logging Configuration ===


class LoggingSettings(BaseModel):
    """Centralized logging configuration."""

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    format: str = Field(
        default="auto",
        description="Logging output format: 'rich' for development, 'json' for production, 'auto' for automatic selection",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        upper_v = v.upper()
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        lower_v = v.lower()
        if lower_v not in ("auto", "rich", "json"):
            raise ValueError(f"Invalid log format: {v}. Must be one of auto, rich, json")
        return lower_v
