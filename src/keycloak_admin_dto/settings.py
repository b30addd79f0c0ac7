"""Centralized settings using pydantic-settings.

Configuration for the DTO layer loaded from environment variables. Uses
pydantic for automatic validation, type coercion, and documentation.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from environment variables.

    All settings have sensible defaults. Override via environment variables
    as documented per field.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Keycloak server
    server_url: str = Field(
        default="http://localhost:8080",
        validation_alias="KEYCLOAK_URL",
        description="Base URL of the Keycloak server used when building request URLs",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=True,
        validation_alias="JSON_LOGS",
        description="Enable JSON formatted logging for structured log aggregation",
    )
    correlation_ids: bool = Field(
        default=True,
        validation_alias="CORRELATION_IDS",
        description="Enable correlation IDs in logs for request tracing",
    )
    log_payload_preview_limit: int = Field(
        default=512,
        ge=0,
        validation_alias="LOG_PAYLOAD_PREVIEW_LIMIT",
        description="Maximum characters of a rejected payload included in logs",
    )


# Global settings instance - initialized once at module import
settings = Settings()
