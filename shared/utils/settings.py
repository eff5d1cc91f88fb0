"""
Base settings shared by the gateway and the provider services
"""

from pathlib import Path
from typing import List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logger import LOG_FORMATS

# Shipped as package data alongside the shared package
DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


class SettingsLoadError(RuntimeError):
    """Raised when service settings cannot be loaded or validated."""


class BaseServiceSettings(BaseSettings):
    """
    Process configuration read once at startup

    Environment variable names map directly to field names in uppercase.
    Example: `log_level` reads from `LOG_LEVEL`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    logging_config_path: Optional[str] = Field(default=None)
    static_dir: Path = Field(default=DEFAULT_STATIC_DIR)
    cors_allowed_origins: str = Field(default="*")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        log_format = v.strip().lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"log format must be one of {', '.join(LOG_FORMATS)}")
        return log_format

    def cors_origins(self) -> List[str]:
        """Allowed CORS origins parsed from the comma separated setting"""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


def load_settings(settings_class: type) -> BaseServiceSettings:
    """
    Load and validate settings from environment and dotenv

    Raises:
        SettingsLoadError: Raised when a setting is missing or invalid
    """
    try:
        return settings_class()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
