"""
Application configuration settings.

Centralized configuration using Pydantic Settings for type safety and validation.

Decision: Using pydantic-settings for:
1. Type-safe configuration
2. Environment variable loading (SMTP_HOST, SMTP_USER, ...)
3. Default values
4. Easy testing with different configs
"""

import logging
from typing import Any

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "otp-delivery-service"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False

    # Email transport (SMTP)
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_secure: bool = False
    smtp_user: str | None = None
    smtp_pass: str | None = None
    smtp_from_name: str = "Sentinel Healthcare"
    smtp_timeout_seconds: float = 10.0

    # Operations
    verify_email_on_startup: bool = True

    @field_validator("smtp_secure", mode="before")
    @classmethod
    def _parse_secure_flag(cls, value: Any) -> Any:
        """
        Only the literal string "true" enables implicit TLS.

        Values such as "1" or "yes" keep STARTTLS on the submission port.
        """
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return value

    @field_validator("smtp_port", "smtp_timeout_seconds", mode="before")
    @classmethod
    def _unparseable_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """
        Fall back to the default for a number that does not parse (SMTP_PORT=abc).

        Settings are loaded at import time, so a typo here must not stop the
        service from starting.
        """
        if not isinstance(value, str):
            return value
        parse = int if info.field_name == "smtp_port" else float
        try:
            return parse(value.strip())
        except ValueError:
            default = cls.model_fields[info.field_name].default
            logger.warning(
                f"Ignoring unreadable {info.field_name.upper()}={value!r}, using {default}"
            )
            return default

    @field_validator("smtp_user", "smtp_pass", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


# Global settings instance
settings = Settings()
