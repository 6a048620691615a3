"""
Application settings.

Settings are read from the environment (and an optional .env file) once,
at startup, into an immutable object that is then passed to the adapters
that need it. Nothing else in the application reads environment variables.
"""

import logging

from pydantic import ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.domain.exceptions import ConfigurationError

DEFAULT_OPENAI_MODEL = "gpt-3.5-turbo-instruct"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseSettings):
    """
    Credentials and tunables for the pipeline.

    Field names map to upper-case environment variables
    (openai_api_key <- OPENAI_API_KEY). Construct directly in tests, or
    with `Settings.from_env()` in entry points.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # --- Credentials (required) ---
    openai_api_key: str
    custom_search_key: str
    custom_search_cx: str

    # --- Tunables ---
    openai_model: str = DEFAULT_OPENAI_MODEL
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL

    # Validators raise ConfigurationError, which pydantic lets propagate as-is

    @field_validator("openai_api_key", "custom_search_key", "custom_search_cx")
    @classmethod
    def _require_credential(cls, value: str, info: ValidationInfo) -> str:
        if not value or not value.strip():
            raise ConfigurationError(f"{info.field_name.upper()} must be set")
        return value

    @field_validator("openai_model")
    @classmethod
    def _require_model(cls, value: str) -> str:
        if not value or not value.strip():
            raise ConfigurationError("OPENAI_MODEL cannot be empty")
        return value

    @field_validator("http_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ConfigurationError(f"HTTP_TIMEOUT_SECONDS must be positive, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        if not isinstance(logging.getLevelName(value.upper()), int):
            raise ConfigurationError(f"LOG_LEVEL '{value}' is not a logging level")
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the environment.

        Returns:
            Validated Settings

        Raises:
            ConfigurationError: If a required variable is missing or a
                value cannot be parsed
        """
        try:
            return cls()
        except ValidationError as e:
            errors = e.errors()
            missing = [str(err["loc"][0]).upper() for err in errors if err["type"] == "missing"]
            if missing:
                raise ConfigurationError(f"{', '.join(missing)} must be set") from e
            first = errors[0]
            raise ConfigurationError(f"{str(first['loc'][0]).upper()}: {first['msg']}") from e


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for entry points (API server and scripts)."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
