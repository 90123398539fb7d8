from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="", validation_alias="LOG_FILE")
    timezone: str = Field(
        default="UTC",
        validation_alias="SELLAPORTER_TIMEZONE",
        description="IANA zone whose UTC offset is applied to launch dates and times",
    )
    pages_file: str = Field(
        default="pages.yaml",
        validation_alias="SELLAPORTER_PAGES_FILE",
        description="YAML document holding the page store",
    )
    query_namespace: str = Field(
        default="sellaporter",
        validation_alias="SELLAPORTER_QUERY_NAMESPACE",
        description="Query parameter namespace for phase/time overrides",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Fall back to UTC when the configured zone is unknown."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown SELLAPORTER_TIMEZONE '{value}'. Defaulting to UTC.")
            return "UTC"
        return value

    @field_validator("query_namespace")
    @classmethod
    def validate_query_namespace(cls, value: str) -> str:
        """Namespace must be a non-empty single key."""
        cleaned = value.strip()
        if not cleaned:
            logger.warning("Empty SELLAPORTER_QUERY_NAMESPACE. Defaulting to 'sellaporter'.")
            return "sellaporter"
        return cleaned


settings = Settings()
