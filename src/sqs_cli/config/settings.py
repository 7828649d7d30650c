"""
Module: settings.py
Description: CLI configuration using pydantic-settings.

Loads defaults for the command-line flags from environment variables,
with a .env file supported for local use. Flags passed on the command
line always take precedence over these values.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """CLI settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # AWS settings
    aws_region: str = Field(default="us-east-1", description="AWS region")

    # SQS settings
    queue_url: str = Field(
        default="",
        description="URL of the SQS queue used when -queue-url is not given"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
