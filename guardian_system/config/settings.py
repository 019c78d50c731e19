"""Process settings using Pydantic BaseSettings for environment variable management."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Process-wide settings loaded from ``GUARDIAN_*`` environment variables.

    Policy tables are not settings: they live in PolicyConfig snapshots.
    ``policy_path`` only names the document to load at startup.

    Attributes:
        log_level: Logging level shared by loguru and structlog
        log_format: "json" for JSON records, "console" for colorized lines
        policy_path: Optional JSON policy document replacing the built-in tables
        default_tier: Age tier used by the CLI when --tier is omitted
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )
    policy_path: str | None = Field(
        default=None,
        description="Path to a JSON policy document replacing the built-in tables"
    )
    default_tier: str = Field(
        default="UNDER_8",
        description="Age tier applied by the CLI when --tier is omitted"
    )

    model_config = {
        "env_prefix": "GUARDIAN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        log_format = value.strip().lower()
        if log_format not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return log_format


# Singleton instance - import this throughout the application
settings = Settings()
