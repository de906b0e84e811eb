"""changegate configuration."""

import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from changegate.errors import ConfigError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Runner environment loaded from environment variables or .env."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # GitHub Actions runner
    github_output: Optional[str] = None
    github_event_name: Optional[str] = None
    github_repository: Optional[str] = None
    github_pr_number: Optional[str] = None
    github_event_before: Optional[str] = None
    github_event_after: Optional[str] = None

    # GitHub API
    github_token: Optional[str] = None
    github_api_url: str = "https://api.github.com"
    http_timeout: float = Field(
        default=30.0, gt=0, validation_alias="CHANGEGATE_HTTP_TIMEOUT"
    )

    # Application
    log_level: str = "INFO"

    # -----------------------------------
    # Field Validators
    # -----------------------------------

    @field_validator(
        "github_output",
        "github_event_name",
        "github_repository",
        "github_pr_number",
        "github_event_before",
        "github_event_after",
        "github_token",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat unset and whitespace-only values the same way.

        Args:
            v: The raw value from the environment.

        Returns:
            The stripped string, or None when nothing is left.
        """
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("github_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"❌ LOG_LEVEL must be one of {', '.join(sorted(VALID_LOG_LEVELS))}."
            )
        return level


def create_settings() -> Settings:
    """Load and validate settings from the environment.

    Returns:
        Settings: Validated settings instance.

    Raises:
        ConfigError: If a value is present but malformed.
    """
    try:
        return Settings()
    except ValidationError as e:
        for err in e.errors():
            logger.error(f"  {err['msg']}")
        raise ConfigError("Invalid configuration in environment") from e
