from typing import ClassVar, Set

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuilderBaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )

    _LOG_LEVELS: ClassVar[Set[str]] = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    log_level: str = Field(
        default="INFO",
        description="Base log level passed to setup_logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        level = v.strip().upper()
        if level not in cls._LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. "
                f"Use one of: {', '.join(sorted(cls._LOG_LEVELS))}"
            )
        return level
