from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs
from pydantic import BaseModel, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "intent_classifier"


def _default_home() -> Path:
    """Get default home directory using platformdirs."""
    return Path(PlatformDirs(appname=APP_NAME, appauthor=False).user_cache_dir)


class DirectoryConfig(BaseModel):
    """Directory configuration with computed paths."""

    home: Path = Field(
        default_factory=_default_home,
        description="Base directory for all intent_classifier data",
    )

    @computed_field
    @property
    def logs_dir(self) -> Path:
        """Directory for JSONL classification logs."""
        path = self.home / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path


class LoggingConfig(BaseModel):
    """Logging configuration."""

    logger_name: str = Field(
        default=APP_NAME,
        description="Name of the structured logger",
    )

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    console_output: bool = Field(
        default=False,
        description="Emit human-readable log lines on stderr",
    )

    file_output: bool = Field(
        default=False,
        description="Append JSON log lines to <home>/logs/classifier.jsonl",
    )


class ResponseConfig(BaseModel):
    """Defaults for model responses read from plain text."""

    default_role: str = Field(
        default="assistant",
        description="Role label attached to raw text that carries no envelope",
    )


class AppConfig(BaseSettings):
    """Root application configuration.

    All configuration is loaded from environment variables with INTENT_CLASSIFIER_ prefix.
    Use double underscore for nested config: INTENT_CLASSIFIER_LOGGING__LEVEL

    Example env vars:
        export INTENT_CLASSIFIER_LOGGING__LEVEL=DEBUG
        export INTENT_CLASSIFIER_LOGGING__FILE_OUTPUT=true
        export INTENT_CLASSIFIER_DIRECTORIES__HOME=/custom/path
        export INTENT_CLASSIFIER_RESPONSE__DEFAULT_ROLE=assistant
    """

    model_config = SettingsConfigDict(
        env_prefix="INTENT_CLASSIFIER_",
        env_nested_delimiter="__",
        frozen=True,
        extra="forbid",
    )

    directories: DirectoryConfig = Field(default_factory=DirectoryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    response: ResponseConfig = Field(default_factory=ResponseConfig)
