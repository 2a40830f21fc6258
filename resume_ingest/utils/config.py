"""
Configuration management for Resume Ingest.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base path
ROOT_DIR = Path(__file__).parent.parent.parent


class DatabaseSettings(BaseSettings):
    """MongoDB database configuration for the task store."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    host: str = "localhost"
    port: int = 27017
    name: str = "resume_ingest"
    username: str | None = None
    password: str | None = None
    tasks_collection: str = "parse_tasks"
    timeout_ms: int = 5000


class WorkerSettings(BaseSettings):
    """Background parse worker pool configuration."""

    model_config = SettingsConfigDict(env_prefix="WORKER_")

    max_workers: int = Field(default=4, ge=1)
    queue_size: int = Field(default=100, ge=1)
    max_file_size_mb: int = Field(default=20, ge=1)

    @property
    def max_file_size_bytes(self) -> int:
        """Maximum accepted source file size in bytes."""
        return self.max_file_size_mb * 1024 * 1024


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "resume_ingest.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "Resume Ingest"
    version: str = "0.1.0"
    description: str = "Resume parsing and structured extraction service"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Task store backend
    store: Literal["memory", "mongodb"] = "memory"

    # Version stamped on results when the extractor does not set its own
    parser_version: str = "1.0.0"

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    workers: WorkerSettings = Field(default_factory=WorkerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("parser_version")
    @classmethod
    def validate_parser_version(cls, v: str) -> str:
        """Reject blank version strings."""
        if not v.strip():
            raise ValueError("parser_version must not be blank")
        return v.strip()


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
