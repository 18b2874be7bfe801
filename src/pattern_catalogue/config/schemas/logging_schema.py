"""Logging configuration schema."""
from pydantic import BaseModel, Field, field_validator

from pattern_catalogue.config.defaults import LogDestination, LogLevel


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/pattern_catalogue.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size in MB")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 1:
            raise ValueError("Log rotation settings must be at least 1")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDERR, description="Where logs are written")
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v
