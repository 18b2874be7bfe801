"""Main application configuration schema."""
from pydantic import BaseModel, Field, field_validator

from .demo_schema import DemoConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demos: DemoConfig = Field(default_factory=lambda: DemoConfig())

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate version."""
        if not v:
            raise ValueError("Configuration version cannot be empty")
        return v
