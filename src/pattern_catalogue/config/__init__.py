"""Configuration package."""
from .defaults import DEFAULT_CONFIG, LogDestination, LogLevel
from .manager import ConfigurationManager, load_config
from .schemas import AppConfig, DemoConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "DEFAULT_CONFIG",
    "DemoConfig",
    "LogDestination",
    "LogLevel",
    "LoggingConfig",
    "load_config",
]
