# pattern_catalogue/config/defaults.py
from enum import Enum
from typing import Any, Dict


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDERR = "stderr"
    BOTH = "both"


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",

    # Logging configuration; transcripts own stdout so logs never go there
    "logging": {
        "level": "${PATTERN_CATALOGUE_LOG_LEVEL:WARNING}",
        "destination": "${PATTERN_CATALOGUE_LOG_DESTINATION:stderr}",
        "file": {
            "path": "${PATTERN_CATALOGUE_LOG_DIR:logs}/pattern_catalogue.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # Per-demo knobs
    "demos": {
        "observer_capacity": 10,
        "remote_slots": 7,
        "command_history_size": 10,
        "list_size": 100,
        "singleton_log_file": "${PATTERN_CATALOGUE_SINGLETON_LOG_FILE:app.log}",
        "singleton_workers": 5,
    },
}

# Environment variables copied verbatim onto configuration paths
ENV_OVERRIDES: Dict[str, tuple] = {
    "PATTERN_CATALOGUE_LOG_LEVEL": ("logging", "level"),
    "PATTERN_CATALOGUE_LOG_DESTINATION": ("logging", "destination"),
    "PATTERN_CATALOGUE_SINGLETON_LOG_FILE": ("demos", "singleton_log_file"),
}
