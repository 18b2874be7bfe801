"""Structured logging built on structlog and the stdlib logging module.

Demonstrations own standard output for their transcripts, so every handler
configured here writes to stderr or to a rotating file.
"""
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog

from pattern_catalogue.config.defaults import LogDestination
from pattern_catalogue.config.schemas import LoggingConfig

_configure_lock = threading.Lock()
_configured = False

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class DetailedFormatter(logging.Formatter):
    """Formatter that includes caller information."""

    def format(self, record):
        # Add method name and line number to the record
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _ensure_configured() -> None:
    """Route structlog through stdlib logging before the first logger is handed out."""
    global _configured
    if _configured:
        return
    with _configure_lock:
        if not _configured:
            _configure_structlog()
            _configured = True


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, the schema defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    global _configured
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    handlers = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if config.destination in (LogDestination.STDERR, LogDestination.BOTH):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    with _configure_lock:
        _configure_structlog()
        _configured = True

    logger = structlog.get_logger("pattern_catalogue")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    _ensure_configured()
    return structlog.get_logger(name)
