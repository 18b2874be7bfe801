"""Shared test fixtures for the pattern catalogue."""
import logging
import os
import sys
from unittest.mock import patch

import pytest

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from pattern_catalogue.config import DemoConfig  # noqa: E402
from pattern_catalogue.infrastructure.logging.logger import DetailedFormatter  # noqa: E402
from pattern_catalogue.patterns.creational.singleton.services import (  # noqa: E402
    DatabaseConnection,
    FileLogger,
    Logger,
)

CATALOGUE_ENV_VARS = (
    "PATTERN_CATALOGUE_CONFIG",
    "PATTERN_CATALOGUE_LOG_LEVEL",
    "PATTERN_CATALOGUE_LOG_DESTINATION",
    "PATTERN_CATALOGUE_LOG_DIR",
    "PATTERN_CATALOGUE_SINGLETON_LOG_FILE",
)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Release every singleton instance before and after each test."""
    for singleton in (FileLogger, Logger, DatabaseConnection):
        singleton.reset_instance()
    yield
    for singleton in (FileLogger, Logger, DatabaseConnection):
        singleton.reset_instance()


@pytest.fixture
def clean_env():
    """Run a test without any catalogue environment overrides."""
    environ = {key: value for key, value in os.environ.items() if key not in CATALOGUE_ENV_VARS}
    with patch.dict(os.environ, environ, clear=True):
        yield


@pytest.fixture
def demo_config(tmp_path):
    """Demo settings whose singleton log file lives in a temporary directory."""
    return DemoConfig(singleton_log_file=str(tmp_path / "app.log"))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers setup_logging installed during a test and restore the root level."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers and isinstance(handler.formatter, DetailedFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
