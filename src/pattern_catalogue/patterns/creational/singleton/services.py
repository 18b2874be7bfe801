"""Singleton services - a database connection, a console logger and a file logger."""
import sys
from typing import Optional, TextIO

from pattern_catalogue.infrastructure.logging.logger import get_logger

from .base import ThreadSafeSingleton

logger = get_logger(__name__)


class DatabaseConnection(ThreadSafeSingleton):
    """Shared connection; the connection string can be changed after construction."""

    def __init__(self):
        self._connection_string = "database://localhost:5432"
        print("Database connection established")
        logger.info("Database connection constructed", connection=self._connection_string)

    def execute_query(self, query: str) -> None:
        print(f"Executing query: {query} on {self._connection_string}")

    def set_connection_string(self, connection_string: str) -> None:
        self._connection_string = connection_string

    def get_connection_string(self) -> str:
        return self._connection_string


class Logger(ThreadSafeSingleton):
    def log(self, message: str) -> None:
        print(f"[LOG] {message}")


class FileLogger(ThreadSafeSingleton):
    """
    Appends "[LOG] message" lines to a file.

    If the file cannot be opened a diagnostic goes to stderr and every later
    log() call is a no-op.
    """

    def __init__(self, path: str = "app.log"):
        self.path = path
        self._handle: Optional[TextIO] = None
        try:
            self._handle = open(path, "a")
        except OSError as e:
            print("Failed to open log file", file=sys.stderr)
            logger.warning("Log file unavailable", path=path, error=str(e))

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def log(self, message: str) -> None:
        if self._handle is None:
            return
        self._handle.write(f"[LOG] {message}\n")
        self._handle.flush()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
