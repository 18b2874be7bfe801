"""Event loggers for the application: printing or silent."""
from abc import ABC, abstractmethod
from typing import Optional


class EventLogger(ABC):
    @abstractmethod
    def log(self, level: str, message: str) -> None:
        pass


class ConsoleLogger(EventLogger):
    def log(self, level: str, message: str) -> None:
        print(f"[{level}] {message}")


class NullLogger(EventLogger):
    def log(self, level: str, message: str) -> None:
        pass


class Application:
    """Falls back to NullLogger so run() never checks for a missing logger."""

    def __init__(self, logger: Optional[EventLogger] = None):
        self.logger = logger or NullLogger()

    def run(self) -> None:
        self.logger.log("INFO", "Application starting")
        self.logger.log("DEBUG", "Processing data")
        self.logger.log("INFO", "Application finished")
