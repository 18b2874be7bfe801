"""Logging chain - every handler sees the request and acts when it is severe enough."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class LogLevel(IntEnum):
    INFO = 0
    DEBUG = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


@dataclass(frozen=True)
class LogRequest:
    level: LogLevel
    message: str
    source: str


class LogHandler(ABC):
    """Pass-through link: acts when request.level >= threshold, then always forwards."""

    def __init__(self, threshold: LogLevel, name: str):
        self.threshold = threshold
        self.name = name
        self._next: Optional["LogHandler"] = None

    def set_next(self, handler: "LogHandler") -> "LogHandler":
        self._next = handler
        return handler

    def handle(self, request: LogRequest) -> None:
        if request.level >= self.threshold:
            self.write(request)
        if self._next is not None:
            self._next.handle(request)

    @abstractmethod
    def write(self, request: LogRequest) -> None:
        pass


class ConsoleLogger(LogHandler):
    def write(self, request: LogRequest) -> None:
        print(f"[CONSOLE] {self.name}: [{request.level.name}] {request.message} (from {request.source})")


class FileLogger(LogHandler):
    def __init__(self, threshold: LogLevel, filename: str, name: str):
        super().__init__(threshold, name)
        self.filename = filename

    def write(self, request: LogRequest) -> None:
        print(
            f"[FILE] {self.name}: Writing to '{self.filename}': "
            f"[{request.level.name}] {request.message} (from {request.source})"
        )


class EmailLogger(LogHandler):
    def __init__(self, threshold: LogLevel, email: str, name: str):
        super().__init__(threshold, name)
        self.email = email

    def write(self, request: LogRequest) -> None:
        print(
            f"[EMAIL] {self.name}: Sending alert to '{self.email}': "
            f"[{request.level.name}] {request.message} (from {request.source})"
        )
        print("  Subject: Critical Error Alert")
        print(f"  Body: A critical error occurred in {request.source}: {request.message}")
