"""Singleton pattern - process-wide instances with thread-safe first access."""
from .base import ThreadSafeSingleton
from .services import DatabaseConnection, FileLogger, Logger

__all__ = ["DatabaseConnection", "FileLogger", "Logger", "ThreadSafeSingleton"]
