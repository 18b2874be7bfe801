"""Dependency Injection pattern - collaborators supplied from outside, optionally by a container."""
from .container import Container
from .services import (
    ConsoleLogger,
    Database,
    EmailService,
    FileLogger,
    InMemoryDatabase,
    Logger,
    MockEmailService,
    PostgreSQLDatabase,
    SMTPEmailService,
    UserService,
)
from .wiring import Environment, ServiceFactory, UserServiceBuilder, application_container

__all__ = [
    "ConsoleLogger",
    "Container",
    "Database",
    "EmailService",
    "Environment",
    "FileLogger",
    "InMemoryDatabase",
    "Logger",
    "MockEmailService",
    "PostgreSQLDatabase",
    "SMTPEmailService",
    "ServiceFactory",
    "UserService",
    "UserServiceBuilder",
    "application_container",
]
