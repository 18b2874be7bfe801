"""Alternative ways of assembling a UserService: builder, factory and per-environment containers."""
from enum import Enum
from typing import Optional

from pattern_catalogue.domain.base.exceptions import ValidationError
from pattern_catalogue.patterns.architectural.dependency_injection.container import Container
from pattern_catalogue.patterns.architectural.dependency_injection.services import (
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


class UserServiceBuilder:
    def __init__(self):
        self._logger: Optional[Logger] = None
        self._database: Optional[Database] = None
        self._email_service: Optional[EmailService] = None

    def with_logger(self, logger: Logger) -> "UserServiceBuilder":
        self._logger = logger
        return self

    def with_database(self, database: Database) -> "UserServiceBuilder":
        self._database = database
        return self

    def with_email_service(self, email_service: EmailService) -> "UserServiceBuilder":
        self._email_service = email_service
        return self

    def build(self) -> UserService:
        """
        Raises:
            ValidationError: If any collaborator was never supplied
        """
        missing = [
            name
            for name, value in (
                ("logger", self._logger),
                ("database", self._database),
                ("email_service", self._email_service),
            )
            if value is None
        ]
        if missing:
            raise ValidationError(f"All dependencies must be provided; missing: {', '.join(missing)}", missing)
        return UserService(self._logger, self._database, self._email_service)


class ServiceFactory:
    """Canned configurations wired by hand."""

    @staticmethod
    def development() -> UserService:
        return UserService(ConsoleLogger(), InMemoryDatabase(), MockEmailService())

    @staticmethod
    def production() -> UserService:
        return UserService(
            FileLogger("production.log"),
            PostgreSQLDatabase("postgresql://prod-server:5432/users"),
            SMTPEmailService("smtp.company.com"),
        )

    @staticmethod
    def test() -> UserService:
        return UserService(FileLogger("test.log"), InMemoryDatabase(), MockEmailService())


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


def application_container(environment: Environment) -> Container:
    """
    Container whose registrations depend on the environment.

    Development and test share one instance of each service; production
    builds fresh services through factories on every resolution.
    """
    container = Container()
    if environment is Environment.DEVELOPMENT:
        container.register_instance(Logger, ConsoleLogger())
        container.register_instance(Database, InMemoryDatabase())
        container.register_instance(EmailService, MockEmailService())
    elif environment is Environment.PRODUCTION:
        container.register_factory(Logger, lambda c: FileLogger("production.log"))
        container.register_factory(Database, lambda c: PostgreSQLDatabase("postgresql://prod:5432/app"))
        container.register_factory(EmailService, lambda c: SMTPEmailService("smtp.company.com"))
    else:
        container.register_instance(Logger, FileLogger("test.log"))
        container.register_instance(Database, InMemoryDatabase())
        container.register_instance(EmailService, MockEmailService())
    container.register_singleton(UserService)
    return container
