"""Dependency Injection demo - manual wiring, builder, factory, container and environments."""
import sys

from pattern_catalogue.domain.base.exceptions import DependencyResolutionError, ValidationError
from pattern_catalogue.patterns.architectural.dependency_injection.container import Container
from pattern_catalogue.patterns.architectural.dependency_injection.services import (
    ConsoleLogger,
    Database,
    EmailService,
    FileLogger,
    InMemoryDatabase,
    Logger,
    MockEmailService,
    SMTPEmailService,
    UserService,
)
from pattern_catalogue.patterns.architectural.dependency_injection.wiring import (
    Environment,
    ServiceFactory,
    UserServiceBuilder,
    application_container,
)


class ReportService:
    def __init__(self, audit: "AuditService"):
        self.audit = audit


class AuditService:
    def __init__(self, reports: ReportService):
        self.reports = reports


def main() -> int:
    print("=== Dependency Injection Pattern Demo ===\n")

    print("1. Manual Dependency Injection:")
    service = UserService(ConsoleLogger(), InMemoryDatabase(), MockEmailService())
    service.print_service_info()
    user_id = service.create_user("Alice Johnson", "alice@example.com")
    print(f"Created user with ID: {user_id}")
    print(f"Retrieved user data: {service.get_user(user_id)}")

    print("\n2. Builder Pattern for DI:")
    built = (
        UserServiceBuilder()
        .with_logger(FileLogger("users.log"))
        .with_database(InMemoryDatabase())
        .with_email_service(MockEmailService())
        .build()
    )
    built.print_service_info()
    built.create_user("Bob Smith", "bob@example.com")
    try:
        UserServiceBuilder().with_logger(ConsoleLogger()).build()
    except ValidationError as e:
        print(f"Incomplete builder rejected: {e}")

    print("\n3. Factory Pattern for DI:")
    print("Development Service:")
    development = ServiceFactory.development()
    development.print_service_info()
    development.create_user("Charlie Brown", "charlie@example.com")
    print("\nProduction Service:")
    production = ServiceFactory.production()
    production.print_service_info()
    production.create_user("Diana Prince", "diana@example.com")

    print("\n4. DI Container:")
    container = Container()
    container.register_instance(Logger, ConsoleLogger())
    container.register_singleton(Database, InMemoryDatabase)
    container.register_factory(EmailService, lambda c: SMTPEmailService("smtp.example.com"))
    print("Registered services:")
    for name in container.registrations():
        print(f"  - {name}")
    resolved = container.get(UserService)
    print("\nContainer-resolved service:")
    resolved.print_service_info()
    resolved.create_user("Eve Adams", "eve@example.com")
    same_database = container.get(Database) is resolved.database
    print(f"Singleton database shared? {'Yes' if same_database else 'No'}")

    print("\n5. Resolution errors:")
    try:
        Container().get(UserService)
    except DependencyResolutionError as e:
        print(f"Resolution failed: {e}")
    try:
        Container().get(ReportService)
    except DependencyResolutionError as e:
        print(f"Resolution failed: {e}")

    print("\n6. Environment-based Configuration:")
    for environment in Environment:
        label = environment.value.capitalize()
        print(f"\n{label} Environment:")
        env_service = application_container(environment).get(UserService)
        env_service.print_service_info()
        env_service.create_user(f"User {label}", f"user@{environment.value}.com")

    print("\nDependency Injection keeps components loosely coupled and easy to test!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
