"""Service interfaces, interchangeable implementations and the user service that consumes them."""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger


class Logger(ABC):
    @abstractmethod
    def log(self, message: str) -> None:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass


class ConsoleLogger(Logger):
    def log(self, message: str) -> None:
        print(f"[CONSOLE LOG] {message}")

    @property
    def name(self) -> str:
        return "ConsoleLogger"


class FileLogger(Logger):
    """Labels messages with a file name; nothing is written to disk."""

    def __init__(self, filename: str = "app.log"):
        self.filename = filename

    def log(self, message: str) -> None:
        print(f"[FILE LOG to {self.filename}] {message}")

    @property
    def name(self) -> str:
        return f"FileLogger({self.filename})"


class Database(ABC):
    @abstractmethod
    def save(self, data: str) -> str:
        """Store a record and return its generated id."""

    @abstractmethod
    def find(self, record_id: str) -> Optional[str]:
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        pass


class InMemoryDatabase(Database):
    def __init__(self):
        self._records: Dict[str, str] = {}

    def save(self, data: str) -> str:
        record_id = f"ID{len(self._records) + 1}"
        self._records[record_id] = data
        return record_id

    def find(self, record_id: str) -> Optional[str]:
        return self._records.get(record_id)

    def is_connected(self) -> bool:
        return True


class PostgreSQLDatabase(Database):
    """Simulated server connection; records are kept in memory."""

    def __init__(self, connection_string: str = "postgresql://localhost:5432/app"):
        self.connection_string = connection_string
        self._records: Dict[str, str] = {}
        print(f"Connected to PostgreSQL: {connection_string}")

    def save(self, data: str) -> str:
        print(f"Saving to PostgreSQL: {data}")
        record_id = f"POSTGRES_ID_{len(self._records) + 1}"
        self._records[record_id] = data
        return record_id

    def find(self, record_id: str) -> Optional[str]:
        return self._records.get(record_id)

    def is_connected(self) -> bool:
        return True


class EmailService(ABC):
    @abstractmethod
    def send_email(self, to: str, subject: str, body: str) -> bool:
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass


class MockEmailService(EmailService):
    def __init__(self):
        self.sent = []

    def send_email(self, to: str, subject: str, body: str) -> bool:
        print(f"[MOCK EMAIL] To: {to}, Subject: {subject}, Body: {body}")
        self.sent.append((to, subject, body))
        return True

    @property
    def provider_name(self) -> str:
        return "MockEmailService"


class SMTPEmailService(EmailService):
    def __init__(self, smtp_server: str = "smtp.example.com"):
        self.smtp_server = smtp_server

    def send_email(self, to: str, subject: str, body: str) -> bool:
        print(f"[SMTP via {self.smtp_server}] To: {to}, Subject: {subject}, Body: {body}")
        return True

    @property
    def provider_name(self) -> str:
        return f"SMTP({self.smtp_server})"


class UserService:
    """Receives every collaborator through its constructor."""

    def __init__(self, logger: Logger, database: Database, email_service: EmailService):
        self.logger = logger
        self.database = database
        self.email_service = email_service
        self._logger = get_logger(__name__)

    def create_user(self, name: str, email: str) -> Optional[str]:
        """Store a user and send the welcome email; returns None when the database is down."""
        self.logger.log(f"Creating user: {name}")
        if not self.database.is_connected():
            self.logger.log("Database connection failed")
            return None
        user_id = self.database.save(f'{{"name":"{name}","email":"{email}"}}')
        self.logger.log(f"User created with ID: {user_id}")
        self.email_service.send_email(email, "Welcome!", f"Hello {name}, welcome to our service!")
        self._logger.debug(f"Created user {user_id} via {self.logger.name}")
        return user_id

    def get_user(self, user_id: str) -> Optional[str]:
        self.logger.log(f"Retrieving user with ID: {user_id}")
        return self.database.find(user_id)

    def print_service_info(self) -> None:
        print("UserService Configuration:")
        print(f"  Logger: {self.logger.name}")
        print(f"  Database: Connected={self.database.is_connected()}")
        print(f"  Email: {self.email_service.provider_name}")
