"""Presentations of user records; the controller does not care which one it has."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalogue.patterns.behavioral.mvc.model import User

FRAME_RULE = "─" * 25


class UserView(ABC):
    @abstractmethod
    def show_user(self, user: User) -> None:
        pass

    def show_users(self, users: List[User]) -> None:
        print("=== All Users ===")
        for user in users:
            self.show_user(user)

    def show_message(self, message: str) -> None:
        print(f"Message: {message}")

    def show_error(self, error: str) -> None:
        print(f"Error: {error}")

    def show_not_found(self, user_id: int) -> None:
        print(f"User with ID {user_id} not found")


class ConsoleView(UserView):
    def show_user(self, user: User) -> None:
        print(f"User ID: {user.id}")
        print(f"Name: {user.name}")
        print(f"Email: {user.email}")
        print("---")


class FramedView(UserView):
    def show_user(self, user: User) -> None:
        print(f"┌{FRAME_RULE}")
        print(f"│ User ID: {user.id}")
        print(f"│ Name: {user.name}")
        print(f"│ Email: {user.email}")
        print(f"└{FRAME_RULE}")


class JsonView(UserView):
    def show_user(self, user: User) -> None:
        print(user.model_dump_json(indent=2))
