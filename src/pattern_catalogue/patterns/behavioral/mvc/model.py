"""User records and the in-memory model that owns them."""
from typing import List, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from pattern_catalogue.domain.base.exceptions import InvalidParameterError, ValidationError
from pattern_catalogue.infrastructure.logging.logger import get_logger


class User(BaseModel):
    id: int
    name: str
    email: str


class UserModel:
    """Ordered collection of users keyed by id."""

    def __init__(self):
        self._logger = get_logger(__name__)
        self._users: List[User] = []

    def add(self, user_id: int, name: str, email: str) -> User:
        """
        Append a new user.

        Raises:
            ValidationError: If a user with the same id is already stored
            InvalidParameterError: If the id, name or email has the wrong type
        """
        if self.exists(user_id):
            raise ValidationError(f"User with ID {user_id} already exists", {"id": user_id})
        try:
            user = User(id=user_id, name=name, email=email)
        except PydanticValidationError as e:
            raise InvalidParameterError(f"Invalid user data for ID {user_id}", e.errors()) from e
        self._users.append(user)
        self._logger.debug(f"Stored user {user_id}")
        return user

    def get(self, user_id: int) -> Optional[User]:
        return next((user for user in self._users if user.id == user_id), None)

    def exists(self, user_id: int) -> bool:
        return self.get(user_id) is not None

    def remove(self, user_id: int) -> bool:
        remaining = [user for user in self._users if user.id != user_id]
        removed = len(remaining) != len(self._users)
        self._users = remaining
        return removed

    def all(self) -> List[User]:
        return list(self._users)

    def count(self) -> int:
        return len(self._users)
