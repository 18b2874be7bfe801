"""Originator, opaque memento and stack caretaker."""
from typing import List

from pattern_catalogue.domain.base.exceptions import EmptyHistoryError
from pattern_catalogue.infrastructure.logging.logger import get_logger


class Memento:
    """Snapshot token. Only the Originator reads what is inside."""

    __slots__ = ("_state",)

    def __init__(self, state: str):
        self._state = state

    def __repr__(self) -> str:
        return "Memento(<opaque>)"


class Originator:
    def __init__(self):
        self._state = ""

    @property
    def state(self) -> str:
        return self._state

    def set_state(self, state: str) -> None:
        self._state = state
        print(f"Originator::setState() {state}")

    def create_memento(self) -> Memento:
        print(f"Originator::createMemento() {self._state}")
        return Memento(self._state)

    def set_memento(self, memento: Memento) -> None:
        self._state = memento._state
        print(f"Originator::setMemento() {self._state}")


class Caretaker:
    """LIFO store of mementos; never looks inside them."""

    def __init__(self):
        self._logger = get_logger(__name__)
        self._stack: List[Memento] = []

    def push(self, memento: Memento) -> None:
        self._stack.append(memento)

    def pop(self) -> Memento:
        """Remove and return the most recent memento.

        Raises:
            EmptyHistoryError: If nothing has been saved
        """
        if not self._stack:
            self._logger.debug("Pop requested on empty caretaker")
            raise EmptyHistoryError("No saved state to restore")
        return self._stack.pop()

    def is_empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)
