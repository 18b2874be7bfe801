"""Message hub: every colleague registers on construction and hears every other."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalogue.infrastructure.logging.logger import get_logger


class Mediator(ABC):
    @abstractmethod
    def add(self, colleague: "Colleague") -> None:
        pass

    @abstractmethod
    def distribute(self, sender: "Colleague", message: str) -> None:
        pass


class ConcreteMediator(Mediator):
    """Delivers each message once to every registered colleague except the sender."""

    def __init__(self):
        self._logger = get_logger(__name__)
        self._colleagues: List["Colleague"] = []

    @property
    def colleagues(self) -> List["Colleague"]:
        return list(self._colleagues)

    def add(self, colleague: "Colleague") -> None:
        if any(existing is colleague for existing in self._colleagues):
            return
        self._colleagues.append(colleague)
        self._logger.debug(f"Registered colleague {colleague.id}")

    def distribute(self, sender: "Colleague", message: str) -> None:
        for colleague in self._colleagues:
            if colleague is not sender:
                colleague.receive(message)


class Colleague:
    """Holds a non-owning reference back to its mediator."""

    def __init__(self, mediator: Mediator, colleague_id: int):
        self._mediator = mediator
        self.id = colleague_id
        self.received: List[str] = []
        mediator.add(self)

    def send(self, message: str) -> None:
        print(f"{self.id} Sent message {message}")
        self._mediator.distribute(self, message)

    def receive(self, message: str) -> None:
        self.received.append(message)
        print(f"{self.id} Got message {message}")
