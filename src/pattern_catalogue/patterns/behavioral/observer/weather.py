"""Weather station subject with display and alert observers."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalogue.domain.base.exceptions import CapacityExceededError
from pattern_catalogue.infrastructure.logging.logger import get_logger

DEFAULT_TEMPERATURE = 20
HIGH_TEMPERATURE = 30
FREEZING_TEMPERATURE = 0


class Observer(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def update(self, subject: "Subject") -> None:
        pass


class Subject:
    """
    Holds non-owning references to at most ``capacity`` observers.

    Notification follows attach order. Attaching or detaching from inside
    ``update`` is not supported.
    """

    def __init__(self, capacity: int = 10, state: int = DEFAULT_TEMPERATURE):
        self._logger = get_logger(__name__)
        self.capacity = capacity
        self.state = state
        self._observers: List[Observer] = []

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def attach(self, observer: Observer) -> None:
        """
        Add an observer at the end of the notification order.

        Raises:
            CapacityExceededError: If the subject is already full; nothing is attached
        """
        if any(existing is observer for existing in self._observers):
            self._logger.debug(f"Observer {observer.name} already attached")
            return
        if len(self._observers) >= self.capacity:
            self._logger.warning(f"Rejected observer {observer.name}: subject is full")
            raise CapacityExceededError("observer", self.capacity)
        self._observers.append(observer)
        print(f"Observer {observer.name} attached")

    def detach(self, observer: Observer) -> bool:
        for index, existing in enumerate(self._observers):
            if existing is observer:
                del self._observers[index]
                print(f"Observer {observer.name} detached")
                return True
        return False

    def notify(self) -> None:
        print(f"Notifying {len(self._observers)} observers about state change to {self.state}")
        for observer in self._observers:
            observer.update(self)

    def set_state(self, state: int) -> None:
        self.state = state
        self.notify()


class DisplayObserver(Observer):
    def update(self, subject: Subject) -> None:
        print(f"Display {self.name}: Temperature changed to {subject.state}°C")


class AlertObserver(Observer):
    """Speaks only above HIGH_TEMPERATURE or below FREEZING_TEMPERATURE."""

    def update(self, subject: Subject) -> None:
        if subject.state > HIGH_TEMPERATURE:
            print(f"Alert {self.name}: WARNING! High temperature: {subject.state}°C")
        elif subject.state < FREEZING_TEMPERATURE:
            print(f"Alert {self.name}: WARNING! Freezing temperature: {subject.state}°C")
