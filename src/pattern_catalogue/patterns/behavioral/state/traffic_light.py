"""Traffic light cycling Red -> Green -> Yellow -> Red on a tick counter."""
from abc import ABC, abstractmethod

from pattern_catalogue.infrastructure.logging.logger import get_logger


class LightState(ABC):
    @property
    @abstractmethod
    def color(self) -> str:
        pass

    @property
    @abstractmethod
    def duration(self) -> int:
        """Ticks spent in this state before ``handle`` is called."""

    @abstractmethod
    def handle(self, light: "TrafficLight") -> None:
        pass


class RedLight(LightState):
    color = "RED"
    duration = 10

    def handle(self, light: "TrafficLight") -> None:
        light.set_state(GreenLight())


class GreenLight(LightState):
    color = "GREEN"
    duration = 15

    def handle(self, light: "TrafficLight") -> None:
        light.set_state(YellowLight())


class YellowLight(LightState):
    color = "YELLOW"
    duration = 3

    def handle(self, light: "TrafficLight") -> None:
        light.set_state(RedLight())


class TrafficLight:
    """
    Starts on red with the full red duration remaining.

    Each ``update`` counts one tick down; an update that finds no time left
    hands over to the current state, which picks the next colour.
    """

    def __init__(self):
        self._logger = get_logger(__name__)
        self.state: LightState = RedLight()
        self.time_remaining = self.state.duration

    @property
    def color(self) -> str:
        return self.state.color

    def set_state(self, state: LightState) -> None:
        self._logger.debug(f"Transition {self.state.color} -> {state.color}")
        self.state = state
        self.time_remaining = state.duration
        print(f"Traffic light changed to: {state.color} ({self.time_remaining}s)")

    def update(self) -> None:
        if self.time_remaining > 0:
            self.time_remaining -= 1
            print(f"Traffic light: {self.state.color} ({self.time_remaining}s remaining)")
        else:
            self.state.handle(self)
