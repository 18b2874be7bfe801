"""Smart-home remote: light receiver, on/off commands and the slot-based invoker."""
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, List, Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger


class Light:
    """Receiver."""

    def __init__(self, location: str):
        self.location = location
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print(f"Light in {self.location} is ON")

    def off(self) -> None:
        self.is_on = False
        print(f"Light in {self.location} is OFF")

    def restore(self, is_on: bool) -> None:
        if is_on:
            self.on()
        else:
            self.off()


class Command(ABC):
    name = "Command"

    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass


class NoCommand(Command):
    """Placeholder for empty slots."""

    name = "No command"

    def execute(self) -> None:
        pass

    def undo(self) -> None:
        pass


class LightCommand(Command):
    """Remembers the light's state before execute so undo restores exactly that."""

    def __init__(self, light: Light):
        self.light = light
        self._previous: Optional[bool] = None

    def execute(self) -> None:
        self._previous = self.light.is_on
        self.apply()

    def undo(self) -> None:
        if self._previous is not None:
            self.light.restore(self._previous)

    @abstractmethod
    def apply(self) -> None:
        pass


class LightOnCommand(LightCommand):
    @property
    def name(self) -> str:
        return f"{self.light.location} light on"

    def apply(self) -> None:
        self.light.on()


class LightOffCommand(LightCommand):
    @property
    def name(self) -> str:
        return f"{self.light.location} light off"

    def apply(self) -> None:
        self.light.off()


class RemoteControl:
    """
    Invoker with a fixed number of slots, an undo slot and a bounded history.

    History keeps the most recent history_size commands; older ones are evicted
    first in, first out.
    """

    def __init__(self, slots: int = 7, history_size: int = 10):
        self._commands: List[Command] = [NoCommand() for _ in range(slots)]
        self._undo_command: Command = NoCommand()
        self._history: Deque[Command] = deque(maxlen=history_size)
        self._logger = get_logger(__name__)

    @property
    def slots(self) -> int:
        return len(self._commands)

    @property
    def history(self) -> List[Command]:
        return list(self._history)

    def _valid_slot(self, slot: int) -> bool:
        if 0 <= slot < len(self._commands):
            return True
        print(f"Invalid slot: {slot}")
        self._logger.warning("Slot out of range", slot=slot, slots=len(self._commands))
        return False

    def set_command(self, slot: int, command: Command) -> None:
        if self._valid_slot(slot):
            self._commands[slot] = command

    def press_button(self, slot: int) -> None:
        if not self._valid_slot(slot):
            return
        command = self._commands[slot]
        if isinstance(command, NoCommand):
            print(f"Slot {slot} is empty")
            return
        command.execute()
        self._undo_command = command
        self._history.append(command)

    def press_undo(self) -> None:
        if isinstance(self._undo_command, NoCommand):
            print("Nothing to undo")
            return
        self._undo_command.undo()
        self._undo_command = NoCommand()

    def show_history(self) -> None:
        print("\n--- Command History ---")
        for index, command in enumerate(self._history, start=1):
            print(f"Command {index} executed: {command.name}")
        print(f"Total commands executed: {len(self._history)}\n")
