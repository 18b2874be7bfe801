"""Command demo - program the remote, press buttons, undo, review history."""
import sys
from typing import Optional

from pattern_catalogue.config import DemoConfig, load_config
from pattern_catalogue.patterns.behavioral.command.remote import (
    Light,
    LightOffCommand,
    LightOnCommand,
    RemoteControl,
)


def main(config: Optional[DemoConfig] = None) -> int:
    config = config or load_config().demos
    print("--- Smart Home Remote Control ---")

    living_room_light = Light("Living Room")
    kitchen_light = Light("Kitchen")

    remote = RemoteControl(config.remote_slots, config.command_history_size)
    remote.set_command(0, LightOnCommand(living_room_light))
    remote.set_command(1, LightOffCommand(living_room_light))
    remote.set_command(2, LightOnCommand(kitchen_light))
    remote.set_command(3, LightOffCommand(kitchen_light))

    print("\nTesting remote control:")
    remote.press_button(0)
    remote.press_button(2)
    remote.press_button(1)

    print("\nTesting undo:")
    remote.press_undo()
    remote.press_undo()

    remote.press_button(3)
    remote.press_button(5)
    remote.press_button(remote.slots)

    remote.show_history()
    return 0


if __name__ == "__main__":
    sys.exit(main())
