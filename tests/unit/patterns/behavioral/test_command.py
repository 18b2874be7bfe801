"""Tests for the remote control commands."""
from pattern_catalogue.patterns.behavioral.command.remote import (
    Light,
    LightOffCommand,
    LightOnCommand,
    RemoteControl,
)


class TestRemoteControl:
    """Test slots, undo and history."""

    def setup_method(self):
        """Set up a remote with living room and kitchen lights."""
        self.living_room = Light("Living Room")
        self.kitchen = Light("Kitchen")
        self.remote = RemoteControl(slots=7, history_size=10)
        self.remote.set_command(0, LightOnCommand(self.living_room))
        self.remote.set_command(1, LightOffCommand(self.living_room))
        self.remote.set_command(2, LightOnCommand(self.kitchen))
        self.remote.set_command(3, LightOffCommand(self.kitchen))

    def test_undo_restores_previous_state(self):
        """Test on(LR), on(K), off(LR), undo leaves both lights on."""
        self.remote.press_button(0)
        self.remote.press_button(2)
        self.remote.press_button(1)
        self.remote.press_undo()

        assert self.living_room.is_on
        assert self.kitchen.is_on

    def test_second_undo_has_nothing(self, capsys):
        """Test the undo slot is cleared after use."""
        self.remote.press_button(0)
        self.remote.press_undo()
        capsys.readouterr()
        self.remote.press_undo()
        assert capsys.readouterr().out == "Nothing to undo\n"

    def test_undo_of_noop_press_keeps_state(self):
        """Test undoing an off press on a light that was already off leaves it off."""
        self.remote.press_button(1)
        self.remote.press_undo()
        assert not self.living_room.is_on

    def test_empty_and_invalid_slots(self, capsys):
        """Test empty slots and out-of-range slots are reported."""
        self.remote.press_button(5)
        self.remote.press_button(7)
        self.remote.press_button(-1)
        assert capsys.readouterr().out == "Slot 5 is empty\nInvalid slot: 7\nInvalid slot: -1\n"
        assert self.remote.history == []

    def test_history_is_bounded(self):
        """Test only the most recent commands are kept."""
        remote = RemoteControl(slots=2, history_size=3)
        remote.set_command(0, LightOnCommand(self.kitchen))
        remote.set_command(1, LightOffCommand(self.kitchen))
        for slot in [0, 1, 0, 1, 0]:
            remote.press_button(slot)

        assert [command.name for command in remote.history] == [
            "Kitchen light on",
            "Kitchen light off",
            "Kitchen light on",
        ]

    def test_show_history(self, capsys):
        """Test history lists commands in execution order."""
        self.remote.press_button(0)
        self.remote.press_button(3)
        capsys.readouterr()
        self.remote.show_history()

        out = capsys.readouterr().out
        assert "Command 1 executed: Living Room light on" in out
        assert "Command 2 executed: Kitchen light off" in out
        assert "Total commands executed: 2" in out
