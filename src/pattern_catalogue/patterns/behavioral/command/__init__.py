"""Command pattern - requests as objects that can be queued, recorded and undone."""
from .remote import (
    Command,
    Light,
    LightOffCommand,
    LightOnCommand,
    NoCommand,
    RemoteControl,
)

__all__ = [
    "Command",
    "Light",
    "LightOffCommand",
    "LightOnCommand",
    "NoCommand",
    "RemoteControl",
]
