"""Abstract Factory pattern - families of UI widgets that always match."""
from .widgets import (
    Application,
    Button,
    Checkbox,
    LinuxUIFactory,
    MacUIFactory,
    TextField,
    UIFactory,
    WindowsUIFactory,
    get_factory,
)

__all__ = [
    "Application",
    "Button",
    "Checkbox",
    "LinuxUIFactory",
    "MacUIFactory",
    "TextField",
    "UIFactory",
    "WindowsUIFactory",
    "get_factory",
]
