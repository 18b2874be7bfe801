"""Two-product widget kit - a button and a checkbox painted per platform."""
from abc import ABC, abstractmethod
from typing import List


class KitButton(ABC):
    @abstractmethod
    def paint(self) -> None:
        pass

    @abstractmethod
    def family(self) -> str:
        pass


class KitCheckbox(ABC):
    @abstractmethod
    def paint(self) -> None:
        pass

    @abstractmethod
    def family(self) -> str:
        pass


class WindowsKitButton(KitButton):
    def paint(self) -> None:
        print("Rendering Windows Button")

    def family(self) -> str:
        return "Windows"


class WindowsKitCheckbox(KitCheckbox):
    def paint(self) -> None:
        print("Rendering Windows Checkbox")

    def family(self) -> str:
        return "Windows"


class MacKitButton(KitButton):
    def paint(self) -> None:
        print("Rendering Mac Button")

    def family(self) -> str:
        return "Mac"


class MacKitCheckbox(KitCheckbox):
    def paint(self) -> None:
        print("Rendering Mac Checkbox")

    def family(self) -> str:
        return "Mac"


class GUIFactory(ABC):
    """Creates a button and a checkbox of one family."""

    @abstractmethod
    def create_button(self) -> KitButton:
        pass

    @abstractmethod
    def create_checkbox(self) -> KitCheckbox:
        pass

    @abstractmethod
    def family(self) -> str:
        pass


class WindowsFactory(GUIFactory):
    def create_button(self) -> KitButton:
        return WindowsKitButton()

    def create_checkbox(self) -> KitCheckbox:
        return WindowsKitCheckbox()

    def family(self) -> str:
        return "Windows"


class MacFactory(GUIFactory):
    def create_button(self) -> KitButton:
        return MacKitButton()

    def create_checkbox(self) -> KitCheckbox:
        return MacKitCheckbox()

    def family(self) -> str:
        return "Mac"


class Dialog:
    def __init__(self, factory: GUIFactory):
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def render(self) -> None:
        self.button.paint()
        self.checkbox.paint()

    def families(self) -> List[str]:
        return [self.button.family(), self.checkbox.family()]
