"""UI widget families - Windows, macOS and Linux products and their factories."""
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from pattern_catalogue.domain.base.exceptions import UnknownTypeError


class Button(ABC):
    def __init__(self, text: str):
        self.text = text

    @abstractmethod
    def render(self) -> None:
        pass

    @abstractmethod
    def click(self) -> None:
        pass

    @abstractmethod
    def family(self) -> str:
        pass


class TextField(ABC):
    def __init__(self):
        self.value = ""

    def set_value(self, value: str) -> None:
        self.value = value

    def get_value(self) -> str:
        return self.value

    @abstractmethod
    def render(self) -> None:
        pass

    @abstractmethod
    def family(self) -> str:
        pass


class Checkbox(ABC):
    def __init__(self):
        self.checked = False

    def set_checked(self, checked: bool) -> None:
        self.checked = checked

    def is_checked(self) -> bool:
        return self.checked

    @abstractmethod
    def render(self) -> None:
        pass

    @abstractmethod
    def family(self) -> str:
        pass


# Windows family

class WindowsButton(Button):
    def render(self) -> None:
        print(f"[Windows Button: {self.text}]")

    def click(self) -> None:
        print(f"Windows button '{self.text}' clicked with mouse")

    def family(self) -> str:
        return "Windows"


class WindowsTextField(TextField):
    def render(self) -> None:
        print(f"[Windows TextField: {self.value}]")

    def family(self) -> str:
        return "Windows"


class WindowsCheckbox(Checkbox):
    def render(self) -> None:
        print(f"[Windows Checkbox: {'☑' if self.checked else '☐'}]")

    def family(self) -> str:
        return "Windows"


# macOS family

class MacButton(Button):
    def render(self) -> None:
        print(f"( {self.text} )")

    def click(self) -> None:
        print(f"Mac button '{self.text}' clicked with trackpad")

    def family(self) -> str:
        return "macOS"


class MacTextField(TextField):
    def render(self) -> None:
        print(f"│ {self.value} │")

    def family(self) -> str:
        return "macOS"


class MacCheckbox(Checkbox):
    def render(self) -> None:
        print(f"{'✓' if self.checked else '○'} Mac checkbox")

    def family(self) -> str:
        return "macOS"


# Linux family

class LinuxButton(Button):
    def render(self) -> None:
        print(f"< {self.text} >")

    def click(self) -> None:
        print(f"Linux button '{self.text}' clicked")

    def family(self) -> str:
        return "Linux"


class LinuxTextField(TextField):
    def render(self) -> None:
        print(f"[ {self.value} ]")

    def family(self) -> str:
        return "Linux"


class LinuxCheckbox(Checkbox):
    def render(self) -> None:
        print(f"[{'x' if self.checked else ' '}] Linux checkbox")

    def family(self) -> str:
        return "Linux"


class UIFactory(ABC):
    """Creates one matching set of widgets."""

    @abstractmethod
    def create_button(self, text: str) -> Button:
        pass

    @abstractmethod
    def create_text_field(self) -> TextField:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass

    @abstractmethod
    def theme(self) -> str:
        pass


class WindowsUIFactory(UIFactory):
    def create_button(self, text: str) -> Button:
        return WindowsButton(text)

    def create_text_field(self) -> TextField:
        return WindowsTextField()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()

    def theme(self) -> str:
        return "Windows"


class MacUIFactory(UIFactory):
    def create_button(self, text: str) -> Button:
        return MacButton(text)

    def create_text_field(self) -> TextField:
        return MacTextField()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()

    def theme(self) -> str:
        return "macOS"


class LinuxUIFactory(UIFactory):
    def create_button(self, text: str) -> Button:
        return LinuxButton(text)

    def create_text_field(self) -> TextField:
        return LinuxTextField()

    def create_checkbox(self) -> Checkbox:
        return LinuxCheckbox()

    def theme(self) -> str:
        return "Linux"


_FACTORIES: Dict[str, Type[UIFactory]] = {
    "Windows": WindowsUIFactory,
    "macOS": MacUIFactory,
    "Linux": LinuxUIFactory,
}


def get_factory(os_name: str) -> UIFactory:
    """
    Select the widget factory for an operating system.

    Raises:
        UnknownTypeError: If the operating system has no widget family
    """
    factory_class = _FACTORIES.get(os_name)
    if factory_class is None:
        raise UnknownTypeError(f"Unsupported OS: {os_name}", os_name)
    return factory_class()


class Application:
    """Client that only talks to the abstract factory and product interfaces."""

    def __init__(self, factory: UIFactory):
        self.factory = factory
        self.buttons: List[Button] = []
        self.text_fields: List[TextField] = []
        self.checkboxes: List[Checkbox] = []

    def create_ui(self) -> None:
        print(f"Creating UI with {self.factory.theme()} theme:")

        self.buttons.append(self.factory.create_button("OK"))
        self.buttons.append(self.factory.create_button("Cancel"))
        self.text_fields.append(self.factory.create_text_field())
        self.text_fields.append(self.factory.create_text_field())
        self.checkboxes.append(self.factory.create_checkbox())
        self.checkboxes.append(self.factory.create_checkbox())

        self.text_fields[0].set_value("Username")
        self.text_fields[1].set_value("Password")
        self.checkboxes[0].set_checked(True)
        self.checkboxes[1].set_checked(False)

    def render_ui(self) -> None:
        print(f"\nRendering {self.factory.theme()} UI:")
        print("-" * 24)
        for text_field in self.text_fields:
            text_field.render()
        for checkbox in self.checkboxes:
            checkbox.render()
        for button in self.buttons:
            button.render()

    def simulate_interaction(self) -> None:
        print("\nSimulating user interaction:")
        if self.buttons:
            self.buttons[0].click()
        if self.text_fields:
            self.text_fields[0].set_value("john_doe")
            print(f"Text field updated to: {self.text_fields[0].get_value()}")
        if self.checkboxes:
            self.checkboxes[1].set_checked(True)
            state = "checked" if self.checkboxes[1].is_checked() else "unchecked"
            print(f"Checkbox 2 is now: {state}")

    def families(self) -> List[str]:
        """Family identifier of every widget created so far."""
        widgets = [*self.buttons, *self.text_fields, *self.checkboxes]
        return [widget.family() for widget in widgets]
