"""Login dialog: widgets report events, the dialog decides how the others react."""
from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger


class DialogMediator(ABC):
    @abstractmethod
    def notify(self, sender: "Component", event: str) -> None:
        pass


class Component:
    kind = "Component"

    def __init__(self, name: str, text: str = ""):
        self.name = name
        self.text = text
        self.enabled = True
        self.mediator: Optional[DialogMediator] = None

    def _notify(self, event: str) -> None:
        if self.mediator is not None:
            self.mediator.notify(self, event)

    def click(self) -> None:
        pass

    def set_text(self, text: str) -> None:
        self.text = text

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled
        print(f"{self.kind} '{self.name}' {'enabled' if enabled else 'disabled'}")


class Button(Component):
    kind = "Button"

    def __init__(self, name: str):
        super().__init__(name, "Button")

    def click(self) -> None:
        print(f"Button '{self.name}' clicked")
        self._notify("click")

    def set_text(self, text: str) -> None:
        super().set_text(text)
        print(f"Button '{self.name}' text set to: '{text}'")


class TextBox(Component):
    kind = "TextBox"

    def click(self) -> None:
        print(f"TextBox '{self.name}' focused")
        self._notify("focus")

    def set_text(self, text: str) -> None:
        super().set_text(text)
        print(f"TextBox '{self.name}' text changed to: '{text}'")
        self._notify("text_changed")


class CheckBox(Component):
    kind = "CheckBox"

    def __init__(self, name: str):
        super().__init__(name, "CheckBox")
        self.checked = False

    def click(self) -> None:
        self.checked = not self.checked
        state = "checked" if self.checked else "unchecked"
        print(f"CheckBox '{self.name}' {state}")
        self._notify(state)

    def set_text(self, text: str) -> None:
        super().set_text(text)
        print(f"CheckBox '{self.name}' label set to: '{text}'")


class ListBox(Component):
    """``set_text`` appends an item rather than replacing a label."""

    kind = "ListBox"

    def __init__(self, name: str):
        super().__init__(name)
        self.items: List[str] = []
        self.selected_index = -1

    @property
    def selected(self) -> Optional[str]:
        if self.selected_index < 0:
            return None
        return self.items[self.selected_index]

    def click(self) -> None:
        print(f"ListBox '{self.name}' item selected: {self.selected or 'none'}")
        self._notify("selection_changed")

    def set_text(self, text: str) -> None:
        self.items.append(text)
        print(f"ListBox '{self.name}' item added: '{text}'")

    def select_item(self, index: int) -> None:
        if 0 <= index < len(self.items):
            self.selected_index = index
            print(f"ListBox '{self.name}' selected item {index}: '{self.items[index]}'")
            self._notify("selection_changed")


class AuthDialog(DialogMediator):
    """Owns the login form widgets and all rules that link them."""

    def __init__(self):
        self._logger = get_logger(__name__)
        self.ok_button = Button("OK")
        self.cancel_button = Button("Cancel")
        self.username = TextBox("Username")
        self.password = TextBox("Password")
        self.remember = CheckBox("RememberMe")
        self.user_list = ListBox("UserList")
        self.clear_button = Button("Clear")

        self.ok_button.set_enabled(False)
        self.password.set_enabled(False)
        self.user_list.set_enabled(False)
        self.clear_button.set_enabled(False)

        self.ok_button.set_text("Login")
        self.cancel_button.set_text("Cancel")
        self.remember.set_text("Remember Me")
        self.clear_button.set_text("Clear Form")

        for component in self.components:
            component.mediator = self

    @property
    def components(self) -> List[Component]:
        return [
            self.ok_button,
            self.cancel_button,
            self.username,
            self.password,
            self.remember,
            self.user_list,
            self.clear_button,
        ]

    def notify(self, sender: Component, event: str) -> None:
        print(f"Mediator received event '{event}' from '{sender.name}'")
        self._logger.debug(f"Dialog event {event} from {sender.name}")

        if sender is self.username and event == "text_changed":
            has_username = len(sender.text) > 0
            self.ok_button.set_enabled(has_username)
            if has_username:
                self.password.set_enabled(True)
        elif sender is self.remember and event == "checked":
            self.user_list.set_enabled(True)
            self.clear_button.set_enabled(True)
            if self.username.text:
                self.user_list.set_text(self.username.text)
        elif sender is self.remember and event == "unchecked":
            self.user_list.set_enabled(False)
            self.clear_button.set_enabled(False)
        elif sender is self.user_list and event == "selection_changed":
            if self.user_list.selected is not None:
                self.username.set_text(self.user_list.selected)
        elif sender is self.clear_button and event == "click":
            self.username.set_text("")
            self.password.set_text("")
            if self.remember.checked:
                self.remember.click()
        elif sender is self.ok_button and event == "click":
            print(f"Processing login for user: {self.username.text}")
            print(f"Password length: {len(self.password.text)} characters")
        elif sender is self.cancel_button and event == "click":
            print("Login canceled")

        print("---")
