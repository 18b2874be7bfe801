"""Context-sensitive help: widgets defer to their container when they have no topic."""
from typing import Optional

from .base import Handler

Topic = int
NO_HELP_TOPIC: Topic = -1


class HelpHandler(Handler[None]):
    """A handler with NO_HELP_TOPIC forwards unconditionally."""

    label = "Help"

    def __init__(self, successor: Optional["HelpHandler"] = None, topic: Topic = NO_HELP_TOPIC):
        super().__init__(successor)
        self.topic = topic

    def has_help(self) -> bool:
        return self.topic != NO_HELP_TOPIC

    def set_handler(self, successor: Optional["HelpHandler"], topic: Topic) -> None:
        self.set_next(successor)
        self.topic = topic

    def handle_help(self) -> None:
        self.handle(None)

    def can_handle(self, request: None) -> bool:
        return self.has_help()

    def process(self, request: None) -> None:
        print(self.label)

    def exhausted_message(self, request: None) -> str:
        return "No help available"


class Widget(HelpHandler):
    pass


class Button(Widget):
    label = "Button Help"


class Dialog(Widget):
    label = "Dialog Help"


class Application(HelpHandler):
    label = "Application Help"

    def __init__(self, topic: Topic):
        super().__init__(None, topic)
