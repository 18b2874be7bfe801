"""Text formatting decorators producing nested HTML markup."""
from abc import ABC, abstractmethod


class TextComponent(ABC):
    @abstractmethod
    def text(self) -> str:
        pass

    def length(self) -> int:
        return len(self.text())


class PlainText(TextComponent):
    def __init__(self, content: str):
        self.content = content

    def text(self) -> str:
        return self.content


class TextDecorator(TextComponent):
    tag = ""

    def __init__(self, inner: TextComponent):
        self.inner = inner

    def text(self) -> str:
        return f"<{self.tag}>{self.inner.text()}</{self.tag}>"


class Bold(TextDecorator):
    tag = "b"


class Italic(TextDecorator):
    tag = "i"


class Underline(TextDecorator):
    tag = "u"


class Color(TextDecorator):
    def __init__(self, inner: TextComponent, color: str):
        super().__init__(inner)
        self.color = color

    def text(self) -> str:
        return f'<span style="color:{self.color}">{self.inner.text()}</span>'
