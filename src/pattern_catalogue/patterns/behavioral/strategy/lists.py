"""
List formatting strategies - Markdown and HTML.

StaticTextProcessor fixes its strategy at construction; DynamicTextProcessor
switches format at runtime.
"""
import io
from enum import Enum
from typing import Dict, Generic, Iterable, Type, TypeVar, Union

from pattern_catalogue.domain.base.exceptions import UnknownTypeError


class ListStrategy:
    """Default hooks write nothing."""

    def start(self, out: io.StringIO) -> None:
        pass

    def add_list_item(self, out: io.StringIO, item: str) -> None:
        pass

    def end(self, out: io.StringIO) -> None:
        pass


class MarkdownListStrategy(ListStrategy):
    def add_list_item(self, out: io.StringIO, item: str) -> None:
        out.write(f" - {item}\n")


class HtmlListStrategy(ListStrategy):
    def start(self, out: io.StringIO) -> None:
        out.write("<ul>\n")

    def add_list_item(self, out: io.StringIO, item: str) -> None:
        out.write(f"\t<li>{item}</li>\n")

    def end(self, out: io.StringIO) -> None:
        out.write("</ul>\n")


class OutputFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"


STRATEGIES: Dict[OutputFormat, Type[ListStrategy]] = {
    OutputFormat.MARKDOWN: MarkdownListStrategy,
    OutputFormat.HTML: HtmlListStrategy,
}

S = TypeVar("S", bound=ListStrategy)


def _append(strategy: ListStrategy, out: io.StringIO, items: Iterable[str]) -> None:
    strategy.start(out)
    for item in items:
        strategy.add_list_item(out, item)
    strategy.end(out)


class StaticTextProcessor(Generic[S]):
    def __init__(self, strategy_class: Type[S]):
        self._strategy: S = strategy_class()
        self._out = io.StringIO()

    @property
    def strategy(self) -> S:
        return self._strategy

    def append_list(self, items: Iterable[str]) -> None:
        _append(self._strategy, self._out, items)

    def text(self) -> str:
        return self._out.getvalue()

    def __str__(self) -> str:
        return self.text()


class DynamicTextProcessor:
    def __init__(self, output_format: Union[OutputFormat, str] = OutputFormat.MARKDOWN):
        self._out = io.StringIO()
        self._strategy: ListStrategy = ListStrategy()
        self.set_output_format(output_format)

    def set_output_format(self, output_format: Union[OutputFormat, str]) -> None:
        """
        Switch the list strategy used by later ``append_list`` calls.

        Raises:
            UnknownTypeError: If the format is not one of OutputFormat
        """
        try:
            fmt = OutputFormat(output_format)
        except ValueError as e:
            raise UnknownTypeError(f"Unknown output format: {output_format}", str(output_format)) from e
        self._strategy = STRATEGIES[fmt]()

    def append_list(self, items: Iterable[str]) -> None:
        _append(self._strategy, self._out, items)

    def clear(self) -> None:
        self._out = io.StringIO()

    def text(self) -> str:
        return self._out.getvalue()

    def __str__(self) -> str:
        return self.text()
