"""
Document visitors - three ways to print Markdown and HTML lists.

DocumentPrinter uses double dispatch through ``accept``. ReflectiveDocumentPrinter
inspects the runtime type. ``inspect_document`` matches on the Document union.
"""
from abc import ABC, abstractmethod
from typing import List, Union

from pattern_catalogue.domain.base.exceptions import UnknownTypeError


class Document(ABC):
    def __init__(self):
        self.content: List[str] = []

    def add_to_list(self, line: str) -> None:
        self.content.append(line)

    @abstractmethod
    def accept(self, visitor: "DocumentVisitor") -> None:
        pass


class Markdown(Document):
    start = "* "

    def accept(self, visitor: "DocumentVisitor") -> None:
        visitor.visit_markdown(self)


class Html(Document):
    start = "<li>"
    end = "</li>"

    def accept(self, visitor: "DocumentVisitor") -> None:
        visitor.visit_html(self)


class DocumentVisitor(ABC):
    """One ``visit_*`` method per concrete Document."""

    @abstractmethod
    def visit_markdown(self, document: Markdown) -> None:
        pass

    @abstractmethod
    def visit_html(self, document: Html) -> None:
        pass


def _print_markdown(document: Markdown) -> None:
    for item in document.content:
        print(f"{document.start}{item}")


def _print_html(document: Html) -> None:
    print("<ul>")
    for item in document.content:
        print(f"\t{document.start}{item}{document.end}")
    print("</ul>")


class DocumentPrinter(DocumentVisitor):
    def visit_markdown(self, document: Markdown) -> None:
        _print_markdown(document)

    def visit_html(self, document: Html) -> None:
        _print_html(document)


class ReflectiveDocumentPrinter:
    """Needs no ``accept``; picks the printer from the element's runtime type."""

    def visit(self, document: Document) -> None:
        if isinstance(document, Markdown):
            _print_markdown(document)
        elif isinstance(document, Html):
            _print_html(document)
        else:
            raise UnknownTypeError(
                f"No printer for document type: {type(document).__name__}",
                type(document).__name__,
            )


DocumentUnion = Union[Markdown, Html]


def inspect_document(document: DocumentUnion) -> None:
    match document:
        case Markdown():
            _print_markdown(document)
        case Html():
            _print_html(document)
        case _:
            raise UnknownTypeError(
                f"No printer for document type: {type(document).__name__}",
                type(document).__name__,
            )
