"""Visitor pattern - operations over element types kept outside the elements."""
from .documents import (
    Document,
    DocumentPrinter,
    DocumentVisitor,
    Html,
    Markdown,
    ReflectiveDocumentPrinter,
    inspect_document,
)
from .shapes import (
    AreaCalculator,
    BoundsCalculator,
    Circle,
    DrawingVisitor,
    Rectangle,
    ShapeCollection,
    ShapeVisitor,
    Triangle,
)

__all__ = [
    "AreaCalculator",
    "BoundsCalculator",
    "Circle",
    "Document",
    "DocumentPrinter",
    "DocumentVisitor",
    "DrawingVisitor",
    "Html",
    "Markdown",
    "Rectangle",
    "ReflectiveDocumentPrinter",
    "ShapeCollection",
    "ShapeVisitor",
    "Triangle",
    "inspect_document",
]
