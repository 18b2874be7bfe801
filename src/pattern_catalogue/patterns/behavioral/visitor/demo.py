"""Visitor demo - document printers three ways, then graphics visitors."""
import sys

from pattern_catalogue.patterns.behavioral.visitor.documents import (
    DocumentPrinter,
    Html,
    Markdown,
    ReflectiveDocumentPrinter,
    inspect_document,
)
from pattern_catalogue.patterns.behavioral.visitor.shapes import (
    AreaCalculator,
    BoundsCalculator,
    Circle,
    DrawingVisitor,
    Rectangle,
    ShapeCollection,
    Triangle,
)

LINE = "This is a line"


def run_documents() -> None:
    html = Html()
    html.add_to_list(LINE)
    markdown = Markdown()
    markdown.add_to_list(LINE)

    print("--- Classic visitor ---")
    printer = DocumentPrinter()
    html.accept(printer)
    markdown.accept(printer)

    print("\n--- Reflective visitor ---")
    reflective = ReflectiveDocumentPrinter()
    reflective.visit(html)
    reflective.visit(markdown)

    print("\n--- Inspector over the document union ---")
    inspect_document(html)


def run_shapes() -> None:
    print("\n=== Visitor Pattern Demo - Graphics Processing ===\n")
    shapes = ShapeCollection()
    shapes.add(Circle(10.0, 10.0, 5.0))
    shapes.add(Rectangle(20.0, 15.0, 8.0, 6.0))
    shapes.add(Triangle(0.0, 0.0, 4.0, 0.0, 2.0, 3.0))
    shapes.add(Circle(30.0, 25.0, 3.0))

    print("=== Area Calculation ===")
    area = AreaCalculator()
    shapes.accept(area)
    print(f"Total area of all shapes: {area.total_area:.2f}\n")

    print("=== SVG Drawing ===")
    svg = DrawingVisitor("SVG")
    shapes.accept(svg)
    print(f"Shapes drawn in SVG: {svg.shapes_drawn}\n")

    print("=== Canvas Drawing ===")
    canvas = DrawingVisitor("Canvas")
    shapes.accept(canvas)
    print(f"Shapes drawn in Canvas: {canvas.shapes_drawn}\n")

    print("=== Bounds Calculation ===")
    bounds = BoundsCalculator()
    shapes.accept(bounds)
    min_x, min_y, max_x, max_y = bounds.bounds
    print(f"Overall bounding box: ({min_x:.1f}, {min_y:.1f}) to ({max_x:.1f}, {max_y:.1f})")
    print(f"Bounding box size: {max_x - min_x:.1f} x {max_y - min_y:.1f}")


def main() -> int:
    run_documents()
    run_shapes()
    return 0


if __name__ == "__main__":
    sys.exit(main())
