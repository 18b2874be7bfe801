"""Shape elements and the area, drawing and bounds visitors that walk them."""
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from pattern_catalogue.domain.base.exceptions import UnknownTypeError
from pattern_catalogue.infrastructure.logging.logger import get_logger

Bounds = Tuple[float, float, float, float]


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_circle(self, circle: "Circle") -> None:
        pass

    @abstractmethod
    def visit_rectangle(self, rectangle: "Rectangle") -> None:
        pass

    @abstractmethod
    def visit_triangle(self, triangle: "Triangle") -> None:
        pass


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_circle(self)


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_rectangle(self)


@dataclass(frozen=True)
class Triangle:
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float

    @property
    def vertices(self) -> List[Tuple[float, float]]:
        return [(self.x1, self.y1), (self.x2, self.y2), (self.x3, self.y3)]

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_triangle(self)


class AreaCalculator(ShapeVisitor):
    def __init__(self):
        self.total_area = 0.0

    def visit_circle(self, circle: Circle) -> None:
        area = math.pi * circle.radius * circle.radius
        self.total_area += area
        print(
            f"Circle at ({circle.x:.1f}, {circle.y:.1f}) with radius "
            f"{circle.radius:.1f} has area: {area:.2f}"
        )

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        area = rectangle.width * rectangle.height
        self.total_area += area
        print(
            f"Rectangle at ({rectangle.x:.1f}, {rectangle.y:.1f}) with size "
            f"{rectangle.width:.1f}x{rectangle.height:.1f} has area: {area:.2f}"
        )

    def visit_triangle(self, triangle: Triangle) -> None:
        # Shoelace formula
        area = 0.5 * abs(
            triangle.x1 * (triangle.y2 - triangle.y3)
            + triangle.x2 * (triangle.y3 - triangle.y1)
            + triangle.x3 * (triangle.y1 - triangle.y2)
        )
        self.total_area += area
        vertices = ", ".join(f"({x:.1f},{y:.1f})" for x, y in triangle.vertices)
        print(f"Triangle with vertices {vertices} has area: {area:.2f}")


class DrawingVisitor(ShapeVisitor):
    """Emits SVG elements or canvas calls; counts what it drew."""

    FORMATS = ("SVG", "Canvas")

    def __init__(self, output_format: str):
        if output_format not in self.FORMATS:
            raise UnknownTypeError(f"Unknown drawing format: {output_format}", output_format)
        self.output_format = output_format
        self.shapes_drawn = 0

    def visit_circle(self, circle: Circle) -> None:
        print(
            f"[{self.output_format}] Drawing circle: center({circle.x:.1f}, {circle.y:.1f}), "
            f"radius={circle.radius:.1f}"
        )
        if self.output_format == "SVG":
            print(f'  <circle cx="{circle.x:.1f}" cy="{circle.y:.1f}" r="{circle.radius:.1f}" />')
        else:
            print(f"  ctx.arc({circle.x:.1f}, {circle.y:.1f}, {circle.radius:.1f}, 0, 2*Math.PI);")
        self.shapes_drawn += 1

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        r = rectangle
        print(
            f"[{self.output_format}] Drawing rectangle: position({r.x:.1f}, {r.y:.1f}), "
            f"size({r.width:.1f}x{r.height:.1f})"
        )
        if self.output_format == "SVG":
            print(
                f'  <rect x="{r.x:.1f}" y="{r.y:.1f}" width="{r.width:.1f}" '
                f'height="{r.height:.1f}" />'
            )
        else:
            print(f"  ctx.rect({r.x:.1f}, {r.y:.1f}, {r.width:.1f}, {r.height:.1f});")
        self.shapes_drawn += 1

    def visit_triangle(self, triangle: Triangle) -> None:
        vertices = ", ".join(f"({x:.1f},{y:.1f})" for x, y in triangle.vertices)
        print(f"[{self.output_format}] Drawing triangle: vertices{vertices}")
        if self.output_format == "SVG":
            points = " ".join(f"{x:.1f},{y:.1f}" for x, y in triangle.vertices)
            print(f'  <polygon points="{points}" />')
        else:
            (x1, y1), *rest = triangle.vertices
            print("  ctx.beginPath();")
            print(f"  ctx.moveTo({x1:.1f}, {y1:.1f});")
            for x, y in rest:
                print(f"  ctx.lineTo({x:.1f}, {y:.1f});")
            print("  ctx.closePath();")
        self.shapes_drawn += 1


class BoundsCalculator(ShapeVisitor):
    """Accumulates the bounding box of every shape visited."""

    def __init__(self):
        self._bounds: Optional[Bounds] = None

    @property
    def bounds(self) -> Optional[Bounds]:
        """(min_x, min_y, max_x, max_y), or None before any visit."""
        return self._bounds

    def _extend(self, left: float, top: float, right: float, bottom: float) -> None:
        if self._bounds is None:
            self._bounds = (left, top, right, bottom)
            return
        min_x, min_y, max_x, max_y = self._bounds
        self._bounds = (min(min_x, left), min(min_y, top), max(max_x, right), max(max_y, bottom))

    def visit_circle(self, circle: Circle) -> None:
        left, right = circle.x - circle.radius, circle.x + circle.radius
        top, bottom = circle.y - circle.radius, circle.y + circle.radius
        self._extend(left, top, right, bottom)
        print(f"Circle bounds: ({left:.1f}, {top:.1f}) to ({right:.1f}, {bottom:.1f})")

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        left, right = rectangle.x, rectangle.x + rectangle.width
        top, bottom = rectangle.y, rectangle.y + rectangle.height
        self._extend(left, top, right, bottom)
        print(f"Rectangle bounds: ({left:.1f}, {top:.1f}) to ({right:.1f}, {bottom:.1f})")

    def visit_triangle(self, triangle: Triangle) -> None:
        xs = [x for x, _ in triangle.vertices]
        ys = [y for _, y in triangle.vertices]
        self._extend(min(xs), min(ys), max(xs), max(ys))
        print(
            f"Triangle bounds: ({min(xs):.1f}, {min(ys):.1f}) to "
            f"({max(xs):.1f}, {max(ys):.1f})"
        )


Shape = Union[Circle, Rectangle, Triangle]


class ShapeCollection:
    def __init__(self):
        self._logger = get_logger(__name__)
        self.shapes: List[Shape] = []

    def add(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def accept(self, visitor: ShapeVisitor) -> None:
        self._logger.debug(f"{type(visitor).__name__} visiting {len(self.shapes)} shapes")
        for shape in self.shapes:
            shape.accept(visitor)
