"""Shapes - the abstraction side of the bridge. Geometry lives here, pixels do not."""
from abc import ABC, abstractmethod

from .renderers import Renderer


class Shape(ABC):
    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def set_renderer(self, renderer: Renderer) -> None:
        self.renderer = renderer

    @abstractmethod
    def draw(self) -> None:
        pass

    @abstractmethod
    def move(self, dx: float, dy: float) -> None:
        pass

    @abstractmethod
    def resize(self, factor: float) -> None:
        pass


class Circle(Shape):
    def __init__(self, renderer: Renderer, x: float, y: float, radius: float):
        super().__init__(renderer)
        self.x = x
        self.y = y
        self.radius = radius

    def draw(self) -> None:
        self.renderer.render_circle(self.x, self.y, self.radius)

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy
        print(f"Circle moved by ({dx:.1f}, {dy:.1f}) to ({self.x:.1f}, {self.y:.1f})")

    def resize(self, factor: float) -> None:
        self.radius *= factor
        print(f"Circle resized by factor {factor:.1f}, new radius: {self.radius:.1f}")


class Rectangle(Shape):
    def __init__(self, renderer: Renderer, x: float, y: float, width: float, height: float):
        super().__init__(renderer)
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def draw(self) -> None:
        self.renderer.render_rectangle(self.x, self.y, self.width, self.height)

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy
        print(f"Rectangle moved by ({dx:.1f}, {dy:.1f}) to ({self.x:.1f}, {self.y:.1f})")

    def resize(self, factor: float) -> None:
        self.width *= factor
        self.height *= factor
        print(
            f"Rectangle resized by factor {factor:.1f}, "
            f"new size: {self.width:.1f}x{self.height:.1f}"
        )


class Line(Shape):
    def __init__(self, renderer: Renderer, x1: float, y1: float, x2: float, y2: float):
        super().__init__(renderer)
        self.x1, self.y1 = x1, y1
        self.x2, self.y2 = x2, y2

    def draw(self) -> None:
        self.renderer.render_line(self.x1, self.y1, self.x2, self.y2)

    def move(self, dx: float, dy: float) -> None:
        self.x1 += dx
        self.y1 += dy
        self.x2 += dx
        self.y2 += dy
        print(f"Line moved by ({dx:.1f}, {dy:.1f}) to ({self.x1:.1f}, {self.y1:.1f})")

    def resize(self, factor: float) -> None:
        # Scales about the first endpoint
        self.x2 = self.x1 + (self.x2 - self.x1) * factor
        self.y2 = self.y1 + (self.y2 - self.y1) * factor
        print(f"Line resized by factor {factor:.1f}, new end: ({self.x2:.1f}, {self.y2:.1f})")
