"""Rendering backends - the implementation side of the bridge."""
from abc import ABC, abstractmethod


class Renderer(ABC):
    """Primitive drawing operations every backend provides."""

    name = "Renderer"

    def render_circle(self, x: float, y: float, radius: float) -> None:
        print(f"[{self.name}] Drawing circle at ({x:.1f}, {y:.1f}) with radius {radius:.1f}")
        print(f"  {self.name}: {self._circle_call()}; /* circle implementation */")

    def render_rectangle(self, x: float, y: float, width: float, height: float) -> None:
        print(f"[{self.name}] Drawing rectangle at ({x:.1f}, {y:.1f}) size {width:.1f}x{height:.1f}")
        print(f"  {self.name}: {self._rectangle_call()}; /* rectangle implementation */")

    def render_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        print(f"[{self.name}] Drawing line from ({x1:.1f}, {y1:.1f}) to ({x2:.1f}, {y2:.1f})")
        print(f"  {self.name}: {self._line_call()}; /* line implementation */")

    @abstractmethod
    def _circle_call(self) -> str:
        pass

    @abstractmethod
    def _rectangle_call(self) -> str:
        pass

    @abstractmethod
    def _line_call(self) -> str:
        pass


class OpenGLRenderer(Renderer):
    name = "OpenGL"

    def _circle_call(self) -> str:
        return "glBegin(GL_TRIANGLE_FAN)"

    def _rectangle_call(self) -> str:
        return "glBegin(GL_QUADS)"

    def _line_call(self) -> str:
        return "glBegin(GL_LINES)"


class DirectXRenderer(Renderer):
    name = "DirectX"

    def _circle_call(self) -> str:
        return "DrawIndexedPrimitive()"

    def _rectangle_call(self) -> str:
        return "DrawPrimitive()"

    def _line_call(self) -> str:
        return "DrawPrimitiveUP()"
