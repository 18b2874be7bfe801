"""Bridge pattern - shapes drawn through interchangeable rendering backends."""
from .renderers import DirectXRenderer, OpenGLRenderer, Renderer
from .shapes import Circle, Line, Rectangle, Shape

__all__ = [
    "Circle",
    "DirectXRenderer",
    "Line",
    "OpenGLRenderer",
    "Rectangle",
    "Renderer",
    "Shape",
]
