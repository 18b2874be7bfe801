"""Prototype pattern - new shapes by cloning registered exemplars."""
from .shapes import Circle, PrototypeRegistry, Rectangle, Shape

__all__ = ["Circle", "PrototypeRegistry", "Rectangle", "Shape"]
