"""Cloneable shapes and the registry that hands out copies of them."""
from abc import ABC, abstractmethod
from typing import Dict, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalogue.domain.base.exceptions import UnknownTypeError
from pattern_catalogue.infrastructure.logging.logger import get_logger

S = TypeVar("S", bound="Shape")


class Shape(BaseModel, ABC):
    """Base prototype. Clones are deep copies with their own identity."""
    model_config = ConfigDict(validate_assignment=True)

    x: int = 0
    y: int = 0
    color: str = "Black"

    def clone(self: S) -> S:
        return self.model_copy(deep=True)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def set_color(self, color: str) -> None:
        self.color = color

    @abstractmethod
    def draw(self) -> None:
        pass


class Rectangle(Shape):
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    def draw(self) -> None:
        print(
            f"Drawing Rectangle at ({self.x},{self.y}) with size "
            f"{self.width}x{self.height}, color: {self.color}"
        )


class Circle(Shape):
    radius: int = Field(..., gt=0)

    def draw(self) -> None:
        print(
            f"Drawing Circle at ({self.x},{self.y}) with radius {self.radius}, "
            f"color: {self.color}"
        )


class PrototypeRegistry:
    """Maps names to prototypes; lookups return fresh clones, never the prototype."""

    def __init__(self):
        self._prototypes: Dict[str, Shape] = {}
        self._logger = get_logger(__name__)

    def add_prototype(self, name: str, prototype: Shape) -> None:
        self._prototypes[name] = prototype
        print(f"Registered prototype: {name}")

    def create(self, name: str) -> Shape:
        """
        Clone the prototype registered under name.

        Raises:
            UnknownTypeError: If nothing is registered under name
        """
        prototype = self._prototypes.get(name)
        if prototype is None:
            raise UnknownTypeError(f"Prototype not found: {name}", name)
        self._logger.debug("Cloning prototype", name=name)
        return prototype.clone()

    def names(self) -> List[str]:
        return list(self._prototypes)

    def clear(self) -> None:
        self._prototypes.clear()
