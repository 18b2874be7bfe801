"""Shape factory - creates validated shapes from a type tag and numeric parameters."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from pattern_catalogue.domain.base.exceptions import InvalidParameterError, UnknownTypeError
from pattern_catalogue.infrastructure.logging.logger import get_logger

PI = 3.14159265359

logger = get_logger(__name__)


class ShapeType(str, Enum):
    """Shape type enumeration."""
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"


class Shape(BaseModel, ABC):
    """Base class for factory-made shapes."""
    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def draw(self) -> None:
        """Print the shape."""

    @abstractmethod
    def area(self) -> float:
        """Compute the area."""

    def destroy(self) -> None:
        logger.debug("Shape destroyed", shape=type(self).__name__)


class Circle(Shape):
    radius: float = Field(..., gt=0)

    def draw(self) -> None:
        print(f"Drawing Circle with radius {self.radius:.2f}")

    def area(self) -> float:
        return PI * self.radius * self.radius


class Rectangle(Shape):
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    def draw(self) -> None:
        print(f"Drawing Rectangle {self.width:.2f}x{self.height:.2f}")

    def area(self) -> float:
        return self.width * self.height


class Triangle(Shape):
    base: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    def draw(self) -> None:
        print(f"Drawing Triangle base:{self.base:.2f} height:{self.height:.2f}")

    def area(self) -> float:
        return 0.5 * self.base * self.height


class ShapeFactory:
    """Creates shapes from a ShapeType and positional parameters."""

    _fields = {
        ShapeType.CIRCLE: (Circle, ("radius",)),
        ShapeType.RECTANGLE: (Rectangle, ("width", "height")),
        ShapeType.TRIANGLE: (Triangle, ("base", "height")),
    }

    @classmethod
    def create(cls, shape_type: Union[ShapeType, str], *params: float) -> Shape:
        """
        Create a shape.

        Args:
            shape_type: Shape type or its string value
            params: Dimensions in declaration order (radius; width, height; base, height)

        Raises:
            UnknownTypeError: If the shape type is not known
            InvalidParameterError: If a dimension is missing or not positive
        """
        try:
            shape_type = ShapeType(shape_type)
        except ValueError as e:
            raise UnknownTypeError("Invalid shape type", str(shape_type)) from e

        shape_class, names = cls._fields[shape_type]
        if len(params) < len(names):
            raise InvalidParameterError("Invalid parameter", {"expected": names, "got": params})
        try:
            shape = shape_class(**dict(zip(names, params)))
        except PydanticValidationError as e:
            raise InvalidParameterError("Invalid parameter", e.errors()) from e

        logger.debug("Shape created", shape_type=shape_type.value)
        return shape
