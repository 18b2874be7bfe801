"""Prototype demo - clone, move and recolour copies while the originals stay put."""
import sys

from pattern_catalogue.domain.base.exceptions import UnknownTypeError
from pattern_catalogue.patterns.creational.prototype.shapes import (
    Circle,
    PrototypeRegistry,
    Rectangle,
)


def main() -> int:
    print("--- Prototype Pattern Example ---\n")

    registry = PrototypeRegistry()
    red_rectangle = Rectangle(x=0, y=0, width=100, height=50, color="Red")
    blue_circle = Circle(x=0, y=0, radius=25, color="Blue")
    registry.add_prototype("RedRectangle", red_rectangle)
    registry.add_prototype("BlueCircle", blue_circle)

    print("\n--- Creating shapes from prototypes ---")
    shape1 = registry.create("RedRectangle")
    shape1.set_position(10, 20)
    shape1.draw()

    shape2 = registry.create("BlueCircle")
    shape2.set_position(50, 75)
    shape2.draw()

    shape3 = registry.create("RedRectangle")
    shape3.set_position(100, 200)
    shape3.set_color("Green")
    shape3.draw()

    try:
        registry.create("YellowTriangle")
    except UnknownTypeError as e:
        print(f"Lookup failed: {e}")

    print("\n--- Original prototypes remain unchanged ---")
    red_rectangle.draw()
    blue_circle.draw()

    registry.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())
