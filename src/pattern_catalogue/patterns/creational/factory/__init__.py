"""Factory pattern - shape factory and a runtime-extensible vehicle factory."""
from .shapes import Circle, Rectangle, Shape, ShapeFactory, ShapeType, Triangle
from .vehicles import (
    Car,
    Motorcycle,
    SimpleVehicleFactory,
    Truck,
    Vehicle,
    VehicleFactory,
    VehicleType,
)

__all__ = [
    "Car",
    "Circle",
    "Motorcycle",
    "Rectangle",
    "Shape",
    "ShapeFactory",
    "ShapeType",
    "SimpleVehicleFactory",
    "Triangle",
    "Truck",
    "Vehicle",
    "VehicleFactory",
    "VehicleType",
]
