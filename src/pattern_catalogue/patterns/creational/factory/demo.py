"""Factory demo - shapes from a closed factory, vehicles from an extensible one."""
import sys

from pattern_catalogue.domain.base.exceptions import DomainException, InvalidParameterError
from pattern_catalogue.patterns.creational.factory.shapes import ShapeFactory, ShapeType
from pattern_catalogue.patterns.creational.factory.vehicles import (
    Car,
    SimpleVehicleFactory,
    Vehicle,
    VehicleFactory,
    VehicleType,
)


class ElectricCar(Vehicle):
    """Vehicle type that only exists in this driver, registered at runtime."""

    def __init__(self, model: str):
        if not model:
            raise InvalidParameterError("Electric car model cannot be empty")
        self.model = model

    def start(self) -> None:
        print(f"Electric car {self.model} started silently")

    def stop(self) -> None:
        print(f"Electric car {self.model} stopped")

    def get_type(self) -> str:
        return f"Electric Car ({self.model})"


def demonstrate_vehicle(vehicle: Vehicle) -> None:
    print(f"Created: {vehicle.get_type()}")
    vehicle.start()
    vehicle.stop()
    print("---")


def run_shapes() -> None:
    requests = [
        ("circle", ShapeType.CIRCLE, (5.0,)),
        ("rectangle", ShapeType.RECTANGLE, (4.0, 6.0)),
        ("triangle", ShapeType.TRIANGLE, (3.0, 4.0)),
    ]
    shapes = []
    for label, shape_type, params in requests:
        try:
            shapes.append(ShapeFactory.create(shape_type, *params))
        except DomainException as e:
            print(f"Failed to create {label}: {e}")

    for shape in shapes:
        shape.draw()
        print(f"Area: {shape.area():.2f}\n")
        shape.destroy()


def run_vehicles() -> None:
    print("=== Modern Factory Pattern Demo ===")
    factory = VehicleFactory()
    print(f"Available vehicle types: {' '.join(factory.available_types())} \n")

    demonstrate_vehicle(factory.create("car", "Toyota Camry"))
    demonstrate_vehicle(factory.create("motorcycle", "Harley Davidson"))
    demonstrate_vehicle(factory.create("truck", "25"))

    factory.register("electric_car", lambda param: ElectricCar(param or "Tesla Model 3"))
    demonstrate_vehicle(factory.create("electric_car", "Tesla Model S"))

    print("\n=== Using Simple Factory ===")
    demonstrate_vehicle(SimpleVehicleFactory.create(VehicleType.CAR, "BMW X5"))
    demonstrate_vehicle(SimpleVehicleFactory.create(VehicleType.MOTORCYCLE, "Yamaha R1"))
    vehicle_type = SimpleVehicleFactory.string_to_vehicle_type("truck")
    if vehicle_type is not None:
        demonstrate_vehicle(SimpleVehicleFactory.create(vehicle_type, "50"))

    print("\n=== Error Handling Demo ===")
    try:
        factory.create("airplane", "Boeing 737")
    except DomainException as e:
        print(f"Caught expected exception: {e}")
    try:
        Car("")
    except DomainException as e:
        print(f"Caught expected exception: {e}")

    print("\nFactory pattern demonstration completed successfully!")


def main() -> int:
    run_shapes()
    run_vehicles()
    return 0


if __name__ == "__main__":
    sys.exit(main())
