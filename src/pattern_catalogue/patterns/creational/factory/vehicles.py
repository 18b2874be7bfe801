"""Vehicle factory - creator table that accepts new vehicle types at runtime."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, List, Optional

from pattern_catalogue.domain.base.exceptions import (
    InvalidParameterError,
    UnknownTypeError,
    ValidationError,
)
from pattern_catalogue.infrastructure.logging.logger import get_logger


class Vehicle(ABC):
    """Interface every vehicle implements."""

    @abstractmethod
    def start(self) -> None:
        pass

    @abstractmethod
    def stop(self) -> None:
        pass

    @abstractmethod
    def get_type(self) -> str:
        pass


class Car(Vehicle):
    def __init__(self, model: str):
        if not model:
            raise InvalidParameterError("Car model cannot be empty")
        self.model = model

    def start(self) -> None:
        print(f"Car {self.model} engine started with key ignition")

    def stop(self) -> None:
        print(f"Car {self.model} engine stopped")

    def get_type(self) -> str:
        return f"Car ({self.model})"


class Motorcycle(Vehicle):
    def __init__(self, brand: str):
        if not brand:
            raise InvalidParameterError("Motorcycle brand cannot be empty")
        self.brand = brand

    def start(self) -> None:
        print(f"Motorcycle {self.brand} engine started with kick start")

    def stop(self) -> None:
        print(f"Motorcycle {self.brand} engine stopped")

    def get_type(self) -> str:
        return f"Motorcycle ({self.brand})"


class Truck(Vehicle):
    def __init__(self, capacity: int):
        if capacity <= 0:
            raise InvalidParameterError("Truck capacity must be positive")
        self.capacity = capacity

    def start(self) -> None:
        print(f"Truck with {self.capacity}T capacity engine started")

    def stop(self) -> None:
        print("Truck engine stopped")

    def get_type(self) -> str:
        return f"Truck ({self.capacity}T)"


Creator = Callable[[str], Vehicle]


def _parse_capacity(param: str, default: int) -> int:
    if not param:
        return default
    try:
        return int(param)
    except ValueError as e:
        raise InvalidParameterError(f"Invalid capacity parameter for truck: {param}") from e


class VehicleFactory:
    """
    Creator table keyed by lower-cased vehicle type.

    Car, motorcycle and truck are available out of the box; further types are
    added with register() without touching this class.
    """

    def __init__(self):
        self._creators: Dict[str, Creator] = {
            "car": lambda param: Car(param or "Generic Car"),
            "motorcycle": lambda param: Motorcycle(param or "Generic Bike"),
            "truck": lambda param: Truck(_parse_capacity(param, 10)),
        }
        self._logger = get_logger(__name__)

    def register(self, vehicle_type: str, creator: Creator) -> None:
        """
        Register a creator for a vehicle type, replacing any existing one.

        Raises:
            ValidationError: If the type is empty or the creator is not callable
        """
        if not vehicle_type:
            raise ValidationError("Vehicle type cannot be empty")
        if not callable(creator):
            raise ValidationError("Creator function cannot be null")
        self._creators[vehicle_type.lower()] = creator
        self._logger.info(f"Registered vehicle type: {vehicle_type.lower()}")

    def create(self, vehicle_type: str, param: str = "") -> Vehicle:
        """
        Create a vehicle.

        Raises:
            UnknownTypeError: If no creator is registered for the type
            InvalidParameterError: If the creator rejects the parameter
        """
        creator = self._creators.get(vehicle_type.lower())
        if creator is None:
            raise UnknownTypeError(f"Unknown vehicle type: {vehicle_type}", vehicle_type)
        return creator(param)

    def available_types(self) -> List[str]:
        return sorted(self._creators)

    def has_type(self, vehicle_type: str) -> bool:
        return vehicle_type.lower() in self._creators


class VehicleType(Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    TRUCK = "truck"


class SimpleVehicleFactory:
    """Closed factory switching over a fixed VehicleType enumeration."""

    @staticmethod
    def create(vehicle_type: VehicleType, param: str = "") -> Vehicle:
        if vehicle_type is VehicleType.CAR:
            return Car(param or "Default Car")
        if vehicle_type is VehicleType.MOTORCYCLE:
            return Motorcycle(param or "Default Bike")
        if vehicle_type is VehicleType.TRUCK:
            return Truck(_parse_capacity(param, 15))
        raise UnknownTypeError("Unknown vehicle type enum", str(vehicle_type))

    @staticmethod
    def string_to_vehicle_type(name: str) -> Optional[VehicleType]:
        try:
            return VehicleType(name.lower())
        except ValueError:
            return None
