"""Coffee and its condiment decorators."""
from abc import ABC, abstractmethod


class Coffee(ABC):
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def cost(self) -> float:
        pass

    def __str__(self) -> str:
        return f"{self.description()}: ${self.cost():.2f}"


class SimpleCoffee(Coffee):
    def description(self) -> str:
        return "Simple Coffee"

    def cost(self) -> float:
        return 2.0


class CoffeeDecorator(Coffee):
    """Wraps one inner coffee, appending its label and adding its price."""

    label = ""
    increment = 0.0

    def __init__(self, inner: Coffee):
        self.inner = inner

    def description(self) -> str:
        return f"{self.inner.description()}, {self.label}"

    def cost(self) -> float:
        return self.inner.cost() + self.increment


class Milk(CoffeeDecorator):
    label = "Milk"
    increment = 0.5


class Sugar(CoffeeDecorator):
    label = "Sugar"
    increment = 0.2


class Whip(CoffeeDecorator):
    label = "Whip"
    increment = 0.7
