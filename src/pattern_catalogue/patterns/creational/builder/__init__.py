"""Builder pattern - step-by-step assembly of a computer configuration."""
from .computer import Computer, ComputerBuilder, ComputerDirector

__all__ = ["Computer", "ComputerBuilder", "ComputerDirector"]
