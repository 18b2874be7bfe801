"""Facade pattern - one entry point over the hardware subsystems of a computer."""
from .computer import CPU, GPU, ComputerFacade, HardDrive, Memory

__all__ = ["CPU", "GPU", "ComputerFacade", "HardDrive", "Memory"]
