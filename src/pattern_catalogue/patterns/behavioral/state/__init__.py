"""State pattern - a vending machine and a traffic light whose behaviour follows their current state."""
from .traffic_light import GreenLight, LightState, RedLight, TrafficLight, YellowLight
from .vending import (
    DispensingState,
    HasMoneyState,
    IdleState,
    MachineState,
    OutOfStockState,
    VendingMachine,
)

__all__ = [
    "DispensingState",
    "GreenLight",
    "HasMoneyState",
    "IdleState",
    "LightState",
    "MachineState",
    "OutOfStockState",
    "RedLight",
    "TrafficLight",
    "VendingMachine",
    "YellowLight",
]
