"""Null Object pattern - a do-nothing participant instead of a missing one."""
from .customers import (
    Customer,
    CustomerRepository,
    CustomerService,
    NullCustomer,
    RealCustomer,
)
from .loggers import Application, ConsoleLogger, EventLogger, NullLogger

__all__ = [
    "Application",
    "ConsoleLogger",
    "Customer",
    "CustomerRepository",
    "CustomerService",
    "EventLogger",
    "NullCustomer",
    "NullLogger",
    "RealCustomer",
]
