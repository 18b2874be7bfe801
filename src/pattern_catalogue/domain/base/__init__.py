"""Base domain types."""
from .exceptions import (
    AlreadyBuiltError,
    CapacityExceededError,
    ConfigurationError,
    DomainException,
    EmptyHistoryError,
    InvalidParameterError,
    NoHandlerError,
    UnknownTypeError,
    UnsupportedFormatError,
    ValidationError,
)

__all__ = [
    "AlreadyBuiltError",
    "CapacityExceededError",
    "ConfigurationError",
    "DomainException",
    "EmptyHistoryError",
    "InvalidParameterError",
    "NoHandlerError",
    "UnknownTypeError",
    "UnsupportedFormatError",
    "ValidationError",
]
