"""Domain exceptions - error taxonomy shared by every pattern demonstration."""
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class InvalidParameterError(ValidationError):
    """Raised when a construction parameter violates its domain (e.g. non-positive radius)."""
    pass


class UnknownTypeError(DomainException):
    """Raised when a factory or registry is asked for a type it does not know."""
    def __init__(self, message: str, type_name: Optional[str] = None):
        super().__init__(message)
        self.type_name = type_name


class UnsupportedFormatError(DomainException):
    """Raised when a media or output format has no implementation."""
    def __init__(self, format_name: str):
        super().__init__(f"Invalid media. {format_name} format not supported")
        self.format_name = format_name


class AlreadyBuiltError(DomainException):
    """Raised when a builder is used after it handed over its product."""
    def __init__(self, builder_name: str):
        super().__init__(f"{builder_name} has already built its product")
        self.builder_name = builder_name


class NoHandlerError(DomainException):
    """Raised when a request reaches the end of a chain unhandled."""
    pass


class EmptyHistoryError(DomainException):
    """Raised when restoring from an empty history."""
    pass


class CapacityExceededError(DomainException):
    """Raised when attempting to exceed a fixed capacity."""
    def __init__(self, resource_type: str, maximum: int):
        super().__init__(f"Cannot exceed {resource_type} limit: {maximum}")
        self.resource_type = resource_type
        self.maximum = maximum


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class ExpressionSyntaxError(DomainException):
    """Raised when an expression cannot be parsed."""
    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message if position is None else f"{message} at position {position}")
        self.position = position


class EvaluationError(DomainException):
    """Raised when a parsed expression cannot be evaluated (unknown variable, division by zero)."""
    pass


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidStateTransitionError(DomainException):
    """Raised when an operation is not allowed in the current state."""
    def __init__(self, current_state: str, attempted_operation: str):
        super().__init__(f"Cannot {attempted_operation} while {current_state}")
        self.current_state = current_state
        self.attempted_operation = attempted_operation


class DependencyResolutionError(DomainException):
    """Raised when a container cannot build a requested service."""
    def __init__(self, dependency_type: Any, message: str):
        super().__init__(message)
        self.dependency_type = dependency_type


class CircularDependencyError(DependencyResolutionError):
    """Raised when a service depends on itself through its constructor chain."""
    def __init__(self, chain: List[Any]):
        names = " -> ".join(getattr(item, "__name__", str(item)) for item in chain)
        super().__init__(chain[-1], f"Circular dependency detected: {names}")
        self.chain = chain


class ConcurrencyError(DomainException):
    """Raised when an append was based on a stale version of an aggregate."""
    def __init__(self, aggregate_id: str, expected_version: int, actual_version: int):
        super().__init__(
            f"Aggregate {aggregate_id} was modified: expected version {expected_version}, found {actual_version}"
        )
        self.aggregate_id = aggregate_id
        self.expected_version = expected_version
        self.actual_version = actual_version
