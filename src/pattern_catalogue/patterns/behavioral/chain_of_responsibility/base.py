"""Base handler - a singly linked chain where the first able handler wins."""
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from pattern_catalogue.domain.base.exceptions import NoHandlerError

R = TypeVar("R")


class Handler(ABC, Generic[R]):
    """
    Link in a chain.

    Successors are borrowed references; the driver that builds the chain owns
    every handler in it.
    """

    def __init__(self, successor: Optional["Handler[R]"] = None):
        self._successor = successor

    @property
    def successor(self) -> Optional["Handler[R]"]:
        return self._successor

    def set_next(self, successor: Optional["Handler[R]"]) -> Optional["Handler[R]"]:
        """Set the successor and return it so chains can be built fluently."""
        self._successor = successor
        return successor

    def handle(self, request: R) -> Any:
        """
        Service the request here or forward it.

        Raises:
            NoHandlerError: If no handler in the rest of the chain can service it
        """
        if self.can_handle(request):
            return self.process(request)
        if self._successor is None:
            raise NoHandlerError(self.exhausted_message(request))
        self.on_forward(request)
        return self._successor.handle(request)

    @abstractmethod
    def can_handle(self, request: R) -> bool:
        pass

    @abstractmethod
    def process(self, request: R) -> Any:
        pass

    def on_forward(self, request: R) -> None:
        pass

    def exhausted_message(self, request: R) -> str:
        return f"No handler for request: {request!r}"
