"""Append-only event storage."""
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from pattern_catalogue.domain.base.exceptions import ConcurrencyError
from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.patterns.architectural.event_sourcing.events import AccountEvent


class EventStore(ABC):
    @abstractmethod
    def append(
        self, aggregate_id: str, events: Sequence[AccountEvent], expected_version: Optional[int] = None
    ) -> List[AccountEvent]:
        """
        Append events to an aggregate's stream.

        Args:
            aggregate_id: Stream to append to
            events: New events, oldest first
            expected_version: Stream length the caller based its decision on;
                None skips the check

        Returns:
            The stored events, carrying their assigned sequence numbers

        Raises:
            ConcurrencyError: If the stream has grown past ``expected_version``
        """

    @abstractmethod
    def events_for(self, aggregate_id: str) -> List[AccountEvent]:
        pass

    @abstractmethod
    def all_events(self) -> List[AccountEvent]:
        """Every stored event in append order."""

    def count(self) -> int:
        return len(self.all_events())

    def version(self, aggregate_id: str) -> int:
        return len(self.events_for(aggregate_id))


class InMemoryEventStore(EventStore):
    def __init__(self):
        self._logger = get_logger(__name__)
        self._lock = threading.Lock()
        self._streams: Dict[str, List[AccountEvent]] = {}
        self._log: List[AccountEvent] = []

    def append(
        self, aggregate_id: str, events: Sequence[AccountEvent], expected_version: Optional[int] = None
    ) -> List[AccountEvent]:
        with self._lock:
            stream = self._streams.setdefault(aggregate_id, [])
            if expected_version is not None and expected_version != len(stream):
                raise ConcurrencyError(aggregate_id, expected_version, len(stream))
            stored = []
            for event in events:
                event = event.model_copy(update={"sequence": len(self._log) + 1})
                stream.append(event)
                self._log.append(event)
                stored.append(event)
        self._logger.debug(f"Appended {len(stored)} events to {aggregate_id}")
        return stored

    def events_for(self, aggregate_id: str) -> List[AccountEvent]:
        return list(self._streams.get(aggregate_id, []))

    def all_events(self) -> List[AccountEvent]:
        return list(self._log)

    def count(self) -> int:
        return len(self._log)
