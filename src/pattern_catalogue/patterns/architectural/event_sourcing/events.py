"""Immutable bank account events."""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountEvent(BaseModel):
    """
    Base class for all account events.

    ``sequence`` is assigned by the event store when the event is appended;
    it orders the global log independently of wall-clock time.
    """

    model_config = ConfigDict(frozen=True)

    event_type: str = ""
    aggregate_id: str
    sequence: Optional[int] = None
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if not data.get("event_type"):
            data["event_type"] = self.__class__.__name__
        super().__init__(**data)

    def describe(self) -> str:
        fields = self.model_dump(exclude={"event_type", "aggregate_id", "sequence", "occurred_at"})
        details = "".join(f", {key}={_format(value)}" for key, value in fields.items())
        return f"{self.event_type}{{accountId={self.aggregate_id}{details}}}"


def _format(value) -> str:
    return f"{value:.2f}" if isinstance(value, float) else str(value)


class AccountOpened(AccountEvent):
    owner_name: str
    initial_balance: float


class MoneyDeposited(AccountEvent):
    amount: float


class MoneyWithdrawn(AccountEvent):
    amount: float


class AccountClosed(AccountEvent):
    final_balance: float
