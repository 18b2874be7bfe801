"""Bank account aggregate and summary projection, both rebuilt from events."""
from typing import Iterable

from pydantic import BaseModel

from pattern_catalogue.patterns.architectural.event_sourcing.events import (
    AccountClosed,
    AccountEvent,
    AccountOpened,
    MoneyDeposited,
    MoneyWithdrawn,
)


class BankAccount(BaseModel):
    """Current state of one account; ``version`` counts the events applied."""

    id: str = ""
    owner_name: str = ""
    balance: float = 0.0
    closed: bool = False
    version: int = 0

    def apply(self, event: AccountEvent) -> None:
        if isinstance(event, AccountOpened):
            self.id = event.aggregate_id
            self.owner_name = event.owner_name
            self.balance = event.initial_balance
            self.closed = False
        elif isinstance(event, MoneyDeposited):
            self.balance += event.amount
        elif isinstance(event, MoneyWithdrawn):
            self.balance -= event.amount
        elif isinstance(event, AccountClosed):
            self.closed = True
        self.version += 1

    @classmethod
    def from_events(cls, events: Iterable[AccountEvent]) -> "BankAccount":
        account = cls()
        for event in events:
            account.apply(event)
        return account

    @property
    def status(self) -> str:
        return "Closed" if self.closed else "Open"


class AccountSummary(BaseModel):
    """Read model totalling an account's money movements."""

    id: str = ""
    owner_name: str = ""
    balance: float = 0.0
    total_deposits: float = 0.0
    total_withdrawals: float = 0.0
    transaction_count: int = 0
    closed: bool = False

    @classmethod
    def from_events(cls, events: Iterable[AccountEvent]) -> "AccountSummary":
        summary = cls()
        for event in events:
            if isinstance(event, AccountOpened):
                summary.id = event.aggregate_id
                summary.owner_name = event.owner_name
                summary.balance = event.initial_balance
                summary.total_deposits = event.initial_balance
            elif isinstance(event, MoneyDeposited):
                summary.balance += event.amount
                summary.total_deposits += event.amount
            elif isinstance(event, MoneyWithdrawn):
                summary.balance -= event.amount
                summary.total_withdrawals += event.amount
            elif isinstance(event, AccountClosed):
                summary.closed = True
            else:
                continue
            summary.transaction_count += 1
        return summary
