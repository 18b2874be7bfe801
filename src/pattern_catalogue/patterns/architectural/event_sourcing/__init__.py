"""Event Sourcing pattern - state derived by replaying an append-only event log."""
from .account import AccountSummary, BankAccount
from .commands import (
    AccountCommand,
    BankAccountCommandHandler,
    CloseAccount,
    DepositMoney,
    OpenAccount,
    WithdrawMoney,
)
from .events import AccountClosed, AccountEvent, AccountOpened, MoneyDeposited, MoneyWithdrawn
from .store import EventStore, InMemoryEventStore

__all__ = [
    "AccountClosed",
    "AccountCommand",
    "AccountEvent",
    "AccountOpened",
    "AccountSummary",
    "BankAccount",
    "BankAccountCommandHandler",
    "CloseAccount",
    "DepositMoney",
    "EventStore",
    "InMemoryEventStore",
    "MoneyDeposited",
    "MoneyWithdrawn",
    "OpenAccount",
    "WithdrawMoney",
]
