"""Account commands and the handler that turns them into events."""
from typing import Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict

from pattern_catalogue.domain.base.exceptions import (
    InvalidStateTransitionError,
    ResourceNotFoundError,
    UnknownTypeError,
    ValidationError,
)
from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.patterns.architectural.event_sourcing.account import BankAccount
from pattern_catalogue.patterns.architectural.event_sourcing.events import (
    AccountClosed,
    AccountEvent,
    AccountOpened,
    MoneyDeposited,
    MoneyWithdrawn,
)
from pattern_catalogue.patterns.architectural.event_sourcing.store import EventStore


class AccountCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_id: str


class OpenAccount(AccountCommand):
    owner_name: str
    initial_balance: float


class DepositMoney(AccountCommand):
    amount: float


class WithdrawMoney(AccountCommand):
    amount: float


class CloseAccount(AccountCommand):
    pass


class BankAccountCommandHandler:
    """
    Validates commands against the state rebuilt from the store.

    Each accepted command appends its events with the version it was
    decided on, so a concurrent writer makes the append fail instead of
    silently overdrawing an account.
    """

    def __init__(self, event_store: EventStore):
        self.event_store = event_store
        self._logger = get_logger(__name__)
        self._handlers: Dict[Type[AccountCommand], Callable[..., List[AccountEvent]]] = {
            OpenAccount: self._open,
            DepositMoney: self._deposit,
            WithdrawMoney: self._withdraw,
            CloseAccount: self._close,
        }

    def handle(self, command: AccountCommand) -> List[AccountEvent]:
        """
        Execute a command.

        Returns:
            The events the command produced, as stored

        Raises:
            ValidationError: If the command breaks a business rule
            ResourceNotFoundError: If the account has never been opened
            InvalidStateTransitionError: If the account is already closed
            ConcurrencyError: If the account changed while the command was decided
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise UnknownTypeError(f"Unknown command type: {type(command).__name__}", type(command).__name__)
        events = handler(command)
        self._logger.info("Command handled", command=type(command).__name__, account_id=command.account_id)
        return events

    def account_state(self, account_id: str) -> Optional[BankAccount]:
        events = self.event_store.events_for(account_id)
        return BankAccount.from_events(events) if events else None

    def _load_open_account(self, account_id: str, operation: str) -> BankAccount:
        account = self.account_state(account_id)
        if account is None:
            raise ResourceNotFoundError("Account", account_id)
        if account.closed:
            raise InvalidStateTransitionError("account is closed", operation)
        return account

    def _open(self, command: OpenAccount) -> List[AccountEvent]:
        if command.initial_balance < 0:
            raise ValidationError("Initial balance cannot be negative")
        if self.event_store.version(command.account_id) > 0:
            raise ValidationError(f"Account {command.account_id} already exists")
        event = AccountOpened(
            aggregate_id=command.account_id,
            owner_name=command.owner_name,
            initial_balance=command.initial_balance,
        )
        return self.event_store.append(command.account_id, [event], expected_version=0)

    def _deposit(self, command: DepositMoney) -> List[AccountEvent]:
        if command.amount <= 0:
            raise ValidationError("Deposit amount must be positive")
        account = self._load_open_account(command.account_id, "deposit")
        event = MoneyDeposited(aggregate_id=command.account_id, amount=command.amount)
        return self.event_store.append(command.account_id, [event], expected_version=account.version)

    def _withdraw(self, command: WithdrawMoney) -> List[AccountEvent]:
        if command.amount <= 0:
            raise ValidationError("Withdrawal amount must be positive")
        account = self._load_open_account(command.account_id, "withdraw")
        if account.balance < command.amount:
            raise ValidationError(
                f"Insufficient funds: balance ${account.balance:.2f}, requested ${command.amount:.2f}"
            )
        event = MoneyWithdrawn(aggregate_id=command.account_id, amount=command.amount)
        return self.event_store.append(command.account_id, [event], expected_version=account.version)

    def _close(self, command: CloseAccount) -> List[AccountEvent]:
        account = self._load_open_account(command.account_id, "close")
        event = AccountClosed(aggregate_id=command.account_id, final_balance=account.balance)
        return self.event_store.append(command.account_id, [event], expected_version=account.version)
