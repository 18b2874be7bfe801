"""Tests for account events, the event store, the command handler and projections."""
import pytest
from pydantic import ValidationError as PydanticValidationError

from pattern_catalogue.domain.base.exceptions import (
    ConcurrencyError,
    InvalidStateTransitionError,
    ResourceNotFoundError,
    UnknownTypeError,
    ValidationError,
)
from pattern_catalogue.patterns.architectural.event_sourcing import (
    AccountClosed,
    AccountCommand,
    AccountOpened,
    AccountSummary,
    BankAccount,
    BankAccountCommandHandler,
    CloseAccount,
    DepositMoney,
    InMemoryEventStore,
    MoneyDeposited,
    MoneyWithdrawn,
    OpenAccount,
    WithdrawMoney,
)


class TestEvents:
    """Test event construction."""

    def test_event_type_defaults_to_class_name(self):
        """Test each event names itself."""
        assert MoneyDeposited(aggregate_id="A", amount=5.0).event_type == "MoneyDeposited"

    def test_events_are_immutable(self):
        """Test stored facts cannot be edited."""
        event = MoneyDeposited(aggregate_id="A", amount=5.0)
        with pytest.raises(PydanticValidationError):
            event.amount = 10.0

    def test_describe(self):
        """Test the one-line description lists the payload."""
        event = AccountOpened(aggregate_id="ACC-1", owner_name="Alice", initial_balance=1000.0)
        assert event.describe() == "AccountOpened{accountId=ACC-1, owner_name=Alice, initial_balance=1000.00}"


class TestInMemoryEventStore:
    """Test append-only storage."""

    def setup_method(self):
        """Set up an empty store."""
        self.store = InMemoryEventStore()

    def test_sequence_numbers_follow_global_append_order(self):
        """Test every stored event gets the next global sequence number."""
        self.store.append("A", [MoneyDeposited(aggregate_id="A", amount=1.0)])
        self.store.append("B", [MoneyDeposited(aggregate_id="B", amount=2.0)])
        stored = self.store.append("A", [MoneyWithdrawn(aggregate_id="A", amount=1.0)])

        assert stored[0].sequence == 3
        assert [event.sequence for event in self.store.events_for("A")] == [1, 3]
        assert [event.aggregate_id for event in self.store.all_events()] == ["A", "B", "A"]
        assert self.store.count() == 3
        assert self.store.version("A") == 2

    def test_unknown_stream_is_empty(self):
        """Test reading a stream nobody wrote to."""
        assert self.store.events_for("nobody") == []
        assert self.store.version("nobody") == 0

    def test_stale_expected_version_rejected(self):
        """Test an append based on an old version fails and stores nothing."""
        self.store.append("A", [MoneyDeposited(aggregate_id="A", amount=1.0)])
        with pytest.raises(ConcurrencyError, match="expected version 0, found 1"):
            self.store.append("A", [MoneyDeposited(aggregate_id="A", amount=1.0)], expected_version=0)
        assert self.store.count() == 1

    def test_returned_lists_are_copies(self):
        """Test callers cannot append behind the store's back."""
        self.store.append("A", [MoneyDeposited(aggregate_id="A", amount=1.0)])
        self.store.events_for("A").clear()
        self.store.all_events().clear()
        assert self.store.count() == 1


class TestProjections:
    """Test state rebuilt from events."""

    EVENTS = [
        AccountOpened(aggregate_id="A", owner_name="Alice", initial_balance=100.0),
        MoneyDeposited(aggregate_id="A", amount=50.0),
        MoneyWithdrawn(aggregate_id="A", amount=30.0),
        AccountClosed(aggregate_id="A", final_balance=120.0),
    ]

    def test_account_replay(self):
        """Test the aggregate folds every event and counts its version."""
        account = BankAccount.from_events(self.EVENTS)
        assert account.owner_name == "Alice"
        assert account.balance == 120.0
        assert account.closed
        assert account.status == "Closed"
        assert account.version == 4

    def test_replay_prefix_gives_past_state(self):
        """Test replaying a prefix reconstructs an earlier version."""
        account = BankAccount.from_events(self.EVENTS[:2])
        assert account.balance == 150.0
        assert account.status == "Open"

    def test_summary_totals(self):
        """Test the read model totals deposits and withdrawals."""
        summary = AccountSummary.from_events(self.EVENTS)
        assert summary.total_deposits == 150.0
        assert summary.total_withdrawals == 30.0
        assert summary.balance == 120.0
        assert summary.transaction_count == 4
        assert summary.closed


class TestCommandHandler:
    """Test business rules enforced when handling commands."""

    def setup_method(self):
        """Set up a handler with one open account holding 500."""
        self.store = InMemoryEventStore()
        self.handler = BankAccountCommandHandler(self.store)
        self.handler.handle(OpenAccount(account_id="B", owner_name="Bob", initial_balance=500.0))

    def test_transactions_update_state(self):
        """Test deposits and withdrawals append events and move the balance."""
        self.handler.handle(DepositMoney(account_id="B", amount=100.0))
        events = self.handler.handle(WithdrawMoney(account_id="B", amount=250.0))

        assert isinstance(events[0], MoneyWithdrawn)
        assert events[0].sequence == 3
        assert self.handler.account_state("B").balance == 350.0

    def test_duplicate_open_rejected(self):
        """Test an id can only be opened once."""
        with pytest.raises(ValidationError, match="Account B already exists"):
            self.handler.handle(OpenAccount(account_id="B", owner_name="Bob", initial_balance=1.0))

    def test_negative_opening_balance_rejected(self):
        """Test opening balances may not be negative."""
        with pytest.raises(ValidationError, match="Initial balance cannot be negative"):
            self.handler.handle(OpenAccount(account_id="C", owner_name="Cy", initial_balance=-1.0))
        assert self.handler.account_state("C") is None

    @pytest.mark.parametrize(
        "command, message",
        [
            (DepositMoney(account_id="B", amount=0.0), "Deposit amount must be positive"),
            (WithdrawMoney(account_id="B", amount=-5.0), "Withdrawal amount must be positive"),
            (WithdrawMoney(account_id="B", amount=1000.0), "Insufficient funds: balance \\$500.00"),
        ],
        ids=["zero_deposit", "negative_withdrawal", "overdraw"],
    )
    def test_rejected_amounts_store_nothing(self, command, message):
        """Test invalid money movements are refused without new events."""
        with pytest.raises(ValidationError, match=message):
            self.handler.handle(command)
        assert self.store.count() == 1

    def test_unknown_account(self):
        """Test commands against an unopened account."""
        with pytest.raises(ResourceNotFoundError, match="Account with ID Z not found"):
            self.handler.handle(DepositMoney(account_id="Z", amount=5.0))

    def test_closed_account_refuses_everything(self):
        """Test a closed account accepts no further commands."""
        closed = self.handler.handle(CloseAccount(account_id="B"))
        assert closed[0].final_balance == 500.0

        for command in (DepositMoney(account_id="B", amount=5.0), CloseAccount(account_id="B")):
            with pytest.raises(InvalidStateTransitionError, match="while account is closed"):
                self.handler.handle(command)
        assert self.handler.account_state("B").closed

    def test_unknown_command(self):
        """Test a command type without a handler is rejected."""
        with pytest.raises(UnknownTypeError, match="Unknown command type: AccountCommand"):
            self.handler.handle(AccountCommand(account_id="B"))

    def test_concurrent_writer_detected(self, monkeypatch):
        """Test a withdrawal decided on a stale balance is refused."""
        original = self.store.events_for

        def stale_then_race(account_id):
            events = original(account_id)
            # Another writer drains the account after this read
            self.store.append("B", [MoneyWithdrawn(aggregate_id="B", amount=500.0)])
            monkeypatch.setattr(self.store, "events_for", original)
            return events

        monkeypatch.setattr(self.store, "events_for", stale_then_race)
        with pytest.raises(ConcurrencyError):
            self.handler.handle(WithdrawMoney(account_id="B", amount=400.0))
        assert self.handler.account_state("B").balance == 0.0
