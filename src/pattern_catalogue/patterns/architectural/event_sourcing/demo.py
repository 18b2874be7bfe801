"""Event Sourcing demo - bank accounts whose state is replayed from their events."""
import sys

from pattern_catalogue.domain.base.exceptions import DomainException
from pattern_catalogue.patterns.architectural.event_sourcing.account import AccountSummary, BankAccount
from pattern_catalogue.patterns.architectural.event_sourcing.commands import (
    AccountCommand,
    BankAccountCommandHandler,
    CloseAccount,
    DepositMoney,
    OpenAccount,
    WithdrawMoney,
)
from pattern_catalogue.patterns.architectural.event_sourcing.store import InMemoryEventStore

ALICE = "ACC-1"
BOB = "ACC-2"


def attempt(handler: BankAccountCommandHandler, command: AccountCommand, success: str, failure: str) -> None:
    try:
        handler.handle(command)
        print(f"[ok] {success}")
    except DomainException as e:
        print(f"[failed] {failure}: {e}")


def main() -> int:
    print("=== Event Sourcing Pattern Demo ===\n")
    store = InMemoryEventStore()
    handler = BankAccountCommandHandler(store)

    print("1. Opening bank accounts:")
    attempt(handler, OpenAccount(account_id=ALICE, owner_name="Alice Johnson", initial_balance=1000.0),
            f"Account opened for Alice Johnson (ID: {ALICE})", "Failed to open Alice's account")
    attempt(handler, OpenAccount(account_id=BOB, owner_name="Bob Smith", initial_balance=500.0),
            f"Account opened for Bob Smith (ID: {BOB})", "Failed to open Bob's account")
    attempt(handler, OpenAccount(account_id=BOB, owner_name="Bob Smith", initial_balance=10.0),
            "Bob's account opened twice", "Failed to reopen Bob's account")

    print("\n2. Performing transactions:")
    attempt(handler, DepositMoney(account_id=ALICE, amount=250.0), "Alice deposited $250", "Alice's deposit failed")
    attempt(handler, WithdrawMoney(account_id=BOB, amount=100.0), "Bob withdrew $100", "Bob's withdrawal failed")
    attempt(handler, DepositMoney(account_id=ALICE, amount=500.0), "Alice deposited $500",
            "Alice's second deposit failed")

    print("\n3. Current account states:")
    for name, account_id in (("Alice", ALICE), ("Bob", BOB)):
        account = handler.account_state(account_id)
        print(f"{name}'s account: ${account.balance:.2f} ({account.status})")

    print("\n4. Event history (Alice's account):")
    alice_events = store.events_for(ALICE)
    for index, event in enumerate(alice_events, start=1):
        print(f"Event {index}: {event.event_type} (sequence {event.sequence})")
        print(f"  {event.describe()}")

    print("\n5. Account summary (projection):")
    summary = AccountSummary.from_events(alice_events)
    print("Alice's Summary:")
    print(f"  Total deposits: ${summary.total_deposits:.2f}")
    print(f"  Total withdrawals: ${summary.total_withdrawals:.2f}")
    print(f"  Transaction count: {summary.transaction_count}")
    print(f"  Current balance: ${summary.balance:.2f}")

    print("\n6. Testing business rules:")
    attempt(handler, WithdrawMoney(account_id=BOB, amount=1000.0), "Large withdrawal succeeded",
            "Large withdrawal failed")
    attempt(handler, CloseAccount(account_id=BOB), "Bob's account closed", "Failed to close Bob's account")
    attempt(handler, DepositMoney(account_id=BOB, amount=50.0), "Deposit to closed account succeeded",
            "Deposit to closed account failed")
    attempt(handler, DepositMoney(account_id="ACC-9", amount=50.0), "Deposit to unknown account succeeded",
            "Deposit to unknown account failed")

    print("\n7. Replaying Alice's account at each version:")
    for version in range(1, len(alice_events) + 1):
        account = BankAccount.from_events(alice_events[:version])
        print(f"  Version {version}: ${account.balance:.2f}")

    print("\n8. All events in append order:")
    for event in store.all_events():
        print(f"{event.sequence}. {event.event_type} (Account: {event.aggregate_id})")

    print(f"\nTotal events stored: {store.count()}")
    print("\nEvent Sourcing provides a complete audit trail and allows")
    print("reconstruction of state at any point in time!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
