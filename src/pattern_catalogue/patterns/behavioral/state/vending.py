"""Vending machine context and its four states."""
from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger

DEFAULT_STOCK = 5


class MachineState(ABC):
    name = "State"

    @abstractmethod
    def handle(self, machine: "VendingMachine") -> None:
        pass

    def enter(self, machine: "VendingMachine") -> None:
        pass

    def exit(self, machine: "VendingMachine") -> None:
        pass


class IdleState(MachineState):
    name = "Idle"

    def handle(self, machine: "VendingMachine") -> None:
        print("Machine is idle. Please insert money to continue.")

    def enter(self, machine: "VendingMachine") -> None:
        print(f"Entering idle state. Balance: ${machine.balance:.2f}")

    def exit(self, machine: "VendingMachine") -> None:
        print("Exiting idle state.")


class HasMoneyState(MachineState):
    name = "HasMoney"

    def handle(self, machine: "VendingMachine") -> None:
        if machine.selected_item is None:
            print("Money inserted. Please select an item.")
            return
        if machine.balance < machine.item_price:
            print(f"Insufficient funds. Need ${machine.item_price - machine.balance:.2f} more.")
            return
        if machine.item_count > 0:
            print("Item selected and sufficient funds. Transitioning to dispensing.")
            machine.set_state(DispensingState())
        else:
            print("Selected item is out of stock.")
            machine.set_state(OutOfStockState())

    def enter(self, machine: "VendingMachine") -> None:
        print(f"Entering has money state. Balance: ${machine.balance:.2f}")

    def exit(self, machine: "VendingMachine") -> None:
        print("Exiting has money state.")


class DispensingState(MachineState):
    """Transient: dispenses on entry and hands control back to Idle."""

    name = "Dispensing"

    def handle(self, machine: "VendingMachine") -> None:
        print(f"Dispensing {machine.selected_item}...")
        machine.balance -= machine.item_price
        machine.item_count -= 1
        machine.dispensed.append(machine.selected_item)
        print(f"Item dispensed! Change: ${machine.balance:.2f}")
        machine.return_money()
        machine.clear_selection()
        machine.set_state(IdleState())

    def enter(self, machine: "VendingMachine") -> None:
        print("Entering dispensing state.")
        self.handle(machine)

    def exit(self, machine: "VendingMachine") -> None:
        print("Exiting dispensing state.")


class OutOfStockState(MachineState):
    """Transient: refunds on entry and hands control back to Idle."""

    name = "OutOfStock"

    def handle(self, machine: "VendingMachine") -> None:
        print("Selected item is out of stock. Returning money.")
        machine.return_money()
        machine.clear_selection()
        machine.set_state(IdleState())

    def enter(self, machine: "VendingMachine") -> None:
        print("Entering out of stock state.")
        self.handle(machine)

    def exit(self, machine: "VendingMachine") -> None:
        print("Exiting out of stock state.")


class VendingMachine:
    """
    Context object. Requests are forwarded to the current state.

    Transitions run ``exit`` on the old state before ``enter`` on the new one;
    a state may transition again from inside its own ``enter``.
    """

    def __init__(self, item_count: int = DEFAULT_STOCK):
        self._logger = get_logger(__name__)
        self.balance = 0.0
        self.item_price = 0.0
        self.item_count = item_count
        self.selected_item: Optional[str] = None
        self.dispensed: List[str] = []
        self.state: MachineState = IdleState()
        self.state.enter(self)

    @property
    def state_name(self) -> str:
        return self.state.name

    def set_state(self, state: MachineState) -> None:
        self._logger.debug(f"Transition {self.state.name} -> {state.name}")
        self.state.exit(self)
        self.state = state
        state.enter(self)

    def request(self) -> None:
        self.state.handle(self)

    def insert_money(self, amount: float) -> None:
        print(f"Inserting ${amount:.2f}")
        self.balance += amount
        if isinstance(self.state, IdleState):
            self.set_state(HasMoneyState())

    def select_item(self, item: str, price: float) -> None:
        print(f"Selecting item: {item} (${price:.2f})")
        self.selected_item = item
        self.item_price = price

    def dispense_item(self) -> None:
        self.request()

    def restock(self, count: int) -> None:
        self.item_count += count
        print(f"Restocked {count} items. Items in stock: {self.item_count}")

    def return_money(self) -> float:
        refund = self.balance
        if refund > 0:
            print(f"Returning ${refund:.2f}")
            self.balance = 0.0
        return refund

    def clear_selection(self) -> None:
        self.selected_item = None
        self.item_price = 0.0
