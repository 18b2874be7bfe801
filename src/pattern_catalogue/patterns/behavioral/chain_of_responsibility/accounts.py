"""Payment accounts tried in order until one has enough balance."""
from typing import Optional

from .base import Handler


class Account(Handler[float]):
    system_name = "Account"

    def __init__(self, balance: float, successor: Optional["Account"] = None):
        super().__init__(successor)
        self.balance = balance

    def pay(self, amount: float) -> None:
        self.handle(amount)

    def can_handle(self, amount: float) -> bool:
        return self.balance >= amount

    def process(self, amount: float) -> None:
        self.balance -= amount
        print(f"Paid {amount:g} using {self.system_name}")

    def on_forward(self, amount: float) -> None:
        print(f"Cannot pay using {self.system_name}. Proceeding...")

    def exhausted_message(self, amount: float) -> str:
        return "None of the accounts have enough balance."


class Bank(Account):
    system_name = "Bank"


class PayPal(Account):
    system_name = "PayPal"


class Bitcoin(Account):
    system_name = "Bitcoin"
