"""Checkout with a pluggable payment method."""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from pattern_catalogue.infrastructure.logging.logger import get_logger

WALLET_EDGE = 6


class PaymentStrategy(ABC):
    @abstractmethod
    def pay(self, amount: float) -> None:
        pass


class CreditCardPayment(PaymentStrategy):
    def __init__(self, card_number: str, name: str, cvv: str, expiry_date: str):
        self.card_number = card_number
        self.name = name
        self.cvv = cvv
        self.expiry_date = expiry_date

    def pay(self, amount: float) -> None:
        print(f"Paid ${amount:.2f} using Credit Card")
        print(f"Card: ****-****-****-{self.card_number[-4:]}")
        print(f"Cardholder: {self.name}")


class PayPalPayment(PaymentStrategy):
    def __init__(self, email: str, password: str):
        self.email = email
        self._password = password

    def pay(self, amount: float) -> None:
        print(f"Paid ${amount:.2f} using PayPal")
        print(f"Account: {self.email}")


class CryptoPayment(PaymentStrategy):
    def __init__(self, wallet_address: str, crypto_type: str):
        self.wallet_address = wallet_address
        self.crypto_type = crypto_type

    @property
    def short_wallet(self) -> str:
        if len(self.wallet_address) <= 2 * WALLET_EDGE:
            return self.wallet_address
        return f"{self.wallet_address[:WALLET_EDGE]}...{self.wallet_address[-WALLET_EDGE:]}"

    def pay(self, amount: float) -> None:
        print(f"Paid ${amount:.2f} using {self.crypto_type}")
        print(f"Wallet: {self.short_wallet}")


class ShoppingCart:
    """Context: swapping the payment strategy leaves the cart contents alone."""

    def __init__(self):
        self._logger = get_logger(__name__)
        self.items: List[Tuple[str, float]] = []
        self.total = 0.0
        self.payment_strategy: Optional[PaymentStrategy] = None

    def add_item(self, item: str, price: float) -> None:
        self.items.append((item, price))
        self.total += price
        print(f"Added {item}: ${price:.2f} (Total: ${self.total:.2f})")

    def set_payment_strategy(self, strategy: Optional[PaymentStrategy]) -> None:
        self.payment_strategy = strategy

    def checkout(self) -> bool:
        if self.payment_strategy is None:
            print("No payment method selected!")
            return False
        print("\n--- Checkout ---")
        print(f"Total Amount: ${self.total:.2f}")
        self.payment_strategy.pay(self.total)
        print("Payment completed successfully!")
        self._logger.info(f"Checked out {len(self.items)} items with {type(self.payment_strategy).__name__}")
        return True
