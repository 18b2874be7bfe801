"""Object adapter letting a dollars-only legacy payment system accept modern requests."""
import itertools
from abc import ABC, abstractmethod

# Conversion rates to USD
RATES = {"USD": 1.0, "EUR": 1.1, "GBP": 1.3, "JPY": 0.009}


class LegacyPaymentSystem:
    def make_payment(self, amount: float) -> None:
        print(f"Legacy payment: ${amount:.2f} processed")


class PaymentProcessor(ABC):
    @abstractmethod
    def process_payment(self, currency: str, amount: float, method: str) -> bool:
        pass

    @abstractmethod
    def transaction_id(self) -> str:
        pass


class LegacyPaymentAdapter(PaymentProcessor):
    def __init__(self, legacy_system: LegacyPaymentSystem = None):
        self._legacy = legacy_system or LegacyPaymentSystem()
        self._last_transaction_id = ""
        self._counter = itertools.count(1)

    def process_payment(self, currency: str, amount: float, method: str) -> bool:
        rate = RATES.get(currency.upper())
        if rate is None:
            print(f"Unsupported currency: {currency}")
            return False
        usd_amount = amount * rate
        print("Adapting modern payment request:")
        print(f"  Original: {amount:g} {currency} via {method}")
        print(f"  Converted: ${usd_amount:.2f} USD")
        self._legacy.make_payment(usd_amount)
        self._last_transaction_id = f"TXN_{next(self._counter)}_{currency}"
        return True

    def transaction_id(self) -> str:
        return self._last_transaction_id
