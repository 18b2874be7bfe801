"""Customers, the guest stand-in, and a repository that never returns None."""
from abc import ABC, abstractmethod
from typing import Dict

from pattern_catalogue.infrastructure.logging.logger import get_logger

GUEST_ID = 0
POINTS_PER_PURCHASE = 10


class Customer(ABC):
    def __init__(self, customer_id: int, name: str):
        self.id = customer_id
        self.name = name

    @abstractmethod
    def greet(self) -> None:
        pass

    @abstractmethod
    def purchase(self, item: str) -> None:
        pass

    @abstractmethod
    def discount(self) -> int:
        """Discount rate in percent."""

    @abstractmethod
    def is_null(self) -> bool:
        pass


class RealCustomer(Customer):
    def __init__(self, customer_id: int, name: str, email: str, loyalty_points: int = 0):
        super().__init__(customer_id, name)
        self.email = email
        self.loyalty_points = loyalty_points

    def greet(self) -> None:
        print(f"Hello {self.name}! Welcome back!")

    def purchase(self, item: str) -> None:
        print(f"{self.name} purchased: {item}")
        self.loyalty_points += POINTS_PER_PURCHASE
        print(f"Loyalty points: {self.loyalty_points}")

    def discount(self) -> int:
        if self.loyalty_points > 100:
            return 15
        if self.loyalty_points > 50:
            return 10
        return 5

    def is_null(self) -> bool:
        return False


class NullCustomer(Customer):
    """Guest: greets generically, asks to register, never discounts."""

    def __init__(self):
        super().__init__(GUEST_ID, "Guest")

    def greet(self) -> None:
        print("Welcome, guest!")

    def purchase(self, item: str) -> None:
        print(f"Please register to purchase: {item}")

    def discount(self) -> int:
        return 0

    def is_null(self) -> bool:
        return True


class CustomerRepository:
    def __init__(self):
        self._logger = get_logger(__name__)
        self._customers: Dict[int, Customer] = {}
        self._guest = NullCustomer()

    def add(self, customer: RealCustomer) -> None:
        self._customers[customer.id] = customer

    def find(self, customer_id: int) -> Customer:
        customer = self._customers.get(customer_id)
        if customer is None:
            self._logger.debug(f"Customer {customer_id} not found, using guest")
            return self._guest
        return customer


class CustomerService:
    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def process_order(self, customer_id: int, item: str, price: float) -> float:
        """Run an order through whichever customer the repository hands back.

        Returns:
            The discounted price
        """
        customer = self.repository.find(customer_id)
        customer.greet()

        discount = customer.discount()
        final_price = price * (100 - discount) / 100.0

        print(f"Processing order for customer ID {customer_id}")
        print(f"Item: {item}, Original price: ${price:.2f}")
        print(f"Discount: {discount}%, Final price: ${final_price:.2f}")

        customer.purchase(item)
        if customer.is_null():
            print("Note: This was a guest purchase")
        print("---")
        return final_price
