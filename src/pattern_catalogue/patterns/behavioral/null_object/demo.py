"""Null Object demo - orders for known and unknown customers, silent logging."""
import sys

from pattern_catalogue.patterns.behavioral.null_object.customers import (
    CustomerRepository,
    CustomerService,
    RealCustomer,
)
from pattern_catalogue.patterns.behavioral.null_object.loggers import Application, ConsoleLogger


def main() -> int:
    print("=== Null Object Pattern Demo ===")

    repository = CustomerRepository()
    repository.add(RealCustomer(1, "Alice Johnson", "alice@example.com"))
    repository.add(RealCustomer(2, "Bob Smith", "bob@example.com"))
    service = CustomerService(repository)

    print("\n1. Processing orders:")
    service.process_order(1, "Laptop", 1000.0)
    service.process_order(2, "Mouse", 50.0)
    service.process_order(999, "Keyboard", 100.0)

    print("\n2. Logger example:")
    print("With console logger:")
    Application(ConsoleLogger()).run()

    print("\nWith null logger (silent):")
    Application().run()

    print("\nNull Object pattern removes checks for missing objects")
    print("and provides default behavior in their place.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
