"""Strategy demo - payment methods at checkout, list formats in a text processor."""
import sys

from pattern_catalogue.domain.base.exceptions import UnknownTypeError
from pattern_catalogue.patterns.behavioral.strategy.lists import (
    DynamicTextProcessor,
    HtmlListStrategy,
    MarkdownListStrategy,
    OutputFormat,
    StaticTextProcessor,
)
from pattern_catalogue.patterns.behavioral.strategy.payment import (
    CreditCardPayment,
    CryptoPayment,
    PayPalPayment,
    ShoppingCart,
)

ITEMS = ["foo", "bar", "baz"]


def run_payments() -> None:
    print("--- E-Commerce Payment System ---")
    cart = ShoppingCart()
    cart.add_item("Laptop", 999.99)
    cart.add_item("Mouse", 29.99)
    cart.add_item("Keyboard", 79.99)

    print("\n=== Payment with Credit Card ===")
    cart.set_payment_strategy(CreditCardPayment("1234-5678-9012-3456", "John Doe", "123", "12/25"))
    cart.checkout()

    print("\n=== Payment with PayPal ===")
    cart.set_payment_strategy(PayPalPayment("john.doe@email.com", "password123"))
    cart.checkout()

    print("\n=== Payment with Cryptocurrency ===")
    cart.set_payment_strategy(CryptoPayment("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa", "Bitcoin"))
    cart.checkout()

    print("\n=== Checkout without a payment method ===")
    cart.set_payment_strategy(None)
    cart.checkout()


def run_lists() -> None:
    print("\n--- Static list strategy ---")
    markdown = StaticTextProcessor(MarkdownListStrategy)
    markdown.append_list(ITEMS)
    print(markdown.text())
    html = StaticTextProcessor(HtmlListStrategy)
    html.append_list(ITEMS)
    print(html.text())

    print("--- Dynamic list strategy ---")
    processor = DynamicTextProcessor()
    processor.set_output_format(OutputFormat.MARKDOWN)
    processor.append_list(ITEMS)
    print(processor.text())
    processor.clear()
    processor.set_output_format(OutputFormat.HTML)
    processor.append_list(ITEMS)
    print(processor.text())

    try:
        processor.set_output_format("latex")
    except UnknownTypeError as e:
        print(f"Error: {e}")


def main() -> int:
    run_payments()
    run_lists()
    return 0


if __name__ == "__main__":
    sys.exit(main())
