"""Strategy pattern - interchangeable algorithms behind one interface."""
from .lists import (
    DynamicTextProcessor,
    HtmlListStrategy,
    ListStrategy,
    MarkdownListStrategy,
    OutputFormat,
    StaticTextProcessor,
)
from .payment import (
    CreditCardPayment,
    CryptoPayment,
    PaymentStrategy,
    PayPalPayment,
    ShoppingCart,
)

__all__ = [
    "CreditCardPayment",
    "CryptoPayment",
    "DynamicTextProcessor",
    "HtmlListStrategy",
    "ListStrategy",
    "MarkdownListStrategy",
    "OutputFormat",
    "PaymentStrategy",
    "PayPalPayment",
    "ShoppingCart",
    "StaticTextProcessor",
]
