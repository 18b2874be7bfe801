"""Decorator demo - coffee orders and styled text."""
import sys

from pattern_catalogue.patterns.structural.decorator.coffee import Milk, SimpleCoffee, Sugar, Whip
from pattern_catalogue.patterns.structural.decorator.text import (
    Bold,
    Color,
    Italic,
    PlainText,
    Underline,
)


def main() -> int:
    print("--- Coffee Shop with Decorator Pattern ---")
    orders = [
        SimpleCoffee(),
        Milk(SimpleCoffee()),
        Sugar(Milk(SimpleCoffee())),
        Whip(Sugar(Milk(SimpleCoffee()))),
    ]
    for coffee in orders:
        print(coffee)

    print("\n--- Text Formatting ---")
    plain = PlainText("Hello World")
    print(f"Plain: {plain.text()} (length: {plain.length()})")
    bold = Bold(PlainText("Hello World"))
    print(f"Bold: {bold.text()} (length: {bold.length()})")
    styled = Color(Underline(Italic(Bold(PlainText("Styled Text")))), "red")
    print(f"Styled: {styled.text()}")
    print(f"Length: {styled.length()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
