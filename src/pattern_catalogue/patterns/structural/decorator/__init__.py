"""Decorator pattern - behaviour stacked onto objects one wrapper at a time."""
from .coffee import Coffee, CoffeeDecorator, Milk, SimpleCoffee, Sugar, Whip
from .text import Bold, Color, Italic, PlainText, TextComponent, Underline

__all__ = [
    "Bold",
    "Coffee",
    "CoffeeDecorator",
    "Color",
    "Italic",
    "Milk",
    "PlainText",
    "SimpleCoffee",
    "Sugar",
    "TextComponent",
    "Underline",
    "Whip",
]
