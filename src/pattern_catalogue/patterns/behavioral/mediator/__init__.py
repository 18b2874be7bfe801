"""Mediator pattern - colleagues talk through a hub instead of to each other."""
from .colleagues import Colleague, ConcreteMediator, Mediator
from .dialog import AuthDialog, Button, CheckBox, Component, ListBox, TextBox

__all__ = [
    "AuthDialog",
    "Button",
    "CheckBox",
    "Colleague",
    "Component",
    "ConcreteMediator",
    "ListBox",
    "Mediator",
    "TextBox",
]
