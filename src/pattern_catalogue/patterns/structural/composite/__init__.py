"""Composite pattern - uniform treatment of leaves and containers in a tree."""
from .tree import Component, Composite, Leaf

__all__ = ["Component", "Composite", "Leaf"]
