"""Creational patterns - Factory, Abstract Factory, Builder, Prototype, Singleton."""
