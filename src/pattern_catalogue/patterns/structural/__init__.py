"""Structural patterns - Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy."""
