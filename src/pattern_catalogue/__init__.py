"""Pattern Catalogue - Root Package.

A catalogue of classical object-oriented design patterns, each implemented as a
small, self-contained demonstration with a runnable driver.

Key Components:
- patterns.creational: Factory, Abstract Factory, Builder, Prototype, Singleton
- patterns.structural: Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy
- patterns.behavioral: Chain of Responsibility, Command, Iterator, Mediator,
  Memento, MVC, Null Object, Observer, State, Strategy, Visitor
- config: Configuration defaults, schemas and loading
- infrastructure.logging: Structured logging setup
"""

from pattern_catalogue._package import PACKAGE_NAME, __version__

__all__ = ["PACKAGE_NAME", "__version__"]
