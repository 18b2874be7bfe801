"""Static table of runnable demonstrations."""
import importlib
from typing import Callable, Dict, List, NamedTuple, Optional

from pattern_catalogue.domain.base.exceptions import UnknownTypeError

FAMILIES = ("creational", "structural", "behavioral", "architectural")


class DemoEntry(NamedTuple):
    name: str
    family: str
    description: str
    configurable: bool = False

    @property
    def module(self) -> str:
        return f"pattern_catalogue.patterns.{self.family}.{self.name}.demo"


DEMOS: List[DemoEntry] = [
    DemoEntry("factory", "creational", "Shape and vehicle factories with runtime registration"),
    DemoEntry("abstract_factory", "creational", "Per-platform widget families"),
    DemoEntry("builder", "creational", "Fluent computer builder and director"),
    DemoEntry("prototype", "creational", "Cloneable shapes and a prototype registry"),
    DemoEntry("singleton", "creational", "Thread-safe database connection and loggers", True),
    DemoEntry("adapter", "structural", "Media player, payment and rectangle adapters"),
    DemoEntry("bridge", "structural", "Shapes drawn through swappable renderers"),
    DemoEntry("composite", "structural", "File system and graphics trees"),
    DemoEntry("decorator", "structural", "Coffee add-ons and text styling"),
    DemoEntry("facade", "structural", "Computer start-up and shutdown sequencing"),
    DemoEntry("flyweight", "structural", "Shared particle types in a game world"),
    DemoEntry("proxy", "structural", "Lazy, access-controlled image loading"),
    DemoEntry("chain_of_responsibility", "behavioral", "Payment, help, log and support chains"),
    DemoEntry("command", "behavioral", "Remote control with undo and history", True),
    DemoEntry("interpreter", "behavioral", "Arithmetic parser, boolean rules and a tiny program"),
    DemoEntry("iterator", "behavioral", "List cursors, traversers, library and matrix orders", True),
    DemoEntry("mediator", "behavioral", "Colleague broadcast and a login dialog"),
    DemoEntry("memento", "behavioral", "Snapshots, editor undo/redo and game checkpoints"),
    DemoEntry("mvc", "behavioral", "User records with swappable views"),
    DemoEntry("null_object", "behavioral", "Guest customers and a silent logger"),
    DemoEntry("observer", "behavioral", "Weather station notifications", True),
    DemoEntry("state", "behavioral", "Vending machine and traffic light states"),
    DemoEntry("strategy", "behavioral", "Payment methods and list formats"),
    DemoEntry("template_method", "behavioral", "Data pipelines, game levels and recipes"),
    DemoEntry("visitor", "behavioral", "Document printers and graphics visitors"),
    DemoEntry("dependency_injection", "architectural", "Manual wiring, builder, factory and an auto-wiring container"),
    DemoEntry("event_sourcing", "architectural", "Bank accounts rebuilt from an event log"),
    DemoEntry("repository", "architectural", "Product service over memory and JSON file storage"),
]

_BY_NAME: Dict[str, DemoEntry] = {entry.name: entry for entry in DEMOS}


def find_demo(name: str) -> DemoEntry:
    """
    Look up a demonstration by name; dashes and underscores are interchangeable.

    Raises:
        UnknownTypeError: If no demonstration has that name
    """
    entry = _BY_NAME.get(name.replace("-", "_").lower())
    if entry is None:
        raise UnknownTypeError(f"Unknown demo: {name}", name)
    return entry


def list_demos(family: Optional[str] = None) -> List[DemoEntry]:
    return [entry for entry in DEMOS if family is None or entry.family == family]


def load_main(entry: DemoEntry) -> Callable[..., int]:
    return importlib.import_module(entry.module).main
