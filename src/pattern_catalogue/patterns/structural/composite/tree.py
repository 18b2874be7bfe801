"""Component tree - leaves and composites sharing one interface."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Component(ABC):
    """
    Node of the tree.

    destroy() releases the node (and, for composites, everything below it) and
    returns the number of nodes released; a node already released counts zero.
    """

    def __init__(self, name: str):
        self.name = name
        self.destroyed = False

    @abstractmethod
    def draw(self, indent: int = 0) -> None:
        pass

    @abstractmethod
    def add(self, child: "Component") -> None:
        pass

    @abstractmethod
    def remove(self, child: "Component") -> None:
        pass

    def contains(self, node: "Component") -> bool:
        return node is self

    def destroy(self) -> int:
        if self.destroyed:
            return 0
        self.destroyed = True
        logger.debug("Component destroyed", name=self.name)
        return 1


class Leaf(Component):
    def draw(self, indent: int = 0) -> None:
        print(f"{'  ' * indent}- {self.name} (Leaf)")

    def add(self, child: Component) -> None:
        print(f"Cannot add child to leaf node: {self.name}")

    def remove(self, child: Component) -> None:
        print(f"Cannot remove child from leaf node: {self.name}")


class Composite(Component):
    """Owns its children; drawing and destruction recurse depth-first in insertion order."""

    def __init__(self, name: str):
        super().__init__(name)
        self.children: List[Component] = []

    def draw(self, indent: int = 0) -> None:
        print(f"{'  ' * indent}+ {self.name} (Composite)")
        for child in self.children:
            child.draw(indent + 1)

    def contains(self, node: Component) -> bool:
        return node is self or any(child.contains(node) for child in self.children)

    def add(self, child: Component) -> None:
        # The tree stays acyclic
        if child.contains(self):
            print(f"Cannot add '{child.name}' to composite '{self.name}': it would contain itself")
            logger.info("Rejected cyclic add", parent=self.name, child=child.name)
            return
        self.children.append(child)
        print(f"Added '{child.name}' to composite '{self.name}'")

    def remove(self, child: Component) -> None:
        # Identity, not name equality
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                print(f"Removed '{child.name}' from composite '{self.name}'")
                return
        print(f"Child '{child.name}' not found in composite '{self.name}'")

    def destroy(self) -> int:
        if self.destroyed:
            return 0
        released = sum(child.destroy() for child in self.children)
        self.children.clear()
        return released + super().destroy()
