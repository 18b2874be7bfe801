"""Fixed-capacity list with an external iterator and a hook-driven traverser."""
from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger


class MyList:
    """Bounded list backed by ``size`` zero-initialised slots."""

    def __init__(self, size: int = 100):
        self._logger = get_logger(__name__)
        self._size = size
        self._count = 0
        self._items: List[Any] = [0] * size
        print(f"MyList() : mSize({size})")

    @property
    def size(self) -> int:
        return self._size

    def count(self) -> int:
        return self._count

    def push_back(self, item: Any) -> bool:
        if self._count >= self._size:
            print("count is over size")
            return False
        self._items[self._count] = item
        self._count += 1
        print(f"pushed {item} at {self._count - 1}")
        return True

    def pop_back(self) -> Optional[Any]:
        if self._count <= 0:
            print("no item in list")
            return None
        self._count -= 1
        item = self._items[self._count]
        print(f"poped {item} at {self._count}")
        return item

    def get(self, pos: int) -> Optional[Any]:
        """Return the item at ``pos``.

        Positions past the live count are reported; slots inside the backing
        storage still return their stale value, anything beyond returns None.
        """
        if pos >= self._count or pos < 0:
            print("wrong access, handle")
            self._logger.debug(f"Out of range access at {pos} (count={self._count})")
            if pos < 0 or pos >= self._size:
                return None
        return self._items[pos]

    def create_iterator(self) -> "MyListIterator":
        return MyListIterator(self)

    def debug_list(self) -> None:
        print("\ndebug list...")
        print("".join(f" {self._items[i]}" for i in range(self._count)), end="")
        print("\n")

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        cursor = self.create_iterator()
        cursor.begin()
        while not cursor.is_done():
            yield cursor.current_item()
            cursor.next()


class MyListIterator:
    """Cursor over a MyList; the client drives the traversal."""

    def __init__(self, my_list: MyList):
        self._list = my_list
        self._current = 0

    def begin(self) -> None:
        self._current = 0

    def end(self) -> None:
        self._current = self._list.count()

    def next(self) -> None:
        if self.is_done():
            return
        self._current += 1

    def is_done(self) -> bool:
        return self._current >= self._list.count()

    def current_item(self) -> Optional[Any]:
        return self._list.get(self._current)


class ListTraverser(ABC):
    """Internal traversal; ``process_item`` returning False stops the walk."""

    def __init__(self, my_list: MyList):
        self._iterator = my_list.create_iterator()

    def traverse(self) -> bool:
        result = False
        self._iterator.begin()
        while not self._iterator.is_done():
            result = self.process_item(self._iterator.current_item())
            if not result:
                break
            self._iterator.next()
        return result

    @abstractmethod
    def process_item(self, item: Any) -> bool:
        pass


class PrintMyListInt(ListTraverser):
    """Prints at most ``total`` items."""

    def __init__(self, my_list: MyList, total: int):
        super().__init__(my_list)
        self.total = total
        self.visited = 0

    def process_item(self, item: Any) -> bool:
        if self.visited >= self.total:
            return False
        self.visited += 1
        print(f"traversing ... {item}")
        return self.visited < self.total
