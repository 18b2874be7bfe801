"""Iterator pattern - external cursors over aggregates that hide their storage."""
from .library import Book, BookCollection, Matrix
from .my_list import ListTraverser, MyList, MyListIterator, PrintMyListInt

__all__ = [
    "Book",
    "BookCollection",
    "ListTraverser",
    "Matrix",
    "MyList",
    "MyListIterator",
    "PrintMyListInt",
]
