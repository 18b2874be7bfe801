"""Iterator demo - bounded list cursors, traverser hook, library and matrix orders."""
import sys
from typing import Optional

from pattern_catalogue.config import DemoConfig, load_config
from pattern_catalogue.patterns.behavioral.iterator.library import Book, BookCollection, Matrix
from pattern_catalogue.patterns.behavioral.iterator.my_list import (
    MyList,
    MyListIterator,
    PrintMyListInt,
)


def run_my_list(size: int) -> None:
    items = MyList(size)
    for value in (1, 1, 3, 5):
        items.push_back(value)
    items.debug_list()

    items.pop_back()
    items.pop_back()
    items.debug_list()

    for _ in range(4):
        items.pop_back()
    items.debug_list()

    for value in (7, 9, 3, 100, 99, 77, 44):
        items.push_back(value)
    items.debug_list()

    print("debug by iterator...")
    cursor = MyListIterator(items)
    cursor.begin()
    while not cursor.is_done():
        print(cursor.current_item())
        cursor.next()

    print("debug by iterator ptr...")
    created = items.create_iterator()
    created.begin()
    while not created.is_done():
        print(created.current_item())
        created.next()

    print("traverser test...")
    PrintMyListInt(items, 5).traverse()


def run_library() -> None:
    print("\n=== Iterator Pattern Demo - Book Library ===\n")
    library = BookCollection()
    library.add(Book("The Great Gatsby", "F. Scott Fitzgerald", 1925, 12.99))
    library.add(Book("To Kill a Mockingbird", "Harper Lee", 1960, 14.50))
    library.add(Book("1984", "George Orwell", 1949, 13.25))
    library.add(Book("The Catcher in the Rye", "J.D. Salinger", 1951, 11.75))
    library.add(Book("Lord of the Flies", "William Golding", 1954, 10.99))
    print(f"Library contains {library.size()} books\n")

    print("=== Forward Iteration ===")
    for book in library.forward():
        print(f"  {book}")
    print()

    print("=== Reverse Iteration ===")
    for book in library.reverse():
        print(f"  {book}")
    print()

    print("=== Filtered Iteration (1940-1960) ===")
    for book in library.published_between(1940, 1960):
        print(f"  {book}")
    print()

    print("=== Matrix Iteration Example ===")
    matrix = Matrix(3, 4)
    matrix.print()
    print()

    print("Row-wise iteration:")
    print("".join(f"{value} " for value in matrix.row_wise()))
    print()
    print("Column-wise iteration:")
    print("".join(f"{value} " for value in matrix.column_wise()))
    print()

    print("=== Testing Reset Functionality ===")
    print("Forward iterator reset and iterate first 3 books:")
    for _, book in zip(range(3), library.forward()):
        print(f"  {book}")


def main(config: Optional[DemoConfig] = None) -> int:
    config = config or load_config().demos
    run_my_list(config.list_size)
    run_library()
    return 0


if __name__ == "__main__":
    sys.exit(main())
