"""Book library and matrix aggregates, each offering several traversal orders."""
from dataclasses import dataclass
from typing import Iterator, List

from pattern_catalogue.domain.base.exceptions import InvalidParameterError


@dataclass(frozen=True)
class Book:
    title: str
    author: str
    year: int
    price: float

    def __str__(self) -> str:
        return f'"{self.title}" by {self.author} ({self.year}) - ${self.price:.2f}'


class BookCollection:
    """Aggregate of books; every iterator returned is independent of the others."""

    def __init__(self):
        self._books: List[Book] = []

    def add(self, book: Book) -> None:
        self._books.append(book)

    def size(self) -> int:
        return len(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return self.forward()

    def forward(self) -> Iterator[Book]:
        for book in self._books:
            yield book

    def reverse(self) -> Iterator[Book]:
        for index in range(len(self._books) - 1, -1, -1):
            yield self._books[index]

    def published_between(self, start_year: int, end_year: int) -> Iterator[Book]:
        """Yield books whose year lies in ``[start_year, end_year]``."""
        if start_year > end_year:
            raise InvalidParameterError(
                f"Invalid year range: {start_year}-{end_year}",
                {"start_year": start_year, "end_year": end_year},
            )
        return (book for book in self._books if start_year <= book.year <= end_year)


class Matrix:
    """Rows x cols grid filled with 1..rows*cols in row-major order."""

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise InvalidParameterError(
                f"Matrix dimensions must be positive: {rows}x{cols}",
                {"rows": rows, "cols": cols},
            )
        self.rows = rows
        self.cols = cols
        self._data = [[r * cols + c + 1 for c in range(cols)] for r in range(rows)]

    def at(self, row: int, col: int) -> int:
        return self._data[row][col]

    def row_wise(self) -> Iterator[int]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield self._data[row][col]

    def column_wise(self) -> Iterator[int]:
        for col in range(self.cols):
            for row in range(self.rows):
                yield self._data[row][col]

    def print(self) -> None:
        print(f"Matrix {self.rows}x{self.cols}:")
        for row in self._data:
            print("  " + "".join(f"{value:3d} " for value in row))
