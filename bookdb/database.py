"""An in-memory collection of books that tracks their authors."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from bookdb.book import ROW_TEMPLATE, Book, Genre, format_book


class BookDatabase:
    """Ordered collection of books with the set of their authors."""

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._books: list[Book] = []
        self._authors: dict[str, None] = {}
        for book in books:
            self.append(book)

    def append(self, book: Book) -> None:
        """Add a book to the end of the collection."""
        if not isinstance(book, Book):
            raise TypeError(f"expected Book, got {type(book).__name__}")
        self._books.append(book)
        self._authors.setdefault(book.author, None)

    def add(
        self,
        author: str,
        title: str,
        year: int,
        genre: Genre | str,
        rating: float,
        read_count: int,
    ) -> Book:
        """Build a book from its fields, append it and return it."""
        book = Book(author, title, year, genre, rating, read_count)
        self.append(book)
        return book

    def clear(self) -> None:
        self._books.clear()
        self._authors.clear()

    @property
    def books(self) -> tuple[Book, ...]:
        return tuple(self._books)

    @property
    def authors(self) -> frozenset[str]:
        return frozenset(self._authors)

    def sort(self, key: Callable[[Book], Any] | None = None, reverse: bool = False) -> None:
        """Sort the books in place."""
        self._books.sort(key=key, reverse=reverse)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Put the books in random order."""
        (rng if rng is not None else random.Random()).shuffle(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __reversed__(self) -> Iterator[Book]:
        return reversed(self._books)

    def __getitem__(self, index: int | slice) -> Book | list[Book]:
        return self._books[index]

    def __contains__(self, book: object) -> bool:
        return book in self._books

    def __repr__(self) -> str:
        return f"BookDatabase({self._books!r})"

    def __str__(self) -> str:
        return format_database(self)


def format_database(db: BookDatabase) -> str:
    """Render the books as a table followed by the list of authors."""
    lines = [
        f"BookDatabase (size = {len(db)}): ",
        ROW_TEMPLATE.format("TITLE", "AUTHOR", "YEAR", "GENRE", "RATING", "READS"),
    ]
    lines.extend(format_book(book) for book in db)
    lines.append("")
    lines.append("\033[4m|{:^25}|\033[0m".format("AUTHORS:"))
    lines.extend("\033[4m|{:^25}|\033[0m".format(author) for author in sorted(db.authors))
    return "\n".join(lines) + "\n"