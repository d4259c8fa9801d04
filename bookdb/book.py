"""Books, their genres and their one-line table rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

ROW_TEMPLATE = "\033[4m|{:^25}|{:^25}|{:^15}|{:^15}|{:^15}|{:^15}|\033[0m"


@total_ordering
class Genre(Enum):
    """Genre of a book; members order as they are declared."""

    FICTION = "Fiction"
    NON_FICTION = "NonFiction"
    SCI_FI = "SciFi"
    BIOGRAPHY = "Biography"
    MYSTERY = "Mystery"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Genre):
            return NotImplemented
        members = list(Genre)
        return members.index(self) < members.index(other)


def parse_genre(value: str | Genre) -> Genre:
    """Return the genre named by ``value``; a Genre is returned unchanged."""
    if isinstance(value, Genre):
        return value
    if not isinstance(value, str):
        raise TypeError(f"cannot convert {type(value).__name__} to Genre")
    try:
        return Genre(value)
    except ValueError:
        raise ValueError(f"unsupported genre: {value!r}") from None


@dataclass(frozen=True)
class Book:
    """A single book record; ``genre`` may be given by name."""

    author: str
    title: str
    year: int
    genre: Genre
    rating: float
    read_count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "genre", parse_genre(self.genre))

    def __str__(self) -> str:
        return format_book(self)


def _format_number(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_book(book: Book) -> str:
    """Render a book as one underlined table row."""
    return ROW_TEMPLATE.format(
        book.title,
        book.author,
        book.year,
        str(book.genre),
        _format_number(book.rating),
        book.read_count,
    )