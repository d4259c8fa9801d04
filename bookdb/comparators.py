"""Sort keys for books."""

from __future__ import annotations

from bookdb.book import Book


def by_author(book: Book) -> str:
    """Key ordering books by author name."""
    return book.author


def by_popularity(book: Book) -> int:
    """Key ordering the most read books first."""
    return -book.read_count


def by_rating(book: Book) -> float:
    """Key ordering the best rated books first."""
    return -book.rating