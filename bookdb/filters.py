"""Book predicates and their combinators."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from bookdb.book import Book, Genre, parse_genre

Predicate = Callable[[Book], bool]


def genre_is(genre: Genre | str) -> Predicate:
    """Match books of the given genre."""
    wanted = parse_genre(genre)
    return lambda book: book.genre is wanted


def year_between(start: int, stop: int) -> Predicate:
    """Match books published in ``[start, stop)``."""
    return lambda book: start <= book.year < stop


def rating_above(threshold: float) -> Predicate:
    """Match books rated strictly above ``threshold``."""
    return lambda book: book.rating > threshold


def all_of(*args: Predicate) -> Predicate:
    """Match books that every predicate matches."""
    return lambda book: all(pred(book) for pred in args)


def any_of(*args: Predicate) -> Predicate:
    """Match books that at least one predicate matches."""
    return lambda book: any(pred(book) for pred in args)


def filter_books(books: Iterable[Book], predicate: Predicate) -> list[Book]:
    """Return the matching books in their original order."""
    return [book for book in books if predicate(book)]