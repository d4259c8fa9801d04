"""Aggregate statistics over collections of books."""

from __future__ import annotations

import heapq
import random
from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from bookdb.book import Book, Genre
from bookdb.database import BookDatabase

_ROW_TEMPLATE = "\033[4m|{:^20}|{:^20}|\033[0m"
_RATING_ROW_TEMPLATE = "\033[4m|{:^20}|{:^20.2f}|\033[0m"


def build_author_histogram(db: BookDatabase) -> dict[str, int]:
    """Count the books of each author, ordered by author name."""
    counts = Counter(book.author for book in db)
    return {author: counts[author] for author in sorted(counts)}


def calculate_genre_ratings(books: Iterable[Book]) -> dict[Genre, float]:
    """Average rating of each genre present, ordered by genre."""
    totals: dict[Genre, list[float]] = {}
    for book in books:
        entry = totals.setdefault(book.genre, [0.0, 0])
        entry[0] += book.rating
        entry[1] += 1
    return {
        genre: (total / count if count else 0.0)
        for genre, (total, count) in sorted(totals.items())
    }


def calculate_average_rating(books: Iterable[Book]) -> float:
    """Mean rating of the books, or 0.0 when there are none."""
    ratings = [book.rating for book in books]
    if not ratings:
        return 0.0
    total = 0.0
    for rating in ratings:
        total += rating
    return total / len(ratings)


def get_top_n_by(
    books: Iterable[Book], count: int, key: Callable[[Book], Any]
) -> list[Book]:
    """The first ``count`` books in the order given by ``key``."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return heapq.nsmallest(count, books, key=key)


def sample_random_books(
    books: Iterable[Book], count: int, rng: random.Random | None = None
) -> list[Book]:
    """Up to ``count`` distinct books chosen at random, in their original order."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    pool = list(books)
    generator = rng if rng is not None else random.Random()
    chosen = sorted(generator.sample(range(len(pool)), min(count, len(pool))))
    return [pool[position] for position in chosen]


def format_histogram(histogram: Mapping[str, int]) -> str:
    """Render an author histogram as an underlined table."""
    lines = [_ROW_TEMPLATE.format("AUTHOR", "BOOKS")]
    lines.extend(_ROW_TEMPLATE.format(author, count) for author, count in histogram.items())
    return "\n".join(lines) + "\n"


def format_genre_ratings(ratings: Mapping[Genre, float]) -> str:
    """Render average genre ratings as an underlined table."""
    lines = [_ROW_TEMPLATE.format("GENRE", "AVG RATING")]
    lines.extend(
        _RATING_ROW_TEMPLATE.format(str(genre), rating) for genre, rating in ratings.items()
    )
    return "\n".join(lines) + "\n"