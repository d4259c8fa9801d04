"""Command that demonstrates the book database on a small sample."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Sequence

from bookdb.book import Book, Genre, format_book
from bookdb.comparators import by_author, by_popularity, by_rating
from bookdb.database import BookDatabase, format_database
from bookdb.filters import (
    all_of,
    any_of,
    filter_books,
    genre_is,
    rating_above,
    year_between,
)
from bookdb.stats import (
    build_author_histogram,
    calculate_average_rating,
    calculate_genre_ratings,
    format_genre_ratings,
    format_histogram,
    get_top_n_by,
    sample_random_books,
)


def sample_database() -> BookDatabase:
    """A database holding ten well-known books."""
    db = BookDatabase()
    db.add("George Orwell", "1984", 1949, Genre.SCI_FI, 4.0, 190)
    db.add("George Orwell", "Animal Farm", 1945, Genre.FICTION, 4.4, 143)
    db.add("F. Scott Fitzgerald", "The Great Gatsby", 1925, Genre.FICTION, 4.5, 120)
    db.add("Harper Lee", "To Kill a Mockingbird", 1960, Genre.FICTION, 4.8, 156)
    db.add("Jane Austen", "Pride and Prejudice", 1813, Genre.FICTION, 4.7, 178)
    db.add("J.D. Salinger", "The Catcher in the Rye", 1951, Genre.FICTION, 4.3, 112)
    db.add("Aldous Huxley", "Brave New World", 1932, Genre.SCI_FI, 4.5, 98)
    db.add("Charlotte Brontë", "Jane Eyre", 1847, Genre.FICTION, 4.6, 110)
    db.add("J.R.R. Tolkien", "The Hobbit", 1937, Genre.FICTION, 4.9, 203)
    db.add("William Golding", "Lord of the Flies", 1954, Genre.FICTION, 4.2, 89)
    return db


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _rows(books: Iterable[Book]) -> str:
    return "".join(format_book(book) + "\n" for book in books)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a tour of the database features on the sample books."""
    parser = argparse.ArgumentParser(
        prog="bookdb", description="Show the book database working on sample data."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random sample")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    out = sys.stdout

    db = sample_database()
    out.write(f"Books: {format_database(db)}\n\n")

    db.sort(key=by_author)
    out.write(f"Books sorted by author: {format_database(db)}\n\n==================\n")

    db.sort(key=by_popularity)
    out.write(f"Books sorted by popularity: {format_database(db)}\n\n==================\n")

    out.write("Author histogram:\n" + format_histogram(build_author_histogram(db)))

    ratings = calculate_genre_ratings(db)
    out.write(f"\n\nAverage ratings by genres: \n{format_genre_ratings(ratings)}\n")

    average = calculate_average_rating(db)
    out.write(f"Average books rating in library: {_format_number(average)}\n")

    out.write("\n\nBooks from the 20th century WITH rating ≥ 4.5:\n")
    out.write(_rows(filter_books(db, all_of(year_between(1900, 1999), rating_above(4.5)))))

    out.write("\n\nBooks from the 20th century OR Genre is SciFi OR rating ≥ 4.5:\n")
    out.write(
        _rows(
            filter_books(
                db, any_of(genre_is("SciFi"), year_between(1900, 1999), rating_above(4.5))
            )
        )
    )

    out.write("\n\nTop 3 books by rating:\n")
    out.write(_rows(get_top_n_by(db, 3, by_rating)))

    out.write("\n\nRandom 3 books:\n")
    out.write(_rows(sample_random_books(db, 3, rng)))

    orwell = next((book for book in db if book.author == "George Orwell"), None)
    if orwell is not None:
        out.write(
            f"\n\nTransparent lookup by authors. Found Orwell's book: \n{format_book(orwell)}\n"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())