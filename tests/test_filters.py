import pytest

from bookdb.book import Book, Genre
from bookdb.database import BookDatabase
from bookdb.filters import (
    all_of,
    any_of,
    filter_books,
    genre_is,
    rating_above,
    year_between,
)


def sample_books():
    return [
        Book("George Orwell", "1984", 1949, Genre.SCI_FI, 4.0, 190),
        Book("George Orwell", "Animal Farm", 1945, Genre.FICTION, 4.4, 143),
        Book("F. Scott Fitzgerald", "The Great Gatsby", 1925, Genre.FICTION, 4.5, 120),
        Book("Harper Lee", "To Kill a Mockingbird", 1960, Genre.FICTION, 4.8, 156),
        Book("Jane Austen", "Pride and Prejudice", 1813, Genre.FICTION, 4.7, 178),
        Book("J.D. Salinger", "The Catcher in the Rye", 1951, Genre.FICTION, 4.3, 112),
        Book("Aldous Huxley", "Brave New World", 1932, Genre.SCI_FI, 4.5, 98),
        Book("Charlotte Brontë", "Jane Eyre", 1847, Genre.FICTION, 4.6, 110),
        Book("J.R.R. Tolkien", "The Hobbit", 1937, Genre.FICTION, 4.9, 203),
        Book("William Golding", "Lord of the Flies", 1954, Genre.FICTION, 4.2, 89),
    ]


@pytest.fixture
def db():
    return BookDatabase(sample_books())


def twentieth_century_top():
    return all_of(year_between(1900, 1999), rating_above(4.5))


def test_filter_all_of(db):
    filtered = filter_books(db, twentieth_century_top())
    assert all(b.rating > 4.5 and 1900 < b.year < 1999 for b in filtered)
    assert [b.title for b in filtered] == ["To Kill a Mockingbird", "The Hobbit"]


def test_filter_any_of(db):
    pred = any_of(genre_is("SciFi"), year_between(1900, 1999), rating_above(4.5))
    assert filter_books(db, pred) == sample_books()


def test_filter_empty():
    assert filter_books(BookDatabase(), twentieth_century_top()) == []


def test_filter_bad_data():
    db = BookDatabase(
        [
            Book("", "", -10, Genre.UNKNOWN, -999.0, 0),
            Book("", "", -1, Genre.UNKNOWN, -10000000000.0, 0),
        ]
    )
    assert filter_books(db, twentieth_century_top()) == []


def test_genre_is(db):
    titles = [b.title for b in filter_books(db, genre_is(Genre.SCI_FI))]
    assert titles == ["1984", "Brave New World"]


def test_genre_is_unknown_name():
    with pytest.raises(ValueError):
        genre_is("Poetry")


def test_year_between_is_half_open():
    pred = year_between(1900, 1999)
    book = Book("A", "T", 1900, Genre.FICTION, 1.0, 0)
    later = Book("A", "T", 1999, Genre.FICTION, 1.0, 0)
    assert pred(book) is True
    assert pred(later) is False


def test_rating_above_is_strict():
    pred = rating_above(4.5)
    assert pred(Book("A", "T", 1, Genre.FICTION, 4.5, 0)) is False
    assert pred(Book("A", "T", 1, Genre.FICTION, 4.6, 0)) is True


def test_empty_combinators():
    book = Book("A", "T", 1, Genre.FICTION, 1.0, 0)
    assert all_of()(book) is True
    assert any_of()(book) is False