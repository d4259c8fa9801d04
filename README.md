# bookdb

An in-memory catalogue of books. Each entry records its author, title, year,
genre, rating and how many times it has been read. The catalogue can be
sorted, filtered and summarised with a few statistics.

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install .[test]
```

## Command line

```
bookdb [--seed N]
```

This loads a sample catalogue of ten books and prints:

- the catalogue as a table, followed by its authors
- the catalogue sorted by author, then by popularity
- an author histogram
- the average rating for each genre
- the overall average rating
- the books from 1900 to 1998 rated above 4.5
- the books that are SciFi, from 1900 to 1998, or rated above 4.5
- the three best-rated books
- three books picked at random (`--seed` makes the pick repeatable)
- the first book found by George Orwell

Tables are drawn with terminal underline escape codes.

```
bookdb-benchmark [--sizes N [N ...]] [--iterations N]
```

This times the main operations (appending, sorting, histogram, ratings,
filters, top-N and random sampling) on generated catalogues of each size
(by default 1000, 4096, 32768 and 100000 books, 10 timed runs each) and prints
a table with the mean time in microseconds.

## Library use

```python
from bookdb.book import Book, Genre, format_book
from bookdb.database import BookDatabase, format_database
from bookdb.comparators import by_author, by_popularity, by_rating
from bookdb.filters import all_of, any_of, genre_is, rating_above, year_between, filter_books
from bookdb.stats import (
    build_author_histogram,
    calculate_average_rating,
    calculate_genre_ratings,
    get_top_n_by,
    sample_random_books,
)

db = BookDatabase()
db.add("George Orwell", "1984", 1949, Genre.SCI_FI, 4.0, 190)
db.add("Harper Lee", "To Kill a Mockingbird", 1960, "Fiction", 4.8, 156)
db.append(Book("Jane Austen", "Pride and Prejudice", 1813, Genre.FICTION, 4.7, 178))

db.sort(key=by_author)
print(format_database(db))

hits = filter_books(db, all_of(year_between(1900, 1999), rating_above(4.5)))
print(calculate_average_rating(db))
print(calculate_genre_ratings(db))
print(build_author_histogram(db))
print(get_top_n_by(db, 1, by_rating))
print(sample_random_books(db, 2))
```

### Books

`Book` is a frozen dataclass with the fields `author`, `title`, `year`,
`genre`, `rating` and `read_count`. A genre can be given as a `Genre` member
(`FICTION`, `NON_FICTION`, `SCI_FI`, `BIOGRAPHY`, `MYSTERY`, `UNKNOWN`) or by
its name: `Fiction`, `NonFiction`, `SciFi`, `Biography`, `Mystery` or
`Unknown`. `parse_genre` does the conversion; any other name raises
`ValueError`. `format_book` renders a book as one table row.

### The database

`BookDatabase` keeps books in insertion order and tracks the set of their
authors. It supports `append`, `add` (builds and returns the book), `clear`,
`sort(key=..., reverse=...)`, `shuffle(rng)`, `len()`, iteration, `reversed()`,
indexing and `in`. The `books` property gives a tuple of the books and
`authors` a frozenset of author names. `format_database` renders the books and
the sorted author list as a table.

### Sorting, filtering and statistics

- `by_author`, `by_popularity` and `by_rating` are sort keys; the last two put
  the most read and the best rated books first.
- `year_between(start, stop)` matches years from `start` up to but not
  including `stop`. `rating_above(threshold)` matches ratings strictly greater
  than the threshold. `genre_is` matches one genre. `all_of` and `any_of`
  combine predicates, and `filter_books` keeps the matching books in order.
- `build_author_histogram` counts books per author, ordered by name.
- `calculate_genre_ratings` gives the mean rating of each genre present.
- `calculate_average_rating` gives the mean rating, or `0.0` for no books.
- `get_top_n_by(books, count, key)` returns the first `count` books by `key`.
- `sample_random_books(books, count, rng)` picks up to `count` distinct books,
  kept in their original order.
- `format_histogram` and `format_genre_ratings` render those results as tables.

Negative counts raise `ValueError`.

## What it does not do

The catalogue lives only in memory. There is no storage: books cannot be
saved to or loaded from a file, and nothing is kept between runs.