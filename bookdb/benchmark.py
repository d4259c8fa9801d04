"""Timing of the database operations on generated book collections."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from bookdb.book import Book, Genre
from bookdb.comparators import by_author, by_popularity, by_rating
from bookdb.database import BookDatabase
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
    get_top_n_by,
    sample_random_books,
)

DEFAULT_SEED = 42
DEFAULT_ITERATIONS = 10
DEFAULT_SIZES = (1000, 4096, 32768, 100000)
SHUFFLE_SEED = 42


@dataclass(frozen=True)
class BookRecord:
    """Raw fields of one generated book."""

    author: str
    title: str
    year: int
    genre: Genre
    rating: float
    read_count: int


@dataclass(frozen=True)
class BenchmarkResult:
    """Timings of one operation on one collection size."""

    name: str
    size: int
    durations: tuple[float, ...]

    @property
    def iterations(self) -> int:
        return len(self.durations)

    @property
    def mean_microseconds(self) -> float:
        if not self.durations:
            return 0.0
        return sum(self.durations) / len(self.durations) * 1e6


@lru_cache(maxsize=None)
def _generate(count: int, seed: int) -> tuple[BookRecord, ...]:
    rng = random.Random(seed)
    records = [
        BookRecord(
            author=f"Author{i}",
            title=f"Title{i}",
            year=1900 + rng.randrange(69) + 20,
            genre=Genre.UNKNOWN,
            rating=float(rng.randrange(10)),
            read_count=rng.randrange(1000),
        )
        for i in range(count)
    ]
    # Insertion order is randomised so that sorting has real work to do.
    random.Random(SHUFFLE_SEED).shuffle(records)
    return tuple(records)


def generate_data(count: int, seed: int = DEFAULT_SEED) -> tuple[BookRecord, ...]:
    """Deterministic shuffled records ``Author<i>``/``Title<i>`` for ``i < count``."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return _generate(count, seed)


def _to_book(record: BookRecord) -> Book:
    return Book(
        record.author,
        record.title,
        record.year,
        record.genre,
        record.rating,
        record.read_count,
    )


def _filled(records: Iterable[BookRecord]) -> BookDatabase:
    db = BookDatabase()
    for r in records:
        db.add(r.author, r.title, r.year, r.genre, r.rating, r.read_count)
    return db


def _time(
    iterations: int,
    action: Callable[[], Any],
    reset: Callable[[], None] | None = None,
) -> tuple[float, ...]:
    durations = []
    for _ in range(iterations):
        start = time.perf_counter()
        action()
        durations.append(time.perf_counter() - start)
        if reset is not None:
            reset()
    return tuple(durations)


def _push_back(records: Sequence[BookRecord], iterations: int) -> tuple[float, ...]:
    def action() -> None:
        db = BookDatabase()
        for record in records:
            db.append(_to_book(record))

    return _time(iterations, action)


def _emplace_back(records: Sequence[BookRecord], iterations: int) -> tuple[float, ...]:
    return _time(iterations, lambda: _filled(records))


def _sorting(key: Callable[[Book], Any]) -> Callable[[Sequence[BookRecord], int], tuple[float, ...]]:
    def run(records: Sequence[BookRecord], iterations: int) -> tuple[float, ...]:
        db = _filled(records)
        return _time(
            iterations,
            lambda: db.sort(key=key),
            lambda: db.shuffle(random.Random(SHUFFLE_SEED)),
        )

    return run


def _on_database(
    operation: Callable[[BookDatabase], Any],
) -> Callable[[Sequence[BookRecord], int], tuple[float, ...]]:
    def run(records: Sequence[BookRecord], iterations: int) -> tuple[float, ...]:
        db = _filled(records)
        return _time(iterations, lambda: operation(db))

    return run


_CASES: tuple[tuple[str, Callable[[Sequence[BookRecord], int], tuple[float, ...]]], ...] = (
    ("PushBack", _push_back),
    ("EmplaceBack", _emplace_back),
    ("SortLessByAuthor", _sorting(by_author)),
    ("SortLessByPopularity", _sorting(by_popularity)),
    ("SortLessByRating", _sorting(by_rating)),
    ("BuildAuthorHistogramFlat", _on_database(build_author_histogram)),
    ("CalculateGenreRatings", _on_database(calculate_genre_ratings)),
    ("CalculateAverageRating", _on_database(calculate_average_rating)),
    (
        "FilterBooksAllOf",
        _on_database(
            lambda db: filter_books(db, all_of(year_between(1900, 1999), rating_above(4.5)))
        ),
    ),
    (
        "FilterBooksAnyOf",
        _on_database(
            lambda db: filter_books(
                db,
                any_of(genre_is("SciFi"), year_between(1900, 1999), rating_above(4.5)),
            )
        ),
    ),
    ("GetTopNBy", _on_database(lambda db: get_top_n_by(db, 10, by_rating))),
    ("SampleRandomBooks", _on_database(lambda db: sample_random_books(db, 10))),
)

BENCHMARK_NAMES = tuple(name for name, _ in _CASES)


def run_benchmarks(
    sizes: Iterable[int] = DEFAULT_SIZES, iterations: int = DEFAULT_ITERATIONS
) -> list[BenchmarkResult]:
    """Time every operation on every size, grouped by operation."""
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    sizes = tuple(sizes)
    data = {size: generate_data(size) for size in sizes}
    return [
        BenchmarkResult(name, size, run(data[size], iterations))
        for name, run in _CASES
        for size in sizes
    ]


def format_results(results: Iterable[BenchmarkResult]) -> str:
    """Render results as a plain text table, mean time in microseconds."""
    rows = [(f"BM_{r.name}/{r.size}", f"{r.mean_microseconds:.1f} us", str(r.iterations)) for r in results]
    header = ("Benchmark", "Time", "Iterations")
    widths = [max(len(row[col]) for row in (header, *rows)) for col in range(3)]
    lines = [
        f"{name:<{widths[0]}}  {timing:>{widths[1]}}  {count:>{widths[2]}}"
        for name, timing, count in (header, *rows)
    ]
    lines.insert(1, "-" * (sum(widths) + 4))
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmarks and print their table."""
    parser = argparse.ArgumentParser(
        prog="bookdb-benchmark", description="Time the book database operations."
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=list(DEFAULT_SIZES),
        help="collection sizes to measure",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help="timed runs of each operation",
    )
    args = parser.parse_args(argv)
    try:
        results = run_benchmarks(args.sizes, args.iterations)
    except ValueError as error:
        parser.error(str(error))
    sys.stdout.write(format_results(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())