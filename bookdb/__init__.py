"""In-memory book catalogue with sorting, filtering, rating statistics and benchmarks."""

__version__ = "1.0.0"