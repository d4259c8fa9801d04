import pytest

from bookdb.benchmark import (
    BENCHMARK_NAMES,
    BenchmarkResult,
    BookRecord,
    format_results,
    generate_data,
    main,
    run_benchmarks,
)
from bookdb.book import Genre


def test_generate_data_length_and_determinism():
    first = generate_data(50, seed=7)
    second = generate_data(50, seed=7)
    assert len(first) == 50
    assert first == second


def test_generate_data_zero_is_empty():
    assert generate_data(0) == ()


def test_generate_data_negative_count_raises():
    with pytest.raises(ValueError):
        generate_data(-1)


def test_generate_data_covers_every_index_once():
    records = generate_data(200)
    assert sorted(r.author for r in records) == sorted(f"Author{i}" for i in range(200))
    for record in records:
        assert record.title == record.author.replace("Author", "Title")


def test_generate_data_field_ranges():
    for record in generate_data(300, seed=3):
        assert isinstance(record, BookRecord)
        assert 1920 <= record.year < 1989
        assert record.genre is Genre.UNKNOWN
        assert record.rating in {float(n) for n in range(10)}
        assert 0 <= record.read_count < 1000


def test_generate_data_is_shuffled():
    authors = [r.author for r in generate_data(100)]
    ordered = [f"Author{i}" for i in range(100)]
    assert sorted(authors) == sorted(ordered)
    displaced = sum(1 for got, want in zip(authors, ordered) if got != want)
    assert displaced > len(ordered) // 2


def test_benchmark_result_mean():
    result = BenchmarkResult("PushBack", 10, (0.000001, 0.000003))
    assert result.iterations == 2
    assert result.mean_microseconds == pytest.approx(2.0)


def test_benchmark_result_without_durations():
    assert BenchmarkResult("PushBack", 10, ()).mean_microseconds == 0.0


def test_run_benchmarks_covers_every_case_and_size():
    results = run_benchmarks([5, 20], iterations=2)
    assert len(results) == len(BENCHMARK_NAMES) * 2
    assert [r.name for r in results[::2]] == list(BENCHMARK_NAMES)
    assert {r.size for r in results} == {5, 20}
    for result in results:
        assert result.iterations == 2
        assert all(d >= 0 for d in result.durations)


def test_run_benchmarks_rejects_bad_iterations():
    with pytest.raises(ValueError):
        run_benchmarks([5], iterations=0)


def test_run_benchmarks_rejects_negative_size():
    with pytest.raises(ValueError):
        run_benchmarks([-3], iterations=1)


def test_format_results_lists_each_result():
    results = [
        BenchmarkResult("PushBack", 1000, (0.001,)),
        BenchmarkResult("GetTopNBy", 4096, (0.002, 0.004)),
    ]
    text = format_results(results)
    lines = text.splitlines()
    assert lines[0].startswith("Benchmark")
    assert "BM_PushBack/1000" in lines[2]
    assert "BM_GetTopNBy/4096" in lines[3]
    assert lines[3].rstrip().endswith("2")


def test_main_prints_table(capsys):
    assert main(["--sizes", "8", "--iterations", "1"]) == 0
    out = capsys.readouterr().out
    for name in BENCHMARK_NAMES:
        assert f"BM_{name}/8" in out


def test_main_rejects_zero_iterations():
    with pytest.raises(SystemExit) as info:
        main(["--sizes", "8", "--iterations", "0"])
    assert info.value.code == 2