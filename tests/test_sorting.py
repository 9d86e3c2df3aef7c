import random

import pytest

from algolab.sorting import (
    benchmark,
    generate_numbers,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    read_numbers,
    selection_sort,
    time_sort,
    write_numbers,
)


@pytest.mark.parametrize("seed", range(4))
def test_sorts_agree_with_builtin(seed):
    rng = random.Random(seed)
    data = [rng.randrange(-50, 50) for _ in range(rng.randrange(0, 120))]
    expected = sorted(data)
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_sorts_do_not_modify_input():
    data = [5, 3, 9, 1, 3]
    assert merge_sort(data) == [1, 3, 3, 5, 9]
    assert quick_sort(data) == [1, 3, 3, 5, 9]
    assert insertion_sort(data) == [1, 3, 3, 5, 9]
    assert selection_sort(data) == [1, 3, 3, 5, 9]
    assert data == [5, 3, 9, 1, 3]


@pytest.mark.parametrize("data", [[], [7], [2, 2, 2], list(range(30)), list(range(30, 0, -1))])
def test_sorts_edge_inputs(data):
    expected = sorted(data)
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_quick_sort_handles_long_sorted_input():
    data = list(range(3000))
    assert quick_sort(data[::-1]) == data


def test_generate_numbers_is_bounded_and_reproducible():
    first = generate_numbers(500, 10, random.Random(3))
    second = generate_numbers(500, 10, random.Random(3))
    assert first == second
    assert len(first) == 500
    assert all(0 <= n < 10 for n in first)


def test_numbers_round_trip(tmp_path):
    path = tmp_path / "numbers.txt"
    numbers = generate_numbers(200, 1000, random.Random(1))
    write_numbers(path, numbers)
    assert read_numbers(path, 200) == numbers
    assert read_numbers(path, 50) == numbers[:50]


def test_read_numbers_too_few(tmp_path):
    path = tmp_path / "numbers.txt"
    write_numbers(path, [1, 2, 3])
    with pytest.raises(ValueError):
        read_numbers(path, 4)


def test_time_sort_reports_milliseconds():
    assert time_sort(merge_sort, list(range(100))) >= 0


def test_benchmark_block_sizes():
    rows = list(benchmark(list(range(250)), [merge_sort, quick_sort], 100))
    assert [row[0] for row in rows] == [100, 200]
    assert all(len(row) == 3 and min(row[1:]) >= 0 for row in rows)


def test_benchmark_rejects_bad_step():
    with pytest.raises(ValueError):
        list(benchmark([1, 2], [merge_sort], 0))


def test_main_writes_csv(tmp_path, capsys):
    output = tmp_path / "times.csv"
    numbers_file = tmp_path / "numbers.txt"
    code = main([
        "--algorithms", "insertion-selection",
        "--total", "300",
        "--step", "100",
        "--numbers-file", str(numbers_file),
        "--output", str(output),
        "--seed", "5",
    ])
    assert code == 0
    lines = output.read_text().splitlines()
    assert lines[0] == "Block Size,Insertion Sort Time (ms),Selection Sort Time (ms)"
    assert [line.split(",")[0] for line in lines[1:]] == ["100", "200", "300"]
    assert len(read_numbers(numbers_file, 300)) == 300
    assert "Experiment completed successfully." in capsys.readouterr().out