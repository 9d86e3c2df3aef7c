import csv
import functools
import random

import pytest

from algolab.matrix_chain import (
    chain_multiply,
    matrix_chain_order,
    multiply,
    multiply_strassen,
    optimal_parenthesization,
    random_binary_matrix,
    random_dimensions,
    save_matrix_csv,
    strassen,
    main,
)

TEXTBOOK_DIMS = [30, 35, 15, 5, 10, 20, 25]


def _random_int_matrix(rows, cols, rng):
    return [[rng.randint(-5, 5) for _ in range(cols)] for _ in range(rows)]


def test_textbook_chain_cost():
    cost, _ = matrix_chain_order(TEXTBOOK_DIMS)
    assert cost[0][5] == 15125


def test_textbook_chain_parenthesization():
    _, splits = matrix_chain_order(TEXTBOOK_DIMS)
    assert optimal_parenthesization(splits, 0, 5) == "((M1 x (M2 x M3)) x ((M4 x M5) x M6))"


def test_single_matrix_chain():
    cost, splits = matrix_chain_order([4, 7])
    assert cost == [[0]]
    assert optimal_parenthesization(splits, 0, 0) == "M1"


def test_diagonal_and_lower_triangle_are_zero():
    cost, _ = matrix_chain_order(TEXTBOOK_DIMS)
    for i, row in enumerate(cost):
        assert all(value == 0 for value in row[: i + 1])


def test_optimal_cost_not_worse_than_left_to_right():
    rng = random.Random(7)
    for _ in range(20):
        dims = random_dimensions(6, rng)
        cost, _ = matrix_chain_order(dims)
        left_to_right = sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, len(dims) - 1))
        assert cost[0][-1] <= left_to_right


def test_matrix_chain_order_rejects_empty():
    with pytest.raises(ValueError):
        matrix_chain_order([5])


def test_multiply_by_identity_returns_same_matrix():
    rng = random.Random(1)
    a = _random_int_matrix(3, 4, rng)
    identity = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    assert multiply(a, identity) == a


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


@pytest.mark.parametrize("size", [1, 2, 4, 8])
def test_strassen_agrees_with_plain_multiplication(size):
    rng = random.Random(size)
    a = _random_int_matrix(size, size, rng)
    b = _random_int_matrix(size, size, rng)
    assert strassen(a, b) == multiply(a, b)


def test_strassen_rejects_non_power_of_two():
    m = [[1, 2, 3]] * 3
    with pytest.raises(ValueError):
        strassen(m, m)


@pytest.mark.parametrize("shape", [(3, 5, 2), (1, 1, 1), (6, 2, 7), (4, 4, 4)])
def test_multiply_strassen_rectangular(shape):
    r1, c1, c2 = shape
    rng = random.Random(sum(shape))
    a = _random_int_matrix(r1, c1, rng)
    b = _random_int_matrix(c1, c2, rng)
    assert multiply_strassen(a, b) == multiply(a, b)


def test_multiply_strassen_mismatch():
    with pytest.raises(ValueError):
        multiply_strassen([[1, 2, 3]], [[1], [2]])


@pytest.mark.parametrize("method", [multiply, multiply_strassen])
def test_chain_multiply_matches_sequential_product(method):
    rng = random.Random(11)
    dims = random_dimensions(5, rng)
    matrices = [random_binary_matrix(dims[i], dims[i + 1], rng) for i in range(5)]
    _, splits = matrix_chain_order(dims)
    expected = functools.reduce(multiply, matrices)
    assert chain_multiply(matrices, splits, method) == expected


def test_random_dimensions_are_small_powers_of_two():
    dims = random_dimensions(10, random.Random(3))
    assert len(dims) == 11
    assert set(dims) <= {2, 4, 8, 16, 32}


def test_random_binary_matrix_shape_and_values():
    m = random_binary_matrix(3, 5, random.Random(4))
    assert len(m) == 3
    assert all(len(row) == 5 for row in m)
    assert {v for row in m for v in row} <= {0, 1}


def test_save_matrix_csv_round_trip(tmp_path):
    matrix = random_binary_matrix(4, 6, random.Random(5))
    path = tmp_path / "m.csv"
    save_matrix_csv(path, matrix)
    with open(path, newline="") as handle:
        loaded = [[float(cell) for cell in row] for row in csv.reader(handle)]
    assert loaded == matrix


@pytest.mark.parametrize("method", ["regular", "strassen"])
def test_main_writes_matrices(tmp_path, capsys, method):
    code = main(["--method", method, "--count", "4", "--seed", "2", "--output-dir", str(tmp_path)])
    assert code == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == [f"matrix_{i}.csv" for i in range(1, 5)]
    assert "Optimal Parenthesization" in capsys.readouterr().out