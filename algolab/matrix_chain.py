"""Optimal matrix-chain ordering, with plain and Strassen multiplication."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path

Matrix = list[list[float]]
Multiplier = Callable[[Sequence[Sequence[float]], Sequence[Sequence[float]]], Matrix]

DEFAULT_COUNT = 10


def matrix_chain_order(dims: Sequence[int]) -> tuple[list[list[int]], list[list[int]]]:
    """Return ``(cost, splits)`` tables for the chain whose matrix i is dims[i] x dims[i+1].

    ``cost[i][j]`` is the fewest scalar multiplications for matrices i..j and
    ``splits[i][j]`` the first split point that reaches it. Entries with
    ``j <= i`` are zero.
    """
    dims = list(dims)
    n = len(dims) - 1
    if n < 1:
        raise ValueError("at least one matrix is needed")
    if any(d <= 0 for d in dims):
        raise ValueError("dimensions must be positive")
    cost = [[0] * n for _ in range(n)]
    splits = [[0] * n for _ in range(n)]
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            best: int | None = None
            for k in range(i, j):
                q = cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                if best is None or q < best:
                    best = q
                    splits[i][j] = k
            cost[i][j] = best
    return cost, splits


def optimal_parenthesization(splits: Sequence[Sequence[int]], i: int, j: int) -> str:
    """Render the product of matrices i..j as nested ``(A x B)`` groups named M1, M2, ..."""
    if i == j:
        return f"M{i + 1}"
    k = splits[i][j]
    left = optimal_parenthesization(splits, i, k)
    right = optimal_parenthesization(splits, k + 1, j)
    return f"({left} x {right})"


def _rows(matrix: Sequence[Sequence[float]]) -> Matrix:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must have equal length")
    return rows


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the ordinary product ``a x b``."""
    a, b = _rows(a), _rows(b)
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def _add(a: Matrix, b: Matrix) -> Matrix:
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _sub(a: Matrix, b: Matrix) -> Matrix:
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _quarters(m: Matrix, half: int) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    top, bottom = m[:half], m[half:]
    return (
        [row[:half] for row in top],
        [row[half:] for row in top],
        [row[:half] for row in bottom],
        [row[half:] for row in bottom],
    )


def _strassen(a: Matrix, b: Matrix) -> Matrix:
    n = len(a)
    if n == 1:
        return [[a[0][0] * b[0][0]]]
    if n == 2:
        return [
            [a[0][0] * b[0][0] + a[0][1] * b[1][0], a[0][0] * b[0][1] + a[0][1] * b[1][1]],
            [a[1][0] * b[0][0] + a[1][1] * b[1][0], a[1][0] * b[0][1] + a[1][1] * b[1][1]],
        ]
    half = n // 2
    a11, a12, a21, a22 = _quarters(a, half)
    b11, b12, b21, b22 = _quarters(b, half)

    m1 = _strassen(_add(a11, a22), _add(b11, b22))
    m2 = _strassen(_add(a21, a22), b11)
    m3 = _strassen(a11, _sub(b12, b22))
    m4 = _strassen(a22, _sub(b21, b11))
    m5 = _strassen(_add(a11, a12), b22)
    m6 = _strassen(_sub(a21, a11), _add(b11, b12))
    m7 = _strassen(_sub(a12, a22), _add(b21, b22))

    c11 = _add(_sub(_add(m1, m4), m5), m7)
    c12 = _add(m3, m5)
    c21 = _add(m2, m4)
    c22 = _add(_add(_sub(m1, m2), m3), m6)
    return [left + right for left, right in zip(c11, c12)] + [
        left + right for left, right in zip(c21, c22)
    ]


def strassen(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Multiply two square matrices whose size is a power of two by Strassen's method."""
    a, b = _rows(a), _rows(b)
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("matrix size must be a positive power of two")
    for m in (a, b):
        if len(m) != n or any(len(row) != n for row in m):
            raise ValueError(f"matrices must both be {n}x{n}")
    return _strassen(a, b)


def _next_power_of_two(n: int) -> int:
    p = 1
    while p < n:
        p <<= 1
    return p


def multiply_strassen(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Multiply rectangular matrices by zero-padding them to a square power of two."""
    a, b = _rows(a), _rows(b)
    if not a or not b or not b[0]:
        raise ValueError("matrices must not be empty")
    r1, c1, c2 = len(a), len(b), len(b[0])
    if any(len(row) != c1 for row in a):
        raise ValueError("inner dimensions do not match")
    n = _next_power_of_two(max(r1, c1, c2))

    def pad(m: Matrix) -> Matrix:
        padded = [row + [0] * (n - len(row)) for row in m]
        padded.extend([0] * n for _ in range(n - len(m)))
        return padded

    product = _strassen(pad(a), pad(b))
    return [row[:c2] for row in product[:r1]]


def chain_multiply(
    matrices: Sequence[Sequence[Sequence[float]]],
    splits: Sequence[Sequence[int]],
    multiply: Multiplier = multiply,
) -> Matrix:
    """Multiply the whole chain in the order given by ``splits``."""
    if not matrices:
        raise ValueError("at least one matrix is needed")

    def product(i: int, j: int) -> Matrix:
        if i == j:
            return _rows(matrices[i])
        k = splits[i][j]
        return multiply(product(i, k), product(k + 1, j))

    return product(0, len(matrices) - 1)


def random_dimensions(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count + 1`` dimensions, each a power of two from 2 to 32."""
    rng = rng or random.Random()
    return [1 << rng.randint(1, 5) for _ in range(count + 1)]


def random_binary_matrix(rows: int, cols: int, rng: random.Random | None = None) -> Matrix:
    """Return a ``rows`` x ``cols`` matrix of random zeros and ones."""
    rng = rng or random.Random()
    return [[float(rng.randrange(2)) for _ in range(cols)] for _ in range(rows)]


def save_matrix_csv(path, matrix: Sequence[Sequence[float]]) -> None:
    """Write the matrix as comma-separated whole numbers, one row per line."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for row in matrix:
            handle.write(",".join(f"{value:.0f}" for value in row) + "\n")


def _print_table(table: list[list[int]]) -> None:
    for i, row in enumerate(table):
        print("".join("   - " if j < i else f"{value:4d} " for j, value in enumerate(row)))


def main(argv=None) -> int:
    """Build a random chain, find its best order and time the multiplication."""
    parser = argparse.ArgumentParser(description="Optimal matrix-chain multiplication.")
    parser.add_argument("--method", choices=("regular", "strassen"), default="regular")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output-dir", default=".")
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be at least 1")

    rng = random.Random(args.seed)
    dims = random_dimensions(args.count, rng)
    matrices = []
    out_dir = Path(args.output_dir)
    try:
        for index in range(args.count):
            matrix = random_binary_matrix(dims[index], dims[index + 1], rng)
            matrices.append(matrix)
            save_matrix_csv(out_dir / f"matrix_{index + 1}.csv", matrix)
    except OSError as error:
        print(f"File creation failed: {error}", file=sys.stderr)
        return 1

    cost, splits = matrix_chain_order(dims)
    parens = optimal_parenthesization(splits, 0, args.count - 1)

    if args.method == "regular":
        print("Matrix m[i][j] of scalar multiplications:")
        _print_table(cost)
        print("\nMatrix s[i][j] of splits:")
        _print_table(splits)
        print("\nOptimal Parenthesization:")
        print(parens)
        start = time.perf_counter()
        chain_multiply(matrices, splits, multiply)
        elapsed = time.perf_counter() - start
        print(f"\nTime for regular optimal multiplication: {elapsed:.6f} sec")
    else:
        print(f"Optimal Parenthesization: {parens}")
        start = time.perf_counter()
        chain_multiply(matrices, splits, multiply_strassen)
        elapsed = time.perf_counter() - start
        print(f"Time for Strassen optimal multiplication: {elapsed:.6f} sec")
    return 0


if __name__ == "__main__":
    sys.exit(main())