"""Tabulate common growth-rate functions for n = 0..100."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence

HEADER = ["n", "n^3", "lg n", "n*2^n", "ln n", "2^(lg n)", "n", "2^n", "n lg n", "sqrt(lg n)", "n!"]
UNDEFINED = "undef"
OVERFLOW = "ovrflw"
FACTORIAL_LIMIT = 20
DEFAULT_LIMIT = 100
DEFAULT_OUTPUT = "function_values.csv"


def n_cubed(n: int) -> float:
    return float(n) ** 3


def log2_n(n: int) -> float:
    """Base-2 logarithm; raises ValueError for n <= 0."""
    return math.log2(n)


def n_times_2_pow_n(n: int) -> float:
    return n * 2.0**n


def ln_n(n: int) -> float:
    """Natural logarithm; raises ValueError for n <= 0."""
    return math.log(n)


def two_pow_log2_n(n: int) -> float:
    return 2.0 ** math.log2(n)


def identity(n: int) -> float:
    return float(n)


def two_pow_n(n: int) -> float:
    return 2.0**n


def n_log2_n(n: int) -> float:
    return n * math.log2(n)


def sqrt_log2_n(n: int) -> float:
    return math.sqrt(math.log2(n))


def factorial(n: int) -> float:
    """n! accumulated in floating point."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, n + 1), start=1.0)


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def growth_row(n: int) -> list[str]:
    """Return the formatted table cells for one value of n."""
    positive = n > 0
    if n > 1:
        sqrt_cell = _fmt(sqrt_log2_n(n))
    elif n == 1:
        sqrt_cell = "0.00"
    else:
        sqrt_cell = UNDEFINED
    return [
        str(n),
        _fmt(n_cubed(n)),
        _fmt(log2_n(n)) if positive else UNDEFINED,
        _fmt(n_times_2_pow_n(n)),
        _fmt(ln_n(n)) if positive else UNDEFINED,
        _fmt(two_pow_log2_n(n)) if positive else UNDEFINED,
        _fmt(identity(n)),
        _fmt(two_pow_n(n)),
        _fmt(n_log2_n(n)) if positive else UNDEFINED,
        sqrt_cell,
        _fmt(factorial(n)) if n <= FACTORIAL_LIMIT else OVERFLOW,
    ]


def growth_table(limit: int = DEFAULT_LIMIT) -> list[list[str]]:
    """Rows for n = 0..limit inclusive."""
    return [growth_row(n) for n in range(limit + 1)]


def write_csv(path, rows: Iterable[Sequence[str]]) -> None:
    """Write the header and the given rows as comma-separated lines."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(",".join(HEADER) + "\n")
        for row in rows:
            handle.write(",".join(row) + "\n")


def main(argv=None) -> int:
    """Print the growth table and save it as CSV."""
    parser = argparse.ArgumentParser(description="Tabulate growth-rate functions.")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="CSV file to write")
    args = parser.parse_args(argv)

    rows = growth_table(DEFAULT_LIMIT)
    try:
        write_csv(args.output, rows)
    except OSError:
        print("Error opening file!")
        return 1

    print(", ".join(HEADER))
    for row in rows:
        print(", ".join(row))
    print(f"\nResults saved to {args.output}")
    print("Use this file to create 2D plots in Excel/LibreOffice.")
    return 0


if __name__ == "__main__":
    sys.exit(main())