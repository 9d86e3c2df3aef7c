"""Comparison sorts and a timing experiment over growing block sizes."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterable, Iterator, Sequence

SortFunction = Callable[[Iterable[int]], list[int]]

TOTAL_NUMBERS = 100000
NUMBERS_FILE = "random_numbers.txt"
OUTPUT_FILE = "sorting_times.csv"
PROGRESS_EVERY = 10000


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by top-down merge sort (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by quicksort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(items, low, high)
        pending.append((pivot + 1, high))
        pending.append((low, pivot - 1))
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def generate_numbers(count: int, upper: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random integers in ``0..upper-1``."""
    rng = rng or random.Random()
    return [rng.randrange(upper) for _ in range(count)]


def write_numbers(path, numbers: Iterable[int]) -> None:
    """Write one number per line."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{number}\n" for number in numbers)


def read_numbers(path, count: int) -> list[int]:
    """Read the first ``count`` whitespace-separated integers from ``path``."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    if len(tokens) < count:
        raise ValueError("Error reading from file")
    try:
        return [int(token) for token in tokens[:count]]
    except ValueError:
        raise ValueError("Error reading from file") from None


def time_sort(sort: SortFunction, values: Sequence[int]) -> int:
    """Sort a copy of ``values`` and return the whole milliseconds it took."""
    data = list(values)
    start = time.perf_counter()
    sort(data)
    return int((time.perf_counter() - start) * 1000)


def benchmark(
    numbers: Sequence[int], sorts: Sequence[SortFunction], step: int = 100
) -> Iterator[tuple[int, ...]]:
    """Yield ``(block_size, ms, ...)`` for prefixes of size step, 2*step, ... len(numbers)."""
    if step <= 0:
        raise ValueError("step must be positive")
    for size in range(step, len(numbers) + 1, step):
        block = numbers[:size]
        yield (size, *(time_sort(sort, block) for sort in sorts))


_EXPERIMENTS = {
    "merge-quick": (
        (merge_sort, quick_sort),
        "Block Size,Merge Sort Time (ms),Quick Sort Time (ms)",
    ),
    "insertion-selection": (
        (insertion_sort, selection_sort),
        "Block Size,Insertion Sort Time (ms),Selection Sort Time (ms)",
    ),
}


def main(argv=None) -> int:
    """Generate numbers, time two sorts over growing blocks and save the results as CSV."""
    parser = argparse.ArgumentParser(description="Time sorting algorithms on growing blocks.")
    parser.add_argument("--algorithms", choices=sorted(_EXPERIMENTS), default="merge-quick")
    parser.add_argument("--total", type=int, default=TOTAL_NUMBERS)
    parser.add_argument("--step", type=int, default=100)
    parser.add_argument("--numbers-file", default=NUMBERS_FILE)
    parser.add_argument("--output", default=OUTPUT_FILE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    sorts, header = _EXPERIMENTS[args.algorithms]
    upper = args.total if args.algorithms == "merge-quick" else 1000000
    rng = random.Random(args.seed)

    try:
        write_numbers(args.numbers_file, generate_numbers(args.total, upper, rng))
    except OSError as error:
        print(f"Error opening file for writing: {error}", file=sys.stderr)
        return 1
    try:
        numbers = read_numbers(args.numbers_file, args.total)
    except OSError as error:
        print(f"Error opening file for reading: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    try:
        with open(args.output, "w", encoding="utf-8") as out:
            out.write(header + "\n")
            for row in benchmark(numbers, sorts, args.step):
                out.write(",".join(str(cell) for cell in row) + "\n")
                if row[0] % PROGRESS_EVERY == 0:
                    print(f"Processed block size: {row[0]}")
    except OSError as error:
        print(f"Error opening output file: {error}", file=sys.stderr)
        return 1

    if args.algorithms == "merge-quick":
        print(f"\nSorting times saved to {args.output}")
        print("Use this file to create 2D plots in Excel/LibreOffice.")
        print("\nSpace Complexity Analysis:")
        print("Merge Sort: O(n) - Requires additional space for temporary arrays during merging")
        print("Quick Sort: O(log n) - Space used by recursive calls (in-place sorting)")
        print("Note: Quick sort can degrade to O(n) space in worst-case scenarios.")
    else:
        print(f"Sorting times saved to {args.output}")
        print("Experiment completed successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())