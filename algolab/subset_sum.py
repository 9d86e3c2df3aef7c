"""Enumerate subsets of a sequence whose elements add up to a target sum."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence


def subsets_with_sum(values: Sequence[int], target: int) -> Iterator[list[int]]:
    """Yield, depth first, every chosen subset whose running sum reaches ``target``.

    Elements are tried "included" before "excluded". A branch stops as soon
    as its sum equals the target, exceeds it, or runs out of elements.
    """
    values = list(values)

    def explore(index: int, chosen: list[int], total: int) -> Iterator[list[int]]:
        if total == target:
            yield list(chosen)
            return
        if total > target or index >= len(values):
            return
        value = values[index]
        chosen.append(value)
        yield from explore(index + 1, chosen, total + value)
        chosen.pop()
        yield from explore(index + 1, chosen, total)

    yield from explore(0, [], 0)


def format_subset(subset: Iterable[int]) -> str:
    """Render a subset as ``{ a b c }``, leaving out zero elements."""
    return "{ " + "".join(f"{value} " for value in subset if value != 0) + "}"


def _ints(stream) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _next(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def main(argv=None) -> int:
    """Read a target, a size and the elements from standard input and list the subsets."""
    tokens = _ints(sys.stdin)
    print("Enter Target Sum: ", end="", flush=True)
    target = _next(tokens)
    print("Enter Size of array: ", end="", flush=True)
    size = _next(tokens)
    print("Enter elements:")
    values = [_next(tokens) for _ in range(size)]

    print(f"Subsets with sum {target}:")
    found = False
    for subset in subsets_with_sum(values, target):
        print(format_subset(subset))
        found = True
    if not found:
        print("No subsets found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())