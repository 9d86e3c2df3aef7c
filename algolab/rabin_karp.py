"""Rabin-Karp substring search with a rolling hash."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Union

PRIME = 101
BASE = 256
TEXT_FILES = 10
PATTERN_SIZES = [10 * p for p in range(1, 11)]

Text = Union[str, bytes]


def _code(text: Text, index: int) -> int:
    item = text[index]
    return item if isinstance(item, int) else ord(item)


def create_hash(text: Text, length: int, modulus: int = PRIME) -> int:
    """Hash of the first ``length`` characters of ``text``."""
    if not 0 <= length <= len(text):
        raise ValueError("length outside the text")
    value = 0
    for index in range(length):
        value = (value * BASE + _code(text, index)) % modulus
    return value


def roll_hash(
    text: Text,
    old_index: int,
    new_index: int,
    old_hash: int,
    pattern_length: int,
    modulus: int = PRIME,
) -> int:
    """Drop ``text[old_index]`` from a window hash and append ``text[new_index]``."""
    high = pow(BASE, pattern_length - 1, modulus)
    value = (old_hash - _code(text, old_index) * high) % modulus
    return (value * BASE + _code(text, new_index)) % modulus


def rabin_karp(text: Text, pattern: Text, modulus: int = PRIME) -> list[int]:
    """Return every start index at which ``pattern`` occurs in ``text``."""
    if type(text) is not type(pattern):
        raise TypeError("text and pattern must both be str or both be bytes")
    if not pattern:
        raise ValueError("pattern must not be empty")
    m, n = len(pattern), len(text)
    if m > n:
        return []
    pattern_hash = create_hash(pattern, m, modulus)
    window_hash = create_hash(text, m, modulus)
    matches = []
    for start in range(n - m + 1):
        if pattern_hash == window_hash and text[start : start + m] == pattern:
            matches.append(start)
        if start < n - m:
            window_hash = roll_hash(text, start, start + m, window_hash, m, modulus)
    return matches


def main(argv=None) -> int:
    """Time the search of every pattern file in every text file and save a CSV report."""
    parser = argparse.ArgumentParser(description="Time Rabin-Karp searches.")
    parser.add_argument("--text-dir", default="text_files")
    parser.add_argument("--pattern-dir", default="patterns")
    parser.add_argument("--output", default="results.csv")
    args = parser.parse_args(argv)

    text_dir, pattern_dir = Path(args.text_dir), Path(args.pattern_dir)
    try:
        with open(args.output, "w", encoding="utf-8", newline="") as csv_file:
            csv_file.write("TextFile,PatternSize,TimeTaken\n")
            for t in range(1, TEXT_FILES + 1):
                text = (text_dir / f"text{t}.txt").read_bytes()
                for size in PATTERN_SIZES:
                    pattern = (pattern_dir / f"pattern{size}.txt").read_bytes()
                    start = time.perf_counter()
                    rabin_karp(text, pattern, PRIME)
                    elapsed = time.perf_counter() - start
                    csv_file.write(f"text{t}.txt,{size},{elapsed:.8f}\n")
    except OSError as error:
        print(f"File open failed: {error}", file=sys.stderr)
        return 1
    print(f"✅ Search completed. Results saved in {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())