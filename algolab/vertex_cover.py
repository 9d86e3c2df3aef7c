"""Greedy 2-approximation of a minimum vertex cover."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator


def approximate_vertex_cover(num_vertices: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the sorted vertices of a cover built from a greedy maximal matching.

    Vertices are scanned in ascending order; each uncovered vertex is paired
    with its lowest-numbered uncovered neighbour and both join the cover.
    """
    adjacency: list[set[int]] = [set() for _ in range(num_vertices)]
    for u, v in edges:
        if not (0 <= u < num_vertices and 0 <= v < num_vertices):
            raise ValueError(f"edge ({u}, {v}) refers to a vertex outside 0..{num_vertices - 1}")
        adjacency[u].add(v)
        adjacency[v].add(u)

    covered = [False] * num_vertices
    for u, neighbours in enumerate(adjacency):
        if covered[u]:
            continue
        partner = next((v for v in sorted(neighbours) if not covered[v]), None)
        if partner is not None:
            covered[u] = covered[partner] = True
    return [vertex for vertex, flag in enumerate(covered) if flag]


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
    """Read a graph from standard input and print an approximate vertex cover."""
    tokens = _ints(sys.stdin)
    print("Enter number of vertices: ", end="", flush=True)
    num_vertices = _next(tokens)
    print("Enter number of edges: ", end="", flush=True)
    edge_count = _next(tokens)
    print("Enter edges (u v):")
    edges = [(_next(tokens), _next(tokens)) for _ in range(edge_count)]

    cover = approximate_vertex_cover(num_vertices, edges)
    print("\nApproximate Vertex Cover:")
    for vertex in cover:
        print(f"Vertex {vertex}")
    return 0


if __name__ == "__main__":
    sys.exit(main())