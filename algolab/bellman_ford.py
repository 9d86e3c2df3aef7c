"""Single-source shortest paths with negative edge weights."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed weighted edge."""

    src: int
    dest: int
    weight: int


class NegativeCycleError(Exception):
    """The graph holds a negative-weight cycle reachable from the source."""


def bellman_ford(num_vertices: int, edges: Iterable[Edge], source: int) -> list[int | None]:
    """Return the distance from ``source`` to each vertex, ``None`` where unreachable.

    Raises NegativeCycleError if a reachable negative cycle exists.
    """
    edges = list(edges)
    if not 0 <= source < num_vertices:
        raise ValueError(f"source {source} outside 0..{num_vertices - 1}")
    for edge in edges:
        if not (0 <= edge.src < num_vertices and 0 <= edge.dest < num_vertices):
            raise ValueError(f"edge {edge} refers to a vertex outside 0..{num_vertices - 1}")

    dist: list[int | None] = [None] * num_vertices
    dist[source] = 0

    def relaxable(edge: Edge) -> bool:
        start = dist[edge.src]
        if start is None:
            return False
        end = dist[edge.dest]
        return end is None or start + edge.weight < end

    for _ in range(num_vertices - 1):
        for edge in edges:
            if relaxable(edge):
                dist[edge.dest] = dist[edge.src] + edge.weight

    if any(relaxable(edge) for edge in edges):
        raise NegativeCycleError("Graph contains negative weight cycle")
    return dist


def _ints(stream) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _next(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _distances(num_vertices: int, edges: Sequence[Edge], source: int) -> list[int | None] | None:
    try:
        return bellman_ford(num_vertices, edges, source)
    except NegativeCycleError as error:
        print(error)
        return None


def _single_pair(num_vertices, edges, tokens) -> None:
    print("Enter source node: ", end="", flush=True)
    source = _next(tokens)
    print("Enter destination node: ", end="", flush=True)
    destination = _next(tokens)
    if not (0 <= source < num_vertices and 0 <= destination < num_vertices):
        print("Invalid source or destination node!")
        return
    dist = _distances(num_vertices, edges, source)
    if dist is not None:
        value = dist[destination]
        shown = "No path exists" if value is None else value
        print(f"\nShortest path from {source} to {destination}: {shown}")


def _single_destination(num_vertices, edges, tokens) -> None:
    print("Enter destination node: ", end="", flush=True)
    destination = _next(tokens)
    if not 0 <= destination < num_vertices:
        print("Invalid destination node!")
        return
    print(f"\nShortest paths to node {destination}:")
    print("Source\tDistance")
    print("-------------------")
    for source in range(num_vertices):
        if source == destination:
            continue
        dist = _distances(num_vertices, edges, source)
        if dist is not None:
            value = dist[destination]
            print(f"{source}\t{'No path' if value is None else value}")


def _all_pairs(num_vertices, edges) -> None:
    print("\nAll pairs shortest paths:")
    start = time.perf_counter()
    for source in range(num_vertices):
        dist = _distances(num_vertices, edges, source)
        if dist is None:
            continue
        print(f"\nFrom source {source}:")
        print("Dest\tDistance")
        print("-------------------")
        for target, value in enumerate(dist):
            if target != source:
                print(f"{target}\t{'No path' if value is None else value}")
    print(f"Time taken: {time.perf_counter() - start:.5f} seconds")


def main(argv=None) -> int:
    """Read a graph from standard input and answer shortest-path queries from a menu."""
    tokens = _ints(sys.stdin)
    print("Enter number of vertices: ", end="", flush=True)
    num_vertices = _next(tokens)
    print("Enter number of edges: ", end="", flush=True)
    edge_count = _next(tokens)
    print("vertex1 vertex2 weight")
    edges = [Edge(_next(tokens), _next(tokens), _next(tokens)) for _ in range(edge_count)]
    print("Graph entered successfully!")

    again = 1
    while again != 0:
        print("\n=== Bellman-Ford Algorithm Menu ===")
        print("1. Single source and destination")
        print("2. Single destination, all sources")
        print("3. All pairs shortest paths")
        print("Enter your choice: ", end="", flush=True)
        choice = _next(tokens)
        if choice == 1:
            _single_pair(num_vertices, edges, tokens)
        elif choice == 2:
            _single_destination(num_vertices, edges, tokens)
        elif choice == 3:
            _all_pairs(num_vertices, edges)
        else:
            print("Invalid choice!")
        print("\nDo you want to continue? (1 for yes, 0 for no): ", end="", flush=True)
        again = _next(tokens)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())