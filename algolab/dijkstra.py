"""Dijkstra's shortest paths on an undirected weighted graph."""

from __future__ import annotations

import math
import sys
import time
from collections import deque
from collections.abc import Iterator


class Graph:
    """An undirected weighted graph stored as adjacency lists."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adjacency: list[deque[tuple[int, int]]] = [deque() for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} outside 0..{self.num_vertices - 1}")

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Connect ``src`` and ``dest`` in both directions with ``weight``."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].appendleft((dest, weight))
        self._adjacency[dest].appendleft((src, weight))

    def neighbours(self, vertex: int) -> list[tuple[int, int]]:
        """Return ``(neighbour, weight)`` pairs, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])


def _closest(dist: list[int | None], done: list[bool]) -> int:
    best = -1
    best_key = math.inf
    for vertex, (distance, finished) in enumerate(zip(dist, done)):
        if finished:
            continue
        key = math.inf if distance is None else distance
        if best < 0 or key <= best_key:
            best, best_key = vertex, key
    return best


def dijkstra(graph: Graph, source: int) -> list[int | None]:
    """Return the distance from ``source`` to each vertex, ``None`` where unreachable."""
    n = graph.num_vertices
    if not 0 <= source < n:
        raise ValueError(f"source {source} outside 0..{n - 1}")
    dist: list[int | None] = [None] * n
    dist[source] = 0
    done = [False] * n
    for _ in range(n - 1):
        u = _closest(dist, done)
        done[u] = True
        base = dist[u]
        if base is None:
            continue
        for v, weight in graph.neighbours(u):
            if done[v]:
                continue
            candidate = base + weight
            if dist[v] is None or candidate < dist[v]:
                dist[v] = candidate
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


def _row(label: int, distance: int | None) -> str:
    return f"{label} \t\t\t {'No Path' if distance is None else distance}"


def _print_solution(dist: list[int | None]) -> None:
    print("Vertex \t\t Distance from Source")
    for vertex, distance in enumerate(dist):
        print(_row(vertex, distance))


def main(argv=None) -> int:
    """Read a graph from standard input and answer shortest-path queries from a menu."""
    tokens = _ints(sys.stdin)
    print("enter no. of nodes: ", end="", flush=True)
    graph = Graph(_next(tokens))
    print("Enter number of edges: ", end="", flush=True)
    edge_count = _next(tokens)
    print("vertex1 vertex2 weight")
    for _ in range(edge_count):
        graph.add_edge(_next(tokens), _next(tokens), _next(tokens))
    print("Graph entered successfully!")

    again = 1
    while again != 0:
        print("1. user input 2.single destination 3.all pairs")
        choice = _next(tokens)
        if choice == 1:
            print("enter Source Node: ", end="", flush=True)
            _print_solution(dijkstra(graph, _next(tokens)))
        elif choice == 2:
            print("Enter destination node: ", end="", flush=True)
            dest = _next(tokens)
            print(f"\nFinding shortest paths from all nodes to node {dest}:")
            print("Vertex \t\t Distance from Source")
            for source in range(graph.num_vertices):
                if source != dest:
                    print(_row(source, dijkstra(graph, source)[dest]))
        elif choice == 3:
            print("\nAll pairs shortest paths:")
            start = time.perf_counter()
            for source in range(graph.num_vertices):
                print(f"\nShortest paths from node {source}:")
                _print_solution(dijkstra(graph, source))
                print("----------------------------------------")
            elapsed = time.perf_counter() - start
            print(f"Time taken for all pairs shortest paths: {elapsed:.5f} seconds")
        print("Do you want to run dijkstra? (yes: 1   no: 0):", end="", flush=True)
        again = _next(tokens)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())