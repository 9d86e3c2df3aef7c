"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_GRAPHS = 10
DEFAULT_SIZE = 10
DEFAULT_OUTPUT = "output.csv"


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: int


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of ``item``'s set."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets holding ``x`` and ``y``; return False if already joined."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True


def kruskal_mst(num_vertices: int, edges: Iterable[Edge | tuple[int, int, int]]) -> list[Edge]:
    """Return the spanning-forest edges picked by Kruskal's algorithm, lightest first."""
    items = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in items:
        if not (0 <= edge.src < num_vertices and 0 <= edge.dest < num_vertices):
            raise ValueError(f"edge {edge} refers to a vertex outside 0..{num_vertices - 1}")
    sets = DisjointSet(num_vertices)
    chosen: list[Edge] = []
    for edge in sorted(items, key=lambda e: e.weight):
        if len(chosen) >= num_vertices - 1:
            break
        if sets.union(edge.src, edge.dest):
            chosen.append(edge)
    return chosen


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return ``Edge(parent, v, weight)`` for v = 1..n-1, growing the tree from vertex 0.

    Zero entries mean "no edge". Raises ValueError if the graph is disconnected.
    """
    graph = _square(matrix)
    n = len(graph)
    if n == 0:
        return []
    key = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    key[0] = 0
    for _ in range(n - 1):
        candidates = [v for v in range(n) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    if any(p is None for p in parent[1:]):
        raise ValueError("graph is not connected")
    return [Edge(p, v, graph[v][p]) for v, p in enumerate(parent) if v > 0]


def prim_total_weight(matrix: Sequence[Sequence[int]]) -> int:
    """Total weight of the tree found by Prim's algorithm."""
    return sum(edge.weight for edge in prim_mst(matrix))


def kruskal_total_weight(matrix: Sequence[Sequence[int]]) -> int:
    """Total weight of the forest found by Kruskal's algorithm on a symmetric matrix."""
    graph = _square(matrix)
    edges = [
        Edge(i, j, row[j]) for i, row in enumerate(graph) for j in range(i + 1, len(graph)) if row[j]
    ]
    return sum(edge.weight for edge in kruskal_mst(len(graph), edges))


def random_complete_graph(size: int, rng: random.Random | None = None) -> list[list[int]]:
    """Return a symmetric matrix with random weights 1..100 off the diagonal."""
    rng = rng or random.Random()
    graph = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            graph[i][j] = graph[j][i] = rng.randint(1, 100)
    return graph


EXAMPLE_EDGES = [
    Edge(0, 1, 2),
    Edge(0, 3, 6),
    Edge(1, 2, 3),
    Edge(1, 3, 8),
    Edge(1, 4, 5),
    Edge(2, 4, 7),
    Edge(3, 4, 9),
]

EXAMPLE_MATRIX = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def _elapsed_ms(function, argument) -> float:
    start = time.perf_counter()
    function(argument)
    return (time.perf_counter() - start) * 1000


def main(argv=None) -> int:
    """Print the example MST, or time both algorithms on random graphs."""
    parser = argparse.ArgumentParser(description="Minimum spanning trees.")
    parser.add_argument("mode", nargs="?", choices=("kruskal", "prim", "compare"), default="kruskal")
    parser.add_argument("--graphs", type=int, default=DEFAULT_GRAPHS)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    if args.mode == "kruskal":
        print("Edge \tWeight")
        for edge in kruskal_mst(5, EXAMPLE_EDGES):
            print(f"{edge.src} - {edge.dest} \t{edge.weight}")
        return 0
    if args.mode == "prim":
        print("Edge \tWeight")
        for edge in prim_mst(EXAMPLE_MATRIX):
            print(f"{edge.src} - {edge.dest} \t{edge.weight} ")
        return 0

    rng = random.Random(args.seed)
    try:
        with open(args.output, "w", encoding="utf-8", newline="") as handle:
            handle.write("Graph,Prim_Time(ms),Kruskal_Time(ms)\n")
            for index in range(1, args.graphs + 1):
                graph = random_complete_graph(args.size, rng)
                prim_ms = _elapsed_ms(prim_total_weight, graph)
                kruskal_ms = _elapsed_ms(kruskal_total_weight, graph)
                handle.write(f"{index},{prim_ms:.4f},{kruskal_ms:.4f}\n")
    except OSError:
        print("Error opening file!")
        return 1
    print(f"Results saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())