"""Maximum flow by Ford-Fulkerson with breadth-first augmenting paths."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Sequence


def _augmenting_path(residual: list[list[int]], source: int, sink: int) -> list[int] | None:
    parent: list[int | None] = [None] * len(residual)
    visited = [False] * len(residual)
    visited[source] = True
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, capacity in enumerate(residual[u]):
            if not visited[v] and capacity > 0:
                visited[v] = True
                parent[v] = u
                queue.append(v)
    if not visited[sink]:
        return None
    path = [sink]
    while path[-1] != source:
        path.append(parent[path[-1]])
    return path[::-1]


def ford_fulkerson(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Return the maximum flow from ``source`` to ``sink`` in a capacity matrix."""
    residual = [list(row) for row in capacity]
    n = len(residual)
    if any(len(row) != n for row in residual):
        raise ValueError("capacity matrix must be square")
    for vertex in (source, sink):
        if not 0 <= vertex < n:
            raise ValueError(f"vertex {vertex} outside 0..{n - 1}")
    if source == sink:
        raise ValueError("source and sink must differ")

    total = 0
    while (path := _augmenting_path(residual, source, sink)) is not None:
        steps = list(zip(path, path[1:]))
        flow = min(residual[u][v] for u, v in steps)
        for u, v in steps:
            residual[u][v] -= flow
            residual[v][u] += flow
        total += flow
    return total


def _example_network(size: int = 20) -> list[list[int]]:
    graph = [[0] * size for _ in range(size)]
    for u, v, capacity in ((0, 1, 16), (0, 2, 13), (1, 2, 10), (1, 3, 12), (2, 1, 4), (2, 4, 14)):
        graph[u][v] = capacity
    return graph


def main(argv=None) -> int:
    """Compute the maximum flow of the built-in example network."""
    source, sink = 0, 4
    flow = ford_fulkerson(_example_network(), source, sink)
    print(f"\nMaximum Flow from source {source} to sink {sink}: {flow}")
    return 0


if __name__ == "__main__":
    sys.exit(main())