import io

import pytest

from algolab.bellman_ford import Edge, NegativeCycleError, bellman_ford, main

SAMPLE = [
    Edge(0, 1, 1),
    Edge(0, 2, 4),
    Edge(1, 2, -2),
    Edge(1, 4, 7),
    Edge(2, 3, 3),
    Edge(4, 5, 7),
    Edge(5, 3, -3),
    Edge(6, 7, 2),
    Edge(4, 6, 1),
    Edge(6, 5, 2),
]


def test_sample_graph_invariants():
    dist = bellman_ford(8, SAMPLE, 0)
    assert dist[0] == 0
    assert all(value is not None for value in dist)
    for edge in SAMPLE:
        assert dist[edge.dest] <= dist[edge.src] + edge.weight


def test_each_distance_is_achieved_by_some_edge():
    dist = bellman_ford(8, SAMPLE, 0)
    for vertex in range(1, 8):
        assert any(
            e.dest == vertex and dist[e.src] + e.weight == dist[vertex] for e in SAMPLE
        )


def test_single_edge():
    assert bellman_ford(2, [Edge(0, 1, 5)], 0) == [0, 5]


def test_unreachable_vertices_are_none():
    dist = bellman_ford(3, [Edge(0, 1, 4)], 1)
    assert dist == [None, 0, None]


def test_negative_cycle():
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, [Edge(0, 1, 1), Edge(1, 2, -3), Edge(2, 0, 1)], 0)


def test_unreachable_negative_cycle_is_ignored():
    edges = [Edge(1, 2, -3), Edge(2, 1, 1), Edge(0, 3, 2)]
    dist = bellman_ford(4, edges, 0)
    assert dist[1] is None and dist[2] is None
    assert dist[3] == 2


def test_invalid_source():
    with pytest.raises(ValueError):
        bellman_ford(2, [], 2)


def test_invalid_edge():
    with pytest.raises(ValueError):
        bellman_ford(2, [Edge(0, 3, 1)], 0)


def test_main_single_pair(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n0 1 5\n1\n0 1\n0\n"))
    assert main([]) == 0
    assert "Shortest path from 0 to 1: 5" in capsys.readouterr().out


def test_main_reports_negative_cycle_and_invalid_choice(monkeypatch, capsys):
    data = "2 2\n0 1 1\n1 0 -2\n3\n1\n9\n0\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Graph contains negative weight cycle" in out
    assert "Invalid choice!" in out