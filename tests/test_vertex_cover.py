import io
import random

import pytest

from algolab.vertex_cover import approximate_vertex_cover, main


def _covers(cover, edges):
    chosen = set(cover)
    return all(u in chosen or v in chosen for u, v in edges)


def test_path_graph():
    assert approximate_vertex_cover(3, [(0, 1), (1, 2)]) == [0, 1]


def test_no_edges_gives_empty_cover():
    assert approximate_vertex_cover(4, []) == []


@pytest.mark.parametrize("seed", range(5))
def test_random_graphs_are_covered(seed):
    rng = random.Random(seed)
    n = 12
    edges = [(rng.randrange(n), rng.randrange(n)) for _ in range(20)]
    cover = approximate_vertex_cover(n, edges)
    assert _covers(cover, edges)
    assert cover == sorted(set(cover))


def test_cover_is_built_from_matched_pairs():
    edges = [(0, 1), (2, 3), (4, 5), (1, 2)]
    cover = approximate_vertex_cover(6, edges)
    assert len(cover) % 2 == 0
    assert _covers(cover, edges)


def test_out_of_range_vertex():
    with pytest.raises(ValueError):
        approximate_vertex_cover(2, [(0, 5)])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n2\n0 1\n1 2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Approximate Vertex Cover:" in out
    assert "Vertex 0" in out
    assert "Vertex 1" in out
    assert "Vertex 2" not in out