"""Tests for the Path result model."""

from __future__ import annotations

from heapspf.graph.model import Edge
from heapspf.model.path import Path
from heapspf.types.base import INF, PathStatus


def test_found_path_accessors():
    edges = (Edge(0, 1, 2), Edge(1, 4, 3))
    path = Path.found(0, 4, edges, 5)
    assert path.status == PathStatus.FOUND
    assert path[1] == Edge(1, 4, 3)
    assert len(path) == 2
    assert list(path) == list(edges)
    assert path.vertices == (0, 1, 4)


def test_trivial_and_unreachable():
    trivial = Path.trivial(7)
    assert (trivial.start, trivial.finish, trivial.cost) == (7, 7, 0)
    assert trivial.is_found

    missing = Path.unreachable(1, 2)
    assert missing.cost == INF
    assert not missing.is_found
    assert missing.vertices == ()


def test_ordering_by_cost():
    cheap = Path.found(0, 1, (Edge(0, 1, 1),), 1)
    pricey = Path.found(0, 1, (Edge(0, 2, 4), Edge(2, 1, 4)), 8)
    assert cheap < pricey
    assert sorted([Path.unreachable(0, 1), pricey, cheap]) == [
        cheap,
        pricey,
        Path.unreachable(0, 1),
    ]
    assert cheap.__lt__("x") is NotImplemented


def test_equality():
    assert Path.trivial(3) == Path.trivial(3)
    assert Path.trivial(3) != Path.unreachable(3, 3)
