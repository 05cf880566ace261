"""Shared graph fixtures for heapspf tests."""

from __future__ import annotations

import pytest

from heapspf.graph.model import Edge, Graph


@pytest.fixture
def triangle1():
    # Weights:
    #          [1]          [1]
    #     0 ───────► 1 ───────► 2
    #       ◄───────   ◄───────
    #          [4]          [1]
    #
    #     0 ◄──────────────────► 2
    #                [2]
    edges = [
        Edge(0, 1, 1),
        Edge(1, 0, 4),
        Edge(1, 2, 1),
        Edge(2, 1, 1),
        Edge(0, 2, 2),
        Edge(2, 0, 2),
    ]
    return Graph(edges)


@pytest.fixture
def line1():
    #      [3]      [2]      [7]
    #  0 ──────► 1 ──────► 2 ──────► 3
    return Graph([Edge(0, 1, 3), Edge(1, 2, 2), Edge(2, 3, 7)])


@pytest.fixture
def with_isolated():
    # Vertex 3 has no edges at all; vertex 4 only has an outgoing edge.
    #
    #      [1]      [1]
    #  0 ──────► 1 ──────► 2      3      4 ──[1]──► 0
    edges = [Edge(0, 1, 1), Edge(1, 2, 1), Edge(4, 0, 1)]
    return Graph(edges, vertices=[3])


@pytest.fixture
def square_zero():
    # Equal-cost diamond with a zero-weight shortcut 1 -> 2.
    #
    #        [1]  1  [1]
    #     ┌──────►●──────┐
    #     │       │[0]   ▼
    #     0       ▼      3
    #     │       ●      ▲
    #     └──────►2──────┘
    #        [2]     [1]
    edges = [
        Edge(0, 1, 1),
        Edge(0, 2, 2),
        Edge(1, 2, 0),
        Edge(1, 3, 1),
        Edge(2, 3, 1),
    ]
    return Graph(edges)
