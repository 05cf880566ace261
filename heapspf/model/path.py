"""Lightweight representation of a single shortest path.

The ``Path`` dataclass stores the edge sequence between two vertices together
with its total cost and a status telling apart a found path, the zero-length
path from a vertex to itself, and an unreachable destination.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterator, Tuple

from heapspf.graph.model import Edge
from heapspf.types.base import INF, Cost, PathStatus


@dataclass
class Path:
    """Represents the result of a point-to-point path query.

    Attributes:
        start: Id of the first vertex.
        finish: Id of the last vertex.
        edges: Edges from ``start`` to ``finish`` in travel order. Empty for
            TRIVIAL and UNREACHABLE paths.
        cost: Sum of edge weights; 0 for TRIVIAL, `INF` for UNREACHABLE.
        status: Which of the three outcomes this path represents.
    """

    start: int
    finish: int
    edges: Tuple[Edge, ...]
    cost: Cost
    status: PathStatus

    @classmethod
    def found(
        cls, start: int, finish: int, edges: Tuple[Edge, ...], cost: Cost
    ) -> "Path":
        return cls(start, finish, edges, cost, PathStatus.FOUND)

    @classmethod
    def trivial(cls, vertex: int) -> "Path":
        return cls(vertex, vertex, (), 0, PathStatus.TRIVIAL)

    @classmethod
    def unreachable(cls, start: int, finish: int) -> "Path":
        return cls(start, finish, (), INF, PathStatus.UNREACHABLE)

    @property
    def is_found(self) -> bool:
        """True if ``finish`` is reachable (including start == finish)."""
        return self.status != PathStatus.UNREACHABLE

    @cached_property
    def vertices(self) -> Tuple[int, ...]:
        """Vertex ids visited in order, endpoints included.

        Empty for an unreachable destination.
        """
        if self.status == PathStatus.UNREACHABLE:
            return ()
        return (self.start,) + tuple(edge.dst for edge in self.edges)

    def __getitem__(self, idx: int) -> Edge:
        return self.edges[idx]

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        """Return the number of edges in the path."""
        return len(self.edges)

    def __lt__(self, other: Any) -> bool:
        """Compare two paths based on their cost.

        Returns NotImplemented if ``other`` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost
