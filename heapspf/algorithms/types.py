"""Types and data structures for shortest-path outputs.

Defines the heap record used by Dijkstra and the immutable per-query result
container.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional

from heapspf.graph.model import Edge, VertexLike, vertex_id
from heapspf.types.base import INF, Cost


@dataclass(frozen=True)
class DistanceRecord:
    """Heap entry pairing a vertex with its tentative distance.

    Identity in the indexed heap is the whole record, so a vertex's entry is
    looked up by ``DistanceRecord(current_distance, vertex)``.
    """

    dist: Cost
    vertex: int


def record_precedes(a: DistanceRecord, b: DistanceRecord) -> bool:
    """Heap order for distance records: smaller distance first."""
    return a.dist < b.dist


@dataclass(frozen=True)
class SpfResult:
    """Outcome of a single-source shortest-path computation.

    Attributes:
        start: Id of the source vertex.
        distances: Minimal cost from ``start`` per vertex id; `INF` when the
            vertex is unreachable.
        incoming: Best incoming edge per vertex id on a minimal path from
            ``start``; None for the start vertex and unreachable vertices.
    """

    start: int
    distances: Mapping[int, Cost]
    incoming: Mapping[int, Optional[Edge]]

    def _require(self, vertex: VertexLike) -> int:
        vid = vertex_id(vertex)
        if vid not in self.distances:
            raise KeyError(f"Vertex '{vid}' is not in the graph.")
        return vid

    def is_reachable(self, vertex: VertexLike) -> bool:
        return self.distances[self._require(vertex)] != INF

    def cost_to(self, vertex: VertexLike) -> Cost:
        """Return the minimal cost from start, or `INF` if unreachable."""
        return self.distances[self._require(vertex)]

    def reachable(self) -> List[int]:
        """Ids of vertices reachable from start (including it), ascending."""
        return sorted(v for v, d in self.distances.items() if d != INF)

    def edges_to(self, finish: VertexLike) -> List[Edge]:
        """Reconstruct the edge sequence from start to ``finish``.

        Walks the incoming-edge table back from ``finish`` until a vertex
        without an incoming edge, then reverses. Returns an empty list both
        when ``finish`` is the start and when it is unreachable.

        Raises:
            KeyError: If ``finish`` is not in the graph.
            RuntimeError: If the incoming-edge table contains a cycle, which
                only happens when the graph has negative weights.
        """
        current = self._require(finish)
        path: List[Edge] = []
        edge = self.incoming[current]
        while edge is not None:
            path.append(edge)
            if len(path) > len(self.incoming):
                raise RuntimeError(
                    "Cycle in predecessor table; the graph has negative weights."
                )
            current = edge.src
            edge = self.incoming[current]
        path.reverse()
        return path
