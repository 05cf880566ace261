"""Shortest-path-first (SPF) computation with a decrease-key heap.

Implements single-source Dijkstra over a `Graph`. Tentative distances live in
an `IndexedHeap` of `DistanceRecord`s; relaxing an edge updates the target's
record in place through ``IndexedHeap.replace`` rather than pushing a
duplicate entry, so the heap never holds more than one record per vertex.

Notes:
    Edge weights must be non-negative. Negative weights are not detected
    unless ``SpfConfig.validate_weights`` is enabled, and otherwise produce an
    undefined (but non-raising) result.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from heapspf.algorithms.types import DistanceRecord, SpfResult, record_precedes
from heapspf.config import SPF_CONFIG, SpfConfig
from heapspf.graph.model import Edge, Graph, VertexLike, vertex_id
from heapspf.logging import get_logger
from heapspf.model.path import Path
from heapspf.structures.indexed_heap import IndexedHeap
from heapspf.types.base import INF, Cost

logger = get_logger(__name__)


def _require_vertex(graph: Graph, vertex: VertexLike, role: str) -> int:
    vid = vertex_id(vertex)
    if vid not in graph:
        raise KeyError(f"{role} vertex '{vid}' is not in the graph.")
    return vid


def spf(
    graph: Graph, start: VertexLike, config: Optional[SpfConfig] = None
) -> SpfResult:
    """Compute minimal-cost incoming edges from ``start`` to every vertex.

    Every vertex begins at distance `INF` except ``start`` at 0, and all of
    them are heapified at once. Each iteration peeks the closest vertex, which
    is then final, relaxes its outgoing edges, and pops it. Once the closest
    remaining vertex is at `INF` the rest are unreachable and the loop ends.

    Args:
        graph: Graph to search. Not modified.
        start: Source vertex (id or `Vertex`).
        config: Runtime switches; defaults to the global ``SPF_CONFIG``.

    Returns:
        SpfResult with the distance and incoming-edge tables.

    Raises:
        KeyError: If ``start`` is not in the graph.
        ValueError: If weight validation is enabled and an edge is negative.
        RuntimeError: If heap checking is enabled and the heap is corrupted.
    """
    cfg = config if config is not None else SPF_CONFIG
    src = _require_vertex(graph, start, "Source")
    if cfg.validate_weights:
        graph.validate_weights()

    adjacency = graph.adjacency
    distances: Dict[int, Cost] = {v.id: INF for v in graph.vertices}
    distances[src] = 0
    incoming: Dict[int, Optional[Edge]] = {vid: None for vid in distances}

    logger.debug(
        "SPF from %d over %d vertices and %d edges",
        src,
        graph.count_vertices,
        graph.count_edges,
    )

    heap: IndexedHeap[DistanceRecord] = IndexedHeap(
        record_precedes,
        (DistanceRecord(dist, vid) for vid, dist in distances.items()),
    )
    relaxations = 0

    while heap:
        best = heap.peek()
        assert best is not None
        if best.dist == INF:
            break

        for edge in adjacency[best.vertex]:
            to = edge.dst
            candidate = best.dist + edge.weight
            if distances[to] > candidate:
                heap.replace(
                    DistanceRecord(distances[to], to), DistanceRecord(candidate, to)
                )
                distances[to] = candidate
                incoming[to] = edge
                relaxations += 1

        heap.pop()
        if cfg.check_heap_invariants and not heap.is_valid():
            raise RuntimeError(
                f"Heap invariant violated after finalizing vertex {best.vertex}."
            )

    heap.clear()
    logger.debug(
        "SPF from %d done: %d reachable, %d relaxations",
        src,
        sum(1 for d in distances.values() if d != INF),
        relaxations,
    )
    return SpfResult(start=src, distances=distances, incoming=incoming)


def shortest_path(
    graph: Graph,
    start: VertexLike,
    finish: VertexLike,
    config: Optional[SpfConfig] = None,
) -> List[Edge]:
    """Return the edges of a minimal-cost path from ``start`` to ``finish``.

    An empty list means either ``start == finish`` or no path exists; use
    `find_path` to tell the two apart.

    Raises:
        KeyError: If either vertex is not in the graph.
    """
    dst = _require_vertex(graph, finish, "Destination")
    return spf(graph, start, config).edges_to(dst)


def find_path(
    graph: Graph,
    start: VertexLike,
    finish: VertexLike,
    config: Optional[SpfConfig] = None,
) -> Path:
    """Return a minimal-cost path tagged with its `PathStatus`.

    Raises:
        KeyError: If either vertex is not in the graph.
    """
    dst = _require_vertex(graph, finish, "Destination")
    result = spf(graph, start, config)
    if result.start == dst:
        return Path.trivial(dst)
    if not result.is_reachable(dst):
        return Path.unreachable(result.start, dst)
    edges = tuple(result.edges_to(dst))
    return Path.found(result.start, dst, edges, result.cost_to(dst))


class Dijkstra:
    """Shortest-path queries bound to one graph.

    Each call runs an independent computation with its own heap and tables,
    so repeated queries on the same instance return identical results.

    Args:
        graph: Graph to search.
        config: Runtime switches; defaults to the global ``SPF_CONFIG``.
    """

    def __init__(self, graph: Graph, config: Optional[SpfConfig] = None) -> None:
        self.graph = graph
        self.config = config

    def run(self, start: VertexLike) -> SpfResult:
        return spf(self.graph, start, self.config)

    def shortest_path(self, start: VertexLike, finish: VertexLike) -> List[Edge]:
        return shortest_path(self.graph, start, finish, self.config)

    def find_path(self, start: VertexLike, finish: VertexLike) -> Path:
        return find_path(self.graph, start, finish, self.config)
