"""heapspf: indexed binary heap and Dijkstra shortest paths.

Primary API:
    IndexedHeap - Priority queue with O(log n) update/removal by value
    Graph, Vertex, Edge - Immutable directed weighted graph
    spf() - Single-source shortest paths (distances and incoming edges)
    shortest_path() / find_path() - Point-to-point path queries
    Dijkstra - Query facade bound to one graph
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from heapspf import Edge, Graph, find_path

    graph = Graph([Edge(0, 1, 1), Edge(1, 2, 1), Edge(0, 2, 5)])
    path = find_path(graph, 0, 2)
    path.cost  # 2
"""

from __future__ import annotations

from heapspf import logging
from heapspf._version import __version__
from heapspf.algorithms.spf import Dijkstra, find_path, shortest_path, spf
from heapspf.algorithms.types import DistanceRecord, SpfResult
from heapspf.config import SPF_CONFIG, SpfConfig
from heapspf.graph.model import Edge, Graph, Vertex
from heapspf.lib.nx import NodeMap, from_networkx, to_networkx
from heapspf.model.path import Path
from heapspf.structures.indexed_heap import IndexedHeap
from heapspf.types.base import INF, Cost, PathStatus

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Vertex",
    "Edge",
    "Path",
    # Structures
    "IndexedHeap",
    # Algorithms
    "spf",
    "shortest_path",
    "find_path",
    "Dijkstra",
    "DistanceRecord",
    "SpfResult",
    # Types
    "Cost",
    "INF",
    "PathStatus",
    # Configuration
    "SpfConfig",
    "SPF_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
