"""Graph algorithms built on the indexed heap."""

from heapspf.algorithms.spf import Dijkstra, find_path, shortest_path, spf
from heapspf.algorithms.types import DistanceRecord, SpfResult

__all__ = [
    "Dijkstra",
    "DistanceRecord",
    "SpfResult",
    "find_path",
    "shortest_path",
    "spf",
]
