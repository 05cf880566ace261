"""Shared typing constructs for heapspf.

Public aliases, constants and enums used across the package. Contains no
algorithmic logic.
"""

from heapspf.types.base import INF, Cost, PathStatus

__all__ = [
    "Cost",
    "INF",
    "PathStatus",
]
