"""Base aliases, constants, and enums for shortest-path results."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Union

#: Represents numeric cost of an edge or path (weight, distance, latency).
Cost = Union[int, float]

#: Distance of a vertex with no known path. Saturating: ``INF + w == INF``.
INF: float = math.inf


class PathStatus(IntEnum):
    """Outcome of a point-to-point path query."""

    #: A non-empty path from start to finish exists.
    FOUND = 1
    #: Start and finish are the same vertex; the path has no edges and cost 0.
    TRIVIAL = 2
    #: Finish cannot be reached from start.
    UNREACHABLE = 3
