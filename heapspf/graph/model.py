"""Immutable directed weighted graph built from an edge list.

`Vertex` and `Edge` are frozen value objects. `Graph` keeps the edges in
insertion order and derives the vertex list and adjacency mapping lazily on
first access. A graph is never mutated after construction, so the derived
views are computed at most once per instance and can be shared by concurrent
readers.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple, Union

from heapspf.types.base import Cost


@dataclass(frozen=True, order=True)
class Vertex:
    """Graph vertex identified by an integer id, ordered by id."""

    id: int


#: Anything accepted where a vertex is expected: a `Vertex` or its integer id.
VertexLike = Union[Vertex, int]


def vertex_id(vertex: VertexLike) -> int:
    """Return the integer id of a `Vertex` or a plain int.

    Raises:
        TypeError: If ``vertex`` is neither a Vertex nor an int.
    """
    if isinstance(vertex, Vertex):
        return vertex.id
    if isinstance(vertex, int) and not isinstance(vertex, bool):
        return vertex
    raise TypeError(f"Expected Vertex or int, got {type(vertex).__name__}")


@dataclass(frozen=True)
class Edge:
    """Directed weighted edge ``src -> dst``.

    Equality and hashing use the whole record. Ordering compares weights
    only, so ``sorted(edges)`` yields the cheapest edges first.

    Attributes:
        src: Id of the vertex the edge starts at.
        dst: Id of the vertex the edge ends at.
        weight: Non-negative cost of traversing the edge.
    """

    src: int
    dst: int
    weight: Cost

    @property
    def from_vertex(self) -> Vertex:
        return Vertex(self.src)

    @property
    def to_vertex(self) -> Vertex:
        return Vertex(self.dst)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight >= other.weight


class Graph:
    """Directed weighted graph over integer vertex ids.

    The vertex set is every endpoint of every edge plus any ids passed via
    ``vertices``. The latter is the only way to add a vertex with no edges.

    Args:
        edges: Edges of the graph; order is preserved.
        vertices: Extra vertex ids (or `Vertex` objects) to include.

    Raises:
        TypeError: If an element of ``edges`` is not an `Edge`.
    """

    def __init__(
        self, edges: Iterable[Edge], vertices: Iterable[VertexLike] = ()
    ) -> None:
        edge_list = tuple(edges)
        for edge in edge_list:
            if not isinstance(edge, Edge):
                raise TypeError(f"Expected Edge, got {type(edge).__name__}")
        self._edges: Tuple[Edge, ...] = edge_list
        self._extra_vertices = frozenset(vertex_id(v) for v in vertices)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """All edges in insertion order."""
        return self._edges

    @property
    def count_edges(self) -> int:
        return len(self._edges)

    @property
    def count_vertices(self) -> int:
        return len(self.vertices)

    @cached_property
    def vertices(self) -> Tuple[Vertex, ...]:
        """All vertices sorted by ascending id."""
        ids = set(self._extra_vertices)
        for edge in self._edges:
            ids.add(edge.src)
            ids.add(edge.dst)
        return tuple(Vertex(i) for i in sorted(ids))

    @cached_property
    def adjacency(self) -> Mapping[int, Tuple[Edge, ...]]:
        """Map each vertex id to its outgoing edges, in edge-list order.

        Vertices without outgoing edges map to an empty tuple.
        """
        adj: Dict[int, list] = {v.id: [] for v in self.vertices}
        for edge in self._edges:
            adj[edge.src].append(edge)
        return {v: tuple(out) for v, out in adj.items()}

    def has_vertex(self, vertex: VertexLike) -> bool:
        return vertex_id(vertex) in self.adjacency

    def outgoing(self, vertex: VertexLike) -> Tuple[Edge, ...]:
        """Return outgoing edges of ``vertex``.

        Raises:
            KeyError: If the vertex is not in the graph.
        """
        vid = vertex_id(vertex)
        try:
            return self.adjacency[vid]
        except KeyError:
            raise KeyError(f"Vertex '{vid}' is not in the graph.") from None

    def validate_weights(self) -> None:
        """Check that no edge has a negative weight.

        Raises:
            ValueError: On the first negative-weight edge found.
        """
        for edge in self._edges:
            if edge.weight < 0:
                raise ValueError(
                    f"Edge {edge.src}->{edge.dst} has negative weight {edge.weight}."
                )

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, (Vertex, int)) and not isinstance(vertex, bool):
            return self.has_vertex(vertex)
        return False

    def __len__(self) -> int:
        return self.count_vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.count_vertices}, "
            f"edges={self.count_edges})"
        )
