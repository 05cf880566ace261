"""NetworkX graph conversion utilities.

Convert between NetworkX graphs and the integer-id `Graph` used by the
shortest-path engine.

Example:
    >>> import networkx as nx
    >>> from heapspf.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=10)
    >>> G.add_edge("B", "C", weight=5)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["C"]
    2
    >>>
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from heapspf.graph.model import Edge, Graph
from heapspf.types.base import Cost

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer vertex ids.

    Node names (any hashable) are mapped to contiguous ids starting from 0.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in id order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, ids: List[int]) -> List[Hashable]:
        """Translate a sequence of vertex ids back to node names."""
        return [self.to_name[i] for i in ids]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Cost = 1,
    bidirectional: Optional[bool] = None,
) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a `Graph`.

    Node names are sorted (by ``str``) for deterministic id assignment.
    Nodes without edges are kept as isolated vertices.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the weight (default: "weight").
        default_weight: Weight used when the attribute is missing.
        bidirectional: Add a reverse edge for each edge. Defaults to True for
            undirected graphs and False for directed ones.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )
    if bidirectional is None:
        bidirectional = not G.is_directed()

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))

    edges: List[Edge] = []
    for u, v, data in G.edges(data=True):
        src = node_map.to_index[u]
        dst = node_map.to_index[v]
        weight = data.get(weight_attr, default_weight)
        edges.append(Edge(src, dst, weight))
        if bidirectional:
            edges.append(Edge(dst, src, weight))

    graph = Graph(edges, vertices=node_map.to_name.keys())
    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> nx.MultiDiGraph:
    """Convert a `Graph` to a NetworkX MultiDiGraph.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap restoring original node names. If None,
            nodes are labeled by vertex id.
        weight_attr: Edge attribute name for weights (default: "weight").

    Returns:
        nx.MultiDiGraph with one edge per graph edge, in edge-list order.
    """
    G = nx.MultiDiGraph()

    def name(vid: int) -> Hashable:
        if node_map is None:
            return vid
        return node_map.to_name.get(vid, vid)

    G.add_nodes_from(name(v.id) for v in graph.vertices)
    for edge in graph.edges:
        G.add_edge(name(edge.src), name(edge.dst), **{weight_attr: edge.weight})
    return G
