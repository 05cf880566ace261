"""Tests for heapspf.lib.nx NetworkX conversion utilities."""

import networkx as nx
import pytest

from heapspf.algorithms.spf import find_path
from heapspf.graph.model import Edge, Graph
from heapspf.lib.nx import NodeMap, from_networkx, to_networkx


class TestNodeMap:
    """Tests for NodeMap class."""

    def test_from_names_creates_bidirectional_mapping(self):
        node_map = NodeMap.from_names(["A", "B", "C"])
        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}
        assert len(node_map) == 3

    def test_from_names_empty_list(self):
        node_map = NodeMap.from_names([])
        assert len(node_map) == 0

    def test_names(self):
        node_map = NodeMap.from_names(["X", "Y", "Z"])
        assert node_map.names([2, 0]) == ["Z", "X"]


class TestFromNetworkx:
    def test_digraph_conversion(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=10)
        G.add_edge("B", "C", weight=5)
        G.add_node("D")

        graph, node_map = from_networkx(G)

        assert node_map.to_index == {"A": 0, "B": 1, "C": 2, "D": 3}
        assert graph.edges == (Edge(0, 1, 10), Edge(1, 2, 5))
        assert 3 in graph
        assert graph.outgoing(3) == ()

    def test_default_weight_and_custom_attr(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", cost=4)
        G.add_edge("B", "C")

        graph, _ = from_networkx(G, weight_attr="cost", default_weight=7)
        assert graph.edges == (Edge(0, 1, 4), Edge(1, 2, 7))

    def test_undirected_adds_both_directions(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=2)

        graph, _ = from_networkx(G)
        assert set(graph.edges) == {Edge(0, 1, 2), Edge(1, 0, 2)}

    def test_bidirectional_override(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=2)

        graph, _ = from_networkx(G, bidirectional=False)
        assert graph.count_edges == 1

    def test_multidigraph_parallel_edges(self):
        G = nx.MultiDiGraph()
        G.add_edge("A", "B", weight=5)
        G.add_edge("A", "B", weight=1)

        graph, node_map = from_networkx(G)
        path = find_path(graph, node_map.to_index["A"], node_map.to_index["B"])
        assert path.cost == 1

    def test_rejects_non_networkx(self):
        with pytest.raises(TypeError, match="Expected NetworkX graph"):
            from_networkx({"A": ["B"]})


class TestToNetworkx:
    def test_round_trip_names_and_weights(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=3)
        G.add_edge("B", "C", weight=4)

        graph, node_map = from_networkx(G)
        G_out = to_networkx(graph, node_map)

        assert isinstance(G_out, nx.MultiDiGraph)
        assert set(G_out.nodes()) == {"A", "B", "C"}
        assert G_out["A"]["B"][0]["weight"] == 3
        assert nx.dijkstra_path(G_out, "A", "C") == ["A", "B", "C"]

    def test_integer_labels_without_map(self):
        graph = Graph([Edge(0, 1, 2)], vertices=[5])
        G_out = to_networkx(graph, weight_attr="cost")
        assert sorted(G_out.nodes()) == [0, 1, 5]
        assert G_out[0][1][0]["cost"] == 2
