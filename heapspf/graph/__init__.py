"""Graph primitives.

This package provides the immutable edge-list graph `Graph` and its value
objects `Vertex` and `Edge`.
"""

from heapspf.graph.model import Edge, Graph, Vertex, VertexLike, vertex_id

__all__ = ["Edge", "Graph", "Vertex", "VertexLike", "vertex_id"]
