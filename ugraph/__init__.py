"""
ugraph: an in-memory undirected, weighted graph engine.

Provides mutable vertex/edge storage, breadth-first and depth-first
traversal, and shortest paths (hop count and Dijkstra).

Usage:
    from ugraph import Graph

    graph = Graph()
    for element in "ABCD":
        graph.add_vertex(element)
    graph.connect("A", "B")
    graph.connect("B", "C", weight=2.5)
    graph.shortest_path_weighted("A", "C")
"""

from ugraph.errors import (
    DuplicateElement,
    EdgeNotFound,
    ElementNotFound,
    GraphBusy,
    GraphError,
    InvalidEdge,
)
from ugraph.graph import Color, Graph, VertexView

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "VertexView",
    "Color",
    "GraphError",
    "ElementNotFound",
    "DuplicateElement",
    "InvalidEdge",
    "EdgeNotFound",
    "GraphBusy",
]
