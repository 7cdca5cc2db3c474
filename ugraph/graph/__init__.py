"""
Graph store module.

- Graph: vertex/edge store with traversal and shortest-path entry points
- VertexView: read-only view of one vertex
- Color: transient visitation marker
"""

from ugraph.graph.store import Graph
from ugraph.graph.vertex import Color, Edge, Vertex, VertexView

__all__ = ["Graph", "VertexView", "Color", "Edge", "Vertex"]
