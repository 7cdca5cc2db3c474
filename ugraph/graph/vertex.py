"""
Vertex and edge records for the graph store.

Adjacency entries hold the neighbour's element (its key in the graph's
vertex table), never a reference to the neighbour vertex itself.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from enum import Enum


class Color(Enum):
    """Transient visitation marker used during a single algorithmic pass."""

    NONE = "none"
    UNVISITED = "unvisited"
    VISITED = "visited"


@dataclass(frozen=True)
class Edge:
    """
    One endpoint's view of an undirected edge.

    Attributes:
        neighbor: Element of the vertex on the other end
        weight: Weight shared by both endpoints' entries
    """

    neighbor: Hashable
    weight: float


@dataclass(eq=False)
class Vertex:
    """
    A graph vertex.

    Compared and hashed by identity so it can be tracked inside a heap;
    element uniqueness is enforced by the graph.

    Attributes:
        element: Payload and lookup key
        edges: Neighbour element -> Edge, in insertion order
        marker: Scratch visitation flag (NONE outside a pass)
        distance: Scratch hop count or path weight (inf outside a pass)
    """

    element: Hashable
    edges: dict[Hashable, Edge] = field(default_factory=dict)
    marker: Color = Color.NONE
    distance: float = math.inf

    @property
    def degree(self) -> int:
        return len(self.edges)

    def reset(self) -> None:
        """Restore the scratch fields to their neutral values."""
        self.marker = Color.NONE
        self.distance = math.inf


class VertexView:
    """Read-only view of a vertex handed out to callers."""

    __slots__ = ("_vertex",)

    def __init__(self, vertex: Vertex) -> None:
        self._vertex = vertex

    @property
    def element(self) -> Hashable:
        return self._vertex.element

    @property
    def degree(self) -> int:
        """Number of incident edges."""
        return self._vertex.degree

    @property
    def marker(self) -> Color:
        return self._vertex.marker

    @property
    def distance(self) -> float:
        """Scratch distance; inf outside a traversal or path search."""
        return self._vertex.distance

    def neighbors(self) -> Iterator[Hashable]:
        """Iterate neighbour elements in adjacency order."""
        return iter(self._vertex.edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexView):
            return NotImplemented
        return self._vertex is other._vertex

    def __hash__(self) -> int:
        return id(self._vertex)

    def __repr__(self) -> str:
        return f"VertexView(element={self.element!r}, degree={self.degree})"
