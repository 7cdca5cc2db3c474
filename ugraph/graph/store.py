"""
Undirected, weighted graph over hashable elements.

The Graph owns every vertex in one table keyed by element. Each vertex
keeps its own adjacency (neighbour element -> Edge), and every edge is
stored once per endpoint with the same weight.

Traversals and shortest-path searches use per-vertex scratch fields, so a
graph runs at most one such pass at a time and rejects structural changes
while one is running.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator
from contextlib import contextmanager

from ugraph.config import DEFAULT_EDGE_WEIGHT, NO_EDGE_WEIGHT
from ugraph.errors import (
    DuplicateElement,
    EdgeNotFound,
    ElementNotFound,
    GraphBusy,
    InvalidEdge,
)
from ugraph.graph.vertex import Edge, Vertex, VertexView
from ugraph.paths import shortest_path_unweighted, shortest_path_weighted
from ugraph.traversal import Queue, Stack, traverse

logger = logging.getLogger(__name__)


class Graph:
    """
    Mutable undirected graph with weighted edges.

    Elements must be hashable and are unique within a graph. Iteration
    yields elements in the order they were added.

    Attributes:
        edge_count: Number of undirected edges
    """

    def __init__(self) -> None:
        self._vertices: dict[Hashable, Vertex] = {}
        self._edge_count = 0
        self._busy: str | None = None
        self._iterating = 0

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def contains(self, element: Hashable) -> bool:
        """Check if element is a vertex of the graph."""
        return element in self._vertices

    def are_adjacent(self, a: Hashable, b: Hashable) -> bool:
        """
        Check if a and b share an edge.

        Raises:
            ElementNotFound: If a or b is not in the graph
        """
        vertex_a = self._lookup(a)
        self._lookup(b)
        return b in vertex_a.edges

    def weight_of(self, a: Hashable, b: Hashable) -> float:
        """
        Return the weight of the edge between a and b.

        Returns:
            The edge weight, or NO_EDGE_WEIGHT (-1.0) if they are not adjacent

        Raises:
            ElementNotFound: If a or b is not in the graph
        """
        vertex_a = self._lookup(a)
        self._lookup(b)
        edge = vertex_a.edges.get(b)
        return NO_EDGE_WEIGHT if edge is None else edge.weight

    def neighbors(self, element: Hashable) -> Iterator[Hashable]:
        """
        Iterate the neighbours of element in adjacency order.

        The element is checked immediately; the returned iterator is lazy
        and single-pass.

        Raises:
            ElementNotFound: If element is not in the graph
        """
        return iter(self._lookup(element).edges)

    def degree(self, element: Hashable) -> int:
        """Number of edges incident to element."""
        return self._lookup(element).degree

    def vertex(self, element: Hashable) -> VertexView:
        """Return a read-only view of the vertex holding element."""
        return VertexView(self._lookup(element))

    def for_each_vertex(self, action: Callable[[Hashable], object]) -> None:
        """
        Call action(element) for every vertex in insertion order.

        The graph must not be mutated from inside action; read-only calls,
        traversals and path searches included, are allowed.
        """
        self._iterating += 1
        try:
            for element in self._vertices:
                action(element)
        finally:
            self._iterating -= 1

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, element: Hashable) -> None:
        """
        Add element as a new, unconnected vertex.

        Raises:
            DuplicateElement: If element is already in the graph
        """
        self._check_idle("add_vertex")
        if element in self._vertices:
            raise DuplicateElement(f"Element {element!r} is already in the graph")
        self._vertices[element] = Vertex(element)
        logger.debug(f"Added vertex {element!r}")

    def connect(self, a: Hashable, b: Hashable, weight: float = DEFAULT_EDGE_WEIGHT) -> None:
        """
        Connect a and b with an undirected edge.

        Args:
            a: First endpoint
            b: Second endpoint
            weight: Edge weight (non-negative for meaningful shortest paths)

        Raises:
            ElementNotFound: If a or b is not in the graph
            InvalidEdge: If a == b or they are already adjacent
        """
        self._check_idle("connect")
        vertex_a = self._lookup(a)
        vertex_b = self._lookup(b)
        if a == b:
            raise InvalidEdge(f"Cannot connect {a!r} to itself")
        if b in vertex_a.edges:
            raise InvalidEdge(f"{a!r} and {b!r} are already connected")

        weight = float(weight)
        vertex_a.edges[b] = Edge(neighbor=b, weight=weight)
        vertex_b.edges[a] = Edge(neighbor=a, weight=weight)
        self._edge_count += 1
        logger.debug(f"Connected {a!r} -- {b!r} (weight={weight})")

    def disconnect(self, a: Hashable, b: Hashable) -> None:
        """
        Remove the edge between a and b.

        Raises:
            ElementNotFound: If a or b is not in the graph
            EdgeNotFound: If a and b are not adjacent
        """
        self._check_idle("disconnect")
        vertex_a = self._lookup(a)
        vertex_b = self._lookup(b)
        if b not in vertex_a.edges:
            raise EdgeNotFound(f"{a!r} and {b!r} are not connected")

        del vertex_a.edges[b]
        del vertex_b.edges[a]
        self._edge_count -= 1
        logger.debug(f"Disconnected {a!r} -- {b!r}")

    def remove_vertex(self, element: Hashable) -> None:
        """
        Remove element and every edge incident to it.

        Raises:
            ElementNotFound: If element is not in the graph
        """
        self._check_idle("remove_vertex")
        vertex = self._lookup(element)
        for neighbor in list(vertex.edges):
            self.disconnect(neighbor, element)
        del self._vertices[element]
        logger.debug(f"Removed vertex {element!r}")

    # =========================================================================
    # Traversal and shortest paths
    # =========================================================================

    def breadth_first(self, start: Hashable, action: Callable[[Hashable], object]) -> None:
        """
        Call action(element) on every vertex reachable from start, nearest
        (by hop count) first.

        Raises:
            ElementNotFound: If start is not in the graph
        """
        origin = self._lookup(start)
        with self._exclusive("breadth_first"):
            traverse(self._vertices, origin, Queue(), action)

    def depth_first(self, start: Hashable, action: Callable[[Hashable], object]) -> None:
        """
        Call action(element) on every vertex reachable from start in
        depth-first order.

        Raises:
            ElementNotFound: If start is not in the graph
        """
        origin = self._lookup(start)
        with self._exclusive("depth_first"):
            traverse(self._vertices, origin, Stack(), action)

    def shortest_path_unweighted(self, origin: Hashable, destination: Hashable) -> list[Hashable]:
        """
        Path with the fewest edges from origin to destination.

        Returns:
            Elements from origin to destination, [origin] if they are equal,
            or [] if destination is unreachable

        Raises:
            ElementNotFound: If origin or destination is not in the graph
        """
        source = self._lookup(origin)
        target = self._lookup(destination)
        with self._exclusive("shortest_path_unweighted"):
            return shortest_path_unweighted(self._vertices, source, target)

    def shortest_path_weighted(self, origin: Hashable, destination: Hashable) -> list[Hashable]:
        """
        Path with the least total weight from origin to destination.

        Returns:
            Elements from origin to destination, [origin] if they are equal,
            or [] if destination is unreachable

        Raises:
            ElementNotFound: If origin or destination is not in the graph
        """
        source = self._lookup(origin)
        target = self._lookup(destination)
        with self._exclusive("shortest_path_weighted"):
            return shortest_path_weighted(self._vertices, source, target)

    # =========================================================================
    # Internals
    # =========================================================================

    def _lookup(self, element: Hashable) -> Vertex:
        vertex = self._vertices.get(element)
        if vertex is None:
            raise ElementNotFound(f"Element {element!r} is not in the graph")
        return vertex

    def _check_idle(self, operation: str) -> None:
        if self._busy is not None:
            raise GraphBusy(f"Cannot {operation} while {self._busy} is running")
        if self._iterating:
            raise GraphBusy(f"Cannot {operation} while for_each_vertex is running")

    @contextmanager
    def _exclusive(self, operation: str) -> Iterator[None]:
        if self._busy is not None:
            raise GraphBusy(f"Cannot start {operation} while {self._busy} is running")
        self._busy = operation
        try:
            yield
        finally:
            self._busy = None

    # =========================================================================
    # Dunder
    # =========================================================================

    def __contains__(self, element: object) -> bool:
        return element in self._vertices

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
