"""
Generic traversal over a vertex table.

One algorithm serves both breadth-first and depth-first order; the
pending set passed in decides which.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator, Mapping
from contextlib import closing

from ugraph.graph.vertex import Color, Vertex
from ugraph.traversal.pending import PendingSet

logger = logging.getLogger(__name__)


def walk(
    vertices: Mapping[Hashable, Vertex],
    start: Vertex,
    pending: PendingSet[Vertex],
) -> Iterator[Vertex]:
    """
    Yield every vertex reachable from start, each exactly once.

    A vertex is yielded before its undiscovered neighbours are marked and
    queued, so a consumer may inspect neighbour markers while handling it.
    Every marker is reset to NONE when the generator finishes or is closed.

    Args:
        vertices: The graph's vertex table (element -> Vertex)
        start: Vertex to begin from
        pending: Empty pending set; its discipline sets the visit order
    """
    for vertex in vertices.values():
        vertex.marker = Color.UNVISITED

    try:
        start.marker = Color.VISITED
        pending.put(start)
        visited = 0

        while pending:
            vertex = pending.take()
            visited += 1
            yield vertex

            for edge in vertex.edges.values():
                neighbor = vertices[edge.neighbor]
                if neighbor.marker is Color.UNVISITED:
                    neighbor.marker = Color.VISITED
                    pending.put(neighbor)

        logger.debug(
            f"Traversal from {start.element!r} ({type(pending).__name__}) "
            f"visited {visited}/{len(vertices)} vertices"
        )
    finally:
        for vertex in vertices.values():
            vertex.marker = Color.NONE


def traverse(
    vertices: Mapping[Hashable, Vertex],
    start: Vertex,
    pending: PendingSet[Vertex],
    action: Callable[[Hashable], object],
) -> None:
    """Call action(element) on every vertex reachable from start."""
    with closing(walk(vertices, start, pending)) as visits:
        for vertex in visits:
            action(vertex.element)
