"""
Fewest-edges path between two vertices.

Edge weights are ignored: every edge counts as one hop. Vertices are
layered by hop distance with a breadth-first walk, then the path is read
backward from the destination.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from contextlib import closing

from ugraph.graph.vertex import Color, Vertex
from ugraph.paths.trace import trace_back
from ugraph.traversal import Queue, walk

logger = logging.getLogger(__name__)


def shortest_path_unweighted(
    vertices: Mapping[Hashable, Vertex],
    origin: Vertex,
    destination: Vertex,
) -> list[Hashable]:
    """
    Find a minimum-hop path from origin to destination.

    Args:
        vertices: The graph's vertex table (element -> Vertex)
        origin: Vertex to start from
        destination: Vertex to reach

    Returns:
        Elements from origin to destination inclusive, or [] if the two are
        in different connected components
    """
    if origin is destination:
        return [origin.element]

    try:
        origin.distance = 0
        reached = False

        with closing(walk(vertices, origin, Queue())) as visits:
            for vertex in visits:
                if vertex is destination:
                    reached = True
                    break
                # walk() marks undiscovered neighbours only after we return
                for edge in vertex.edges.values():
                    neighbor = vertices[edge.neighbor]
                    if neighbor.marker is Color.UNVISITED:
                        neighbor.distance = vertex.distance + 1

        if not reached:
            logger.info(
                f"No path from {origin.element!r} to {destination.element!r}"
            )
            return []

        path = trace_back(vertices, origin, destination, _one_hop_closer)
        logger.debug(f"Fewest-hop path ({len(path) - 1} edges): {path!r}")
        return path
    finally:
        for vertex in vertices.values():
            vertex.reset()


def _one_hop_closer(vertex: Vertex, neighbor: Vertex, weight: float) -> bool:
    return neighbor.distance == vertex.distance - 1
