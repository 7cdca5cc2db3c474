"""
Minimum-weight path between two vertices (Dijkstra's algorithm).

Edge weights are assumed non-negative; results with negative weights are
undefined. The relaxation loop runs until every vertex has been settled
rather than stopping at the destination.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Mapping
from operator import attrgetter

from ugraph.graph.vertex import Vertex
from ugraph.paths.heap import MinHeap
from ugraph.paths.trace import trace_back

logger = logging.getLogger(__name__)


def shortest_path_weighted(
    vertices: Mapping[Hashable, Vertex],
    origin: Vertex,
    destination: Vertex,
) -> list[Hashable]:
    """
    Find a minimum-weight path from origin to destination.

    Args:
        vertices: The graph's vertex table (element -> Vertex)
        origin: Vertex to start from
        destination: Vertex to reach

    Returns:
        Elements from origin to destination inclusive, or [] if the two are
        in different connected components
    """
    try:
        for vertex in vertices.values():
            vertex.distance = math.inf
        origin.distance = 0.0

        _relax_all(vertices, MinHeap(vertices.values(), key=attrgetter("distance")))

        if math.isinf(destination.distance):
            logger.info(
                f"No path from {origin.element!r} to {destination.element!r}"
            )
            return []

        path = trace_back(vertices, origin, destination, _on_shortest_route)
        logger.debug(
            f"Minimum-weight path (total {destination.distance}): {path!r}"
        )
        return path
    finally:
        for vertex in vertices.values():
            vertex.reset()


def _relax_all(vertices: Mapping[Hashable, Vertex], heap: MinHeap[Vertex]) -> None:
    settled = 0
    while heap:
        vertex = heap.pop()
        settled += 1
        for edge in vertex.edges.values():
            neighbor = vertices[edge.neighbor]
            candidate = vertex.distance + edge.weight
            if candidate < neighbor.distance and neighbor in heap:
                neighbor.distance = candidate
                heap.reorder(neighbor)
    logger.debug(f"Dijkstra settled {settled} vertices")


def _on_shortest_route(vertex: Vertex, neighbor: Vertex, weight: float) -> bool:
    # Same sum that produced vertex.distance, so no float drift
    return neighbor.distance + weight == vertex.distance
